# xlogger/middleware/__init__.py
from .request_environment_middleware import RequestEnvironmentMiddleware

__all__ = ["RequestEnvironmentMiddleware"]
