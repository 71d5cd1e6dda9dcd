# xlogger/middleware/request_environment_middleware.py
"""
Starlette middleware exposing request data to the sinks.

Usage Example:
    from starlette.applications import Starlette
    from xlogger.middleware import RequestEnvironmentMiddleware

    app = Starlette(routes=routes)
    app.add_middleware(RequestEnvironmentMiddleware)

    # Inside any endpoint, sinks with LogOption.IP / LogOption.USER_AGENT
    # now write the client address and browser of the current request.
"""

from typing import Awaitable, Callable, Optional
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from xlogger.context_vars import RequestEnvironment, request_environment_context_var


class RequestEnvironmentMiddleware(BaseHTTPMiddleware):
    """
    Binds a RequestEnvironment for the duration of each request.
    """

    def __init__(
        self,
        app: ASGIApp,
        *,
        remote_user_header: Optional[str] = None,
    ):
        """
        Initialize the middleware.

        Args:
            app: ASGI application
            remote_user_header: Header carrying the authenticated user name,
                e.g. set by a reverse proxy (default: no user)
        """
        super().__init__(app)
        self.remote_user_header = remote_user_header

    def build_environment(self, request: Request) -> RequestEnvironment:
        return RequestEnvironment(
            remote_addr=request.client.host if request.client else "",
            forwarded_for=request.headers.get("x-forwarded-for", ""),
            user_agent=request.headers.get("user-agent", ""),
            remote_user=(
                request.headers.get(self.remote_user_header, "")
                if self.remote_user_header
                else ""
            ),
        )

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        token = request_environment_context_var.set(self.build_environment(request))
        try:
            return await call_next(request)
        finally:
            request_environment_context_var.reset(token)


__all__ = ["RequestEnvironmentMiddleware"]
