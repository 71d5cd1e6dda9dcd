# xlogger/context_vars.py
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator, Mapping


@dataclass(frozen=True)
class RequestEnvironment:
    """
    Request data a sink may write with a record.

    The library only reads these values; the web layer (or a test)
    binds them for the duration of a request.
    """

    remote_addr: str = ""
    forwarded_for: str = ""
    user_agent: str = ""
    remote_user: str = ""

    @property
    def client_ip(self) -> str:
        """Forwarded-for header if present, else the remote address."""
        return self.forwarded_for or self.remote_addr

    @classmethod
    def from_environ(cls, environ: Mapping[str, str]) -> "RequestEnvironment":
        """Build from a WSGI/CGI style environment mapping."""
        return cls(
            remote_addr=environ.get("REMOTE_ADDR", ""),
            forwarded_for=environ.get("HTTP_X_FORWARDED_FOR", ""),
            user_agent=environ.get("HTTP_USER_AGENT", ""),
            remote_user=environ.get("REMOTE_USER", ""),
        )


# Unique to each async task (each request); empty outside of requests
request_environment_context_var: ContextVar[RequestEnvironment] = ContextVar(
    "request_environment",
    default=RequestEnvironment(),
)


def current_request_environment() -> RequestEnvironment:
    return request_environment_context_var.get()


@contextmanager
def bind_request_environment(environment: RequestEnvironment) -> Iterator[RequestEnvironment]:
    """
    Bind a request environment for the enclosed block.

    Example:
        >>> with bind_request_environment(RequestEnvironment(remote_addr="10.0.0.1")):
        ...     sink.info("handled")
    """
    token = request_environment_context_var.set(environment)
    try:
        yield environment
    finally:
        request_environment_context_var.reset(token)


__all__ = [
    "RequestEnvironment",
    "request_environment_context_var",
    "current_request_environment",
    "bind_request_environment",
]
