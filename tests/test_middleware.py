from __future__ import annotations

from pathlib import Path

import pytest
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route
from starlette.testclient import TestClient

from xlogger import FileSink, LogOption, current_request_environment
from xlogger.middleware import RequestEnvironmentMiddleware


async def environment_endpoint(request: Request) -> JSONResponse:
    environment = current_request_environment()
    return JSONResponse(
        {
            "remote_addr": environment.remote_addr,
            "client_ip": environment.client_ip,
            "user_agent": environment.user_agent,
            "remote_user": environment.remote_user,
        }
    )


def make_client(**middleware_options) -> TestClient:
    app = Starlette(routes=[Route("/env", environment_endpoint)])
    app.add_middleware(RequestEnvironmentMiddleware, **middleware_options)
    return TestClient(app)


def test_environment_is_bound_per_request() -> None:
    client = make_client()
    response = client.get("/env", headers={"user-agent": "pytest-agent"})
    assert response.json() == {
        "remote_addr": "testclient",
        "client_ip": "testclient",
        "user_agent": "pytest-agent",
        "remote_user": "",
    }


def test_forwarded_for_header_is_client_ip() -> None:
    client = make_client()
    response = client.get("/env", headers={"x-forwarded-for": "203.0.113.7"})
    assert response.json()["client_ip"] == "203.0.113.7"


def test_remote_user_header() -> None:
    client = make_client(remote_user_header="x-remote-user")
    response = client.get("/env", headers={"x-remote-user": "alice"})
    assert response.json()["remote_user"] == "alice"


def test_environment_is_reset_after_request() -> None:
    make_client().get("/env", headers={"user-agent": "pytest-agent"})
    assert current_request_environment().user_agent == ""


@pytest.mark.parametrize("agent", ["Mozilla/5.0", "curl/8.4.0"])
def test_sink_writes_request_fields(tmp_path: Path, read_lines, agent: str) -> None:
    path = tmp_path / "requests.csv"

    async def handler(request: Request) -> JSONResponse:
        with FileSink(fullpath=str(path)) as sink:
            sink.set_options(LogOption.IP | LogOption.USER_AGENT)
            sink.info("handled {path}", {"path": request.url.path})
        return JSONResponse({})

    app = Starlette(routes=[Route("/work", handler)])
    app.add_middleware(RequestEnvironmentMiddleware)
    TestClient(app).get("/work", headers={"user-agent": agent})

    (line,) = read_lines(path)
    assert line.split(";")[1:] == ["testclient", "INFO: handled /work", agent]
