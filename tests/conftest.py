"""Shared pytest fixtures for the test suite."""
from __future__ import annotations

import sys
import typing
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(BASE_DIR / "src"))
sys.path.insert(0, str(BASE_DIR))

import falcon
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from falcon_http_exceptions import HTTPException, create_app

if typing.TYPE_CHECKING:
    from falcon import asgi


class BrokenMessageError(Exception):
    """Generic error with an empty ``message`` and a custom string form."""

    message = ""

    def __str__(self) -> str:
        return "boom"


class FailingResource:
    """Raise a different kind of error depending on the ``kind`` parameter."""

    async def on_get(
        self, req: falcon.Request, resp: falcon.Response, kind: str
    ) -> None:
        if kind == "not-found":
            raise HTTPException(404, "Not Found")
        if kind == "bad-request":
            raise HTTPException(400, "")
        if kind == "broken":
            raise BrokenMessageError
        if kind == "falcon":
            raise falcon.HTTPForbidden(description="Members only")
        raise RuntimeError("oops")


@pytest.fixture()
def app() -> asgi.App:
    return create_app(routes=[("/fail/{kind}", FailingResource())])


@pytest_asyncio.fixture()
async def client(app: asgi.App) -> typing.AsyncIterator[AsyncClient]:
    """Yield an HTTP client bound to the ASGI app."""
    async with AsyncClient(
        transport=ASGITransport(app=typing.cast("typing.Any", app)),
        base_url="https://test",
    ) as client:
        yield client
