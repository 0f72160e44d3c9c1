"""Application factory wiring the error handler into a Falcon app."""

from __future__ import annotations

import typing

import falcon
from falcon import asgi

from .middleware import install

if typing.TYPE_CHECKING:
    import collections.abc as cabc


class HealthResource:
    """Liveness endpoint that never goes through the error handler."""

    async def on_get(self, req: falcon.Request, resp: falcon.Response) -> None:
        """Return a simple health status payload."""
        del req  # Unused parameter
        resp.media = {"status": "ok"}


def create_app(
    *,
    routes: cabc.Iterable[tuple[str, object]] | None = None,
) -> asgi.App:
    """Configure and return a Falcon ASGI app that reports errors uniformly.

    Parameters
    ----------
    routes:
        ``(path, resource)`` pairs to mount in addition to ``/health``.
    """
    app = asgi.App()
    app.add_route("/health", HealthResource())
    for path, resource in routes or ():
        app.add_route(path, resource)
    return install(app)
