"""Error-handling entry points for Falcon-based APIs."""

from __future__ import annotations

import logging
import typing
from http import HTTPStatus

import falcon

from .descriptor import create_error_descriptor
from .negotiation import send_exception

if typing.TYPE_CHECKING:  # pragma: no cover
    from falcon import Request, Response, asgi

__all__ = ["ErrorHandler", "install", "middleware"]

_logger = logging.getLogger(__name__)

ErrorHandler = typing.Callable[
    ["Request", "Response", BaseException, dict[str, typing.Any]],
    typing.Awaitable[None],
]


def middleware() -> ErrorHandler:
    """Return a new error handler that reports any exception to the client.

    Register it for :class:`Exception` after all routes have been added::

        app.add_error_handler(Exception, middleware())

    The handler is terminal: it always writes a response and never re-raises.
    Each call returns an independent handler with no shared state.
    """

    async def handle_exception(
        req: Request,
        resp: Response,
        exc: BaseException,
        params: dict[str, typing.Any],
        ws: asgi.WebSocket | None = None,
    ) -> None:
        descriptor = create_error_descriptor(exc)
        if descriptor.status_code >= HTTPStatus.INTERNAL_SERVER_ERROR:
            _logger.error(
                "unhandled error on %s %s", req.method, req.path, exc_info=exc
            )
        else:
            _logger.debug(
                "%d response on %s %s: %s",
                descriptor.status_code,
                req.method,
                req.path,
                descriptor.message,
            )
        if resp is None:
            # WebSocket failures have no HTTP response to write.
            return
        # Keep headers Falcon attaches to its errors, e.g. Allow on a 405.
        if isinstance(exc, falcon.HTTPError) and exc.headers:
            resp.set_headers(exc.headers)
        send_exception(req, resp, descriptor)

    return handle_exception


def install(app: asgi.App) -> asgi.App:
    """Register a fresh :func:`middleware` handler on ``app``.

    The handler covers :class:`Exception` as well as
    :class:`falcon.HTTPError`, replacing Falcon's default serializer so that
    every error response has the same shape.
    """
    handler = middleware()
    app.add_error_handler(Exception, handler)
    app.add_error_handler(falcon.HTTPError, handler)
    return app
