"""HTTP exception contract recognised by the error handler."""

from __future__ import annotations

import typing
from http import HTTPStatus

__all__ = ["HTTPErrorLike", "HTTPException"]


@typing.runtime_checkable
class HTTPErrorLike(typing.Protocol):
    """Any error exposing an HTTP status code and a message.

    Values satisfying this protocol are rendered with their own status code
    and message instead of a generic ``500``.
    """

    status_code: int
    message: str


class HTTPException(Exception):  # noqa: N818
    """Base class for errors that carry an explicit HTTP status.

    Parameters
    ----------
    status_code : int
        The HTTP status code to respond with.
    message : str, optional
        Human-readable explanation. Defaults to the standard reason phrase
        for ``status_code`` when omitted.
    """

    def __init__(self, status_code: int, message: str | None = None) -> None:
        if message is None:
            message = reason_phrase(status_code)
        super().__init__(message)
        self.status_code = status_code
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.status_code!r}, {self.message!r})"


def reason_phrase(status_code: int) -> str:
    """Return the standard reason phrase for ``status_code``, or ``""``."""
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return ""
