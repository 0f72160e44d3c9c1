"""Choose and write the response representation for an error."""

from __future__ import annotations

import enum
import typing

import falcon
from msgspec import json as msgspec_json

if typing.TYPE_CHECKING:  # pragma: no cover
    from .descriptor import ErrorDescriptor

__all__ = [
    "UNKNOWN_ERROR_TEXT",
    "ResponseFormat",
    "format_text_response",
    "get_preferred_response_format",
    "send_exception",
]

UNKNOWN_ERROR_TEXT = "Unknown error"

_ENCODER = msgspec_json.Encoder()


class ResponseFormat(enum.Enum):
    """Representations an error response can take."""

    JSON = "json"
    TEXT = "text"


def get_preferred_response_format(req: falcon.Request) -> ResponseFormat:
    """Return the format the client asked for in its ``Accept`` header.

    JSON is chosen only when the raw header contains ``application/json``.
    Quality values and wildcards are not considered; anything else, including
    a missing header, yields plain text.
    """
    accept = req.get_header("Accept")
    if accept is not None and "application/json" in accept:
        return ResponseFormat.JSON
    return ResponseFormat.TEXT


def format_text_response(descriptor: ErrorDescriptor) -> str:
    """Render ``descriptor`` as the message line followed by the trace."""
    message = descriptor.message or UNKNOWN_ERROR_TEXT
    return f"{message}\n{descriptor.stack_trace or ''}"


def send_exception(
    req: falcon.Request, resp: falcon.Response, descriptor: ErrorDescriptor
) -> ResponseFormat:
    """Write ``descriptor`` to ``resp`` in the format ``req`` prefers.

    Parameters
    ----------
    req : falcon.Request
        The request whose ``Accept`` header drives the format choice.
    resp : falcon.Response
        The response to populate with status, content type and body.
    descriptor : ErrorDescriptor
        The error to report.

    Returns
    -------
    ResponseFormat
        The format that was written.
    """
    response_format = get_preferred_response_format(req)
    resp.status = descriptor.status_code
    # Falcon renders ``text`` in preference to ``data``, so clear whichever
    # body a resource may have set before failing.
    if response_format is ResponseFormat.JSON:
        resp.content_type = falcon.MEDIA_JSON
        resp.text = None
        resp.data = _ENCODER.encode(descriptor)
    else:
        resp.content_type = falcon.MEDIA_TEXT
        resp.data = None
        resp.text = format_text_response(descriptor)
    return response_format
