"""Normalise arbitrary raised values into error descriptors."""

from __future__ import annotations

import traceback
import typing
from http import HTTPStatus

import falcon
import msgspec

from .exceptions import HTTPErrorLike, reason_phrase

__all__ = ["DEFAULT_STATUS_CODE", "ErrorDescriptor", "create_error_descriptor"]

DEFAULT_STATUS_CODE = int(HTTPStatus.INTERNAL_SERVER_ERROR)

_MIN_STATUS = 100
_MAX_STATUS = 599


class ErrorDescriptor(
    msgspec.Struct,  # pyright: ignore[reportUntypedBaseClass]
    frozen=True,
    omit_defaults=True,
    rename="camel",
):
    """Serializable description of a failed request.

    Encodes as ``{"statusCode": ..., "message": ..., "stackTrace": ...}``
    with ``stackTrace`` left out when no trace is available.
    """

    status_code: int
    message: str
    stack_trace: str | None = None


def create_error_descriptor(err: object) -> ErrorDescriptor:
    """Convert any raised value into an :class:`ErrorDescriptor`.

    Falcon's own :class:`falcon.HTTPError` and any value exposing both
    ``status_code`` and ``message`` keep their status and message. Every
    other value is reported as ``500`` with its truthy ``message`` attribute,
    or its string form when that attribute is missing or falsy.

    This function never raises.

    Parameters
    ----------
    err : object
        The raised value. No particular type is assumed.

    Returns
    -------
    ErrorDescriptor
        A fresh descriptor for ``err``.
    """
    stack_trace = _stack_trace(err)
    if isinstance(err, falcon.HTTPError):
        return _describe_falcon_error(err, stack_trace)
    if _is_http_error(err):
        message = _safe_getattr(err, "message")
        return ErrorDescriptor(
            status_code=_coerce_status(_safe_getattr(err, "status_code")),
            message="" if message is None else _to_text(message),
            stack_trace=stack_trace,
        )
    message = _safe_getattr(err, "message")
    return ErrorDescriptor(
        status_code=DEFAULT_STATUS_CODE,
        message=_to_text(message) if _truthy(message) else _to_text(err),
        stack_trace=stack_trace,
    )


def _describe_falcon_error(
    err: falcon.HTTPError, stack_trace: str | None
) -> ErrorDescriptor:
    try:
        status_code = _coerce_status(falcon.http_status_to_code(err.status))
    except ValueError:
        status_code = DEFAULT_STATUS_CODE
    message = err.description or err.title or reason_phrase(status_code)
    return ErrorDescriptor(
        status_code=status_code,
        message=_to_text(message),
        stack_trace=stack_trace,
    )


def _is_http_error(err: object) -> bool:
    try:
        return isinstance(err, HTTPErrorLike)
    except Exception:  # noqa: BLE001 - exotic __getattr__ implementations
        return False


def _coerce_status(value: object) -> int:
    """Return ``value`` as a status code, or ``500`` if it is not one."""
    if isinstance(value, bool) or not isinstance(value, int):
        return DEFAULT_STATUS_CODE
    if not _MIN_STATUS <= value <= _MAX_STATUS:
        return DEFAULT_STATUS_CODE
    return int(value)


def _stack_trace(err: object) -> str | None:
    if isinstance(err, BaseException) and err.__traceback__ is not None:
        return "".join(
            traceback.format_exception(type(err), err, err.__traceback__)
        )
    stack = _safe_getattr(err, "stack")
    if isinstance(stack, str) and stack:
        return stack
    return None


def _safe_getattr(obj: object, name: str) -> typing.Any:
    try:
        return getattr(obj, name, None)
    except Exception:  # noqa: BLE001 - a raising property counts as absent
        return None


def _truthy(value: object) -> bool:
    try:
        return bool(value)
    except Exception:  # noqa: BLE001
        return False


def _to_text(value: object) -> str:
    """Convert ``value`` to ``str`` without ever raising."""
    if isinstance(value, str):
        return value
    try:
        return str(value)
    except Exception:  # noqa: BLE001
        try:
            return repr(value)
        except Exception:  # noqa: BLE001
            return object.__repr__(value)
