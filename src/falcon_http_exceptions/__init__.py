"""Uniform error responses for Falcon applications."""

from .app import create_app
from .descriptor import ErrorDescriptor, create_error_descriptor
from .exceptions import HTTPErrorLike, HTTPException
from .middleware import install, middleware
from .negotiation import (
    ResponseFormat,
    format_text_response,
    get_preferred_response_format,
    send_exception,
)

__all__ = [
    "ErrorDescriptor",
    "HTTPErrorLike",
    "HTTPException",
    "ResponseFormat",
    "create_app",
    "create_error_descriptor",
    "format_text_response",
    "get_preferred_response_format",
    "install",
    "middleware",
    "send_exception",
]
