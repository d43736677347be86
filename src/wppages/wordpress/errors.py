#!filepath: src/wppages/wordpress/errors.py
from __future__ import annotations

import json
from enum import Enum
from typing import Any, Optional

from requests import Response


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    AUTH = "auth"
    CLIENT = "client"
    SERVER = "server"
    UNKNOWN = "unknown"


class WordPressError(RuntimeError):
    """Base class for errors raised by the WordPress integration."""


class WordPressResponseError(WordPressError):
    """Raised when WordPress answers with a non-success status.

    The message always embeds the numeric status and the decoded body, so
    callers that only log ``str(err)`` still get the full diagnostic.

    Args:
        operation: Human readable action, e.g. ``"fetch page 5"``.
        status_code: HTTP status returned by the server.
        detail: Decoded response body (JSON value, raw text or ``None``).
    """

    def __init__(self, operation: str, status_code: int, detail: Any = None) -> None:
        super().__init__(
            f"Failed to {operation} ({status_code}): {stringify_detail(detail)}"
        )
        self.operation = operation
        self.status_code = int(status_code)
        self.detail = detail

    @property
    def kind(self) -> ErrorKind:
        return kind_from_status(self.status_code)

    @property
    def error_code(self) -> Optional[str]:
        """WordPress error code (``rest_post_invalid_id`` and friends) when present."""
        if isinstance(self.detail, dict):
            code = self.detail.get("code")
            return str(code) if code is not None else None
        return None


class WordPressNotFoundError(WordPressResponseError):
    """404 from WordPress."""


class WordPressAuthError(WordPressResponseError):
    """401 or 403 from WordPress."""


class WordPressServerError(WordPressResponseError):
    """5xx from WordPress."""


def kind_from_status(status: int) -> ErrorKind:
    if status == 404:
        return ErrorKind.NOT_FOUND
    if status in (401, 403):
        return ErrorKind.AUTH
    if 400 <= status < 500:
        return ErrorKind.CLIENT
    if 500 <= status < 600:
        return ErrorKind.SERVER
    return ErrorKind.UNKNOWN


_ERRORS_BY_KIND: dict[ErrorKind, type[WordPressResponseError]] = {
    ErrorKind.NOT_FOUND: WordPressNotFoundError,
    ErrorKind.AUTH: WordPressAuthError,
    ErrorKind.SERVER: WordPressServerError,
}


def response_error(operation: str, status_code: int, detail: Any) -> WordPressResponseError:
    """Build the most specific error for a failed response.

    Args:
        operation: Human readable action.
        status_code: HTTP status.
        detail: Decoded response body.

    Returns:
        WordPressResponseError: Error instance, not raised.
    """
    cls = _ERRORS_BY_KIND.get(kind_from_status(status_code), WordPressResponseError)
    return cls(operation, status_code, detail)


def decode_error_body(response: Response) -> Any:
    """Best effort decoding of an error body: JSON, then text, then ``None``."""
    try:
        return response.json()
    except Exception:
        pass
    try:
        return response.text
    except Exception:
        return None


def stringify_detail(detail: Any) -> str:
    try:
        return json.dumps(detail, ensure_ascii=False, default=str)
    except (TypeError, ValueError):
        return repr(detail)


__all__ = [
    "ErrorKind",
    "WordPressError",
    "WordPressResponseError",
    "WordPressNotFoundError",
    "WordPressAuthError",
    "WordPressServerError",
    "kind_from_status",
    "response_error",
    "decode_error_body",
    "stringify_detail",
]
