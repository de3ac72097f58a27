from __future__ import annotations

from typing import Any, Optional


class ScholarClientError(Exception):
    """Base error for client failures."""


class RequestError(ScholarClientError):
    """
    A request reached the server but could not be turned into a result.

    ``str(exc)`` is exactly the normalized message so callers can show it
    as-is; the HTTP details are kept as attributes.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        method: Optional[str] = None,
        url: Optional[str] = None,
        response_json: Any = None,
        response_text: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.method = method
        self.url = url
        self.response_json = response_json
        self.response_text = response_text


class InvalidResponseError(RequestError):
    pass


class AuthenticationError(RequestError):
    """Raised before dispatch when no credential is available."""


class ResponseValidationError(ScholarClientError):
    pass


__all__ = [
    "ScholarClientError",
    "RequestError",
    "InvalidResponseError",
    "AuthenticationError",
    "ResponseValidationError",
]
