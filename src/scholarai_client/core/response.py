from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

import httpx

from .errors import InvalidResponseError, RequestError

INVALID_JSON_MESSAGE = "Invalid JSON response from server"


class ResponseMode(str, Enum):
    """How a successful body is turned into a result."""

    ENVELOPE = "envelope"  # {status, message, data} returned whole
    JSON = "json"  # any JSON value returned as-is
    RAW = "raw"  # unwrap "data" when present, else pass through
    BLOB = "blob"  # bytes, no interpretation


@dataclass(frozen=True)
class RawResponse:
    """
    A fully buffered HTTP response.
    The body is read once on receipt; json()/text()/blob() are pure views over
    that buffer and may be called any number of times.
    """

    status_code: int
    content: bytes = b""
    reason_phrase: str = ""
    headers: Dict[str, str] = field(default_factory=dict)
    method: Optional[str] = None
    url: Optional[str] = None

    @classmethod
    async def from_httpx(cls, resp: httpx.Response) -> "RawResponse":
        content = await resp.aread()
        return cls(
            status_code=resp.status_code,
            content=content,
            reason_phrase=resp.reason_phrase,
            headers=dict(resp.headers),
            method=resp.request.method,
            url=str(resp.request.url),
        )

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        """Raises ValueError when the body is not valid JSON."""
        return json.loads(self.content)

    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")

    def blob(self) -> bytes:
        return self.content


def status_message(status_code: int) -> str:
    return f"HTTP error! status: {status_code}"


def error_message(raw: RawResponse) -> str:
    """
    Best human-readable message for a failed response.
    Priority: JSON "message", JSON "error", raw text body, status line.
    """
    fallback = status_message(raw.status_code)
    try:
        parsed = raw.json()
    except ValueError:
        return raw.text() or fallback

    if isinstance(parsed, dict):
        message = parsed.get("message") or parsed.get("error")
        if message:
            return message if isinstance(message, str) else str(message)
    return fallback


def to_request_error(raw: RawResponse) -> RequestError:
    response_json = None
    response_text = None
    try:
        response_json = raw.json()
    except ValueError:
        response_text = raw.text()[:500]

    return RequestError(
        error_message(raw),
        status_code=raw.status_code,
        method=raw.method,
        url=raw.url,
        response_json=response_json,
        response_text=response_text,
    )


def _parse_json(raw: RawResponse) -> Any:
    try:
        return raw.json()
    except ValueError as exc:
        raise InvalidResponseError(
            INVALID_JSON_MESSAGE,
            status_code=raw.status_code,
            method=raw.method,
            url=raw.url,
            response_text=raw.text()[:500],
        ) from exc


def unwrap_data(payload: Any) -> Any:
    """Return payload["data"] when the key exists; lists and anything else as-is."""
    if isinstance(payload, dict) and "data" in payload:
        return payload["data"]
    return payload


def normalize(raw: RawResponse, mode: ResponseMode = ResponseMode.ENVELOPE) -> Any:
    """
    Turn a buffered response into a result or raise RequestError.
    - non-2xx: RequestError with the error_message() text
    - BLOB: body bytes unchanged
    - ENVELOPE / JSON: parsed body unchanged
    - RAW: parsed body with "data" unwrapped when present
    """
    if not raw.ok:
        raise to_request_error(raw)

    mode = ResponseMode(mode)
    if mode is ResponseMode.BLOB:
        return raw.blob()

    payload = _parse_json(raw)
    if mode is ResponseMode.RAW:
        return unwrap_data(payload)
    return payload


__all__ = [
    "RawResponse",
    "ResponseMode",
    "normalize",
    "error_message",
    "status_message",
    "to_request_error",
    "unwrap_data",
    "INVALID_JSON_MESSAGE",
]
