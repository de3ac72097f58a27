"""Per-task request context (request id and session credentials) using ContextVars."""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token
from dataclasses import dataclass
from typing import Iterable, List, Optional

# Context variables
_request_id_var: ContextVar[str | None] = ContextVar("request_id", default=None)
_access_token_var: ContextVar[str | None] = ContextVar("access_token", default=None)
_user_id_var: ContextVar[str | None] = ContextVar("user_id", default=None)

REQUEST_ID_HEADER = "X-Request-Id"


@dataclass(frozen=True)
class RequestContext:
    request_id: Optional[str] = None
    access_token: Optional[str] = None
    user_id: Optional[str] = None


def ensure_request_id(candidate: Optional[str] = None) -> str:
    return candidate or uuid.uuid4().hex


def apply_request_context(
    *,
    access_token: Optional[str] = None,
    user_id: Optional[str] = None,
    request_id: Optional[str] = None,
) -> Iterable[Token]:
    """Set ContextVars for the current task; returns tokens for reset_context()."""
    tokens: List[Token] = []
    tokens.append(_request_id_var.set(ensure_request_id(request_id)))
    tokens.append(_access_token_var.set(access_token))
    tokens.append(_user_id_var.set(user_id))
    return tokens


def reset_context(tokens: Iterable[Token]) -> None:
    for token in tokens:
        token.var.reset(token)


def get_context() -> RequestContext:
    """Current values; unset fields are None (no request id is generated here)."""
    return RequestContext(
        request_id=_request_id_var.get(),
        access_token=_access_token_var.get(),
        user_id=_user_id_var.get(),
    )


__all__ = [
    "RequestContext",
    "REQUEST_ID_HEADER",
    "apply_request_context",
    "reset_context",
    "get_context",
    "ensure_request_id",
]
