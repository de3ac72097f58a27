from __future__ import annotations

import os
from typing import Optional, Protocol, runtime_checkable

from .config import ACCESS_TOKEN_VAR, USER_ID_VAR
from .context import get_context
from .errors import AuthenticationError

NOT_AUTHENTICATED_MESSAGE = "User not authenticated"
MISSING_TOKEN_MESSAGE = "No access token available for authenticated request"


@runtime_checkable
class CredentialProvider(Protocol):
    """
    Source of the bearer token and current user id.

    refresh() is consulted once after a 401; returning None means the
    original 401 response is reported as-is.
    """

    def get_token(self) -> Optional[str]: ...

    def get_user_id(self) -> Optional[str]: ...

    async def refresh(self) -> Optional[str]: ...


class StaticCredentialProvider:
    """Fixed token/user id, e.g. for scripts and service accounts."""

    def __init__(self, token: Optional[str] = None, user_id: Optional[str] = None):
        self._token = token or None
        self._user_id = user_id or None

    @classmethod
    def from_env(cls) -> "StaticCredentialProvider":
        return cls(
            token=(os.getenv(ACCESS_TOKEN_VAR) or "").strip(),
            user_id=(os.getenv(USER_ID_VAR) or "").strip(),
        )

    def get_token(self) -> Optional[str]:
        return self._token

    def get_user_id(self) -> Optional[str]:
        return self._user_id

    async def refresh(self) -> Optional[str]:
        return None


class ContextCredentialProvider:
    """Reads credentials from the ContextVars set by apply_request_context()."""

    def get_token(self) -> Optional[str]:
        return get_context().access_token

    def get_user_id(self) -> Optional[str]:
        return get_context().user_id

    async def refresh(self) -> Optional[str]:
        return None


def require_token(provider: Optional[CredentialProvider]) -> str:
    token = provider.get_token() if provider is not None else None
    if not token:
        raise AuthenticationError(MISSING_TOKEN_MESSAGE)
    return token


def resolve_user_id(
    provider: Optional[CredentialProvider], user_id: Optional[str] = None
) -> str:
    """Explicit user id wins; otherwise ask the provider."""
    resolved = user_id or (provider.get_user_id() if provider is not None else None)
    if not resolved:
        raise AuthenticationError(NOT_AUTHENTICATED_MESSAGE)
    return resolved


__all__ = [
    "CredentialProvider",
    "StaticCredentialProvider",
    "ContextCredentialProvider",
    "require_token",
    "resolve_user_id",
    "NOT_AUTHENTICATED_MESSAGE",
    "MISSING_TOKEN_MESSAGE",
]
