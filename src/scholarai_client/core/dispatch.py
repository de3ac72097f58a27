from __future__ import annotations

import logging
import time
from typing import Any, Dict, Mapping, Optional

import httpx

from .auth import CredentialProvider, require_token
from .context import REQUEST_ID_HEADER, get_context
from .response import RawResponse


def _clean_params(params: Optional[Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
    if not params:
        return None
    cleaned = {k: v for k, v in params.items() if v is not None}
    return cleaned or None


class HttpDispatcher:
    """
    Anonymous request dispatch.
    - Sends exactly one request and buffers the whole body
    - Transport errors (httpx.HTTPError) propagate unchanged
    - Never interprets status codes; see response.normalize()
    """

    authenticated = False

    def __init__(self, http: httpx.AsyncClient, *, logger: Optional[logging.Logger] = None):
        self.http = http
        self.log = logger or logging.getLogger("scholarai_client.dispatch")

    async def dispatch(
        self,
        method: str,
        url: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        json: Any = None,
        headers: Optional[Mapping[str, str]] = None,
        endpoint: Optional[str] = None,
    ) -> RawResponse:
        return await self._send(
            method.upper(),
            url,
            params=_clean_params(params),
            json=json,
            headers=self._headers(headers),
            endpoint=endpoint,
        )

    def _headers(self, extra: Optional[Mapping[str, str]]) -> Dict[str, str]:
        headers: Dict[str, str] = {}
        request_id = get_context().request_id
        if request_id:
            headers[REQUEST_ID_HEADER] = request_id
        if extra:
            headers.update(extra)
        return headers

    async def _send(
        self,
        method: str,
        url: str,
        *,
        params: Optional[Dict[str, Any]],
        json: Any,
        headers: Dict[str, str],
        endpoint: Optional[str],
    ) -> RawResponse:
        start = time.perf_counter()
        resp = await self.http.request(
            method, url, params=params, json=json, headers=headers
        )
        raw = await RawResponse.from_httpx(resp)
        duration_ms = int((time.perf_counter() - start) * 1000)

        # structured-ish log without secrets
        self.log.debug(
            "op.request",
            extra={
                "request_id": get_context().request_id,
                "endpoint": endpoint,
                "method": method,
                "url": raw.url,
                "status": raw.status_code,
                "duration_ms": duration_ms,
                "authenticated": self.authenticated,
            },
        )
        return raw


class AuthenticatedDispatcher(HttpDispatcher):
    """
    Dispatch with a bearer token from a CredentialProvider.
    Raises AuthenticationError before any network call when no token exists.
    A 401 is replayed once if the provider can refresh the token.
    """

    authenticated = True

    def __init__(
        self,
        http: httpx.AsyncClient,
        credentials: Optional[CredentialProvider],
        *,
        logger: Optional[logging.Logger] = None,
    ):
        super().__init__(http, logger=logger)
        self.credentials = credentials

    async def dispatch(
        self,
        method: str,
        url: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        json: Any = None,
        headers: Optional[Mapping[str, str]] = None,
        endpoint: Optional[str] = None,
    ) -> RawResponse:
        token = require_token(self.credentials)
        method = method.upper()
        params = _clean_params(params)
        send_headers = self._headers(headers)
        send_headers["Authorization"] = f"Bearer {token}"

        raw = await self._send(
            method, url, params=params, json=json, headers=send_headers, endpoint=endpoint
        )
        if raw.status_code != 401 or self.credentials is None:
            return raw

        new_token = await self.credentials.refresh()
        if not new_token:
            return raw

        self.log.info("Access token refreshed, replaying %s %s", method, url)
        send_headers["Authorization"] = f"Bearer {new_token}"
        return await self._send(
            method, url, params=params, json=json, headers=send_headers, endpoint=endpoint
        )


__all__ = ["HttpDispatcher", "AuthenticatedDispatcher"]
