from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from .auth import CredentialProvider, StaticCredentialProvider, resolve_user_id
from .config import ServiceConfig, load_env_config
from .dispatch import AuthenticatedDispatcher, HttpDispatcher
from .endpoints import Endpoint, Target
from .errors import ResponseValidationError
from .response import normalize
from .urls import ConfigSource, UrlResolver

T = TypeVar("T", bound=BaseModel)


class ScholarClient:
    """
    Shared async client for the ScholarAI microservices.
    - Owns URL resolution, anonymous and authenticated dispatch
    - Every call is: resolve URL -> dispatch once -> normalize
    - No business logic; service modules own paths and payload shapes
    """

    def __init__(
        self,
        *,
        config: Optional[ConfigSource] = None,
        credentials: Optional[CredentialProvider] = None,
        timeout_seconds: Optional[float] = None,
        logger: Optional[logging.Logger] = None,
        http: Optional[httpx.AsyncClient] = None,
    ):
        self.resolver = UrlResolver(config if config is not None else ServiceConfig())
        self.credentials = credentials
        self.log = logger or logging.getLogger("scholarai_client.client")

        if timeout_seconds is None:
            timeout_seconds = self.resolver.config.timeout_seconds

        self._owns_http = http is None
        self.http = http or httpx.AsyncClient(
            headers={
                "Accept": "application/json",
                "Content-Type": "application/json",
            },
            timeout=timeout_seconds,
        )
        self.anonymous = HttpDispatcher(self.http, logger=self.log)
        self.authenticated = AuthenticatedDispatcher(
            self.http, credentials, logger=self.log
        )

    @classmethod
    def from_env(cls, **kwargs) -> "ScholarClient":
        config = kwargs.pop("config", None) or load_env_config()
        kwargs.setdefault("credentials", StaticCredentialProvider.from_env())
        return cls(config=config, **kwargs)

    async def aclose(self) -> None:
        if self._owns_http:
            await self.http.aclose()

    async def __aenter__(self) -> "ScholarClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    def url_for(self, endpoint: Endpoint, path_params: Optional[Mapping[str, Any]] = None) -> str:
        path = endpoint.format_path(path_params)
        if endpoint.target is Target.RESEARCH:
            return self.resolver.resolve_research_url(path)
        if endpoint.service:
            return self.resolver.resolve_service_url(endpoint.service, path)
        return self.resolver.resolve_url(path)

    def user_id(self, user_id: Optional[str] = None) -> str:
        """Explicit user id, else the credential provider's; AuthenticationError if none."""
        return resolve_user_id(self.credentials, user_id)

    async def call(
        self,
        endpoint: Endpoint,
        *,
        path_params: Optional[Mapping[str, Any]] = None,
        params: Optional[Mapping[str, Any]] = None,
        json: Any = None,
    ) -> Any:
        """
        Execute one endpoint.
        - Raises RequestError on non-2xx or malformed JSON
        - Raises AuthenticationError before dispatch if credentials are missing
        - Transport errors (httpx.HTTPError) propagate unchanged
        """
        url = self.url_for(endpoint, path_params)
        dispatcher = self.authenticated if endpoint.authenticated else self.anonymous
        raw = await dispatcher.dispatch(
            endpoint.method, url, params=params, json=json, endpoint=endpoint.name
        )
        return normalize(raw, endpoint.mode)

    async def call_model(self, model: Type[T], endpoint: Endpoint, **kwargs: Any) -> T:
        payload = await self.call(endpoint, **kwargs)
        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            raise ResponseValidationError(
                f"Response did not match model {model.__name__}: {exc}"
            ) from exc


def create_client_from_env(**kwargs) -> ScholarClient:
    """Create a ScholarClient from environment variables (optional .env)."""
    return ScholarClient.from_env(**kwargs)


__all__ = ["ScholarClient", "create_client_from_env"]
