from __future__ import annotations

from typing import Callable, Union

from .config import ServiceConfig

ConfigSource = Union[ServiceConfig, Callable[[], ServiceConfig]]


def join_url(base: str, *parts: str) -> str:
    """
    Join a base URL and path parts with exactly one '/' between them.
    Example: join_url("http://h:1/", "/svc/", "api/x") -> 'http://h:1/svc/api/x'
    """
    url = base.rstrip("/")
    for part in parts:
        segment = (part or "").strip("/")
        if segment:
            url = f"{url}/{segment}"
    return url


def resolve_service_url(config: ServiceConfig, service_name: str, path: str) -> str:
    return join_url(config.gateway_base_url, service_name, path)


def resolve_url(config: ServiceConfig, path: str) -> str:
    return join_url(config.gateway_base_url, path)


def resolve_research_url(config: ServiceConfig, path: str) -> str:
    return join_url(config.research_base_url, path)


class UrlResolver:
    """
    Maps logical (service, path) pairs to absolute URLs.

    Accepts either a fixed ServiceConfig or a zero-argument provider; a
    provider is called on every resolution so runtime config changes are
    picked up (e.g. UrlResolver(ServiceConfig.from_env)).
    """

    def __init__(self, config: ConfigSource):
        if isinstance(config, ServiceConfig):
            _config = config

            def config():
                return _config

        self._config_provider: Callable[[], ServiceConfig] = config

    @property
    def config(self) -> ServiceConfig:
        return self._config_provider()

    def resolve_service_url(self, service_name: str, path: str) -> str:
        return resolve_service_url(self.config, service_name, path)

    def resolve_url(self, path: str) -> str:
        return resolve_url(self.config, path)

    def resolve_research_url(self, path: str) -> str:
        return resolve_research_url(self.config, path)


__all__ = [
    "UrlResolver",
    "join_url",
    "resolve_service_url",
    "resolve_url",
    "resolve_research_url",
]
