from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from dotenv import load_dotenv

ENV_VAR = "SCHOLARAI_ENV"
DEV_URL_VAR = "SCHOLARAI_DEV_API_URL"
DOCKER_URL_VAR = "SCHOLARAI_DOCKER_BACKEND_URL"
PROD_URL_VAR = "SCHOLARAI_API_BASE_URL"
RESEARCH_URL_VAR = "SCHOLARAI_ONGOING_RESEARCH_API_URL"
ACCESS_TOKEN_VAR = "SCHOLARAI_ACCESS_TOKEN"
USER_ID_VAR = "SCHOLARAI_USER_ID"
TIMEOUT_VAR = "SCHOLARAI_TIMEOUT_S"
LOG_LEVEL_VAR = "SCHOLARAI_LOG_LEVEL"

DEFAULT_DEV_URL = "http://localhost:8989"
DEFAULT_DOCKER_URL = "http://docker-core-app-1:8989"
DEFAULT_PROD_URL = "http://4.247.29.26:8989"
DEFAULT_RESEARCH_URL = "http://localhost:8083/api"
DEFAULT_TIMEOUT_S = 30.0


class Environment(str, Enum):
    DEV = "dev"
    DOCKER = "docker"
    PROD = "prod"

    @classmethod
    def parse(cls, value: Optional[str]) -> "Environment":
        """Unknown or empty values fall back to dev."""
        raw = (value or "").strip().lower()
        for member in cls:
            if member.value == raw:
                return member
        return cls.DEV


def _env_str(name: str) -> Optional[str]:
    val = os.getenv(name)
    if val is None:
        return None
    val = val.strip()
    return val or None


@dataclass(frozen=True)
class ServiceConfig:
    """
    Deployment settings for the gateway and the standalone research service.

    Overrides left as None fall back to the hardcoded default for their
    environment.
    """

    environment: Environment = Environment.DEV
    dev_url: Optional[str] = None
    docker_url: Optional[str] = None
    prod_url: Optional[str] = None
    research_url: Optional[str] = None
    timeout_seconds: float = DEFAULT_TIMEOUT_S

    @property
    def gateway_base_url(self) -> str:
        if self.environment is Environment.DOCKER:
            return self.docker_url or DEFAULT_DOCKER_URL
        if self.environment is Environment.PROD:
            return self.prod_url or DEFAULT_PROD_URL
        return self.dev_url or DEFAULT_DEV_URL

    @property
    def research_base_url(self) -> str:
        return self.research_url or DEFAULT_RESEARCH_URL

    @classmethod
    def from_env(cls, *, use_dotenv: bool = False) -> "ServiceConfig":
        if use_dotenv:
            load_dotenv()
        timeout_raw = _env_str(TIMEOUT_VAR)
        timeout = float(timeout_raw) if timeout_raw else DEFAULT_TIMEOUT_S
        if timeout <= 0:
            raise ValueError(f"{TIMEOUT_VAR} must be greater than zero")
        return cls(
            environment=Environment.parse(os.getenv(ENV_VAR)),
            dev_url=_env_str(DEV_URL_VAR),
            docker_url=_env_str(DOCKER_URL_VAR),
            prod_url=_env_str(PROD_URL_VAR),
            research_url=_env_str(RESEARCH_URL_VAR),
            timeout_seconds=timeout,
        )


def load_env_config(*, use_dotenv: bool = True) -> ServiceConfig:
    """Load service configuration from environment (optional .env)."""
    return ServiceConfig.from_env(use_dotenv=use_dotenv)


def log_level_from_env(default: str = "INFO") -> str:
    return _env_str(LOG_LEVEL_VAR) or default


__all__ = [
    "Environment",
    "ServiceConfig",
    "load_env_config",
    "log_level_from_env",
    "ENV_VAR",
    "DEV_URL_VAR",
    "DOCKER_URL_VAR",
    "PROD_URL_VAR",
    "RESEARCH_URL_VAR",
    "ACCESS_TOKEN_VAR",
    "USER_ID_VAR",
    "TIMEOUT_VAR",
    "LOG_LEVEL_VAR",
    "DEFAULT_DEV_URL",
    "DEFAULT_DOCKER_URL",
    "DEFAULT_PROD_URL",
    "DEFAULT_RESEARCH_URL",
]
