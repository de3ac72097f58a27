"""Core request/response layer for scholarai-client (no service knowledge)."""

from .auth import (
    ContextCredentialProvider,
    CredentialProvider,
    StaticCredentialProvider,
)
from .client import ScholarClient, create_client_from_env
from .config import Environment, ServiceConfig, load_env_config
from .context import (
    RequestContext,
    apply_request_context,
    ensure_request_id,
    get_context,
    reset_context,
)
from .dispatch import AuthenticatedDispatcher, HttpDispatcher
from .endpoints import PROJECT_SERVICE, Endpoint, Target, endpoint_table
from .errors import (
    AuthenticationError,
    InvalidResponseError,
    RequestError,
    ResponseValidationError,
    ScholarClientError,
)
from .logging import setup_logging
from .response import RawResponse, ResponseMode, error_message, normalize
from .urls import UrlResolver, join_url, resolve_service_url, resolve_url

__all__ = [
    # Client
    "ScholarClient",
    "create_client_from_env",
    # Exceptions
    "ScholarClientError",
    "RequestError",
    "InvalidResponseError",
    "AuthenticationError",
    "ResponseValidationError",
    # Config / URLs
    "Environment",
    "ServiceConfig",
    "load_env_config",
    "UrlResolver",
    "join_url",
    "resolve_service_url",
    "resolve_url",
    # Dispatch / normalization
    "HttpDispatcher",
    "AuthenticatedDispatcher",
    "RawResponse",
    "ResponseMode",
    "normalize",
    "error_message",
    # Endpoints
    "Endpoint",
    "Target",
    "PROJECT_SERVICE",
    "endpoint_table",
    # Credentials / context
    "CredentialProvider",
    "StaticCredentialProvider",
    "ContextCredentialProvider",
    "RequestContext",
    "apply_request_context",
    "reset_context",
    "get_context",
    "ensure_request_id",
    # Logging
    "setup_logging",
]
