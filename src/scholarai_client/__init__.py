"""scholarai_client package exports."""

from .core import (
    AuthenticationError,
    ContextCredentialProvider,
    CredentialProvider,
    Environment,
    InvalidResponseError,
    RequestError,
    ResponseMode,
    ResponseValidationError,
    ScholarClient,
    ScholarClientError,
    ServiceConfig,
    StaticCredentialProvider,
    create_client_from_env,
    setup_logging,
)
from .services import (
    assistance,
    documents,
    extraction,
    library,
    research,
    scholarbot,
    summary,
)

__all__ = [
    # Client
    "ScholarClient",
    "ServiceConfig",
    "Environment",
    "ResponseMode",
    "create_client_from_env",
    "setup_logging",
    # Credentials
    "CredentialProvider",
    "StaticCredentialProvider",
    "ContextCredentialProvider",
    # Exceptions
    "ScholarClientError",
    "RequestError",
    "InvalidResponseError",
    "AuthenticationError",
    "ResponseValidationError",
    # Services
    "assistance",
    "documents",
    "extraction",
    "library",
    "research",
    "scholarbot",
    "summary",
]
