"""Transport and protocol core for gerrit-rest (no resource knowledge)."""

from .auth import (
    AuthenticationService,
    BasicCredentials,
    CookieCredentials,
    DigestChallenge,
    DigestCredentials,
)
from .client import ApiResponse, GerritClient, remove_magic_prefix_line
from .config import GerritEnvConfig, create_client_from_env, load_env_config
from .errors import (
    GerritAuthenticationError,
    GerritClientError,
    GerritConfigurationError,
    GerritConflictError,
    GerritHTTPError,
    GerritModelValidationError,
    GerritNotFoundError,
    GerritParseError,
    GerritSerializationError,
    GerritTransportError,
    GerritUnauthorizedError,
)
from .logging import setup_logging
from .observability import log_event
from .urls import append_query, build_url, encode_query, expand_path, quote_segment

__all__ = [
    # Client
    "GerritClient",
    "ApiResponse",
    "remove_magic_prefix_line",
    # Authentication
    "AuthenticationService",
    "BasicCredentials",
    "CookieCredentials",
    "DigestCredentials",
    "DigestChallenge",
    # URLs
    "build_url",
    "quote_segment",
    "expand_path",
    "encode_query",
    "append_query",
    # Exceptions
    "GerritClientError",
    "GerritConfigurationError",
    "GerritSerializationError",
    "GerritTransportError",
    "GerritAuthenticationError",
    "GerritHTTPError",
    "GerritUnauthorizedError",
    "GerritNotFoundError",
    "GerritConflictError",
    "GerritParseError",
    "GerritModelValidationError",
    # Config and logging
    "GerritEnvConfig",
    "create_client_from_env",
    "load_env_config",
    "setup_logging",
    "log_event",
]
