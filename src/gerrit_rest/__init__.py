"""gerrit_rest package exports."""

from .core.client import ApiResponse, GerritClient, remove_magic_prefix_line
from .core.config import create_client_from_env
from .core.errors import (
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
from .core.logging import setup_logging
from .resources import (
    access,
    accounts,
    changes,
    config,
    events,
    groups,
    plugins,
    projects,
    revisions,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "GerritClient",
    "ApiResponse",
    "create_client_from_env",
    "remove_magic_prefix_line",
    "setup_logging",
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
    # Resource families
    "access",
    "accounts",
    "changes",
    "config",
    "events",
    "groups",
    "plugins",
    "projects",
    "revisions",
]
