from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .client import GerritClient
from .errors import GerritConfigurationError

AUTH_TYPES = ("basic", "digest", "cookie", "none")


@dataclass(frozen=True)
class GerritEnvConfig:
    base_url: str
    username: Optional[str] = None
    password: Optional[str] = None
    auth_type: str = "none"


def load_env_config(*, use_dotenv: bool = True) -> GerritEnvConfig:
    """Load Gerrit connection settings from environment (optional .env)."""
    if use_dotenv:
        load_dotenv()
    base_url = os.getenv("GERRIT_BASE_URL", "").strip()
    username = os.getenv("GERRIT_USERNAME", "").strip() or None
    password = os.getenv("GERRIT_PASSWORD", "") or None
    default_auth = "basic" if username else "none"
    auth_type = (os.getenv("GERRIT_AUTH_TYPE", "").strip() or default_auth).lower()
    return GerritEnvConfig(
        base_url=base_url, username=username, password=password, auth_type=auth_type
    )


def create_client_from_env(**kwargs) -> GerritClient:
    """Create a GerritClient from environment variables with the configured auth."""
    config = load_env_config()
    if not config.base_url:
        raise GerritConfigurationError("Missing GERRIT_BASE_URL in environment.")
    if config.auth_type not in AUTH_TYPES:
        raise GerritConfigurationError(
            f"Unknown GERRIT_AUTH_TYPE {config.auth_type!r}; "
            f"expected one of {', '.join(AUTH_TYPES)}."
        )
    if config.auth_type != "none" and not (config.username and config.password):
        raise GerritConfigurationError(
            "GERRIT_USERNAME and GERRIT_PASSWORD are required "
            f"for {config.auth_type} auth."
        )

    client = GerritClient(base_url=config.base_url, **kwargs)
    auth = client.authentication
    if config.auth_type == "basic":
        auth.set_basic_auth(config.username, config.password)
    elif config.auth_type == "digest":
        auth.set_digest_auth(config.username, config.password)
    elif config.auth_type == "cookie":
        auth.set_cookie_auth(config.username, config.password)
    return client


__all__ = ["AUTH_TYPES", "GerritEnvConfig", "load_env_config", "create_client_from_env"]
