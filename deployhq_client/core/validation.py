#deployhq_client\core\validation.py
import re

from deployhq_client.core.models import ClientConfig
from deployhq_client.core.errors import DeployHQConfigurationError


# Single DNS label: alphanumeric ends, hyphens inside, at most 63 chars
SUBDOMAIN_LABEL = re.compile(r"[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?")


def validate_subdomain(subdomain: str) -> None:
    if not subdomain or not subdomain.strip():
        raise DeployHQConfigurationError("subdomain is required")

    if not SUBDOMAIN_LABEL.fullmatch(subdomain):
        raise DeployHQConfigurationError(
            f"subdomain must be a bare account name, got {subdomain!r}"
        )


def validate_client_config(config: ClientConfig) -> None:
    # -------------------------
    # Base URL
    # -------------------------
    if not config.base_url:
        raise DeployHQConfigurationError("base_url is required")

    if not config.base_url.startswith(("https://", "http://")):
        raise DeployHQConfigurationError("base_url must be an http(s) URL")

    if not config.base_url.endswith("/"):
        raise DeployHQConfigurationError("base_url must end with '/'")

    # -------------------------
    # Credentials
    # -------------------------
    if not config.username or not config.username.strip():
        raise DeployHQConfigurationError("username is required")

    if not config.api_key or not config.api_key.strip():
        raise DeployHQConfigurationError("api_key is required")

    # -------------------------
    # Transport
    # -------------------------
    if not config.content_type:
        raise DeployHQConfigurationError("content_type is required")

    if config.timeout is None or config.timeout <= 0:
        raise DeployHQConfigurationError("timeout must be greater than 0")
