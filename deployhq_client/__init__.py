"""Client library for the DeployHQ deployment service."""

from deployhq_client.client import DeployHQClient
from deployhq_client.config import ClientSettings
from deployhq_client.container import build_client
from deployhq_client.core.errors import (
    DeployHQAuthenticationError,
    DeployHQConfigurationError,
    DeployHQDecodeError,
    DeployHQError,
    DeployHQHTTPError,
    DeployHQNotFoundError,
    DeployHQTimeoutError,
    DeployHQTransportError,
    DeployHQValidationError,
)
from deployhq_client.core.models import ClientConfig, HttpMethod, RequestDescriptor
from deployhq_client.transport.executor import RequestExecutor

__all__ = [
    "ClientConfig",
    "ClientSettings",
    "DeployHQAuthenticationError",
    "DeployHQClient",
    "DeployHQConfigurationError",
    "DeployHQDecodeError",
    "DeployHQError",
    "DeployHQHTTPError",
    "DeployHQNotFoundError",
    "DeployHQTimeoutError",
    "DeployHQTransportError",
    "DeployHQValidationError",
    "HttpMethod",
    "RequestDescriptor",
    "RequestExecutor",
    "build_client",
]
