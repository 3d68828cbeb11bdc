# deployhq_client/core/errors.py

from typing import Any, Optional


# -----------------------------
# Base Errors
# -----------------------------

class DeployHQError(Exception):
    """Base class for all DeployHQ client errors."""
    pass


# -----------------------------
# Configuration Errors
# -----------------------------

class DeployHQConfigurationError(DeployHQError):
    """Missing or malformed client construction arguments."""
    pass


# -----------------------------
# Transport Errors
# -----------------------------

class DeployHQTransportError(DeployHQError):
    """The service could not be reached (DNS, connect, socket)."""

    def __init__(self, message: str, method: str, url: str):
        super().__init__(message)
        self.method = method
        self.url = url


class DeployHQTimeoutError(DeployHQTransportError):
    """The request did not complete within the configured timeout."""
    pass


# -----------------------------
# HTTP Status Errors
# -----------------------------

class DeployHQHTTPError(DeployHQError):
    """The service answered with a non-2xx status."""

    def __init__(
        self,
        status_code: int,
        message: str,
        method: str,
        url: str,
        body: Optional[Any] = None,
    ):
        super().__init__(f"{method} {url} failed [{status_code}]: {message}")
        self.status_code = status_code
        self.message = message
        self.method = method
        self.url = url
        self.body = body


class DeployHQAuthenticationError(DeployHQHTTPError):
    """Credentials rejected (401/403)."""
    pass


class DeployHQNotFoundError(DeployHQHTTPError):
    pass


class DeployHQValidationError(DeployHQHTTPError):
    """Payload rejected by the service (422)."""
    pass


# -----------------------------
# Decode Errors
# -----------------------------

class DeployHQDecodeError(DeployHQError):
    """A 2xx response body could not be parsed."""

    def __init__(self, message: str, status_code: int, body: str):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
