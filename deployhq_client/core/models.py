"""Core request/config models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union


DEFAULT_CONTENT_TYPE = "application/json"
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_USER_AGENT = "deployhq-client/0.1.0"
DEFAULT_SERVICE_HOST = "deployhq.com"


class HttpMethod(Enum):
    """HTTP verbs the service is called with."""

    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"


@dataclass(frozen=True)
class ClientConfig:
    """Immutable connection settings, fixed for the client's lifetime."""

    base_url: str
    username: str
    api_key: str = field(repr=False)

    content_type: str = DEFAULT_CONTENT_TYPE
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    user_agent: str = DEFAULT_USER_AGENT

    def url_for(self, path: str) -> str:
        """Join a relative resource path onto the base URL."""
        return self.base_url + path.lstrip("/")


@dataclass(frozen=True)
class RequestDescriptor:
    """One outbound call: verb, relative path and optional serialized body."""

    method: HttpMethod
    path: str
    body: Optional[Union[str, bytes]] = None

    def encoded_body(self) -> Optional[bytes]:
        if self.body is None:
            return None
        if isinstance(self.body, bytes):
            return self.body
        return self.body.encode("utf-8")
