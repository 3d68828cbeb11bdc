# deployhq_client/transport/executor.py
"""Request executor - every call to the DeployHQ API goes through here."""

import json
import logging
from typing import Any, Dict, Optional, Union

import requests
from requests.auth import HTTPBasicAuth

from deployhq_client.core.errors import (
    DeployHQAuthenticationError,
    DeployHQDecodeError,
    DeployHQHTTPError,
    DeployHQNotFoundError,
    DeployHQTimeoutError,
    DeployHQTransportError,
    DeployHQValidationError,
)
from deployhq_client.core.models import ClientConfig, HttpMethod, RequestDescriptor

logger = logging.getLogger(__name__)


STATUS_ERRORS = {
    401: DeployHQAuthenticationError,
    403: DeployHQAuthenticationError,
    404: DeployHQNotFoundError,
    422: DeployHQValidationError,
}


class RequestExecutor:
    """Builds authenticated requests and turns responses into results or errors."""

    def __init__(self, config: ClientConfig, session: Optional[requests.Session] = None):
        """
        Initialize executor.

        Args:
            config: Connection settings (base URL, credentials, timeout)
            session: Optional session to send through; one is created
                and owned by the executor when omitted
        """
        self.config = config
        self._owns_session = session is None
        self.session = session or requests.Session()
        self._auth = HTTPBasicAuth(config.username, config.api_key)

    # -------------------------
    # VERBS
    # -------------------------

    def get(self, path: str) -> Any:
        return self.execute(RequestDescriptor(HttpMethod.GET, path))

    def post(self, path: str, body: Union[str, bytes]) -> Any:
        """POST an already-serialized body."""
        return self.execute(RequestDescriptor(HttpMethod.POST, path, body))

    def delete(self, path: str) -> Any:
        return self.execute(RequestDescriptor(HttpMethod.DELETE, path))

    # -------------------------
    # EXECUTION
    # -------------------------

    def execute(self, request: RequestDescriptor) -> Any:
        """
        Send one request and decode the response.

        Returns:
            Decoded JSON value, or None for an empty 2xx body

        Raises:
            DeployHQTransportError: If the service cannot be reached
            DeployHQHTTPError: If the service answers with a non-2xx status
            DeployHQDecodeError: If a 2xx body is not valid JSON
        """
        method = request.method.value
        url = self.config.url_for(request.path)

        try:
            prepared = self.session.prepare_request(
                requests.Request(
                    method=method,
                    url=url,
                    headers=self._headers(request),
                    data=request.encoded_body(),
                    auth=self._auth,
                )
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Cannot build request for {url}: {e}")
            raise DeployHQTransportError(
                f"Invalid request URL {url}: {e}", method, url
            ) from e

        logger.debug(f"{method} {url}")

        try:
            response = self.session.send(prepared, timeout=self.config.timeout)
        except requests.exceptions.Timeout as e:
            logger.error(f"{method} {url} timed out after {self.config.timeout}s")
            raise DeployHQTimeoutError(
                f"Request timeout after {self.config.timeout}s", method, url
            ) from e
        except requests.exceptions.RequestException as e:
            logger.error(f"Cannot reach DeployHQ at {url}: {e}")
            raise DeployHQTransportError(
                f"Cannot connect to DeployHQ at {url}: {e}", method, url
            ) from e

        if not 200 <= response.status_code < 300:
            raise self._status_error(response, method, url)

        return self._decode(response, method, url)

    def _headers(self, request: RequestDescriptor) -> Dict[str, str]:
        headers = {
            "Accept": self.config.content_type,
            "User-Agent": self.config.user_agent,
        }
        if request.body is not None:
            headers["Content-Type"] = self.config.content_type
        return headers

    def _decode(self, response: requests.Response, method: str, url: str) -> Any:
        if not response.content or not response.content.strip():
            return None

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"{method} {url} returned an unreadable body [{response.status_code}]")
            raise DeployHQDecodeError(
                f"Cannot decode response from {method} {url}: {e}",
                status_code=response.status_code,
                body=response.text,
            ) from e

    def _status_error(self, response: requests.Response, method: str, url: str) -> DeployHQHTTPError:
        body: Any = response.text
        if response.content:
            try:
                body = response.json()
            except ValueError:
                pass

        message = error_message(body) or response.reason or "HTTP error"
        error_class = STATUS_ERRORS.get(response.status_code, DeployHQHTTPError)

        logger.warning(f"{method} {url} failed [{response.status_code}]: {message}")

        return error_class(
            status_code=response.status_code,
            message=message,
            method=method,
            url=url,
            body=body,
        )

    # -------------------------
    # LIFECYCLE
    # -------------------------

    def close(self) -> None:
        """Close the session if this executor created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "RequestExecutor":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def error_message(body: Any) -> str:
    """Pull a readable message out of an error payload."""
    if isinstance(body, dict):
        errors = body.get("errors")
        if isinstance(errors, list) and errors:
            return "; ".join(str(item) for item in errors)
        if isinstance(errors, dict) and errors:
            return "; ".join(
                f"{field} {', '.join(map(str, problems)) if isinstance(problems, list) else problems}"
                for field, problems in errors.items()
            )
        for key in ("error", "message"):
            if body.get(key):
                return str(body[key])
        return json.dumps(body)

    if isinstance(body, list):
        return "; ".join(str(item) for item in body) if body else ""

    if body is None:
        return ""

    return str(body).strip()
