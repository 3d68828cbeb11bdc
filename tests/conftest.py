#tests\conftest.py

"""Pytest configuration and fixtures."""

import json

import pytest
import requests

from deployhq_client.client import DeployHQClient
from deployhq_client.core.factory import ClientConfigFactory
from deployhq_client.transport.executor import RequestExecutor


def make_response(status_code=200, body=None, text=None, reason=None):
    """Build a canned requests.Response."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response.encoding = "utf-8"

    if body is not None:
        response._content = json.dumps(body).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    elif text is not None:
        response._content = text.encode("utf-8")
        response.headers["Content-Type"] = "text/plain"
    else:
        response._content = b""

    return response


class RecordingSession(requests.Session):
    """Session that records prepared requests instead of hitting the network."""

    def __init__(self):
        super().__init__()
        self.sent = []
        self.timeouts = []
        self.responses = []
        self.error = None
        self.closed = False

    def queue(self, response):
        self.responses.append(response)
        return response

    def send(self, request, **kwargs):
        self.sent.append(request)
        self.timeouts.append(kwargs.get("timeout"))

        if self.error is not None:
            raise self.error

        if self.responses:
            response = self.responses.pop(0)
        else:
            response = make_response(200, body={})

        response.request = request
        response.url = request.url
        return response

    def close(self):
        self.closed = True
        super().close()

    @property
    def last(self):
        return self.sent[-1]

    def last_json(self):
        return json.loads(self.last.body)


@pytest.fixture
def session():
    return RecordingSession()


@pytest.fixture
def config():
    return ClientConfigFactory.create(
        subdomain="acme",
        username="deploy@example.com",
        api_key="secret-key",
    )


@pytest.fixture
def executor(config, session):
    return RequestExecutor(config, session=session)


@pytest.fixture
def client(executor):
    return DeployHQClient(executor)
