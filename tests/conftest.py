import json

import pytest

from ftcapi.client import FtcClient
from ftcapi.config import ClientConfig

from tests.helpers import SERVER


class FakeResponse:
    def __init__(self, status_code=200, content=b"", reason="OK"):
        self.status_code = status_code
        self.content = content
        self.reason = reason


class FakeServer:
    """Stands in for requests.get: answers by exact URL and records every call."""

    def __init__(self):
        self.routes = {}
        self.calls = []

    def add(self, url, payload=None, status=200, body=None, error=None):
        if error is not None:
            self.routes[url] = error
            return
        if body is None:
            body = json.dumps(payload).encode()
        self.routes[url] = FakeResponse(status, body)

    @property
    def urls(self):
        return [url for url, _ in self.calls]

    def __call__(self, url, **kwargs):
        self.calls.append((url, kwargs))
        answer = self.routes.get(url, FakeResponse(404, b"", "Not Found"))
        if isinstance(answer, Exception):
            raise answer
        return answer


@pytest.fixture
def fake_http(monkeypatch):
    server = FakeServer()
    monkeypatch.setattr("ftcapi.transport.requests.get", server)
    return server


@pytest.fixture
def config():
    return ClientConfig(server=SERVER, username="alice", authorization_key="s3cret")


@pytest.fixture
def client(config):
    return FtcClient(config)
