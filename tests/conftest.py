"""Pytest fixtures for the Plasso client tests."""

import json

import httpx
import pytest

from plasso.config import PlassoConfig


class RecordingTransport:
    """Canned replies for httpx.MockTransport; keeps every request it sees."""

    def __init__(self):
        self.requests = []
        self.replies = []

    def reply(self, status_code=200, body=None):
        self.replies.append((status_code, body if body is not None else {}))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status_code, body = self.replies.pop(0) if self.replies else (200, {})
        if isinstance(body, (bytes, str)):
            return httpx.Response(status_code, content=body)
        return httpx.Response(status_code, json=body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


@pytest.fixture
def config():
    return PlassoConfig(domain="https://plasso.test", graphql_url="https://api.plasso.test")


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def http_client(transport):
    with httpx.Client(transport=httpx.MockTransport(transport)) as client:
        yield client
