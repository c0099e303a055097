import asyncio
import json

import httpx
import pytest

from auth import CredentialResolver, CredentialState
from dispatcher import Dispatcher

TOKEN_HOST = "oauth2.googleapis.com"


class RecordingTransport:
    """httpx mock handler that records every request it answers."""

    def __init__(self, responder=None):
        self.requests = []
        self.responder = responder or default_responder

    def __call__(self, request):
        self.requests.append(request)
        return self.responder(request)

    def client(self):
        return httpx.AsyncClient(transport=httpx.MockTransport(self))

    @property
    def api_requests(self):
        return [r for r in self.requests if r.url.host != TOKEN_HOST]

    @property
    def token_requests(self):
        return [r for r in self.requests if r.url.host == TOKEN_HOST]


def default_responder(request):
    if request.url.host == TOKEN_HOST:
        return httpx.Response(200, json={"access_token": "access-1", "expires_in": 3600})
    return httpx.Response(200, json={"kind": "youtube#listResponse", "items": []})


def request_body(request):
    return json.loads(request.content) if request.content else None


def run(coro):
    return asyncio.run(coro)


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def api_key_state():
    return CredentialState.from_api_key("test-key")


@pytest.fixture
def oauth_state():
    return CredentialState.from_oauth("client-id", "client-secret", "refresh-token")


@pytest.fixture
def read_only_dispatcher(api_key_state, transport):
    return Dispatcher(CredentialResolver(api_key_state), client=transport.client())


@pytest.fixture
def read_write_dispatcher(oauth_state, transport):
    return Dispatcher(CredentialResolver(oauth_state), client=transport.client())
