"""Pytest fixtures for testing the JSON Wire client."""

import json

import httpx
import pytest

from jsonwire.config import Settings
from jsonwire.core.session import RemoteSession
from jsonwire.core.transport import Transport

EXECUTOR = "http://wd.test/wd/hub"
SESSION_ID = "123"


def reply(value=None, status=0, session_id=SESSION_ID, http_status=200):
    """Build a JSON Wire reply envelope."""
    return httpx.Response(
        http_status,
        json={"sessionId": session_id, "status": status, "value": value},
    )


class FakeServer:
    """
    In-process stand-in for a JSON Wire server.

    Routes are keyed by (method, path); a route is either an httpx.Response
    or a callable taking the request. Every request is recorded.
    """

    def __init__(self):
        self.routes = {}
        self.requests = []

    def route(self, method, path, response):
        self.routes[(method, path)] = response

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.routes.get((request.method, request.url.path))
        if handler is None:
            return httpx.Response(404, text="no route")
        if callable(handler):
            return handler(request)
        return handler

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


@pytest.fixture
def fake_server():
    """Create an empty fake server."""
    return FakeServer()


@pytest.fixture
def http_client(fake_server):
    """httpx client wired to the fake server."""
    client = httpx.Client(transport=httpx.MockTransport(fake_server.handle))
    yield client
    client.close()


@pytest.fixture
def transport(http_client):
    """Transport over the fake server."""
    return Transport(client=http_client)


@pytest.fixture
def settings():
    """Settings isolated from the environment."""
    return Settings(executor_url=EXECUTOR, trace=False)


@pytest.fixture
def session(transport, settings):
    """Unopened RemoteSession talking to the fake server."""
    return RemoteSession(executor=EXECUTOR, transport=transport, settings=settings)


@pytest.fixture
def opened_session(session, fake_server):
    """RemoteSession opened against the fake server with id 123."""
    fake_server.route("POST", "/wd/hub/session", reply({"browserName": "firefox"}))
    session.open({"browserName": "firefox"})
    fake_server.requests.clear()
    return session
