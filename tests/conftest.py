"""Shared fixtures."""

import json

import httpx
import pytest

from roadgateway_admin.client.client import Client

BASE_URL = "http://admin.test:8001/"


class StubAdmin:
    """In-process admin API answering canned responses."""

    def __init__(self):
        self.routes = {}
        self.requests = []

    def add(self, method, path, status=200, body=None):
        """Answer ``method path`` with ``body``, or a callable of the request."""
        self.routes[(method, "/" + path.lstrip("/"))] = (status, body)

    def handler(self, request):
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"message": "Not found"})

        status, body = route
        if callable(body):
            body = body(request)
        if body is None:
            return httpx.Response(status)
        return httpx.Response(status, json=body)

    @property
    def last(self):
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


@pytest.fixture
def stub():
    return StubAdmin()


@pytest.fixture
def client(stub):
    http_client = httpx.Client(transport=httpx.MockTransport(stub.handler))
    with Client(BASE_URL, http_client=http_client) as admin:
        yield admin
    http_client.close()
