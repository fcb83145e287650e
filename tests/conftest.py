# /tests/conftest.py

import json

import httpx
import pytest
import pytest_asyncio

from school_admin.services.api_client import ApiClient

from .fake_backend import FakeSchoolBackend

BASE_URL = "http://testserver/api"


@pytest.fixture
def backend():
    """A NEW, EMPTY fake backend for EACH test function."""
    return FakeSchoolBackend()


@pytest_asyncio.fixture
async def client(backend):
    """An ApiClient wired to the fake backend through the ASGI transport."""
    api = ApiClient(BASE_URL, transport=httpx.ASGITransport(app=backend.app))
    yield api
    await api.aclose()


class RecordingTransport:
    """
    Captures every outgoing request and answers with a canned JSON body, so
    tests can assert on the exact method, path, query and body sent.
    """

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.body = {"data": []}

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


@pytest.fixture
def recorder():
    return RecordingTransport()


@pytest_asyncio.fixture
async def recording_client(recorder):
    api = ApiClient(BASE_URL, transport=httpx.MockTransport(recorder))
    yield api
    await api.aclose()
