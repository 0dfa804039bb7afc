"""Shared fixtures: a stubbed KVCore API built on httpx.MockTransport."""

import json

import httpx
import pytest
import pytest_asyncio

from kvcore_toolkit import KVCoreClient

BASE_URL = "https://kvcore.test/v2/public"
TOKEN = "test_token"


class StubAPI:
    """
    Records every request and answers with a canned response.

    Set ``responder`` to a callable taking the httpx.Request to vary the
    answer per request.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.responder = lambda request: httpx.Response(200, json={"data": []})

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    def reply(self, status_code: int = 200, **kwargs) -> None:
        self.responder = lambda request: httpx.Response(status_code, **kwargs)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


@pytest.fixture
def stub_api():
    return StubAPI()


@pytest_asyncio.fixture
async def http_client(stub_api):
    async with httpx.AsyncClient(transport=stub_api.transport()) as client:
        yield client


@pytest_asyncio.fixture
async def kvcore(http_client):
    """KVCore client wired to the stub API."""
    client = KVCoreClient(bearer_token=TOKEN, base_url=BASE_URL, http_client=http_client)
    yield client
    await client.aclose()
