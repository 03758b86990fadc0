import httpx
import pytest
import pytest_asyncio
from fastapi import Security
from httpx import ASGITransport, AsyncClient
from dropbox_client.auth import get_dropbox_client, security
from dropbox_client.client import Client
from dropbox_client.main import app

TOKEN = "sl.test-token"


class FakeDropbox:
    """
    Stands in for api.dropboxapi.com.
    Records every request and answers with the configured status/body,
    or raises `error` to simulate a network failure.
    """

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.body = b'{"cursor":null,"entries":[]}'
        self.error = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error("simulated network failure", request=request)
        return httpx.Response(self.status_code, content=self.body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def dropbox():
    return FakeDropbox()


@pytest_asyncio.fixture
async def dbx(dropbox):
    async with Client(TOKEN, transport=dropbox.transport) as c:
        yield c


@pytest_asyncio.fixture(autouse=True)
async def override_dropbox_dependency(dropbox):
    """
    Makes the gateway talk to the fake Dropbox.
    """
    async def _get_test_client(creds=Security(security)):
        async with Client(creds.credentials, transport=dropbox.transport) as c:
            yield c

    app.dependency_overrides[get_dropbox_client] = _get_test_client
    yield
    app.dependency_overrides.clear()


# -----------------------------------------------------------
# Gateway HTTP Client
# -----------------------------------------------------------
@pytest_asyncio.fixture
async def client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
