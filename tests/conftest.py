"""
Shared pytest fixtures.

HTTP is never sent over the network: tests either use httpx.MockTransport for
byte-exact responses or mount the in-memory FastAPI backend from
``tests/fake_backend.py`` through httpx.ASGITransport.
"""

import os

# Must be set before clinic_admin reads its settings
os.environ["APP_DEBUG"] = "false"
os.environ["LOG_DIR"] = ""
os.environ["API_BASE_URL"] = "http://testserver"

from typing import AsyncGenerator, Callable, List

import httpx
import pytest
import pytest_asyncio

from clinic_admin.services.api_client import ApiClient
from clinic_admin.services.clinic_api import ClinicApi
from tests.fake_backend import FakeStore, create_app


@pytest.fixture
def recorded_requests() -> List[httpx.Request]:
    return []


@pytest_asyncio.fixture
async def make_api(recorded_requests) -> AsyncGenerator[Callable[..., ApiClient], None]:
    """Build an ApiClient whose responses come from ``handler``; every request is recorded."""
    clients: List[ApiClient] = []

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> ApiClient:
        def _record(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            return handler(request)

        api = ApiClient("http://testserver", transport=httpx.MockTransport(_record))
        clients.append(api)
        return api

    yield _make
    for api in clients:
        await api.close()


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()


@pytest_asyncio.fixture
async def clinic_api(store) -> AsyncGenerator[ClinicApi, None]:
    """ClinicApi wired to the in-memory backend."""
    transport = httpx.ASGITransport(app=create_app(store))
    api = ClinicApi(ApiClient("http://testserver", transport=transport))
    yield api
    await api.close()
