from __future__ import annotations

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from currency_exchange.clients import frankfurter_client
from currency_exchange.main import app

from .payloads import UPSTREAM


@pytest.fixture(autouse=True)
def _upstream_base_url():
    frankfurter_client.base_url = UPSTREAM
    yield


@pytest_asyncio.fixture
async def async_client() -> AsyncClient:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
    await frankfurter_client.close()
