import httpx
import pytest_asyncio
from typing import AsyncGenerator

from catalog_service.catalog import DEFAULT_CATALOG
from catalog_service.main import create_app

@pytest_asyncio.fixture(scope="function")
async def http_client() -> AsyncGenerator[httpx.AsyncClient, None]:
    # Talks to the ASGI app in-process; no server or port is needed
    transport = httpx.ASGITransport(app=create_app(DEFAULT_CATALOG))
    async with httpx.AsyncClient(transport=transport, base_url="http://localhost:8080") as client:
        yield client
