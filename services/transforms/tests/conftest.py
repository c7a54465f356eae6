from collections.abc import AsyncGenerator, Generator
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
import pytest_asyncio
from azure.core.exceptions import ResourceNotFoundError
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from app.config import Settings, get_settings
from app.main import app
from app.transform.dependencies import get_media_client

EXISTING_ID = (
    "/subscriptions/sub-1/resourceGroups/rg-test/providers/Microsoft.Media"
    "/mediaservices/amstest/transforms/existing"
)
CREATED_ID = (
    "/subscriptions/sub-1/resourceGroups/rg-test/providers/Microsoft.Media"
    "/mediaservices/amstest/transforms/created"
)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        azure_subscription_id="sub-1",
        azure_resource_group="rg-test",
        azure_media_services_account_name="amstest",
        azure_tenant_id="tenant",
        azure_client_id="client",
        azure_client_secret="secret",
    )


@pytest.fixture
def ams_client() -> MagicMock:
    """AMS client double: no Transform exists, create returns CREATED_ID."""
    client = MagicMock()
    client.transforms.get.side_effect = ResourceNotFoundError("Transform not found")
    client.transforms.create_or_update.return_value = SimpleNamespace(id=CREATED_ID)
    return client


@pytest.fixture
def existing_transform(ams_client: MagicMock) -> MagicMock:
    ams_client.transforms.get.side_effect = None
    ams_client.transforms.get.return_value = SimpleNamespace(id=EXISTING_ID)
    return ams_client


@pytest.fixture
def client(settings: Settings, ams_client: MagicMock) -> Generator[TestClient, None, None]:
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_media_client] = lambda: ams_client
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def async_client(
    settings: Settings, ams_client: MagicMock,
) -> AsyncGenerator[AsyncClient, None]:
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_media_client] = lambda: ams_client
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
