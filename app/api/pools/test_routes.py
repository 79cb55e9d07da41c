from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from app.api.coingecko.mocks import MOCK_CONTRACT_ADDRESS, MOCK_NETWORK, MOCK_POOL
from app.main import app

from .manager import PoolManager
from .models import PoolData
from .routes import get_pool_manager

client = TestClient(app)


@pytest.fixture
def mock_manager():
    manager = AsyncMock(spec=PoolManager)
    app.dependency_overrides[get_pool_manager] = lambda: manager
    yield manager
    app.dependency_overrides.clear()


def test_get_pool(mock_manager):
    mock_manager.get_pool.return_value = PoolData.model_validate(MOCK_POOL)

    response = client.get(
        "/api/pools/v1/getPool",
        params={
            "id": "ignored",
            "network": MOCK_NETWORK,
            "contract_address": MOCK_CONTRACT_ADDRESS,
        },
    )

    assert response.status_code == 200
    assert response.json() == MOCK_POOL
    mock_manager.get_pool.assert_awaited_once_with(
        id="ignored", network=MOCK_NETWORK, contract_address=MOCK_CONTRACT_ADDRESS
    )


def test_get_pool_fallback(mock_manager):
    mock_manager.get_pool.return_value = PoolData.fallback()

    response = client.get("/api/pools/v1/getPool", params={"id": "doge"})

    assert response.status_code == 200
    assert response.json() == {"id": "", "address": "", "name": "", "network": ""}
    mock_manager.get_pool.assert_awaited_once_with(
        id="doge", network=None, contract_address=None
    )


def test_get_pool_requires_id(mock_manager):
    response = client.get("/api/pools/v1/getPool")

    assert response.status_code == 422
    mock_manager.get_pool.assert_not_awaited()
