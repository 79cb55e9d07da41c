from fastapi import APIRouter, Depends, Query

from app.api.coingecko.client import CoinGeckoClient
from app.api.common.annotations import (
    CONTRACT_ADDRESS_DESCRIPTION,
    NETWORK_DESCRIPTION,
    TOKEN_QUERY_DESCRIPTION,
)
from app.api.common.models import Tags
from app.config import settings

from .manager import PoolManager
from .models import PoolData

router = APIRouter(prefix="/api/pools", tags=[Tags.POOLS])


def get_pool_manager() -> PoolManager:
    return PoolManager(CoinGeckoClient(settings))


@router.get("/v1/getPool", response_model=PoolData)
async def get_pool(
    id: str = Query(..., description=TOKEN_QUERY_DESCRIPTION),
    network: str | None = Query(None, description=NETWORK_DESCRIPTION),
    contract_address: str | None = Query(
        None, description=CONTRACT_ADDRESS_DESCRIPTION
    ),
    pool_manager: PoolManager = Depends(get_pool_manager),
) -> PoolData:
    """
    Retrieve pool metadata for a token.

    Returns a pool with all fields empty when nothing is found or the
    upstream lookup fails.
    """
    return await pool_manager.get_pool(
        id=id, network=network, contract_address=contract_address
    )
