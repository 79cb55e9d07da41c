import logging
from typing import Any

from app.api.coingecko.client import CoinGeckoClient
from app.api.coingecko.constants import SEARCH_POOLS_ENDPOINT, TOKEN_POOLS_ENDPOINT

from .metrics import record_pool_lookup
from .models import (
    PoolData,
    PoolLookupResult,
    PoolLookupStatus,
    PoolLookupStrategy,
)

logger = logging.getLogger(__name__)


class PoolManager:
    """Pool metadata lookups on top of CoinGeckoClient.

    Lookups never raise. "No match" and "upstream failure" both resolve to
    PoolData.fallback(); lookup() keeps them apart for diagnostics.
    """

    def __init__(self, client: CoinGeckoClient):
        self.client = client

    @staticmethod
    def _first_pool(payload: Any) -> PoolData | None:
        data = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(data, list) or not data:
            return None

        return PoolData.model_validate(data[0])

    async def _fetch_first_pool(
        self, strategy: PoolLookupStrategy, endpoint: str, params: dict | None = None
    ) -> PoolLookupResult:
        try:
            payload = await self.client.fetch_json(endpoint, params)
            pool = self._first_pool(payload)
        except Exception as e:
            return PoolLookupResult(
                strategy=strategy, status=PoolLookupStatus.ERROR, error=str(e)
            )

        if pool is None:
            return PoolLookupResult(strategy=strategy, status=PoolLookupStatus.NOT_FOUND)

        return PoolLookupResult(
            strategy=strategy, status=PoolLookupStatus.FOUND, pool=pool
        )

    async def lookup(
        self,
        id: str,
        network: str | None = None,
        contract_address: str | None = None,
    ) -> PoolLookupResult:
        """
        Look up pool metadata for a token.

        Uses the token pools of network + contract_address when both are set,
        otherwise searches pools with id as free-text query.

        Args:
            id: Token identifier or search query
            network: Optional on-chain network identifier
            contract_address: Optional token contract address

        Returns:
            The lookup outcome. result.pool is the fallback unless status is FOUND.
        """
        if network and contract_address:
            result = await self._fetch_first_pool(
                PoolLookupStrategy.DIRECT,
                TOKEN_POOLS_ENDPOINT.format(
                    network=network, contract_address=contract_address
                ),
            )
            if result.status == PoolLookupStatus.ERROR:
                logger.warning(
                    f"Failed to fetch pools for {contract_address} on {network}: {result.error}"
                )
        else:
            # Search failures are not logged
            result = await self._fetch_first_pool(
                PoolLookupStrategy.SEARCH, SEARCH_POOLS_ENDPOINT, {"query": id}
            )

        record_pool_lookup(result)
        return result

    async def get_pool(
        self,
        id: str,
        network: str | None = None,
        contract_address: str | None = None,
    ) -> PoolData:
        """Same as lookup(), but returns only the pool or the fallback sentinel."""
        result = await self.lookup(id, network, contract_address)
        return result.pool
