from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, model_validator

from app.api.common.annotations import (
    NETWORK_DESCRIPTION,
    POOL_ADDRESS_DESCRIPTION,
    POOL_ID_DESCRIPTION,
)


class PoolData(BaseModel):
    id: str = Field(description=POOL_ID_DESCRIPTION)
    address: str = Field(description=POOL_ADDRESS_DESCRIPTION)
    name: str = Field(description="Pool display name")
    network: str = Field(description=NETWORK_DESCRIPTION)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "id": "eth_0x88e6a0c2ddd26feeb64f039a2c41296fcb3f5640",
                    "address": "0x88e6a0c2ddd26feeb64f039a2c41296fcb3f5640",
                    "name": "USDC / WETH 0.05%",
                    "network": "eth",
                },
                {"id": "", "address": "", "name": "", "network": ""},
            ]
        }
    }

    @model_validator(mode="before")
    @classmethod
    def flatten_resource(cls, data: Any) -> Any:
        """
        Accept the JSON:API resource shape returned by the on-chain endpoints:

        {
            "id": "eth_0x88e6...",
            "type": "pool",
            "attributes": {"address": "0x88e6...", "name": "USDC / WETH 0.05%"},
            "relationships": {"network": {"data": {"id": "eth"}}}
        }
        """
        if not isinstance(data, dict) or not isinstance(data.get("attributes"), dict):
            return data

        attributes = data["attributes"]
        pool_id = data.get("id")

        relationships = data.get("relationships") or {}
        network = ((relationships.get("network") or {}).get("data") or {}).get("id")
        if not network and isinstance(pool_id, str) and "_" in pool_id:
            network = pool_id.split("_", 1)[0]

        return {
            "id": pool_id,
            "address": attributes.get("address", ""),
            "name": attributes.get("name", ""),
            "network": network or "",
        }

    @classmethod
    def fallback(cls) -> "PoolData":
        return cls(id="", address="", name="", network="")

    @property
    def is_fallback(self) -> bool:
        return self == PoolData.fallback()


class PoolLookupStrategy(str, Enum):
    DIRECT = "DIRECT"
    SEARCH = "SEARCH"


class PoolLookupStatus(str, Enum):
    FOUND = "FOUND"
    NOT_FOUND = "NOT_FOUND"
    ERROR = "ERROR"


class PoolLookupResult(BaseModel):
    strategy: PoolLookupStrategy
    status: PoolLookupStatus
    pool: PoolData = Field(default_factory=PoolData.fallback)
    error: str | None = None
