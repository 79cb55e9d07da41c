from enum import Enum

from pydantic import BaseModel


class HealthStatus(str, Enum):
    OK = "OK"
    KO = "KO"


class Tags(str, Enum):
    """API documentation tags for grouping endpoints in Swagger UI."""

    HEALTH = "Health"
    POOLS = "Pools"


class PingResponse(BaseModel):
    coingecko: HealthStatus
