import httpx
from fastapi import APIRouter

from app.api.coingecko.client import CoinGeckoClient
from app.api.coingecko.constants import PING_ENDPOINT
from app.api.coingecko.models import CoinGeckoError
from app.api.common.models import HealthStatus, PingResponse, Tags
from app.config import settings

router = APIRouter(prefix="/api", tags=[Tags.HEALTH])


@router.get("/ping", response_model=PingResponse)
async def ping():
    try:
        await CoinGeckoClient(settings).fetch_json(PING_ENDPOINT, revalidate=0)
        ok = True
    except (CoinGeckoError, httpx.HTTPError, ValueError):
        ok = False
    return PingResponse(coingecko=HealthStatus.OK if ok else HealthStatus.KO)
