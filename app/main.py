from contextlib import asynccontextmanager
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as package_version

import sentry_sdk
from fastapi import FastAPI
from prometheus_client import start_http_server
from prometheus_fastapi_instrumentator import Instrumentator

from app.api.common.routes import router as base_router
from app.api.pools.routes import router as pools_router
from app.config import settings

try:
    version = package_version("poolscout")
except PackageNotFoundError:
    version = "dev"

sentry_sdk.init(
    dsn=settings.SENTRY_DSN,
    environment=settings.ENVIRONMENT,
    release=f"poolscout@{version}",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    start_http_server(port=settings.PROMETHEUS_PORT)
    yield


app = FastAPI(lifespan=lifespan)
Instrumentator().instrument(app)

# API routers
app.include_router(base_router)
app.include_router(pools_router)
