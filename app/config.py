from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # General
    ENVIRONMENT: str = "development"

    # CoinGecko
    COINGECKO_BASE_URL: str = Field(min_length=1)
    COINGECKO_API_KEY: str = Field(min_length=1)
    COINGECKO_TIMEOUT: float = 10.0

    # Monitoring
    SENTRY_DSN: str | None = None
    PROMETHEUS_PORT: int = 8090

    model_config = SettingsConfigDict(env_file=".env")


settings = Settings()
