from typing import Any

import httpx
from pydantic import ValidationError

from app.config import Settings

from .constants import (
    API_KEY_HEADER,
    DEFAULT_REVALIDATE_SECONDS,
    REVALIDATE_EXTENSION,
)
from .models import CoinGeckoError, CoinGeckoErrorBody, QueryParams


class CoinGeckoClient:
    """Thin JSON client for the CoinGecko API"""

    def __init__(self, settings: Settings):
        self.base_url = settings.COINGECKO_BASE_URL
        self.api_key = settings.COINGECKO_API_KEY
        self.timeout = settings.COINGECKO_TIMEOUT

    def _create_client(self) -> httpx.AsyncClient:
        headers = {
            API_KEY_HEADER: self.api_key,
            "Content-Type": "application/json",
        }
        return httpx.AsyncClient(timeout=self.timeout, headers=headers)

    @staticmethod
    def _clean_params(params: QueryParams | None) -> dict[str, Any]:
        """Drop entries whose value is None or an empty string."""
        if not params:
            return {}

        return {
            key: value
            for key, value in params.items()
            if value is not None and value != ""
        }

    def build_url(self, endpoint: str, params: QueryParams | None = None) -> httpx.URL:
        url = httpx.URL(f"{self.base_url}/{endpoint}")
        return url.copy_merge_params(self._clean_params(params))

    @staticmethod
    def _raise_for_error_response(response: httpx.Response) -> None:
        """Raise CoinGeckoError with the upstream error text, if any"""
        try:
            body = CoinGeckoErrorBody.model_validate(response.json())
        except (ValueError, ValidationError):
            body = CoinGeckoErrorBody()

        raise CoinGeckoError(
            message=f"API Error: {response.status_code}: {body.error or response.reason_phrase}",
            status_code=response.status_code,
            error=body.error,
        )

    async def fetch_json(
        self,
        endpoint: str,
        params: QueryParams | None = None,
        revalidate: int = DEFAULT_REVALIDATE_SECONDS,
    ) -> Any:
        """
        Fetch JSON from a CoinGecko endpoint.

        Args:
            endpoint: Path relative to the configured base URL, without a leading slash
            params: Optional query parameters; None and empty-string values are skipped
            revalidate: Cache revalidation hint in seconds, forwarded to the transport

        Returns:
            The decoded JSON body. Its shape is not validated.

        Raises:
            CoinGeckoError: If the response status is not 2xx
            httpx.RequestError: If the request could not be sent
        """
        async with self._create_client() as client:
            response = await client.get(
                self.build_url(endpoint, params),
                extensions={REVALIDATE_EXTENSION: revalidate},
            )

            if not response.is_success:
                self._raise_for_error_response(response)

            return response.json()
