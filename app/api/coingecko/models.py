from collections.abc import Mapping

from pydantic import BaseModel

QueryParams = Mapping[str, str | int | float | bool | None]


class CoinGeckoErrorBody(BaseModel):
    error: str | None = None


class CoinGeckoError(Exception):
    def __init__(
        self,
        message: str,
        status_code: int,
        error: str | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.error = error
        super().__init__(self.message)

    def as_dict(self) -> dict:
        return {"message": self.message, "status_code": self.status_code}
