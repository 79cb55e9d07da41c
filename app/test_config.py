import pytest
from pydantic import ValidationError

from app.config import Settings


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("COINGECKO_BASE_URL", "https://api.coingecko.com/api/v3")
    monkeypatch.setenv("COINGECKO_API_KEY", "demo_key")

    settings = Settings(_env_file=None)

    assert settings.COINGECKO_BASE_URL == "https://api.coingecko.com/api/v3"
    assert settings.COINGECKO_API_KEY == "demo_key"
    assert settings.COINGECKO_TIMEOUT == 10.0


@pytest.mark.parametrize("name", ["COINGECKO_BASE_URL", "COINGECKO_API_KEY"])
def test_settings_missing_value_fails(monkeypatch, name):
    monkeypatch.delenv(name)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


@pytest.mark.parametrize("name", ["COINGECKO_BASE_URL", "COINGECKO_API_KEY"])
def test_settings_empty_value_fails(monkeypatch, name):
    monkeypatch.setenv(name, "")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)
