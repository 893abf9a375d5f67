"""Settings loading and validation."""

import pytest
from pydantic import ValidationError

from portcullis.core.config import Settings, get_settings
from portcullis.core.constants import SUPPORTED_CURRENCIES
from portcullis.domain.enums import Currency


def test_settings_defaults_from_env() -> None:
    """Required values come from env; everything else has defaults."""
    settings = Settings(_env_file=None)
    assert settings.discord_token.get_secret_value() == "test-discord-token"
    assert settings.clerk_api_url == "https://api.clerk.com/v1"
    assert settings.svix_api_url == "https://api.us.svix.com/api/v1"
    assert settings.operator_user_id == 1300607564517474445
    assert settings.http_timeout_seconds == 30.0
    assert settings.default_currency == "USD"
    assert settings.quote_unit_price == 250


def test_missing_secret_rejected(monkeypatch) -> None:
    """A missing platform secret fails at load time and is named."""
    monkeypatch.setenv("SVIX_API_KEY", "")
    with pytest.raises(ValidationError, match="SVIX_API_KEY"):
        Settings(_env_file=None)


def test_missing_database_url_rejected(monkeypatch) -> None:
    """DATABASE_URL is required."""
    monkeypatch.setenv("DATABASE_URL", "")
    with pytest.raises(ValidationError, match="DATABASE_URL"):
        Settings(_env_file=None)


def test_unsupported_currency_rejected(monkeypatch) -> None:
    """Default currency must be USD, EUR or GBP."""
    monkeypatch.setenv("DEFAULT_CURRENCY", "JPY")
    with pytest.raises(ValidationError, match="default_currency"):
        Settings(_env_file=None)


def test_get_settings_is_cached(monkeypatch) -> None:
    """get_settings returns one instance until cache_clear."""
    get_settings.cache_clear()
    first = get_settings()
    assert get_settings() is first
    monkeypatch.setenv("OPERATOR_USER_ID", "123")
    get_settings.cache_clear()
    assert get_settings().operator_user_id == 123
    get_settings.cache_clear()


def test_currency_enum_matches_supported_currencies() -> None:
    """Settings validation and the currency choices offer the same codes."""
    assert Currency.values() == list(SUPPORTED_CURRENCIES)
