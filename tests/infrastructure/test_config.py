"""Settings loaded from environment variables."""

import pytest

from storefront.infrastructure.config import (
    DEFAULT_DATABASE_URL,
    DEFAULT_SHIPPING_FEE_CENTS,
    load_settings,
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in ("DATABASE_URL", "LOG_LEVEL", "SHIPPING_FEE_CENTS", "SQL_ECHO"):
        monkeypatch.delenv(key, raising=False)


def test_defaults():
    settings = load_settings()
    assert settings.database_url == DEFAULT_DATABASE_URL
    assert settings.log_level == "INFO"
    assert settings.shipping_fee_cents == DEFAULT_SHIPPING_FEE_CENTS
    assert settings.sql_echo is False


def test_overrides(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite://")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("SHIPPING_FEE_CENTS", "0")
    monkeypatch.setenv("SQL_ECHO", "yes")
    settings = load_settings()
    assert settings.database_url == "sqlite://"
    assert settings.log_level == "DEBUG"
    assert settings.shipping_fee_cents == 0
    assert settings.sql_echo is True


@pytest.mark.parametrize("value", ["sixty", "-1", "60.5"])
def test_invalid_shipping_fee(monkeypatch, value):
    monkeypatch.setenv("SHIPPING_FEE_CENTS", value)
    with pytest.raises(ValueError, match="SHIPPING_FEE_CENTS"):
        load_settings()
