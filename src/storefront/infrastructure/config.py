"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_DATABASE_URL = "sqlite:///data/storefront.db"
DEFAULT_SHIPPING_FEE_CENTS = 6000

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class Settings:
    database_url: str
    log_level: str
    shipping_fee_cents: int
    sql_echo: bool


def validate_shipping_fee(value: str | None) -> int:
    raw = (value or str(DEFAULT_SHIPPING_FEE_CENTS)).strip()
    try:
        cents = int(raw)
    except ValueError as exc:
        raise ValueError(f"Invalid SHIPPING_FEE_CENTS: {raw!r}") from exc
    if cents < 0:
        raise ValueError("Invalid SHIPPING_FEE_CENTS: must not be negative")
    return cents


def load_settings() -> Settings:
    return Settings(
        database_url=os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        shipping_fee_cents=validate_shipping_fee(os.getenv("SHIPPING_FEE_CENTS")),
        sql_echo=os.getenv("SQL_ECHO", "").strip().lower() in _TRUTHY,
    )
