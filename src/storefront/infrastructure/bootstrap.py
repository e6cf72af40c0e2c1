"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.value_objects import Money
from storefront.infrastructure.config import Settings
from storefront.infrastructure.persistence.database import Database
from storefront.infrastructure.persistence.sql_order_repository import SqlOrderRepository
from storefront.infrastructure.persistence.sql_product_repository import SqlProductRepository
from storefront.infrastructure.persistence.sql_report_repository import SqlReportRepository
from storefront.infrastructure.persistence.sql_store_settings_repository import (
    SqlStoreSettingsRepository,
)


@dataclass
class Container:
    settings: Settings
    database: Database
    product_repository: SqlProductRepository
    order_repository: SqlOrderRepository
    report_repository: SqlReportRepository
    store_settings_repository: SqlStoreSettingsRepository

    @property
    def shipping_fee(self) -> Money:
        return Money(self.settings.shipping_fee_cents)


def build_container(settings: Settings) -> Container:
    database = Database(settings.database_url, echo=settings.sql_echo)
    return Container(
        settings=settings,
        database=database,
        product_repository=SqlProductRepository(database),
        order_repository=SqlOrderRepository(database),
        report_repository=SqlReportRepository(database),
        store_settings_repository=SqlStoreSettingsRepository(database),
    )
