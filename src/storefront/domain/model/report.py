"""Read-only records for the admin dashboard."""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class MonthlyTotal:
    month: str  # "YYYY-MM"
    orders_count: int
    revenue: Money


@dataclass(frozen=True)
class ProductSales:
    product_id: int
    name: str
    quantity: int
    revenue: Money
