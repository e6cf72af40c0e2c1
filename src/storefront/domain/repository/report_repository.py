"""Abstract read model for dashboard aggregates."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from storefront.domain.model.report import MonthlyTotal, ProductSales


class ReportRepository(ABC):

    @abstractmethod
    def monthly_totals(self, since: datetime) -> list[MonthlyTotal]:
        """Order count and revenue per calendar month, oldest month first.

        Canceled orders are excluded.
        """

    @abstractmethod
    def top_products(self, since: datetime, limit: int = 5) -> list[ProductSales]:
        """Best-selling products by quantity since *since*, canceled orders excluded."""
