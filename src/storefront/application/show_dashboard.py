"""Application service: admin dashboard queries.

``summary`` backs the back-office landing page; ``monthly`` backs the
revenue chart.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from storefront.application.list_orders import OrderSummaryDTO, to_order_summary
from storefront.application.list_products import ProductDTO, to_product_dto
from storefront.domain.model.order import OrderStatus
from storefront.domain.model.report import MonthlyTotal, ProductSales
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.report_repository import ReportRepository

SUMMARY_SIZE = 5
TOP_PRODUCTS_WINDOW = timedelta(days=30)
MONTHLY_WINDOW_MONTHS = 12


@dataclass(frozen=True)
class DashboardSummaryDTO:
    latest_pending: list[OrderSummaryDTO]
    top_products: list[ProductSales]
    latest_products: list[ProductDTO]


def months_before(moment: datetime, months: int) -> datetime:
    """Same day-of-month *months* earlier, clamped to the month's length."""
    index = moment.year * 12 + (moment.month - 1) - months
    year, month = divmod(index, 12)
    day = moment.day
    while True:
        try:
            return moment.replace(year=year, month=month + 1, day=day)
        except ValueError:
            day -= 1


class ShowDashboardHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        report_repo: ReportRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._report_repo = report_repo

    def summary(self, now: datetime | None = None) -> DashboardSummaryDTO:
        now = now or datetime.now()

        pending = self._order_repo.list_recent(
            status=OrderStatus.PENDING, limit=SUMMARY_SIZE
        )
        latest_products = self._product_repo.list_all(
            limit=SUMMARY_SIZE, newest_first=True
        )

        return DashboardSummaryDTO(
            latest_pending=[to_order_summary(o) for o in pending],
            top_products=self._report_repo.top_products(
                since=now - TOP_PRODUCTS_WINDOW, limit=SUMMARY_SIZE
            ),
            latest_products=[to_product_dto(p) for p in latest_products],
        )

    def monthly(self, now: datetime | None = None) -> list[MonthlyTotal]:
        now = now or datetime.now()
        return self._report_repo.monthly_totals(
            since=months_before(now, MONTHLY_WINDOW_MONTHS)
        )
