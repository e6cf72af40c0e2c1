"""SQLAlchemy implementation of ReportRepository."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import func, select

from storefront.domain.model.order import OrderStatus
from storefront.domain.model.report import MonthlyTotal, ProductSales
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.report_repository import ReportRepository
from storefront.infrastructure.persistence.database import Database
from storefront.infrastructure.persistence.tables import OrderLineRow, OrderRow, ProductRow


class SqlReportRepository(ReportRepository):

    def __init__(self, database: Database) -> None:
        self._db = database

    def monthly_totals(self, since: datetime) -> list[MonthlyTotal]:
        stmt = (
            select(OrderRow.created_at, OrderRow.total_cents)
            .where(OrderRow.created_at >= since)
            .where(OrderRow.status != OrderStatus.CANCELED.value)
        )
        # Bucketed here rather than with a dialect-specific date function.
        buckets: dict[str, tuple[int, int]] = {}
        with self._db.session() as session:
            for created_at, total_cents in session.execute(stmt):
                month = created_at.strftime("%Y-%m")
                count, revenue = buckets.get(month, (0, 0))
                buckets[month] = (count + 1, revenue + total_cents)

        return [
            MonthlyTotal(month=month, orders_count=count, revenue=Money(revenue))
            for month, (count, revenue) in sorted(buckets.items())
        ]

    def top_products(self, since: datetime, limit: int = 5) -> list[ProductSales]:
        quantity = func.sum(OrderLineRow.quantity).label("quantity")
        revenue = func.sum(OrderLineRow.quantity * OrderLineRow.unit_price_cents).label("revenue")
        stmt = (
            select(ProductRow.id, ProductRow.name, quantity, revenue)
            .join(OrderLineRow, OrderLineRow.product_id == ProductRow.id)
            .join(OrderRow, OrderRow.id == OrderLineRow.order_id)
            .where(OrderRow.created_at >= since)
            .where(OrderRow.status != OrderStatus.CANCELED.value)
            .group_by(ProductRow.id, ProductRow.name)
            .order_by(quantity.desc(), ProductRow.id.asc())
            .limit(limit)
        )
        with self._db.session() as session:
            return [
                ProductSales(
                    product_id=row.id,
                    name=row.name,
                    quantity=int(row.quantity),
                    revenue=Money(int(row.revenue)),
                )
                for row in session.execute(stmt)
            ]
