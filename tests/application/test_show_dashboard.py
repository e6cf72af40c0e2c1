"""Tests for the admin dashboard queries."""

from datetime import datetime

import pytest

from storefront.application.show_dashboard import ShowDashboardHandler, months_before
from storefront.domain.model.order import CustomerSnapshot, Order, OrderLine, OrderStatus
from storefront.domain.model.product import Product
from storefront.domain.model.report import MonthlyTotal, ProductSales
from storefront.domain.model.value_objects import Money, Quantity
from tests.fakes import FakeOrderRepository, FakeProductRepository, FakeReportRepository

NOW = datetime(2025, 8, 31, 12, 0)


def _order(day: int, status: OrderStatus = OrderStatus.PENDING) -> Order:
    order = Order.create(
        CustomerSnapshot(name=f"customer-{day}"),
        [OrderLine(product_id=1, quantity=Quantity(1), unit_price=Money(100))],
        created_at=datetime(2025, 8, day),
    )
    order.change_status(status)
    return order


class TestSummary:

    def test_latest_pending_orders_only(self):
        orders = FakeOrderRepository()
        for day in range(1, 8):
            orders.add(_order(day))
        orders.add(_order(20, OrderStatus.PAID))
        products = FakeProductRepository(
            [Product(id=i, name=f"P{i}", price=Money(100), category="c") for i in range(1, 8)]
        )
        top = [ProductSales(1, "P1", 9, Money(900))]
        handler = ShowDashboardHandler(orders, products, FakeReportRepository(top=top))

        summary = handler.summary(now=NOW)

        assert [o.customer_name for o in summary.latest_pending] == [
            "customer-7", "customer-6", "customer-5", "customer-4", "customer-3",
        ]
        assert [p.id for p in summary.latest_products] == [7, 6, 5, 4, 3]
        assert summary.top_products == top

    def test_top_products_window_is_thirty_days(self):
        reports = FakeReportRepository()
        handler = ShowDashboardHandler(FakeOrderRepository(), FakeProductRepository(), reports)
        handler.summary(now=NOW)
        assert reports.since_calls == [datetime(2025, 8, 1, 12, 0)]


class TestMonthly:

    def test_covers_last_twelve_months(self):
        rows = [MonthlyTotal("2025-08", 2, Money(12000))]
        reports = FakeReportRepository(monthly=rows)
        handler = ShowDashboardHandler(FakeOrderRepository(), FakeProductRepository(), reports)
        assert handler.monthly(now=NOW) == rows
        assert reports.since_calls == [datetime(2024, 8, 31, 12, 0)]


class TestMonthsBefore:

    @pytest.mark.parametrize(
        "moment, months, expected",
        [
            (datetime(2025, 8, 21), 12, datetime(2024, 8, 21)),
            (datetime(2025, 3, 31), 1, datetime(2025, 2, 28)),
            (datetime(2024, 2, 29), 12, datetime(2023, 2, 28)),
            (datetime(2025, 1, 15), 1, datetime(2024, 12, 15)),
        ],
    )
    def test_calendar_arithmetic(self, moment, months, expected):
        assert months_before(moment, months) == expected
