"""SQL product and store settings repositories, dashboard report queries."""

from datetime import datetime

from storefront.domain.model.order import CustomerSnapshot, Order, OrderLine, OrderStatus
from storefront.domain.model.product import Product
from storefront.domain.model.report import MonthlyTotal, ProductSales
from storefront.domain.model.store_settings import DEFAULT_SITE_TITLE, FooterLink, StoreSettings
from storefront.domain.model.value_objects import Money, Quantity
from storefront.infrastructure.persistence.sql_product_repository import SqlProductRepository
from storefront.infrastructure.persistence.sql_store_settings_repository import (
    SqlStoreSettingsRepository,
)


class TestSqlProductRepository:

    def test_get_by_id(self, product_repo):
        product = product_repo.get_by_id(2)
        assert product == Product(id=2, name="Soy Candle", price=Money(499), category="home")

    def test_get_missing(self, product_repo):
        assert product_repo.get_by_id(999999) is None

    def test_save_upserts(self, product_repo):
        soap = product_repo.get_by_id(1)
        soap.update(price=Money(300), image="soap.jpg")
        product_repo.save(soap)
        assert product_repo.get_by_id(1).price == Money(300)
        assert product_repo.get_by_id(1).image == "soap.jpg"

    def test_next_id(self, product_repo):
        assert product_repo.next_id() == 3

    def test_next_id_on_empty_catalog(self, database):
        assert SqlProductRepository(database).next_id() == 1

    def test_list_filters(self, product_repo):
        product_repo.save(Product(id=3, name="Rose Soap", price=Money(300), category="bath"))
        assert [p.id for p in product_repo.list_all()] == [1, 2, 3]
        assert [p.id for p in product_repo.list_all(category="bath")] == [1, 3]
        assert [p.id for p in product_repo.list_all(query="SOAP")] == [1, 3]
        assert [p.id for p in product_repo.list_all(limit=2, newest_first=True)] == [3, 2]

    def test_search_treats_wildcards_literally(self, product_repo):
        assert product_repo.list_all(query="%") == []

    def test_oversized_id_is_not_found(self, product_repo):
        assert product_repo.get_by_id(10**20) is None
        assert product_repo.delete(10**20) is False

    def test_delete(self, product_repo):
        assert product_repo.delete(2) is True
        assert product_repo.get_by_id(2) is None
        assert product_repo.delete(2) is False


class TestSqlStoreSettingsRepository:

    def test_migration_seeds_defaults(self, database):
        settings = SqlStoreSettingsRepository(database).get()
        assert settings == StoreSettings(site_title=DEFAULT_SITE_TITLE)

    def test_save_and_reload(self, database):
        repo = SqlStoreSettingsRepository(database)
        repo.save(
            StoreSettings(
                site_title="Shop",
                footer_notes=["Ships in 3 days", "手工製作"],
                footer_links=[FooterLink("Instagram", "https://instagram.com/shop")],
            )
        )
        reloaded = repo.get()
        assert reloaded.site_title == "Shop"
        assert reloaded.footer_notes == ["Ships in 3 days", "手工製作"]
        assert reloaded.footer_links == [FooterLink("Instagram", "https://instagram.com/shop")]


def _place(order_repo, created_at, lines, status=OrderStatus.PENDING) -> Order:
    order = Order.create(
        CustomerSnapshot(name="Alice"),
        [
            OrderLine(product_id=pid, quantity=Quantity(qty), unit_price=Money(cents))
            for pid, qty, cents in lines
        ],
        shipping_fee=Money(6000),
        created_at=created_at,
    )
    order_repo.add(order)
    if status != OrderStatus.PENDING:
        order.change_status(status)
        order_repo.save(order)
    return order


class TestSqlReportRepository:

    def test_monthly_totals(self, order_repo, product_repo, report_repo):
        _place(order_repo, datetime(2025, 6, 3), [(1, 2, 250)])
        _place(order_repo, datetime(2025, 7, 9), [(2, 1, 499)])
        _place(order_repo, datetime(2025, 7, 30), [(1, 1, 250)])
        _place(order_repo, datetime(2025, 7, 31), [(1, 9, 250)], status=OrderStatus.CANCELED)
        _place(order_repo, datetime(2024, 1, 1), [(1, 1, 250)])

        rows = report_repo.monthly_totals(since=datetime(2025, 1, 1))

        assert rows == [
            MonthlyTotal("2025-06", 1, Money(500 + 6000)),
            MonthlyTotal("2025-07", 2, Money(499 + 6000 + 250 + 6000)),
        ]

    def test_top_products(self, order_repo, product_repo, report_repo):
        _place(order_repo, datetime(2025, 8, 1), [(1, 2, 250), (2, 1, 499)])
        _place(order_repo, datetime(2025, 8, 2), [(2, 4, 450)])
        _place(order_repo, datetime(2025, 8, 3), [(1, 50, 250)], status=OrderStatus.CANCELED)
        _place(order_repo, datetime(2025, 6, 1), [(1, 50, 250)])

        rows = report_repo.top_products(since=datetime(2025, 7, 15))

        assert rows == [
            ProductSales(2, "Soy Candle", 5, Money(499 + 4 * 450)),
            ProductSales(1, "Lavender Soap", 2, Money(500)),
        ]

    def test_top_products_limit(self, order_repo, product_repo, report_repo):
        _place(order_repo, datetime(2025, 8, 1), [(1, 2, 250), (2, 1, 499)])
        assert len(report_repo.top_products(since=datetime(2025, 1, 1), limit=1)) == 1
