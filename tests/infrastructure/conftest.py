"""Fixtures backed by a throwaway SQLite file per test."""

import pytest

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.infrastructure.persistence.database import Database
from storefront.infrastructure.persistence.migrations import apply_migrations
from storefront.infrastructure.persistence.sql_order_repository import SqlOrderRepository
from storefront.infrastructure.persistence.sql_product_repository import SqlProductRepository
from storefront.infrastructure.persistence.sql_report_repository import SqlReportRepository


@pytest.fixture
def database(tmp_path):
    db = Database(f"sqlite:///{tmp_path / 'storefront.db'}")
    apply_migrations(db)
    yield db
    db.dispose()


@pytest.fixture
def product_repo(database):
    repo = SqlProductRepository(database)
    repo.save(Product(id=1, name="Lavender Soap", price=Money(250), category="bath"))
    repo.save(Product(id=2, name="Soy Candle", price=Money(499), category="home"))
    return repo


@pytest.fixture
def order_repo(database):
    return SqlOrderRepository(database)


@pytest.fixture
def report_repo(database):
    return SqlReportRepository(database)
