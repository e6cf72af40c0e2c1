"""Tests for the catalog use cases: add, update, list, show and delete products."""

import pytest

from storefront.application.add_product import AddProductHandler
from storefront.application.delete_product import DeleteProductHandler
from storefront.application.list_products import ListProductsHandler
from storefront.application.show_product import ShowProductHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.exceptions import ProductNotFoundError, ValidationError
from storefront.domain.model.order import CustomerSnapshot, Order, OrderLine
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money, Quantity
from tests.fakes import FakeOrderRepository, FakeProductRepository


def _repo() -> FakeProductRepository:
    return FakeProductRepository(
        [
            Product(id=1, name="Lavender Soap", price=Money(250), category="bath"),
            Product(id=2, name="Soy Candle", price=Money(499), category="home"),
            Product(id=5, name="Rose Soap", price=Money(300), category="bath"),
        ]
    )


class TestAddProduct:

    def test_auto_assigns_next_id(self):
        repo = _repo()
        product = AddProductHandler(repo).handle(name="Towel", price="12.50", category="bath")
        assert product.id == 6
        assert product.price == Money(1250)
        assert repo.get_by_id(6) is product

    def test_explicit_id(self):
        repo = _repo()
        product = AddProductHandler(repo).handle(
            name="Towel", price="1", category="bath", product_id=42
        )
        assert product.id == 42

    def test_duplicate_id_rejected(self):
        with pytest.raises(ValidationError, match="already exists"):
            AddProductHandler(_repo()).handle(name="X", price="1", category="c", product_id=1)

    def test_name_required(self):
        with pytest.raises(ValidationError, match="name is required"):
            AddProductHandler(_repo()).handle(name=" ", price="1", category="c")

    def test_category_required(self):
        with pytest.raises(ValidationError, match="category is required"):
            AddProductHandler(_repo()).handle(name="X", price="1", category="")

    def test_bad_price_rejected(self):
        with pytest.raises(ValidationError):
            AddProductHandler(_repo()).handle(name="X", price="-1", category="c")

    @pytest.mark.parametrize("product_id", [0, -3, 10**20])
    def test_unstorable_id_rejected(self, product_id):
        with pytest.raises(ValidationError, match="positive integer"):
            AddProductHandler(_repo()).handle(
                name="X", price="1", category="c", product_id=product_id
            )

    def test_unstorable_price_rejected(self):
        with pytest.raises(ValidationError):
            AddProductHandler(_repo()).handle(name="X", price="1e30", category="c")


class TestUpdateProduct:

    def test_price_change(self):
        repo = _repo()
        UpdateProductHandler(repo).handle(1, price="2.75")
        assert repo.get_by_id(1).price == Money(275)
        assert repo.get_by_id(1).name == "Lavender Soap"

    def test_missing_product(self):
        with pytest.raises(ProductNotFoundError):
            UpdateProductHandler(_repo()).handle(99, name="Ghost")


class TestListProducts:

    def test_all(self):
        rows = ListProductsHandler(_repo()).handle()
        assert [r.id for r in rows] == [1, 2, 5]
        assert rows[0].price == "NT$2.50"

    def test_category_filter(self):
        rows = ListProductsHandler(_repo()).handle(category="bath")
        assert [r.id for r in rows] == [1, 5]

    def test_all_category_means_no_filter(self):
        assert len(ListProductsHandler(_repo()).handle(category="all")) == 3

    def test_name_search_is_case_insensitive(self):
        rows = ListProductsHandler(_repo()).handle(query="  SOAP ")
        assert [r.name for r in rows] == ["Lavender Soap", "Rose Soap"]


class TestShowProduct:

    def test_detail(self):
        dto = ShowProductHandler(_repo()).handle(2)
        assert dto.name == "Soy Candle"
        assert dto.price_cents == 499
        assert dto.price == "NT$4.99"

    def test_missing_product(self):
        with pytest.raises(ProductNotFoundError, match="Product 99 not found"):
            ShowProductHandler(_repo()).handle(99)


def _orders_for(product_id: int) -> FakeOrderRepository:
    orders = FakeOrderRepository()
    orders.add(
        Order.create(
            CustomerSnapshot(name="Alice"),
            [OrderLine(product_id=product_id, quantity=Quantity(1), unit_price=Money(250))],
        )
    )
    return orders


class TestDeleteProduct:

    def test_unordered_product_removed(self):
        repo = _repo()
        DeleteProductHandler(repo, _orders_for(1)).handle(5)
        assert repo.get_by_id(5) is None
        assert [p.id for p in repo.list_all()] == [1, 2]

    def test_ordered_product_kept(self):
        repo = _repo()
        with pytest.raises(ValidationError, match="appears on existing orders"):
            DeleteProductHandler(repo, _orders_for(1)).handle(1)
        assert repo.get_by_id(1) is not None

    def test_missing_product(self):
        with pytest.raises(ProductNotFoundError):
            DeleteProductHandler(_repo(), FakeOrderRepository()).handle(99)
