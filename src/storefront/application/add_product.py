"""Application service: Add Product use case."""

from __future__ import annotations

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import MAX_STORED_INTEGER, Money
from storefront.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        price: str,
        category: str,
        image: str | None = None,
        product_id: int | None = None,
    ) -> Product:
        """Add a new product to the catalog.

        *price* is in major units ("2.50"). Without an explicit
        *product_id* the next free id is assigned.
        """
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if not category or not category.strip():
            raise ValidationError("Product category is required")

        if product_id is None:
            product_id = self._product_repo.next_id()
        elif not 0 < product_id <= MAX_STORED_INTEGER:
            raise ValidationError(f"Product id must be a positive integer, got {product_id}")
        elif self._product_repo.get_by_id(product_id) is not None:
            raise ValidationError(f"Product with ID {product_id} already exists")

        product = Product(
            id=product_id,
            name=name.strip(),
            price=Money.of(price),
            category=category.strip(),
            image=(image or "").strip() or None,
        )
        self._product_repo.save(product)
        return product
