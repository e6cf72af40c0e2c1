"""Application service: List Products use case (storefront query)."""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository


@dataclass(frozen=True)
class ProductDTO:
    id: int
    name: str
    category: str
    image: str | None
    price_cents: int
    price: str


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self, category: str | None = None, query: str | None = None
    ) -> list[ProductDTO]:
        """List the catalog by id; ``category="all"`` disables the filter."""
        if category == "all":
            category = None
        query = query.strip() if query else None

        return [
            to_product_dto(p)
            for p in self._product_repo.list_all(category=category, query=query or None)
        ]


def to_product_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        category=product.category,
        image=product.image,
        price_cents=product.price.cents,
        price=str(product.price),
    )
