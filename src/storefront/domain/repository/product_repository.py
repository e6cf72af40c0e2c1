"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (SQL, in-memory)
live in the infrastructure layer and the test suite.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(
        self,
        category: str | None = None,
        query: str | None = None,
        limit: int | None = None,
        newest_first: bool = False,
    ) -> list[Product]:
        """Return catalog products, optionally filtered by category and name."""

    @abstractmethod
    def next_id(self) -> int:
        """Return one more than the highest product ID in use."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""

    @abstractmethod
    def delete(self, product_id: int) -> bool:
        """Remove a product. Return False if it did not exist."""
