"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order, OrderStatus


class OrderRepository(ABC):

    @abstractmethod
    def add(self, order: Order) -> None:
        """Persist a new order and assign ``order.id``.

        The header and every line are written as one atomic unit: either
        all of them are committed or none are. Raises PersistenceError on
        storage failure.
        """

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order with its lines, or None if not found."""

    @abstractmethod
    def list_recent(
        self, status: OrderStatus | None = None, limit: int = 100
    ) -> list[Order]:
        """Return orders newest first, optionally filtered by status."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist header changes (status, customer) of an existing order."""

    @abstractmethod
    def delete(self, order_id: int) -> bool:
        """Delete an order and its lines. Return False if it did not exist."""

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored orders."""

    @abstractmethod
    def references_product(self, product_id: int) -> bool:
        """True if any order line was placed for *product_id*."""
