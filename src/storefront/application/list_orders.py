"""Application service: List Orders use case (admin query)."""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.order import Order, OrderStatus
from storefront.domain.repository.order_repository import OrderRepository

DEFAULT_LIMIT = 100
MAX_LIMIT = 1000


@dataclass(frozen=True)
class OrderSummaryDTO:
    id: int
    order_number: str
    created_at: str
    status: str
    customer_name: str | None
    customer_phone: str | None
    total_cents: int
    total: str


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(
        self, status: str | None = None, limit: int = DEFAULT_LIMIT
    ) -> list[OrderSummaryDTO]:
        """Return orders newest first; *limit* is clamped to 1..1000."""
        wanted = OrderStatus.parse(status) if status else None
        limit = max(1, min(MAX_LIMIT, limit))

        return [
            to_order_summary(order)
            for order in self._order_repo.list_recent(status=wanted, limit=limit)
        ]


def to_order_summary(order: Order) -> OrderSummaryDTO:
    return OrderSummaryDTO(
        id=order.id,  # type: ignore[arg-type]
        order_number=order.order_number,  # type: ignore[arg-type]
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M:%S"),
        status=order.status.value,
        customer_name=order.customer.name,
        customer_phone=order.customer.phone,
        total_cents=order.total.cents,
        total=str(order.total),
    )
