"""Application service: Update Order use case (admin).

Covers the two mutations an order allows after checkout: moving it
through its status values and correcting the customer snapshot. Line
items and money amounts are never touched.
"""

from __future__ import annotations

import logging

from storefront.application.dto import OrderDTO, to_order_dto
from storefront.domain.exceptions import OrderNotFoundError
from storefront.domain.model.order import OrderStatus
from storefront.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class UpdateOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(
        self,
        order_id: int,
        status: str | None = None,
        name: str | None = None,
        phone: str | None = None,
        address: str | None = None,
    ) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise OrderNotFoundError(f"Order #{order_id} not found")

        if status is not None:
            new_status = OrderStatus.parse(status)
            if new_status != order.status:
                logger.info(
                    "Order #%s status %s -> %s",
                    order_id, order.status.value, new_status.value,
                )
            order.change_status(new_status)

        order.correct_customer(name=name, phone=phone, address=address)
        self._order_repo.save(order)
        return to_order_dto(order)
