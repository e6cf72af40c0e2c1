"""Application service: Delete Order use case (admin).

Deleting an order removes its line items with it.
"""

from __future__ import annotations

import logging

from storefront.domain.exceptions import OrderNotFoundError
from storefront.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class DeleteOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int) -> None:
        if not self._order_repo.delete(order_id):
            raise OrderNotFoundError(f"Order #{order_id} not found")
        logger.info("Deleted order #%s", order_id)
