"""Application service: Delete Product use case (admin).

A product that already appears on an order stays in the catalog: order
lines point at it, and order history must keep resolving product names.
"""

from __future__ import annotations

import logging

from storefront.domain.exceptions import ProductNotFoundError, ValidationError
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(
        self, product_repo: ProductRepository, order_repo: OrderRepository
    ) -> None:
        self._product_repo = product_repo
        self._order_repo = order_repo

    def handle(self, product_id: int) -> None:
        if self._product_repo.get_by_id(product_id) is None:
            raise ProductNotFoundError(product_id)

        if self._order_repo.references_product(product_id):
            raise ValidationError(
                f"Product {product_id} appears on existing orders and cannot be deleted"
            )

        if not self._product_repo.delete(product_id):
            raise ProductNotFoundError(product_id)
        logger.info("Deleted product #%s", product_id)
