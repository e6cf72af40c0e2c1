"""Application service: Create Order use case.

Orchestrates the flow between repositories and the domain model.
This is the only place that coordinates multiple aggregates (Product
lookup + Order creation).
"""

from __future__ import annotations

import logging

from storefront.application.dto import CartItemSpec, CreatedOrderDTO, CustomerSpec
from storefront.domain.exceptions import CartEmptyError, ProductNotFoundError
from storefront.domain.model.order import SHIPPING_FEE, CustomerSnapshot, Order, OrderLine
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        shipping_fee: Money = SHIPPING_FEE,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._shipping_fee = shipping_fee

    def handle(
        self,
        items: list[CartItemSpec],
        customer: CustomerSpec | None = None,
    ) -> CreatedOrderDTO:
        """Turn a submitted cart into a committed, priced order.

        Steps:
        1. Reject an empty cart before touching any repository.
        2. Resolve every product id (fail on the first missing one, so
           nothing is written).
        3. Build OrderLines with *current* prices (snapshot).
        4. Persist header + lines atomically and return the totals.
        """
        if not items:
            raise CartEmptyError("Cart is empty")

        lines: list[OrderLine] = []
        for spec in items:
            product = self._product_repo.get_by_id(spec.product_id)
            if product is None:
                raise ProductNotFoundError(spec.product_id)

            lines.append(
                OrderLine(
                    product_id=product.id,
                    quantity=Quantity.coerce(spec.quantity),
                    unit_price=product.price,  # <-- price snapshot
                    product_name=product.name,
                )
            )

        order = Order.create(
            customer=self._snapshot(customer),
            lines=lines,
            shipping_fee=self._shipping_fee,
        )
        self._order_repo.add(order)

        logger.info(
            "Created order %s with %d line(s), total %s",
            order.order_number, len(order.lines), order.total,
        )
        return CreatedOrderDTO(
            order_id=order.id,  # type: ignore[arg-type]
            order_number=order.order_number,  # type: ignore[arg-type]
            subtotal_cents=order.subtotal.cents,
            shipping_cents=order.shipping.cents,
            total_cents=order.total.cents,
            subtotal=str(order.subtotal),
            shipping=str(order.shipping),
            total=str(order.total),
        )

    @staticmethod
    def _snapshot(customer: CustomerSpec | None) -> CustomerSnapshot:
        if customer is None:
            return CustomerSnapshot()
        return CustomerSnapshot(
            name=customer.name,
            phone=customer.phone,
            address=customer.address,
        )
