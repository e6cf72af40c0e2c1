"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.order import Order


@dataclass(frozen=True)
class CartItemSpec:
    """Input: what the customer put in the cart (product id + raw quantity)."""

    product_id: int
    quantity: object = 1


@dataclass(frozen=True)
class CustomerSpec:
    """Input: optional customer details submitted at checkout."""

    name: str | None = None
    phone: str | None = None
    address: str | None = None


@dataclass(frozen=True)
class CreatedOrderDTO:
    """Output: the committed order id, number and money totals."""

    order_id: int
    order_number: str
    subtotal_cents: int
    shipping_cents: int
    total_cents: int
    subtotal: str  # formatted, e.g. "NT$9.99"
    shipping: str
    total: str


@dataclass(frozen=True)
class OrderLineDTO:
    """Output: a single line item as displayed to the user."""

    product_id: int
    product_name: str | None
    quantity: int
    unit_price_cents: int
    line_total_cents: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    order_number: str
    status: str
    created_at: str
    customer_name: str | None
    customer_phone: str | None
    customer_address: str | None
    lines: list[OrderLineDTO]
    subtotal_cents: int
    shipping_cents: int
    total_cents: int
    subtotal: str
    shipping: str
    total: str


def to_order_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        order_number=order.order_number,  # type: ignore[arg-type]
        status=order.status.value,
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M:%S"),
        customer_name=order.customer.name,
        customer_phone=order.customer.phone,
        customer_address=order.customer.address,
        lines=[
            OrderLineDTO(
                product_id=line.product_id,
                product_name=line.product_name,
                quantity=line.quantity.value,
                unit_price_cents=line.unit_price.cents,
                line_total_cents=line.line_total.cents,
                unit_price=str(line.unit_price),
                line_total=str(line.line_total),
            )
            for line in order.lines
        ],
        subtotal_cents=order.subtotal.cents,
        shipping_cents=order.shipping.cents,
        total_cents=order.total.cents,
        subtotal=str(order.subtotal),
        shipping=str(order.shipping),
        total=str(order.total),
    )
