"""Order aggregate, the core of the domain.

The Order is an aggregate root that owns its line items.
All business invariants are enforced here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from storefront.domain.exceptions import CartEmptyError, ValidationError
from storefront.domain.model.order_number import encode_order_number
from storefront.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "pending"
    PAID = "paid"
    SHIPPED = "shipped"
    CANCELED = "canceled"

    @staticmethod
    def parse(raw: str) -> OrderStatus:
        try:
            return OrderStatus(raw.strip().lower())
        except (AttributeError, ValueError) as exc:
            allowed = ", ".join(s.value for s in OrderStatus)
            raise ValidationError(
                f"Unknown order status {raw!r} (expected one of: {allowed})"
            ) from exc


@dataclass(frozen=True)
class CustomerSnapshot:
    """Customer details copied onto the order at checkout.

    Not a reference to any user record; every field is optional and
    stored exactly as submitted.
    """

    name: str | None = None
    phone: str | None = None
    address: str | None = None


@dataclass(frozen=True)
class OrderLine:
    """Captures the price snapshot of a product at order-creation time."""

    product_id: int
    quantity: Quantity
    unit_price: Money  # locked at order-creation time
    product_name: str | None = None

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
SHIPPING_FEE = Money(6000)


@dataclass
class Order:
    """Aggregate root for storefront orders.

    Use the ``Order.create()`` factory for new orders; it enforces all
    business rules.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating.
    """

    id: int | None
    customer: CustomerSnapshot
    lines: list[OrderLine]
    shipping: Money
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=datetime.now)

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        customer: CustomerSnapshot | None,
        lines: list[OrderLine],
        shipping_fee: Money = SHIPPING_FEE,
        created_at: datetime | None = None,
    ) -> Order:
        """Create a new order, enforcing all invariants."""
        if not lines:
            raise CartEmptyError("Cart is empty")

        return Order(
            id=None,
            customer=customer or CustomerSnapshot(),
            lines=list(lines),
            shipping=shipping_fee,
            created_at=created_at or datetime.now(),
        )

    # --- Admin maintenance ----------------------------------------------------

    def change_status(self, status: OrderStatus) -> None:
        self.status = status

    def correct_customer(
        self,
        name: str | None = None,
        phone: str | None = None,
        address: str | None = None,
    ) -> None:
        """Fix customer details; ``None`` keeps the current value."""
        self.customer = CustomerSnapshot(
            name=self.customer.name if name is None else name,
            phone=self.customer.phone if phone is None else phone,
            address=self.customer.address if address is None else address,
        )

    # --- Computed properties --------------------------------------------------

    @property
    def subtotal(self) -> Money:
        result = Money.zero()
        for line in self.lines:
            result = result + line.line_total
        return result

    @property
    def total(self) -> Money:
        return self.subtotal + self.shipping

    @property
    def order_number(self) -> str | None:
        """``YYYYMMDD-NNNN``, available once the repository assigned an id."""
        if self.id is None:
            return None
        return encode_order_number(self.id, self.created_at)
