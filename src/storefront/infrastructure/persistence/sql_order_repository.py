"""SQLAlchemy implementation of OrderRepository.

``add`` writes the header and all lines inside one session, so a failed
line insert rolls the header back with it.
"""

from __future__ import annotations

from sqlalchemy import delete, exists, func, select
from sqlalchemy.orm import selectinload

from storefront.domain.exceptions import OrderNotFoundError
from storefront.domain.model.order import CustomerSnapshot, Order, OrderLine, OrderStatus
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.database import Database, fits_integer_column
from storefront.infrastructure.persistence.tables import OrderLineRow, OrderRow


class SqlOrderRepository(OrderRepository):

    def __init__(self, database: Database) -> None:
        self._db = database

    # --- OrderRepository interface --------------------------------------------

    def add(self, order: Order) -> None:
        with self._db.session() as session:
            row = OrderRow(
                created_at=order.created_at,
                subtotal_cents=order.subtotal.cents,
                shipping_cents=order.shipping.cents,
                total_cents=order.total.cents,
                customer_name=order.customer.name,
                customer_phone=order.customer.phone,
                shipping_address=order.customer.address,
                status=order.status.value,
                lines=[
                    OrderLineRow(
                        product_id=line.product_id,
                        quantity=line.quantity.value,
                        unit_price_cents=line.unit_price.cents,
                    )
                    for line in order.lines
                ],
            )
            session.add(row)
            session.flush()
            new_id = row.id
        order.id = new_id

    def get_by_id(self, order_id: int) -> Order | None:
        if not fits_integer_column(order_id):
            return None
        with self._db.session() as session:
            row = session.scalar(
                select(OrderRow)
                .options(selectinload(OrderRow.lines))
                .where(OrderRow.id == order_id)
            )
            return self._to_domain(row) if row is not None else None

    def list_recent(
        self, status: OrderStatus | None = None, limit: int = 100
    ) -> list[Order]:
        stmt = select(OrderRow).options(selectinload(OrderRow.lines))
        if status is not None:
            stmt = stmt.where(OrderRow.status == status.value)
        stmt = stmt.order_by(OrderRow.created_at.desc(), OrderRow.id.desc()).limit(limit)

        with self._db.session() as session:
            return [self._to_domain(row) for row in session.scalars(stmt)]

    def save(self, order: Order) -> None:
        if order.id is None or not fits_integer_column(order.id):
            raise OrderNotFoundError(f"Order #{order.id} not found")
        with self._db.session() as session:
            row = session.get(OrderRow, order.id)
            if row is None:
                raise OrderNotFoundError(f"Order #{order.id} not found")
            row.status = order.status.value
            row.customer_name = order.customer.name
            row.customer_phone = order.customer.phone
            row.shipping_address = order.customer.address

    def delete(self, order_id: int) -> bool:
        if not fits_integer_column(order_id):
            return False
        with self._db.session() as session:
            result = session.execute(delete(OrderRow).where(OrderRow.id == order_id))
            return result.rowcount > 0

    def count(self) -> int:
        with self._db.session() as session:
            return session.scalar(select(func.count()).select_from(OrderRow))

    def references_product(self, product_id: int) -> bool:
        if not fits_integer_column(product_id):
            return False
        with self._db.session() as session:
            return bool(
                session.scalar(select(exists().where(OrderLineRow.product_id == product_id)))
            )

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_domain(row: OrderRow) -> Order:
        lines = [
            OrderLine(
                product_id=line.product_id,
                quantity=Quantity(line.quantity),
                unit_price=Money(line.unit_price_cents),
                product_name=line.product.name if line.product is not None else None,
            )
            for line in row.lines
        ]
        return Order(
            id=row.id,
            customer=CustomerSnapshot(
                name=row.customer_name,
                phone=row.customer_phone,
                address=row.shipping_address,
            ),
            lines=lines,
            shipping=Money(row.shipping_cents),
            status=OrderStatus(row.status),
            created_at=row.created_at,
        )
