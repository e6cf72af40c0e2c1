"""SQLAlchemy table mappings.

Money columns hold integer cents. ``order_lines`` rows belong to exactly
one order and disappear with it, both through the ORM cascade and the
``ON DELETE CASCADE`` foreign key.
``settings`` holds a single row with id 1.
"""

from __future__ import annotations

from sqlalchemy import JSON, CheckConstraint, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


class ProductRow(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(255), nullable=False)
    price_cents = Column(Integer, nullable=False)
    category = Column(String(128), nullable=False, index=True)
    image = Column(Text, nullable=True)


class OrderRow(Base):
    __tablename__ = "orders"
    # Never reuse the id of a deleted order: ids are part of order numbers.
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    created_at = Column(DateTime, nullable=False, index=True)
    subtotal_cents = Column(Integer, nullable=False)
    shipping_cents = Column(Integer, nullable=False)
    total_cents = Column(Integer, nullable=False)
    customer_name = Column(Text, nullable=True)
    customer_phone = Column(Text, nullable=True)
    shipping_address = Column(Text, nullable=True)
    status = Column(String(32), nullable=False, default="pending", index=True)

    lines = relationship(
        "OrderLineRow",
        back_populates="order",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="OrderLineRow.id",
    )


class OrderLineRow(Base):
    __tablename__ = "order_lines"

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(
        Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True
    )
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False)
    quantity = Column(Integer, nullable=False)
    unit_price_cents = Column(Integer, nullable=False)

    order = relationship("OrderRow", back_populates="lines")
    product = relationship("ProductRow", lazy="joined")


class StoreSettingsRow(Base):
    __tablename__ = "settings"
    __table_args__ = (CheckConstraint("id = 1", name="ck_settings_single_row"),)

    id = Column(Integer, primary_key=True, autoincrement=False)
    site_title = Column(String(255), nullable=False)
    footer_notes = Column(JSON, nullable=False, default=list)
    footer_links = Column(JSON, nullable=False, default=list)
