"""SQLAlchemy implementation of ProductRepository."""

from __future__ import annotations

from sqlalchemy import delete, func, select

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.database import Database, fits_integer_column
from storefront.infrastructure.persistence.tables import ProductRow


class SqlProductRepository(ProductRepository):

    def __init__(self, database: Database) -> None:
        self._db = database

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        if not fits_integer_column(product_id):
            return None
        with self._db.session() as session:
            row = session.get(ProductRow, product_id)
            return self._to_domain(row) if row is not None else None

    def list_all(
        self,
        category: str | None = None,
        query: str | None = None,
        limit: int | None = None,
        newest_first: bool = False,
    ) -> list[Product]:
        stmt = select(ProductRow)
        if category:
            stmt = stmt.where(ProductRow.category == category)
        if query:
            stmt = stmt.where(func.lower(ProductRow.name).contains(query.lower(), autoescape=True))
        stmt = stmt.order_by(ProductRow.id.desc() if newest_first else ProductRow.id.asc())
        if limit is not None:
            stmt = stmt.limit(limit)

        with self._db.session() as session:
            return [self._to_domain(row) for row in session.scalars(stmt)]

    def next_id(self) -> int:
        with self._db.session() as session:
            return session.scalar(select(func.coalesce(func.max(ProductRow.id), 0))) + 1

    def save(self, product: Product) -> None:
        with self._db.session() as session:
            session.merge(self._to_row(product))

    def delete(self, product_id: int) -> bool:
        if not fits_integer_column(product_id):
            return False
        with self._db.session() as session:
            result = session.execute(delete(ProductRow).where(ProductRow.id == product_id))
            return result.rowcount > 0

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_row(product: Product) -> ProductRow:
        return ProductRow(
            id=product.id,
            name=product.name,
            price_cents=product.price.cents,
            category=product.category,
            image=product.image,
        )

    @staticmethod
    def _to_domain(row: ProductRow) -> Product:
        return Product(
            id=row.id,
            name=row.name,
            price=Money(row.price_cents),
            category=row.category,
            image=row.image,
        )
