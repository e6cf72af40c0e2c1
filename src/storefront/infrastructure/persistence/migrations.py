"""Versioned schema migrations.

Each migration runs once, in version order, inside its own transaction,
and is recorded in ``schema_migrations``. Every step is written to be
idempotent so a half-recorded run can be repeated safely.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from sqlalchemy import Column, DateTime, Integer, MetaData, String, Table, insert, select
from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError

from storefront.domain.exceptions import PersistenceError
from storefront.domain.model.store_settings import DEFAULT_SITE_TITLE
from storefront.infrastructure.persistence.database import Database
from storefront.infrastructure.persistence.tables import (
    Base,
    OrderLineRow,
    OrderRow,
    ProductRow,
    StoreSettingsRow,
)

logger = logging.getLogger(__name__)

_meta = MetaData()

schema_migrations = Table(
    "schema_migrations",
    _meta,
    Column("version", Integer, primary_key=True, autoincrement=False),
    Column("description", String(255), nullable=False),
    Column("applied_at", DateTime, nullable=False),
)


@dataclass(frozen=True)
class Migration:
    version: int
    description: str
    apply: Callable[[Connection], None]


def _create_catalog(conn: Connection) -> None:
    Base.metadata.create_all(conn, tables=[ProductRow.__table__], checkfirst=True)


def _create_orders(conn: Connection) -> None:
    Base.metadata.create_all(
        conn, tables=[OrderRow.__table__, OrderLineRow.__table__], checkfirst=True
    )


def _create_settings(conn: Connection) -> None:
    table = StoreSettingsRow.__table__
    Base.metadata.create_all(conn, tables=[table], checkfirst=True)
    if conn.execute(select(table.c.id).where(table.c.id == 1)).first() is None:
        conn.execute(
            insert(table).values(
                id=1, site_title=DEFAULT_SITE_TITLE, footer_notes=[], footer_links=[]
            )
        )


MIGRATIONS: list[Migration] = [
    Migration(1, "create products table", _create_catalog),
    Migration(2, "create orders and order_lines tables", _create_orders),
    Migration(3, "create settings table with default row", _create_settings),
]


def applied_versions(database: Database) -> set[int]:
    with database.engine.connect() as conn:
        _meta.create_all(conn, checkfirst=True)
        conn.commit()
        return set(conn.execute(select(schema_migrations.c.version)).scalars())


def apply_migrations(database: Database) -> list[int]:
    """Apply pending migrations; return the versions applied by this call."""
    try:
        done = applied_versions(database)
        applied: list[int] = []
        for migration in sorted(MIGRATIONS, key=lambda m: m.version):
            if migration.version in done:
                continue
            with database.engine.begin() as conn:
                migration.apply(conn)
                conn.execute(
                    insert(schema_migrations).values(
                        version=migration.version,
                        description=migration.description,
                        applied_at=datetime.now(),
                    )
                )
            logger.info("Applied migration %d: %s", migration.version, migration.description)
            applied.append(migration.version)
        return applied
    except SQLAlchemyError as exc:
        raise PersistenceError(f"Migration failed: {exc}") from exc
