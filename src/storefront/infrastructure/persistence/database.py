"""Database handle: one engine and a transactional session scope.

A ``Database`` is built by the composition root and handed to each SQL
repository, so tests can point the whole stack at a throwaway SQLite
file instead of a process-wide connection.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from storefront.domain.exceptions import PersistenceError
from storefront.domain.model.value_objects import MAX_STORED_INTEGER

logger = logging.getLogger(__name__)


def fits_integer_column(value: int) -> bool:
    """True if *value* can be bound to an INTEGER column without overflow."""
    return -MAX_STORED_INTEGER - 1 <= value <= MAX_STORED_INTEGER


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:

    def __init__(self, url: str, echo: bool = False) -> None:
        self.url = url
        self.engine: Engine = self._create_engine(url, echo)
        self._session_factory = sessionmaker(
            bind=self.engine, autoflush=False, expire_on_commit=False
        )

    @staticmethod
    def _create_engine(url: str, echo: bool) -> Engine:
        if not url.startswith("sqlite"):
            return create_engine(url, echo=echo)

        kwargs: dict = {"connect_args": {"check_same_thread": False, "timeout": 30}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            # One shared connection, otherwise every session sees an empty database.
            kwargs["poolclass"] = StaticPool
        else:
            db_path = url.split("sqlite:///", 1)[-1]
            Path(db_path).expanduser().resolve().parent.mkdir(parents=True, exist_ok=True)

        engine = create_engine(url, echo=echo, **kwargs)
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Yield a session; commit on success, roll back on any error.

        Storage errors are re-raised as PersistenceError.
        """
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except SQLAlchemyError as exc:
            session.rollback()
            logger.error("Database transaction rolled back: %s", exc)
            raise PersistenceError(f"Storage operation failed: {exc}") from exc
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def dispose(self) -> None:
        self.engine.dispose()
