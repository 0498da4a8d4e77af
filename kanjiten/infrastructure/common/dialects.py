"""Dialect-specific INSERT constructs for native upserts."""

from collections.abc import Callable
from typing import Any

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

from kanjiten.exceptions import StorageError


def dialect_insert(db: Session) -> Callable[[Any], Any]:
    """
    Return the ``insert`` construct of the session's dialect.

    Both the PostgreSQL and SQLite constructs support ``on_conflict_do_update``
    and ``on_conflict_do_nothing`` with ``index_elements``.

    Raises:
        StorageError: If the session is unbound or the dialect has no native upsert
    """
    if db.bind is None:
        raise StorageError("Database not bound!")

    dialect = db.bind.dialect.name
    if dialect == "postgresql":
        return postgresql.insert
    if dialect == "sqlite":
        return sqlite.insert
    raise StorageError(f"Unsupported database dialect: {dialect}")
