"""SQLAlchemy implementation of the UnitOfWork port."""

import logging
from types import TracebackType

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from kanjiten.application.common.unit_of_work import UnitOfWork
from kanjiten.exceptions import StorageError

logger = logging.getLogger(__name__)


class SqlAlchemyUnitOfWork(UnitOfWork):
    """
    Unit of work bound to the request-scoped session.

    Repositories only flush; this class owns commit and rollback. Driver
    errors raised inside the unit of work are rolled back and re-raised as
    StorageError so callers never see SQLAlchemy types.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Commit failed: {e!s}", exc_info=True)
            raise StorageError from e

    def rollback(self) -> None:
        self.db.rollback()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        super().__exit__(exc_type, exc_val, exc_tb)
        if isinstance(exc_val, SQLAlchemyError):
            logger.error(f"Storage operation failed: {exc_val!s}", exc_info=exc_val)
            raise StorageError from exc_val
