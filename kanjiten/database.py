"""Engine lifecycle and the request-scoped SQLAlchemy session."""

from collections.abc import Generator
from typing import Annotated

from fastapi import Depends
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from kanjiten.config import Settings, get_settings


class Base(DeclarativeBase):
    """Base class for all database models."""


_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def build_engine(settings: Settings) -> Engine:
    """
    Create the engine for ``DATABASE_URL``.

    An in-memory SQLite database lives on a single shared connection, a
    SQLite file gets a regular pool usable from the request threadpool, and
    PostgreSQL is pooled with the sizes from settings.
    """
    url = make_url(settings.DATABASE_URL)

    if url.get_backend_name() == "sqlite":
        connect_args = {"check_same_thread": False}
        if url.database in (None, "", ":memory:"):
            return create_engine(
                url, connect_args=connect_args, poolclass=StaticPool, echo=settings.DB_ECHO
            )
        return create_engine(url, connect_args=connect_args, echo=settings.DB_ECHO)

    return create_engine(
        url,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_recycle=settings.DB_POOL_RECYCLE_SECONDS,
        pool_pre_ping=True,
        echo=settings.DB_ECHO,
    )


def initialize_database(settings: Settings) -> None:
    """Create the engine and session factory; called once from the app lifespan."""
    global _engine, _session_factory  # noqa: PLW0603

    _engine = build_engine(settings)
    _session_factory = sessionmaker(bind=_engine, autoflush=False, expire_on_commit=True)


def dispose_engine() -> None:
    """Close pooled connections on shutdown."""
    global _engine, _session_factory  # noqa: PLW0603
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _session_factory = None


def get_session_factory(
    settings: Annotated[Settings, Depends(get_settings)],
) -> sessionmaker[Session]:
    """Session factory, created on first use when the lifespan did not run."""
    if _session_factory is None:
        initialize_database(settings)
    if _session_factory is None:
        raise RuntimeError("Database session factory could not be created")
    return _session_factory


def get_db(
    session_factory: Annotated[sessionmaker[Session], Depends(get_session_factory)],
) -> Generator[Session, None, None]:
    """One session per request; the unit of work decides commit or rollback."""
    with session_factory() as db:
        yield db


DatabaseSession = Annotated[Session, Depends(get_db)]
