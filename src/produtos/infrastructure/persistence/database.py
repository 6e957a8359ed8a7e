"""SQLAlchemy engine and session helpers."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import MetaData, create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from produtos.domain.exceptions import StorageError

logger = logging.getLogger(__name__)

# Consistent constraint names across backends.
convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    metadata = MetaData(naming_convention=convention)


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """Create an Engine for ``database_url``."""
    try:
        return create_engine(database_url, pool_pre_ping=True, echo=echo)
    except (SQLAlchemyError, ImportError, ValueError) as exc:
        raise StorageError(f"Could not create database engine: {exc}") from exc


def make_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(
        bind=engine, autoflush=False, autocommit=False, expire_on_commit=False
    )


def create_schema(engine: Engine) -> None:
    """Create any missing tables."""
    # Registers the mapped tables on Base.metadata.
    from produtos.infrastructure.persistence import tables  # noqa: F401

    try:
        Base.metadata.create_all(engine)
    except SQLAlchemyError as exc:
        logger.error("Schema creation failed: %s", exc)
        raise StorageError(f"Schema creation failed: {exc}") from exc
    logger.debug("Database schema ready on %s", engine.url.render_as_string())


@contextmanager
def session_scope(session_factory: sessionmaker[Session]) -> Iterator[Session]:
    """Yield a session; commit on success, roll back on any error.

    Database errors leave the scope as StorageError.
    """
    session = session_factory()
    try:
        yield session
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        logger.error("Database operation failed: %s", exc)
        raise StorageError(f"Database operation failed: {exc}") from exc
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
