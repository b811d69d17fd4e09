"""Engine/session helpers for the SQL storage backend."""
from __future__ import annotations

from contextlib import contextmanager
from functools import lru_cache
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from netflex.core.config import get_settings

Base = declarative_base()


@lru_cache
def get_engine(url: str | None = None) -> Engine:
    resolved = (url or get_settings().database_url or "").strip()
    if not resolved:
        raise RuntimeError("DATABASE_URL must be configured to use the SQL backend.")
    return create_engine(resolved, future=True, pool_pre_ping=True)


@lru_cache
def _get_sessionmaker(url: str | None = None):
    return sessionmaker(bind=get_engine(url), autoflush=False, autocommit=False, future=True)


def create_schema(url: str | None = None) -> None:
    """Create the slot table if it is missing."""
    from . import models  # noqa: F401  # register tables on Base.metadata

    Base.metadata.create_all(bind=get_engine(url))


@contextmanager
def get_session(url: str | None = None) -> Iterator[Session]:
    """Yield a session that commits on success and rolls back on error."""
    session: Session = _get_sessionmaker(url)()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
