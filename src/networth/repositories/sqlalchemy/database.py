"""SQLite engine and session lifecycle for the portfolio database."""

from typing import Generator, Optional

from sqlalchemy import create_engine, Engine
from sqlalchemy.orm import sessionmaker, Session, declarative_base

from networth.config.settings import get_settings

Base = declarative_base()

# Built lazily from the current settings; reset_database() drops both.
_engine: Optional[Engine] = None
_session_factory: Optional[sessionmaker] = None


def get_engine() -> Engine:
    """Engine for the configured database URL, created on first use."""
    global _engine
    if _engine is None:
        url = get_settings().get_database_url()
        # Sessions are handed to FastAPI's threadpool.
        connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
        _engine = create_engine(url, connect_args=connect_args, echo=False)
    return _engine


def get_session() -> Session:
    """Open a new session; the caller closes it."""
    global _session_factory
    if _session_factory is None:
        _session_factory = sessionmaker(bind=get_engine(), autoflush=False)
    return _session_factory()


def get_db() -> Generator[Session, None, None]:
    """FastAPI dependency yielding a request-scoped session."""
    db = get_session()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """Create the portfolio tables if they do not exist."""
    from networth.repositories.sqlalchemy import orm_models  # noqa: F401

    Base.metadata.create_all(bind=get_engine())


def reset_database() -> None:
    """Dispose the engine so the next call picks up new settings."""
    global _engine, _session_factory
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _session_factory = None
