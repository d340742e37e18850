"""
Database session management.

The engine is owned by a ``Database`` object built by the application
factory and kept on ``app.state.db``; it is opened at startup and disposed
at shutdown.
"""
from typing import Iterator
from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from stichting.db.base import Base


class Database:
    """Engine plus session factory for one database URL."""

    def __init__(self, url: str, echo: bool = False, **engine_kwargs):
        self.url = url
        if url.startswith("sqlite"):
            engine_kwargs.setdefault("connect_args", {"check_same_thread": False})
        else:
            engine_kwargs.setdefault("pool_pre_ping", True)
            engine_kwargs.setdefault("pool_recycle", 3600)
        self.engine: Engine = create_engine(url, echo=echo, **engine_kwargs)
        if url.startswith("sqlite"):
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def create_all(self) -> None:
        """Initialize database tables."""
        # Import models so SQLAlchemy registers them on Base.metadata
        import stichting.models  # noqa: F401
        Base.metadata.create_all(bind=self.engine)

    def session(self) -> Session:
        return self.SessionLocal()

    def dispose(self) -> None:
        self.engine.dispose()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite only cascades deletes with this pragma on
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def get_db(request: Request) -> Iterator[Session]:
    """Dependency for getting database session."""
    db = request.app.state.db.session()
    try:
        yield db
    finally:
        db.close()
