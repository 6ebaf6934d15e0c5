"""
Database session management.

One pooled connection is held per request. ``Database.request_scope`` applies
the session settings on it, hands out a ``Session`` bound to it and gives the
connection back to the pool on every exit path.
"""
import logging
from contextlib import contextmanager
from typing import Dict, Iterator, List, Tuple

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError, TimeoutError as PoolTimeoutError
from sqlalchemy.orm import Session

from healthtrack.core.config import Settings
from healthtrack.core.errors import ResourceUnavailable, StorageError
from healthtrack.db.base import Base

logger = logging.getLogger(__name__)


class Database:
    """Engine, connection pool and per-request scope for one application."""

    def __init__(self, settings: Settings):
        self.settings = settings
        connect_args = {}
        if settings.DATABASE_URL.startswith("sqlite"):
            # Requests are served from a thread pool
            connect_args["check_same_thread"] = False

        self.engine = create_engine(
            settings.DATABASE_URL,
            echo=settings.DB_ECHO,
            pool_pre_ping=True,
            pool_recycle=3600,
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_timeout=settings.DB_POOL_TIMEOUT,
            connect_args=connect_args,
        )

    def session_statements(self) -> List[Tuple[str, Dict[str, str]]]:
        """Statements run once on every connection handed to a request."""
        dialect = self.engine.dialect.name
        if dialect == "mysql":
            return [
                ("SET SESSION sql_mode = :sql_mode", {"sql_mode": self.settings.DB_SQL_MODE}),
                ("SET time_zone = :time_zone", {"time_zone": self.settings.DB_TIME_ZONE}),
            ]
        if dialect == "sqlite":
            return [("PRAGMA foreign_keys = ON", {})]
        return []

    def _acquire(self) -> Connection:
        try:
            return self.engine.connect()
        except PoolTimeoutError as e:
            logger.warning(f"Connection pool exhausted after {self.settings.DB_POOL_TIMEOUT}s wait")
            raise ResourceUnavailable("No database connection available, retry later") from e
        except SQLAlchemyError as e:
            logger.error(f"Could not connect to database: {e}", exc_info=True)
            raise StorageError("Could not connect to database") from e

    def _apply_session_settings(self, connection: Connection) -> None:
        try:
            for statement, params in self.session_statements():
                connection.execute(text(statement), params)
            # Leave the connection outside a transaction so the Session owns commits
            connection.commit()
        except SQLAlchemyError as e:
            logger.error(f"Could not apply session settings: {e}", exc_info=True)
            raise StorageError("Could not prepare database session") from e

    @contextmanager
    def request_scope(self) -> Iterator[Session]:
        """Acquire a connection, yield a Session on it, always release it."""
        connection = self._acquire()
        try:
            self._apply_session_settings(connection)
            with Session(bind=connection, autoflush=False, expire_on_commit=False) as db:
                yield db
        finally:
            connection.close()

    def init_db(self) -> None:
        """Initialize database tables."""
        # Register every model on the metadata
        import healthtrack.models  # noqa: F401
        Base.metadata.create_all(bind=self.engine)

    def dispose(self) -> None:
        self.engine.dispose()


def get_db(request: Request) -> Iterator[Session]:
    """Dependency for getting the request's database session."""
    database: Database = request.app.state.database
    with database.request_scope() as db:
        yield db
