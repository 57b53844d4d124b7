"""
Connection provider.

The ``Database`` object owns the async engine and session factory. It is built
once in ``create_app`` and hung on ``app.state`` so request handlers reach it
through the ``get_db`` / ``get_database`` dependencies; tests build their own
against in-memory SQLite.
"""

import logging
import ssl
from typing import AsyncIterator

from fastapi import Request
from sqlalchemy import event
from sqlalchemy.engine import URL, make_url
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from dialysis_records.config import Settings

logger = logging.getLogger(__name__)

Base = declarative_base()


def _normalise_url(raw_url: str) -> URL:
    if raw_url.startswith("postgres://"):
        raw_url = raw_url.replace("postgres://", "postgresql+asyncpg://", 1)
    elif raw_url.startswith("postgresql://"):
        raw_url = raw_url.replace("postgresql://", "postgresql+asyncpg://", 1)
    # asyncpg takes TLS settings through connect_args, not the query string
    return make_url(raw_url).difference_update_query(["sslmode"])


def _unverified_tls_context() -> ssl.SSLContext:
    ctx = ssl.create_default_context()
    ctx.check_hostname = False
    ctx.verify_mode = ssl.CERT_NONE
    return ctx


def _log_engine_error(exception_context) -> None:
    logger.error(
        "Database error (%s): %s",
        type(exception_context.original_exception).__name__,
        exception_context.original_exception,
    )


def _log_invalidated_connection(dbapi_connection, connection_record, exception) -> None:
    if exception is not None:
        logger.error("Unexpected error on idle database connection: %s", exception)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Pooled database handle shared by every request."""

    def __init__(self, url, **engine_kwargs):
        self.engine = create_async_engine(url, **engine_kwargs)
        self.session_factory = async_sessionmaker(self.engine, expire_on_commit=False)

        sync_engine = self.engine.sync_engine
        event.listen(sync_engine, "handle_error", _log_engine_error)
        event.listen(sync_engine, "invalidate", _log_invalidated_connection)
        if sync_engine.dialect.name == "sqlite":
            event.listen(sync_engine, "connect", _enable_sqlite_foreign_keys)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        if settings.is_production and settings.database_url:
            logger.info("Using DATABASE_URL for production connection")
            return cls(
                _normalise_url(settings.database_url),
                connect_args={"ssl": _unverified_tls_context()},
                pool_pre_ping=True,
                echo=settings.db_echo,
            )

        logger.info("Using discrete DB_* parameters for local connection")
        url = URL.create(
            "postgresql+asyncpg",
            username=settings.db_user,
            password=settings.db_password or None,
            host=settings.db_host,
            port=settings.db_port,
            database=settings.db_name,
        )
        return cls(url, pool_pre_ping=True, echo=settings.db_echo)

    async def connect(self) -> None:
        """Open a first connection and create any missing tables."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()

    def session(self) -> AsyncSession:
        return self.session_factory()


def get_database(request: Request) -> Database:
    return request.app.state.database


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """One session per request: commit on success, roll back on any error."""
    database = get_database(request)
    async with database.session() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
