"""
Database session management and connection handling
"""

import ssl
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, AsyncIterator, Dict

import structlog
from fastapi import Request
from sqlalchemy import event, text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from pathlab.core.config import Settings
from pathlab.models import Base

logger = structlog.get_logger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """
    Owns the async engine, its bounded connection pool and the session factory.

    Built once per process (normally in the application lifespan) and handed
    to request handlers through ``get_db``.
    """

    def __init__(self, settings: Settings):
        url = make_url(settings.database_url_async)
        engine_kwargs: Dict[str, Any] = {
            "pool_pre_ping": True,
            "pool_size": settings.DB_POOL_SIZE,
            "max_overflow": settings.DB_MAX_OVERFLOW,
            "pool_timeout": settings.DB_POOL_TIMEOUT,
            "echo": settings.DB_ECHO,
        }
        if settings.DB_SSL_CA_PATH and url.get_backend_name() == "postgresql":
            engine_kwargs["connect_args"] = {
                "ssl": ssl.create_default_context(cafile=settings.DB_SSL_CA_PATH)
            }

        self._engine: AsyncEngine = create_async_engine(url, **engine_kwargs)
        if url.get_backend_name() == "sqlite":
            event.listen(self._engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

        self._session_factory = async_sessionmaker(
            bind=self._engine,
            class_=AsyncSession,
            autoflush=False,
            expire_on_commit=False,
        )

    @property
    def engine(self) -> AsyncEngine:
        """Get async engine"""
        return self._engine

    def session(self) -> AsyncSession:
        """Open a new session; the caller closes it"""
        return self._session_factory()

    async def connect(self) -> None:
        """Check that the store answers"""
        try:
            async with self._engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            logger.info("Database connection initialized successfully")
        except Exception as e:
            logger.error("Failed to initialize database connection", error=str(e))
            raise

    async def create_all(self) -> None:
        """Create any missing tables"""
        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def health_check(self) -> bool:
        """Check database health"""
        try:
            async with self._engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error("Database health check failed", error=str(e))
            return False

    async def dispose(self) -> None:
        """Close pooled connections"""
        await self._engine.dispose()
        logger.info("Database connections closed successfully")


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Yield a session bound to the application's database handle"""
    database: Database = request.app.state.database
    async with database.session() as session:
        yield session


@asynccontextmanager
async def transaction(session: AsyncSession) -> AsyncIterator[AsyncSession]:
    """Commit everything done inside the block, or roll all of it back"""
    try:
        yield session
        await session.commit()
    except Exception:
        await session.rollback()
        raise