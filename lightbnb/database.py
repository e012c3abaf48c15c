"""
Database handle and session management.
Owns the async SQLAlchemy engine (and with it the connection pool) that every
data-access function runs against.
"""

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy import text
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Optional
from lightbnb.config import Settings, get_settings
import logging

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for all database models."""

    def to_dict(self) -> Dict[str, Any]:
        """Return the row as a plain record keyed by column name."""
        return {column.key: getattr(self, column.key) for column in self.__table__.columns}

    def __repr__(self) -> str:
        """String representation of the model."""
        return f"<{self.__class__.__name__}(id={self.id})>"


class Database:
    """
    Explicitly owned handle to the relational store.

    Wraps an async engine and a session factory. The caller creates it,
    passes it to the data-access functions and closes it when done.
    """

    def __init__(self, url: str, echo: bool = False, **engine_options: Any):
        """
        Initialize the handle.

        Args:
            url: SQLAlchemy async connection string
            echo: Whether to log emitted SQL
            **engine_options: Extra keyword arguments for create_async_engine
                              (pool sizing, poolclass, connect_args)
        """
        self.url = url
        self._echo = echo
        self._engine_options = engine_options
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker] = None

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "Database":
        """Build a handle with pool options taken from Settings."""
        settings = settings or get_settings()
        return cls(
            settings.sqlalchemy_url,
            echo=settings.debug,
            pool_size=settings.pool_size,
            max_overflow=settings.max_overflow,
            pool_pre_ping=True,  # Validate connections before use
            pool_recycle=settings.pool_recycle,
            pool_timeout=settings.pool_timeout,
        )

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError("Database is not open")
        return self._engine

    def open(self) -> "Database":
        """Create the engine and session factory. Calling it twice is a no-op."""
        if self._engine is None:
            self._engine = create_async_engine(self.url, echo=self._echo, **self._engine_options)
            self._session_factory = async_sessionmaker(
                self._engine,
                class_=AsyncSession,
                expire_on_commit=False,
            )
            logger.info(f"Opened database pool for {self._engine.url.render_as_string(hide_password=True)}")
        return self

    async def close(self) -> None:
        """Dispose of the engine and every pooled connection."""
        if self._engine is None:
            return
        await self._engine.dispose()
        self._engine = None
        self._session_factory = None
        logger.info("Database connections closed")

    async def __aenter__(self) -> "Database":
        return self.open()

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """
        Yield a session bound to a pooled connection.
        Rolls back on error and always releases the connection.
        """
        if self._session_factory is None:
            raise RuntimeError("Database is not open")

        async with self._session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    async def create_tables(self) -> None:
        """
        Create all database tables.
        Intended for tests and local development.
        """
        # Register every model on Base.metadata
        import lightbnb.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables created successfully")

    async def drop_tables(self) -> None:
        """Drop all database tables."""
        import lightbnb.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
        logger.info("Database tables dropped successfully")

    async def check_connection(self) -> bool:
        """
        Test database connectivity.
        Returns True if a round-trip succeeds, False otherwise.
        """
        try:
            async with self.session() as session:
                result = await session.execute(text("SELECT 1"))
                result.scalar()
            logger.info("Database connection successful")
            return True
        except Exception as e:
            logger.error(f"Database connection failed: {e}")
            return False

    def get_pool_status(self) -> Dict[str, Any]:
        """Return connection pool counters for monitoring."""
        pool = self.engine.pool
        try:
            return {
                "pool_size": pool.size(),
                "checked_in_connections": pool.checkedin(),
                "checked_out_connections": pool.checkedout(),
                "overflow_connections": pool.overflow(),
            }
        except AttributeError as e:
            logger.debug(f"Pool {type(pool).__name__} does not report counters: {e}")
            return {"error": f"{type(pool).__name__} does not report counters"}
