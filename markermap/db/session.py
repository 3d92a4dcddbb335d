"""Async engine and session factory for the SQLite database."""

from dataclasses import dataclass

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from markermap.core.config import Settings


def _enable_foreign_keys(dbapi_connection, connection_record) -> None:
    """Turn on FK enforcement; SQLite ships with it off per connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine with foreign keys enforced on every connection."""
    engine = create_async_engine(
        settings.database_url,
        echo=settings.sql_echo,
        future=True,
    )
    event.listen(engine.sync_engine, "connect", _enable_foreign_keys)
    return engine


def create_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the engine."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )


@dataclass
class DatabaseHandle:
    """Open database: the engine and the session factory bound to it."""

    engine: AsyncEngine
    session_maker: async_sessionmaker[AsyncSession]

    @classmethod
    def open(cls, settings: Settings) -> "DatabaseHandle":
        engine = create_engine(settings)
        return cls(engine=engine, session_maker=create_session_maker(engine))

    async def dispose(self) -> None:
        """Close every pooled connection."""
        await self.engine.dispose()
