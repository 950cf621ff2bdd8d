# Database connection setup
from typing import AsyncIterator, Optional

from fastapi import Depends, Request
from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from .config import Settings
from .core.models.base import BaseModel


class Database:
    """Engine plus session factory, built once at startup and shared by all requests."""

    def __init__(self, engine: AsyncEngine, name: Optional[str] = None):
        self.engine = engine
        self.name = name or engine.url.database or ""
        self.session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        engine = create_async_engine(settings.database_url, echo=settings.database_echo)
        return cls(engine, name=make_url(settings.database_url).database)

    async def ping(self) -> None:
        """Round-trip to the database; raises on failure."""
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def create_tables(self) -> None:
        """Create all tables."""
        async with self.engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()


def get_database(request: Request) -> Database:
    """Shared database handle attached to the app during startup."""
    return request.app.state.database


async def get_db_session(database: Database = Depends(get_database)) -> AsyncIterator[AsyncSession]:
    """Get database session."""
    async with database.session_factory() as session:
        yield session
