"""Database configuration for the SQL-backed visit counter."""

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""
    pass


def create_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine for the given URL."""
    return create_async_engine(
        database_url,
        echo=echo,
        # Revalidate stale connections dropped by the server
        pool_pre_ping=True,
    )


def create_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create a session factory bound to an engine."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def init_db(engine: AsyncEngine):
    """Initialize database tables."""
    # Register models on Base.metadata
    from rbe_sandbox.models import visitor  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
