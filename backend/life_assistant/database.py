"""Database engine and session factory for the SQL-backed note store."""
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import declarative_base

# Base class for models
Base = declarative_base()


def create_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine; pool sizing only applies to server databases."""
    engine_kwargs = {"echo": echo, "pool_pre_ping": True}
    if not database_url.startswith("sqlite"):
        engine_kwargs.update(pool_size=5, max_overflow=10)
    return create_async_engine(database_url, **engine_kwargs)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Async session factory bound to ``engine``."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def init_db(engine: AsyncEngine) -> None:
    """Initialize database tables."""
    # Import models so their tables are registered on Base.metadata
    from life_assistant import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db(engine: AsyncEngine) -> None:
    """Close database connections."""
    await engine.dispose()
