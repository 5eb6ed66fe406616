from collections.abc import AsyncGenerator

from loguru import logger
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from budget_server.errors import ConfigurationError, PersistenceNotConfiguredError

engine: AsyncEngine | None = None
async_session: async_sessionmaker[AsyncSession] | None = None


async def connect(database_url: str | None) -> AsyncEngine:
    """Create the engine and session factory, and check the database is reachable."""
    global engine, async_session

    if not database_url:
        raise ConfigurationError(
            "DATABASE_URL env var is not set, but persistence autowiring is enabled"
        )
    if engine is not None:
        await disconnect()

    new_engine = create_async_engine(database_url)
    try:
        async with new_engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception:
        await new_engine.dispose()
        raise

    engine = new_engine
    async_session = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
    logger.info(f"Connected to database {engine.url.render_as_string(hide_password=True)}")
    return engine


async def disconnect() -> None:
    """Dispose of the engine, if there is one."""
    global engine, async_session

    if engine is None:
        return
    logger.info("Closing connection to database")
    await engine.dispose()
    engine = None
    async_session = None


def is_connected() -> bool:
    return engine is not None


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency used to supply database session."""
    if async_session is None:
        raise PersistenceNotConfiguredError(
            "No database is connected. Set DISABLE_PERSISTENCE_AUTOWIRING=false and DATABASE_URL"
        )
    async with async_session() as session:
        yield session
