"""Database engine and session factory."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from ledger_indexer.config.settings import settings


def create_db_engine(
    database_url: str | None = None,
    echo: bool | None = None,
) -> AsyncEngine:
    """
    Create async engine for the indexer.

    Args:
        database_url: Override for settings.database_url
        echo: Override for settings.database_echo

    Returns:
        AsyncEngine bound to the configured database
    """
    return create_async_engine(
        database_url or settings.database_url,
        echo=settings.database_echo if echo is None else echo,
        pool_pre_ping=True,
    )


def create_session_maker(
    engine: AsyncEngine,
) -> async_sessionmaker[AsyncSession]:
    """Create session maker; one session per indexing iteration."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
