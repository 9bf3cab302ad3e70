"""
Indexer main entry point.

Verifies the database and checkpoint, then runs the supervised
indexing loop for the lifetime of the process.
"""

import asyncio
import sys

from loguru import logger
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ledger_indexer.config.database import create_db_engine, create_session_maker
from ledger_indexer.config.logging import setup_logging
from ledger_indexer.config.settings import settings
from ledger_indexer.repositories.indexer_state_repository import (
    IndexerStateRepository,
)
from ledger_indexer.services.chain.client import ChainClient
from ledger_indexer.services.events.decoder import EventDecoder
from ledger_indexer.services.events.definitions import build_event_registry
from ledger_indexer.services.indexer.core import LedgerIndexerService
from ledger_indexer.services.indexer.supervisor import IndexerSupervisor
from ledger_indexer.utils.exceptions import CheckpointMissing
from ledger_indexer.utils.security import mask_database_url


async def verify_startup(
    session_maker: async_sessionmaker[AsyncSession],
) -> int:
    """
    Check the database connection and the seeded checkpoint row.

    Args:
        session_maker: Session factory

    Returns:
        Current checkpoint height

    Raises:
        SQLAlchemyError: If the database is unreachable
        CheckpointMissing: If the checkpoint row was never seeded
    """
    async with session_maker() as session:
        await session.execute(text("SELECT 1"))
        return await IndexerStateRepository(session).get_last_processed_block()


def build_supervisor(
    session_maker: async_sessionmaker[AsyncSession],
) -> IndexerSupervisor:
    """Wire chain client, decoder and indexer from settings."""
    chain = ChainClient.from_url(settings.rpc_url, timeout=settings.rpc_timeout)
    registry = build_event_registry(
        legacy_mint_enabled=settings.legacy_mint_enabled
    )
    contract_addresses = settings.get_contract_addresses()

    logger.info(f"[Indexer] Contracts: {', '.join(contract_addresses)}")
    logger.info(f"[Indexer] Events: {', '.join(registry.names())}")

    indexer = LedgerIndexerService(
        chain=chain,
        session_maker=session_maker,
        contract_addresses=contract_addresses,
        decoder=EventDecoder(registry),
    )
    return IndexerSupervisor(
        indexer,
        poll_interval=settings.indexer_poll_interval,
        error_backoff=settings.indexer_error_backoff,
    )


async def main() -> None:
    """Initialize and run the indexer."""
    setup_logging()

    logger.info(f"Connecting to database {mask_database_url(settings.database_url)}")
    engine = create_db_engine()
    session_maker = create_session_maker(engine)

    try:
        try:
            checkpoint = await verify_startup(session_maker)
        except (SQLAlchemyError, OSError) as e:
            logger.critical(f"Database unavailable: {e}")
            sys.exit(1)
        except CheckpointMissing as e:
            logger.critical(str(e))
            sys.exit(1)

        logger.info(f"[Indexer] Resuming after block {checkpoint}")

        supervisor = build_supervisor(session_maker)
        await supervisor.run_forever()
    finally:
        await engine.dispose()
        logger.info("Indexer stopped")


def run() -> None:
    """Console script entry point."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Interrupted")
    except CheckpointMissing:
        # already logged by the supervisor
        sys.exit(1)


if __name__ == "__main__":
    run()
