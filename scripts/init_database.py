#!/usr/bin/env python3
"""Initialize database tables and seed the indexer checkpoint."""

import argparse
import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from loguru import logger  # noqa: E402

from ledger_indexer.config.database import (  # noqa: E402
    create_db_engine,
    create_session_maker,
)
from ledger_indexer.models import Base  # noqa: E402
from ledger_indexer.repositories.indexer_state_repository import (  # noqa: E402
    IndexerStateRepository,
)

# Configure logger for script
logger.remove()
logger.add(sys.stderr, level="INFO")


async def init_database(start_block: int) -> None:
    """Create all tables and the checkpoint row."""
    logger.info("Connecting to database...")
    engine = create_db_engine()

    try:
        async with engine.begin() as conn:
            logger.info("Creating tables (checkfirst=True)...")
            await conn.run_sync(Base.metadata.create_all, checkfirst=True)

        session_maker = create_session_maker(engine)
        async with session_maker() as session:
            state = await IndexerStateRepository(session).seed(start_block)
            await session.commit()
            logger.info(
                f"Checkpoint at block {state.last_processed_block}"
            )
    finally:
        await engine.dispose()

    logger.success("Database initialized successfully!")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--start-block",
        type=int,
        default=0,
        help="Initial checkpoint if the row does not exist yet",
    )
    args = parser.parse_args()
    asyncio.run(init_database(args.start_block))
