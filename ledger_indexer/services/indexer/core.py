"""
Ledger Indexer Core Service.

Runs one checkpointed indexing iteration: read heights, decide
skip/reset/scan, apply the range and advance the checkpoint.
"""

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ledger_indexer.repositories.indexer_state_repository import (
    IndexerStateRepository,
)
from ledger_indexer.repositories.user_repository import UserRepository
from ledger_indexer.services.chain.client import ChainClient
from ledger_indexer.services.chain.types import BlockRange
from ledger_indexer.services.events.decoder import EventDecoder

from .scanning_mixin import ScanningMixin
from .types import IterationOutcome, IterationResult


class LedgerIndexerService(ScanningMixin):
    """
    Checkpointed event indexer for the balance ledger.

    Each iteration runs in a single database transaction: ledger deltas
    and the checkpoint advance commit together or not at all. A failure
    anywhere in the range leaves both untouched, so the retry reprocesses
    the full range exactly once.
    """

    def __init__(
        self,
        chain: ChainClient,
        session_maker: async_sessionmaker[AsyncSession],
        contract_addresses: list[str],
        decoder: EventDecoder,
    ):
        """
        Initialize indexer.

        Args:
            chain: Chain RPC client
            session_maker: Factory for per-iteration sessions
            contract_addresses: Contracts to scan, in scan order
            decoder: Event decoder
        """
        self.chain = chain
        self.session_maker = session_maker
        self.contract_addresses = list(contract_addresses)
        self.decoder = decoder

    async def run_iteration(self) -> IterationResult:
        """
        Run one indexing iteration.

        Returns:
            Iteration outcome with scan counters

        Raises:
            ChainUnavailable: RPC failure (transient)
            CheckpointMissing: Checkpoint row absent (fatal)
        """
        async with self.session_maker() as session:
            try:
                return await self._run_iteration(session)
            except Exception:
                await session.rollback()
                raise

    async def _run_iteration(self, session: AsyncSession) -> IterationResult:
        state_repo = IndexerStateRepository(session)

        current_height = await self.chain.current_height()
        last_processed = await state_repo.get_last_processed_block()

        # Development chains get wiped; restart from zero next iteration
        if current_height < last_processed:
            logger.warning(
                f"[Indexer] Chain reset detected "
                f"(current: {current_height}, last: {last_processed})"
            )
            await state_repo.reset()
            await session.commit()
            return IterationResult(
                outcome=IterationOutcome.RESET,
                current_height=current_height,
                last_processed_block=0,
            )

        if current_height <= last_processed:
            return IterationResult(
                outcome=IterationOutcome.SKIPPED,
                current_height=current_height,
                last_processed_block=last_processed,
            )

        block_range = BlockRange(last_processed + 1, current_height)
        logger.info(f"[Indexer] Indexing blocks {block_range}")

        stats = await self.scan_range(block_range, UserRepository(session))

        await state_repo.set_last_processed_block(current_height)
        await session.commit()

        if stats.events_applied or stats.decode_errors:
            logger.info(
                f"[Indexer] Blocks {block_range} done: "
                f"{stats.events_applied} events applied, "
                f"{stats.decode_errors} undecodable"
            )

        return IterationResult(
            outcome=IterationOutcome.SCANNED,
            current_height=current_height,
            last_processed_block=current_height,
            block_range=block_range,
            stats=stats,
        )
