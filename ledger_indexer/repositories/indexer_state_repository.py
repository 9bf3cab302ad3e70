"""
Indexer State repository.

Data access layer for the singleton checkpoint row.
"""

from datetime import UTC, datetime

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from ledger_indexer.config.constants import CHECKPOINT_ROW_ID
from ledger_indexer.models.indexer_state import IndexerState
from ledger_indexer.repositories.base import BaseRepository
from ledger_indexer.utils.exceptions import CheckpointMissing


class IndexerStateRepository(BaseRepository[IndexerState]):
    """Repository for the indexer checkpoint."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository."""
        super().__init__(IndexerState, session)

    async def _get_state(self) -> IndexerState:
        state = await self.get_by_pk(CHECKPOINT_ROW_ID)
        if state is None:
            raise CheckpointMissing(
                f"indexer_state row id={CHECKPOINT_ROW_ID} is missing; "
                "run migrations or scripts/init_database.py"
            )
        return state

    async def get_last_processed_block(self) -> int:
        """
        Get the last block whose events are fully applied.

        Returns:
            Last processed block number

        Raises:
            CheckpointMissing: If the checkpoint row was never seeded
        """
        state = await self._get_state()
        return int(state.last_processed_block)

    async def set_last_processed_block(self, height: int) -> None:
        """
        Persist a new checkpoint height.

        The caller guarantees the height does not decrease, except via reset().

        Args:
            height: Block number that is now fully applied

        Raises:
            ValueError: If height is negative
            CheckpointMissing: If the checkpoint row was never seeded
        """
        if height < 0:
            raise ValueError(f"Checkpoint height must be >= 0, got {height}")

        state = await self._get_state()
        state.last_processed_block = height
        state.updated_at = datetime.now(UTC)
        await self.session.flush()

    async def reset(self) -> None:
        """Set the checkpoint back to block 0."""
        await self.set_last_processed_block(0)
        logger.warning("[Indexer] Checkpoint reset to block 0")

    async def seed(self, initial_block: int = 0) -> IndexerState:
        """
        Create the checkpoint row if it does not exist.

        Provisioning helper; the indexing loop never calls it.

        Args:
            initial_block: Starting checkpoint height

        Returns:
            Existing or newly created state
        """
        state = await self.get_by_pk(CHECKPOINT_ROW_ID)
        if state is not None:
            return state

        return await self.create(
            id=CHECKPOINT_ROW_ID,
            last_processed_block=initial_block,
        )
