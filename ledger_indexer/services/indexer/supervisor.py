"""
Indexer Supervisor.

Wraps indexing iterations in a process-lifetime retry loop.
"""

import asyncio
from collections.abc import Awaitable, Callable

from loguru import logger

from ledger_indexer.config.constants import (
    INDEXER_ERROR_BACKOFF,
    INDEXER_POLL_INTERVAL,
)
from ledger_indexer.utils.exceptions import is_fatal

from .core import LedgerIndexerService
from .types import IterationResult

SleepFunc = Callable[[float], Awaitable[None]]


class IndexerSupervisor:
    """
    Infinite supervisory loop around LedgerIndexerService.

    Success sleeps the poll interval; a failed iteration is logged and
    retried after the error backoff. Fatal errors (missing checkpoint)
    propagate and stop the process.

    The sleep function is injectable so tests can drive iterations
    without real delays.
    """

    def __init__(
        self,
        indexer: LedgerIndexerService,
        poll_interval: float = INDEXER_POLL_INTERVAL,
        error_backoff: float = INDEXER_ERROR_BACKOFF,
        sleep: SleepFunc = asyncio.sleep,
    ):
        """
        Initialize supervisor.

        Args:
            indexer: Service running single iterations
            poll_interval: Seconds to wait after a successful iteration
            error_backoff: Seconds to wait after a failed iteration
            sleep: Awaitable sleep function
        """
        self.indexer = indexer
        self.poll_interval = poll_interval
        self.error_backoff = error_backoff
        self.sleep = sleep

        self.iterations = 0
        self.consecutive_failures = 0
        self.last_result: IterationResult | None = None
        self.last_error: Exception | None = None

    async def run_once(self) -> IterationResult | None:
        """
        Run one supervised iteration including its trailing sleep.

        Returns:
            Iteration result, or None if the iteration failed

        Raises:
            Exception: Only fatal errors
        """
        self.iterations += 1
        try:
            result = await self.indexer.run_iteration()
        except Exception as e:
            if is_fatal(e):
                logger.critical(f"[Indexer] Fatal error, stopping: {e}")
                raise

            self.consecutive_failures += 1
            self.last_error = e
            logger.exception(
                f"[Indexer] Iteration failed "
                f"(attempt {self.consecutive_failures}), "
                f"retrying in {self.error_backoff}s: {e}"
            )
            await self.sleep(self.error_backoff)
            return None

        if self.consecutive_failures:
            logger.success(
                f"[Indexer] Recovered after "
                f"{self.consecutive_failures} failed iterations"
            )
        self.consecutive_failures = 0
        self.last_result = result
        await self.sleep(self.poll_interval)
        return result

    async def run_forever(self, max_iterations: int | None = None) -> None:
        """
        Run iterations until cancelled.

        Args:
            max_iterations: Stop after this many iterations (tests only)
        """
        logger.info(
            f"[Indexer] Supervisor started "
            f"(poll={self.poll_interval}s, backoff={self.error_backoff}s, "
            f"contracts={len(self.indexer.contract_addresses)})"
        )
        while max_iterations is None or self.iterations < max_iterations:
            await self.run_once()
