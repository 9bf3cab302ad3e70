"""
Ledger Indexer Scanning Mixin.

Fetches, decodes and applies the logs of every configured contract
for a block range.
"""

from loguru import logger

from ledger_indexer.repositories.user_repository import UserRepository
from ledger_indexer.services.chain.types import BlockRange, RawLogEntry
from ledger_indexer.services.events.types import WithdrawEvent
from ledger_indexer.utils.exceptions import DecodeError
from ledger_indexer.utils.security import mask_address

from .types import ScanStats


class ScanningMixin:
    """Mixin providing range scanning functionality."""

    async def scan_range(
        self,
        block_range: BlockRange,
        user_repo: UserRepository,
    ) -> ScanStats:
        """
        Apply all events of all contracts in a block range.

        Contracts are processed strictly one after another in configured
        order. Any fetch or store failure propagates; decode failures only
        skip the offending log.

        Args:
            block_range: Inclusive range to scan
            user_repo: Ledger repository bound to the iteration's session

        Returns:
            Aggregated scan counters
        """
        stats = ScanStats()

        for contract_address in self.contract_addresses:
            logs = await self.chain.fetch_logs(contract_address, block_range)
            contract_stats = await self._apply_logs(
                contract_address, logs, user_repo
            )
            stats.merge(contract_stats)

        return stats

    async def _apply_logs(
        self,
        contract_address: str,
        logs: list[RawLogEntry],
        user_repo: UserRepository,
    ) -> ScanStats:
        """
        Decode and apply one contract's logs in native order.

        Args:
            contract_address: Contract the logs were fetched for
            logs: Logs in chain order
            user_repo: Ledger repository

        Returns:
            Counters for this contract
        """
        stats = ScanStats(contracts_scanned=1, logs_seen=len(logs))

        for log in logs:
            try:
                event = self.decoder.decode(log)
            except DecodeError as e:
                stats.decode_errors += 1
                logger.warning(
                    f"[Indexer] Skipping undecodable log on {contract_address} "
                    f"block={log.block_number} index={log.log_index}: {e}"
                )
                continue

            deltas = event.ledger_deltas()
            if not deltas:
                stats.unknown_skipped += 1
                continue

            for wallet, signed_amount in deltas:
                await user_repo.apply_delta(wallet, signed_amount)

            stats.events_applied += 1
            self._log_event(contract_address, log, event)

        if logs:
            logger.debug(
                f"[Indexer] {contract_address}: {stats.logs_seen} logs, "
                f"{stats.events_applied} applied, "
                f"{stats.unknown_skipped} unknown, "
                f"{stats.decode_errors} undecodable"
            )

        return stats

    @staticmethod
    def _log_event(contract_address: str, log: RawLogEntry, event) -> None:
        # tax is reported only; it is not part of the ledger delta
        tax = f", tax={event.tax}" if isinstance(event, WithdrawEvent) else ""
        wallet, signed_amount = event.ledger_deltas()[0]
        logger.info(
            f"[Indexer] {event.name} on {contract_address} "
            f"block={log.block_number}: wallet={mask_address(wallet)}, "
            f"delta={signed_amount}{tax}"
        )
