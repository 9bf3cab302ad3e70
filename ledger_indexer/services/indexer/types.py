"""Indexing loop result types."""

from dataclasses import dataclass
from enum import StrEnum

from ledger_indexer.services.chain.types import BlockRange


class IterationOutcome(StrEnum):
    """How an iteration ended."""

    SKIPPED = "skipped"  # no new blocks
    RESET = "reset"  # chain height went below checkpoint
    SCANNED = "scanned"  # range applied and checkpoint advanced


@dataclass(slots=True)
class ScanStats:
    """Counters for one scanned range."""

    contracts_scanned: int = 0
    logs_seen: int = 0
    events_applied: int = 0
    unknown_skipped: int = 0
    decode_errors: int = 0

    def merge(self, other: "ScanStats") -> None:
        self.contracts_scanned += other.contracts_scanned
        self.logs_seen += other.logs_seen
        self.events_applied += other.events_applied
        self.unknown_skipped += other.unknown_skipped
        self.decode_errors += other.decode_errors


@dataclass(slots=True, frozen=True)
class IterationResult:
    """Outcome of a single indexing iteration."""

    outcome: IterationOutcome
    current_height: int
    last_processed_block: int
    block_range: BlockRange | None = None
    stats: ScanStats | None = None

    @property
    def events_applied(self) -> int:
        return self.stats.events_applied if self.stats else 0
