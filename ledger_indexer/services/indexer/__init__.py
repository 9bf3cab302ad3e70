"""
Ledger Indexer Service.

Checkpointed indexing of game contract events into the balance ledger.

Key features:
- Resumes from a durable checkpoint after restart
- Ledger deltas and checkpoint advance commit atomically per iteration
- Blunt restart-from-zero when a development chain is reset
- Supervisor loop with injectable sleep
"""

from .core import LedgerIndexerService
from .scanning_mixin import ScanningMixin
from .supervisor import IndexerSupervisor
from .types import IterationOutcome, IterationResult, ScanStats

__all__ = [
    "IndexerSupervisor",
    "IterationOutcome",
    "IterationResult",
    "LedgerIndexerService",
    "ScanStats",
    "ScanningMixin",
]
