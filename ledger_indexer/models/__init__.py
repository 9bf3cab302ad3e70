"""
Database models.

Exports all SQLAlchemy models for easy imports.
"""

from ledger_indexer.models.base import Base
from ledger_indexer.models.indexer_state import IndexerState
from ledger_indexer.models.types import BaseUnitAmount
from ledger_indexer.models.user import User

__all__ = [
    "Base",
    "BaseUnitAmount",
    "IndexerState",
    "User",
]
