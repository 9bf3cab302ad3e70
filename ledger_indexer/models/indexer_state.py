"""
Indexer State model.

Durable checkpoint of the indexing loop.
"""

from datetime import UTC, datetime

from sqlalchemy import BigInteger, CheckConstraint, DateTime, Integer
from sqlalchemy.orm import Mapped, mapped_column

from ledger_indexer.models.base import Base


class IndexerState(Base):
    """
    Singleton checkpoint row (id = 1).

    Used to:
    - Resume indexing after restart
    - Know the last block whose events are fully applied to the ledger
    """

    __tablename__ = "indexer_state"
    __table_args__ = (
        CheckConstraint("id = 1", name="check_indexer_state_singleton"),
    )

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=False
    )

    last_processed_block: Mapped[int] = mapped_column(
        BigInteger, nullable=False, default=0
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
        nullable=False,
    )

    def __repr__(self) -> str:
        return (
            f"<IndexerState(id={self.id}, "
            f"last_processed_block={self.last_processed_block})>"
        )
