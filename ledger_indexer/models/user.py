"""
User model.

Ledger entry for a wallet observed in deposit/withdraw events.
"""

from datetime import UTC, datetime
from decimal import Decimal

from sqlalchemy import DateTime, Text
from sqlalchemy.orm import Mapped, mapped_column

from ledger_indexer.models.base import Base
from ledger_indexer.models.types import BaseUnitAmount


class User(Base):
    """
    Per-wallet running balance.

    The balance is the sum of every signed delta applied to the wallet,
    in base units (no decimal scaling). Rows are created on the first
    event for a wallet and never deleted by the indexer.
    """

    __tablename__ = "users"

    wallet_address: Mapped[str] = mapped_column(Text, primary_key=True)

    balance: Mapped[Decimal] = mapped_column(
        BaseUnitAmount(), nullable=False, default=Decimal("0")
    )

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<User(wallet_address={self.wallet_address!r}, balance={self.balance})>"
