"""
User repository.

Data access layer for the per-wallet balance ledger.
"""

from datetime import UTC, datetime
from decimal import Decimal

from eth_utils import to_checksum_address
from sqlalchemy.ext.asyncio import AsyncSession

from ledger_indexer.models.user import User
from ledger_indexer.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for ledger entries."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository."""
        super().__init__(User, session)

    async def get_by_wallet(self, wallet_address: str) -> User | None:
        """
        Get ledger entry by wallet.

        Args:
            wallet_address: Wallet address (any case)

        Returns:
            User or None if the wallet was never observed
        """
        return await self.get_by_pk(to_checksum_address(wallet_address))

    async def get_balance(self, wallet_address: str) -> Decimal | None:
        """Get wallet balance in base units, or None if unknown."""
        user = await self.get_by_wallet(wallet_address)
        return user.balance if user else None

    async def apply_delta(
        self, wallet_address: str, signed_amount: int
    ) -> User:
        """
        Add a signed amount to a wallet balance.

        Creates the row with balance = signed_amount on first sight.
        NOT idempotent: applying the same delta twice changes the balance
        twice. Callers must apply each log once per committed transaction.

        Args:
            wallet_address: Wallet address (any case)
            signed_amount: Delta in base units, negative for withdrawals

        Returns:
            Updated user
        """
        wallet = to_checksum_address(wallet_address)
        user = await self.get_by_pk(wallet, for_update=True)

        if user is None:
            return await self.create(
                wallet_address=wallet,
                balance=Decimal(signed_amount),
            )

        # int arithmetic: Decimal addition would round at 28 digits
        user.balance = Decimal(int(user.balance) + signed_amount)
        user.updated_at = datetime.now(UTC)
        await self.session.flush()
        return user
