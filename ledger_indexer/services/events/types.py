"""
Decoded event variants.

Every variant knows its own effect on the ledger through ledger_deltas(),
so the scanner applies events without branching on their kind.
"""

from dataclasses import dataclass
from typing import ClassVar

# (wallet address, signed amount in base units)
LedgerDelta = tuple[str, int]


@dataclass(slots=True, frozen=True)
class DepositEvent:
    """Deposit(address indexed user, uint256 indexed pid, uint256 amount)."""

    user: str
    pid: int
    amount: int
    name: ClassVar[str] = "Deposit"

    def ledger_deltas(self) -> list[LedgerDelta]:
        return [(self.user, self.amount)]


@dataclass(slots=True, frozen=True)
class WithdrawEvent:
    """
    Withdraw(address indexed user, uint256 indexed pid, uint256 amount, uint256 tax).

    Only `amount` leaves the user's tracked balance; `tax` is decoded and
    reported but stays with the contract.
    """

    user: str
    pid: int
    amount: int
    tax: int
    name: ClassVar[str] = "Withdraw"

    def ledger_deltas(self) -> list[LedgerDelta]:
        return [(self.user, -self.amount)]


@dataclass(slots=True, frozen=True)
class MintEvent:
    """Legacy Mint(address indexed wallet, uint256 initialBalance)."""

    wallet: str
    initial_balance: int
    name: ClassVar[str] = "Mint"

    def ledger_deltas(self) -> list[LedgerDelta]:
        return [(self.wallet, self.initial_balance)]


@dataclass(slots=True, frozen=True)
class UnknownEvent:
    """Log whose selector is not registered."""

    selector: bytes | None
    name: ClassVar[str] = "Unknown"

    def ledger_deltas(self) -> list[LedgerDelta]:
        return []


DecodedEvent = DepositEvent | WithdrawEvent | MintEvent | UnknownEvent
