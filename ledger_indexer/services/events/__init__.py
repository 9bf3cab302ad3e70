"""
Event decoding.

Selector registry, event definitions and typed event variants.
"""

from .decoder import EventDecoder
from .definitions import DEPOSIT, MINT, WITHDRAW, build_event_registry
from .registry import EventDefinition, EventRegistry
from .types import (
    DecodedEvent,
    DepositEvent,
    LedgerDelta,
    MintEvent,
    UnknownEvent,
    WithdrawEvent,
)

__all__ = [
    "DEPOSIT",
    "MINT",
    "WITHDRAW",
    "DecodedEvent",
    "DepositEvent",
    "EventDecoder",
    "EventDefinition",
    "EventRegistry",
    "LedgerDelta",
    "MintEvent",
    "UnknownEvent",
    "WithdrawEvent",
    "build_event_registry",
]
