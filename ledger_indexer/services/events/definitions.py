"""
Event definitions.

Fixed ABI layouts of the events the game contracts emit:

    event Deposit(address indexed user, uint256 indexed pid, uint256 amount);
    event Withdraw(address indexed user, uint256 indexed pid,
                   uint256 amount, uint256 tax);
    event Mint(address indexed wallet, uint256 initialBalance);  // legacy
"""

from eth_abi import decode as abi_decode
from eth_abi.exceptions import DecodingError
from eth_utils import to_checksum_address

from ledger_indexer.services.chain.types import RawLogEntry
from ledger_indexer.utils.exceptions import DecodeError

from .registry import EventDefinition, EventRegistry
from .types import DepositEvent, MintEvent, WithdrawEvent

TOPIC_SIZE = 32


def _require_topics(log: RawLogEntry, count: int, event_name: str) -> None:
    if len(log.topics) < count:
        raise DecodeError(
            f"{event_name} expects {count} topics, got {len(log.topics)}"
        )
    for topic in log.topics[:count]:
        if len(topic) != TOPIC_SIZE:
            raise DecodeError(
                f"{event_name} topic has {len(topic)} bytes, expected {TOPIC_SIZE}"
            )


def _topic_address(topic: bytes) -> str:
    return to_checksum_address(topic[-20:])


def _topic_uint(topic: bytes) -> int:
    return int.from_bytes(topic, "big")


def _decode_data(log: RawLogEntry, types: list[str], event_name: str) -> tuple:
    try:
        return abi_decode(types, log.data)
    except DecodingError as e:
        raise DecodeError(f"{event_name} data: {e}") from e


def decode_deposit(log: RawLogEntry) -> DepositEvent:
    _require_topics(log, 3, "Deposit")
    (amount,) = _decode_data(log, ["uint256"], "Deposit")
    return DepositEvent(
        user=_topic_address(log.topics[1]),
        pid=_topic_uint(log.topics[2]),
        amount=amount,
    )


def decode_withdraw(log: RawLogEntry) -> WithdrawEvent:
    _require_topics(log, 3, "Withdraw")
    amount, tax = _decode_data(log, ["uint256", "uint256"], "Withdraw")
    return WithdrawEvent(
        user=_topic_address(log.topics[1]),
        pid=_topic_uint(log.topics[2]),
        amount=amount,
        tax=tax,
    )


def decode_mint(log: RawLogEntry) -> MintEvent:
    _require_topics(log, 2, "Mint")
    (initial_balance,) = _decode_data(log, ["uint256"], "Mint")
    return MintEvent(
        wallet=_topic_address(log.topics[1]),
        initial_balance=initial_balance,
    )


DEPOSIT = EventDefinition(
    name="Deposit",
    signature="Deposit(address,uint256,uint256)",
    decode=decode_deposit,
)

WITHDRAW = EventDefinition(
    name="Withdraw",
    signature="Withdraw(address,uint256,uint256,uint256)",
    decode=decode_withdraw,
)

MINT = EventDefinition(
    name="Mint",
    signature="Mint(address,uint256)",
    decode=decode_mint,
)


def build_event_registry(legacy_mint_enabled: bool = False) -> EventRegistry:
    """
    Build the registry of event kinds applied to the ledger.

    Args:
        legacy_mint_enabled: Also apply legacy Mint events

    Returns:
        Registry with Deposit and Withdraw (and Mint when enabled)
    """
    registry = EventRegistry([DEPOSIT, WITHDRAW])
    if legacy_mint_enabled:
        registry.register(MINT)
    return registry
