"""Unit tests for the selector registry."""

import pytest
from eth_abi import decode as abi_decode
from eth_abi import encode as abi_encode
from eth_utils import keccak, to_checksum_address

from ledger_indexer.services.events import (
    DEPOSIT,
    MINT,
    WITHDRAW,
    EventDecoder,
    EventDefinition,
    EventRegistry,
    MintEvent,
    build_event_registry,
)
from tests.factories import CONTRACT_A, WALLET_A


def test_selectors_are_signature_hashes() -> None:
    """topic0 is keccak256 of the canonical signature."""
    assert DEPOSIT.selector == keccak(text="Deposit(address,uint256,uint256)")
    assert WITHDRAW.selector == keccak(
        text="Withdraw(address,uint256,uint256,uint256)"
    )
    assert len(DEPOSIT.selector) == 32


def test_default_registry_contents() -> None:
    registry = build_event_registry()

    assert registry.names() == ["Deposit", "Withdraw"]
    assert DEPOSIT.selector in registry
    assert MINT.selector not in registry


def test_legacy_mint_registration() -> None:
    registry = build_event_registry(legacy_mint_enabled=True)

    assert len(registry) == 3
    assert registry.get(MINT.selector) is MINT


def test_duplicate_selector_rejected() -> None:
    registry = EventRegistry([DEPOSIT])

    with pytest.raises(ValueError, match="already registered"):
        registry.register(DEPOSIT)


def test_lookup_of_missing_selector() -> None:
    registry = EventRegistry()

    assert registry.get(None) is None
    assert registry.get(b"\x00" * 32) is None


def test_new_event_kind_is_a_registration(log_factory) -> None:
    """A new event kind needs no change in the decoder."""

    def decode_bonus(log):
        (amount,) = abi_decode(["uint256"], log.data)
        return MintEvent(
            wallet=to_checksum_address(log.topics[1][-20:]),
            initial_balance=amount,
        )

    bonus = EventDefinition(
        name="Bonus", signature="Bonus(address,uint256)", decode=decode_bonus
    )
    registry = build_event_registry()
    registry.register(bonus)
    decoder = EventDecoder(registry)

    log = log_factory.raw(
        CONTRACT_A,
        (bonus.selector, bytes(12) + bytes.fromhex(WALLET_A[2:])),
        abi_encode(["uint256"], [42]),
        block=1,
    )

    event = decoder.decode(log)

    assert event.ledger_deltas() == [(to_checksum_address(WALLET_A), 42)]
