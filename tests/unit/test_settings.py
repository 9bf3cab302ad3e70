"""Unit tests for settings parsing and validation."""

import pytest
from pydantic import ValidationError

from ledger_indexer.config.constants import DEFAULT_CONTRACT_ADDRESSES
from ledger_indexer.config.settings import Settings, parse_contract_addresses
from tests.factories import CONTRACT_A, CONTRACT_B


def make_settings(**overrides) -> Settings:
    overrides.setdefault("database_url", "sqlite+aiosqlite:///:memory:")
    return Settings(_env_file=None, **overrides)


class TestParseContractAddresses:
    def test_keeps_order_and_checksums(self):
        raw = f"{CONTRACT_B.lower()}, {CONTRACT_A.lower()}"

        assert parse_contract_addresses(raw) == [CONTRACT_B, CONTRACT_A]

    def test_drops_duplicates_keeping_first(self):
        raw = f"{CONTRACT_A},{CONTRACT_B},{CONTRACT_A.lower()}"

        assert parse_contract_addresses(raw) == [CONTRACT_A, CONTRACT_B]

    def test_ignores_blank_entries(self):
        assert parse_contract_addresses(f" ,{CONTRACT_A},,") == [CONTRACT_A]
        assert parse_contract_addresses("") == []

    def test_rejects_invalid_entry(self):
        with pytest.raises(ValueError, match="0x1234"):
            parse_contract_addresses(f"{CONTRACT_A},0x1234")

    def test_default_list_has_shared_address_once(self):
        addresses = parse_contract_addresses(DEFAULT_CONTRACT_ADDRESSES)

        assert len(addresses) == 6
        assert addresses[0] == CONTRACT_A


class TestSettings:
    def test_defaults(self):
        settings = make_settings()

        assert settings.indexer_poll_interval == 2.0
        assert settings.indexer_error_backoff == 3.0
        assert settings.legacy_mint_enabled is False
        assert len(settings.get_contract_addresses()) == 6

    def test_custom_contract_list(self):
        settings = make_settings(contract_addresses=f"{CONTRACT_B},{CONTRACT_A}")

        assert settings.get_contract_addresses() == [CONTRACT_B, CONTRACT_A]

    def test_invalid_contract_list_rejected(self):
        with pytest.raises(ValidationError):
            make_settings(contract_addresses="not-an-address")

    def test_websocket_rpc_rejected(self):
        with pytest.raises(ValidationError):
            make_settings(rpc_url="ws://127.0.0.1:8545")

    def test_non_positive_intervals_rejected(self):
        with pytest.raises(ValidationError):
            make_settings(indexer_poll_interval=0)
        with pytest.raises(ValidationError):
            make_settings(rpc_timeout=-1)

    def test_log_level_uppercased(self):
        assert make_settings(log_level="debug").log_level == "DEBUG"
