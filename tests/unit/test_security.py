"""Unit tests for log masking helpers."""

import pytest

from ledger_indexer.utils.security import mask_address, mask_database_url


@pytest.mark.parametrize(
    ("address", "expected"),
    [
        ("0x1234567890abcdef1234567890abcdef12345678", "0x1234...5678"),
        (None, "***"),
        ("", "***"),
        ("0x12", "***"),
    ],
)
def test_mask_address(address, expected):
    assert mask_address(address) == expected


def test_mask_database_url_hides_password():
    url = "postgresql+asyncpg://app:secret@db:5432/game"

    assert mask_database_url(url) == "postgresql+asyncpg://app:***@db:5432/game"


def test_mask_database_url_without_password():
    url = "sqlite+aiosqlite:///./ledger.db"

    assert mask_database_url(url) == url
