"""
Application settings.

Loads configuration from environment variables using pydantic-settings.
"""

from eth_utils import is_address, to_checksum_address
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ledger_indexer.config.constants import (
    DEFAULT_CONTRACT_ADDRESSES,
    DEFAULT_RPC_URL,
    INDEXER_ERROR_BACKOFF,
    INDEXER_POLL_INTERVAL,
    LOG_FILE,
    RPC_TIMEOUT,
)


def parse_contract_addresses(raw: str) -> list[str]:
    """
    Parse a comma-separated contract address list.

    Blank entries are ignored, addresses are checksummed and duplicates
    are dropped while keeping the first occurrence.

    Args:
        raw: Comma-separated addresses

    Returns:
        Ordered list of unique checksummed addresses

    Raises:
        ValueError: If an entry is not a valid address
    """
    result: list[str] = []
    seen: set[str] = set()
    for item in raw.split(","):
        item_stripped = item.strip()
        if not item_stripped:
            continue
        if not is_address(item_stripped):
            raise ValueError(f"Invalid contract address: {item_stripped}")
        checksummed = to_checksum_address(item_stripped)
        if checksummed in seen:
            continue
        seen.add(checksummed)
        result.append(checksummed)
    return result


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    database_url: str
    database_echo: bool = False

    # Blockchain RPC
    rpc_url: str = DEFAULT_RPC_URL
    rpc_timeout: float = Field(
        default=RPC_TIMEOUT, gt=0, description="Per-call RPC timeout in seconds"
    )

    # Contracts to scan, comma-separated, scanned in the given order
    contract_addresses: str = DEFAULT_CONTRACT_ADDRESSES

    # Indexing loop
    indexer_poll_interval: float = Field(
        default=INDEXER_POLL_INTERVAL,
        gt=0,
        description="Seconds between successful indexing iterations",
    )
    indexer_error_backoff: float = Field(
        default=INDEXER_ERROR_BACKOFF,
        gt=0,
        description="Seconds to wait after a failed iteration",
    )

    # Event handling
    legacy_mint_enabled: bool = Field(
        default=False,
        description="Apply legacy Mint(wallet, initialBalance) events to the ledger",
    )

    # Application
    environment: str = "development"
    log_level: str = "INFO"
    log_file: str | None = LOG_FILE

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("rpc_url")
    @classmethod
    def validate_rpc_url(cls, v: str) -> str:
        """Only HTTP(S) JSON-RPC endpoints are supported."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(
                "RPC_URL must be an http:// or https:// JSON-RPC endpoint"
            )
        return v

    @field_validator("contract_addresses")
    @classmethod
    def validate_contract_addresses(cls, v: str) -> str:
        """Reject malformed addresses at startup instead of mid-scan."""
        parse_contract_addresses(v)
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()

    def get_contract_addresses(self) -> list[str]:
        """Return the ordered, de-duplicated contract address list."""
        return parse_contract_addresses(self.contract_addresses)


settings = Settings()
