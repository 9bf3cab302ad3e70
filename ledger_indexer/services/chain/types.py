"""Chain value types."""

from dataclasses import dataclass, field


@dataclass(slots=True, frozen=True)
class BlockRange:
    """Inclusive block range [from_block, to_block]."""

    from_block: int
    to_block: int

    def __post_init__(self) -> None:
        if self.from_block < 0 or self.to_block < 0:
            raise ValueError(
                f"Block numbers must be >= 0: {self.from_block}-{self.to_block}"
            )
        if self.from_block > self.to_block:
            raise ValueError(
                f"from_block {self.from_block} > to_block {self.to_block}"
            )

    def span(self) -> int:
        return self.to_block - self.from_block + 1

    def __str__(self) -> str:
        return f"{self.from_block}-{self.to_block}"


@dataclass(slots=True, frozen=True)
class RawLogEntry:
    """A log as returned by eth_getLogs, normalized to bytes and ints."""

    contract_address: str
    topics: tuple[bytes, ...]
    data: bytes
    block_number: int
    log_index: int = 0
    tx_hash: str | None = field(default=None, compare=False)

    @property
    def selector(self) -> bytes | None:
        """topic0, or None for anonymous logs."""
        return self.topics[0] if self.topics else None
