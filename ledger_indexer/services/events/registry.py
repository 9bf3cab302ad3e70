"""
Event Registry.

Maps event selectors (topic0) to decoding definitions. Enabling a new
event kind is a registration, not a new branch in the scanner.
"""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

from eth_utils import keccak

from ledger_indexer.services.chain.types import RawLogEntry

from .types import DecodedEvent


@dataclass(slots=True, frozen=True)
class EventDefinition:
    """
    Known event kind.

    Attributes:
        name: Event name used in logs
        signature: Canonical ABI signature, e.g. "Deposit(address,uint256,uint256)"
        decode: Builds the typed event from a raw log; raises DecodeError
    """

    name: str
    signature: str
    decode: Callable[[RawLogEntry], DecodedEvent] = field(compare=False)

    @property
    def selector(self) -> bytes:
        """keccak256 of the signature (topic0)."""
        return keccak(text=self.signature)


class EventRegistry:
    """Selector -> EventDefinition table."""

    def __init__(self, definitions: list[EventDefinition] | None = None):
        self._by_selector: dict[bytes, EventDefinition] = {}
        for definition in definitions or []:
            self.register(definition)

    def register(self, definition: EventDefinition) -> None:
        """
        Register an event kind.

        Args:
            definition: Event definition

        Raises:
            ValueError: If another definition already owns the selector
        """
        selector = definition.selector
        existing = self._by_selector.get(selector)
        if existing is not None:
            raise ValueError(
                f"Selector 0x{selector.hex()} already registered "
                f"for {existing.name}"
            )
        self._by_selector[selector] = definition

    def get(self, selector: bytes | None) -> EventDefinition | None:
        if selector is None:
            return None
        return self._by_selector.get(bytes(selector))

    def __contains__(self, selector: object) -> bool:
        return isinstance(selector, bytes) and selector in self._by_selector

    def __iter__(self) -> Iterator[EventDefinition]:
        return iter(self._by_selector.values())

    def __len__(self) -> int:
        return len(self._by_selector)

    def names(self) -> list[str]:
        return [definition.name for definition in self]
