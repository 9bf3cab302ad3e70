"""
Event Decoder.

Classifies a raw log by its first topic and decodes its fields.
"""

from ledger_indexer.services.chain.types import RawLogEntry
from ledger_indexer.utils.exceptions import DecodeError

from .registry import EventRegistry
from .types import DecodedEvent, UnknownEvent


class EventDecoder:
    """Registry-driven log decoder."""

    def __init__(self, registry: EventRegistry):
        self.registry = registry

    def decode(self, log: RawLogEntry) -> DecodedEvent:
        """
        Decode a log into a typed event.

        Logs without topics or with an unregistered selector are expected
        (contracts emit other events too) and yield UnknownEvent.

        Args:
            log: Raw log entry

        Returns:
            Typed event or UnknownEvent

        Raises:
            DecodeError: If the selector is known but the log is malformed
        """
        definition = self.registry.get(log.selector)
        if definition is None:
            return UnknownEvent(selector=log.selector)

        try:
            return definition.decode(log)
        except DecodeError:
            raise
        except (ValueError, IndexError, TypeError) as e:
            raise DecodeError(f"{definition.name}: {e}") from e
