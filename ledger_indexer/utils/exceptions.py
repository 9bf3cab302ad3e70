"""
Exception handling utilities.

Defines categorized exception types for the indexing loop.
"""


class IndexerError(Exception):
    """Base exception for indexer errors."""

    pass


class ChainUnavailable(IndexerError):
    """Raised when the chain RPC is unreachable, errors or times out."""

    pass


class CheckpointMissing(IndexerError):
    """Raised when the singleton indexer_state row does not exist."""

    pass


class DecodeError(IndexerError):
    """Raised when a log matches a known selector but cannot be decoded."""

    pass


# Exception categories based on handling strategy

# Must stop the process - provisioning defects, not runtime conditions
FATAL_ERRORS = (
    CheckpointMissing,
)


def is_fatal(exc: BaseException) -> bool:
    """
    Check if exception must terminate the indexing loop.

    Args:
        exc: Exception to check

    Returns:
        True if the supervisor must not retry
    """
    return isinstance(exc, FATAL_ERRORS)
