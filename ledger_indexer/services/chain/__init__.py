"""
Chain access.

JSON-RPC client and normalized chain value types.
"""

from .client import ChainClient, to_raw_log
from .rpc_wrapper import with_timeout
from .types import BlockRange, RawLogEntry

__all__ = [
    "BlockRange",
    "ChainClient",
    "RawLogEntry",
    "to_raw_log",
    "with_timeout",
]
