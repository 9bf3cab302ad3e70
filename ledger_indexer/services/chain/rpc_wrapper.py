"""
RPC Wrapper with Timeout.

Bounds every chain RPC call and maps failures to ChainUnavailable.
"""

import asyncio
from collections.abc import Awaitable
from typing import TypeVar

from loguru import logger

from ledger_indexer.config.constants import RPC_TIMEOUT
from ledger_indexer.utils.exceptions import ChainUnavailable

T = TypeVar("T")


async def with_timeout(
    coro: Awaitable[T],
    timeout: float = RPC_TIMEOUT,
    operation_name: str = "RPC call",
) -> T:
    """
    Execute RPC coroutine with timeout.

    Args:
        coro: Coroutine to execute
        timeout: Timeout in seconds
        operation_name: Operation name for logging

    Returns:
        Result of the coroutine

    Raises:
        ChainUnavailable: If the call times out or fails
    """
    try:
        return await asyncio.wait_for(coro, timeout=timeout)
    except TimeoutError as e:
        error_msg = f"{operation_name} timed out after {timeout}s"
        logger.error(f"[Chain] {error_msg}")
        raise ChainUnavailable(error_msg) from e
    except ChainUnavailable:
        raise
    except Exception as e:
        raise ChainUnavailable(f"{operation_name} failed: {e}") from e
