"""
Chain Client.

Thin accessor to the chain JSON-RPC surface used by the indexer:
current height and log retrieval for an address/block-range filter.
No caching; every call re-queries the node.
"""

from collections.abc import Mapping
from typing import Any

from eth_utils import to_bytes, to_checksum_address
from loguru import logger
from web3 import AsyncHTTPProvider, AsyncWeb3

from ledger_indexer.config.constants import RPC_TIMEOUT

from .rpc_wrapper import with_timeout
from .types import BlockRange, RawLogEntry


def _as_bytes(value: Any) -> bytes:
    if isinstance(value, str):
        return to_bytes(hexstr=value)
    return bytes(value)


def _as_int(value: Any) -> int:
    if isinstance(value, str):
        return int(value, 16) if value.startswith("0x") else int(value)
    return int(value)


def to_raw_log(log: Mapping[str, Any]) -> RawLogEntry:
    """
    Normalize an eth_getLogs entry.

    Accepts both web3 AttributeDicts (HexBytes/int fields) and raw JSON-RPC
    dicts (hex strings).
    """
    tx_hash = log.get("transactionHash")
    return RawLogEntry(
        contract_address=to_checksum_address(log["address"]),
        topics=tuple(_as_bytes(t) for t in log.get("topics", [])),
        data=_as_bytes(log.get("data") or b""),
        block_number=_as_int(log["blockNumber"]),
        log_index=_as_int(log.get("logIndex", 0)),
        tx_hash="0x" + _as_bytes(tx_hash).hex() if tx_hash is not None else None,
    )


class ChainClient:
    """
    Chain RPC accessor.

    Every call is bounded by `timeout`; transport and RPC failures surface
    as ChainUnavailable so the indexing loop can back off and retry.
    """

    def __init__(self, w3: AsyncWeb3, timeout: float = RPC_TIMEOUT):
        """
        Initialize client.

        Args:
            w3: AsyncWeb3 instance (or compatible object)
            timeout: Per-call timeout in seconds
        """
        self.w3 = w3
        self.timeout = timeout

    @classmethod
    def from_url(cls, rpc_url: str, timeout: float = RPC_TIMEOUT) -> "ChainClient":
        """Create client for an HTTP JSON-RPC endpoint."""
        w3 = AsyncWeb3(AsyncHTTPProvider(rpc_url))
        logger.info(f"[Chain] Using RPC endpoint {rpc_url}")
        return cls(w3, timeout=timeout)

    async def current_height(self) -> int:
        """
        Get the latest block number.

        Returns:
            Current chain height

        Raises:
            ChainUnavailable: On network/RPC failure or timeout
        """
        height = await with_timeout(
            self._block_number(),
            timeout=self.timeout,
            operation_name="eth_blockNumber",
        )
        return int(height)

    async def _block_number(self) -> int:
        return await self.w3.eth.block_number

    async def fetch_logs(
        self,
        contract_address: str,
        block_range: BlockRange,
    ) -> list[RawLogEntry]:
        """
        Get every log emitted by a contract in a block range.

        No topic filter is applied, so all event kinds are returned;
        classification is left to the decoder. Order is the node's native
        order (ascending block, then log index).

        Args:
            contract_address: Contract to query
            block_range: Inclusive block range

        Returns:
            Normalized logs

        Raises:
            ChainUnavailable: On network/RPC failure or timeout
        """
        filter_params = {
            "address": to_checksum_address(contract_address),
            "fromBlock": block_range.from_block,
            "toBlock": block_range.to_block,
        }
        logs = await with_timeout(
            self.w3.eth.get_logs(filter_params),
            timeout=self.timeout,
            operation_name=f"eth_getLogs {contract_address} {block_range}",
        )
        return [to_raw_log(log) for log in logs]
