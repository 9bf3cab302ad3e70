"""Test doubles and builders shared by unit and integration tests."""

from eth_abi import encode as abi_encode
from eth_utils import keccak

from ledger_indexer.services.chain.types import BlockRange, RawLogEntry
from ledger_indexer.services.events.definitions import DEPOSIT, MINT, WITHDRAW
from ledger_indexer.utils.exceptions import ChainUnavailable

# Local development chain deployments
CONTRACT_A = "0x5FbDB2315678afecb367f032d93F642f64180aa3"
CONTRACT_B = "0xe7f1725E7734CE288F8367e1Bb143E90bb3F0512"

# Wallets (lowercase; repositories checksum on the way in)
WALLET_A = "0x" + "a1" * 20
WALLET_B = "0x" + "b2" * 20

TRANSFER_SELECTOR = keccak(text="Transfer(address,address,uint256)")


def _address_topic(address: str) -> bytes:
    return bytes(12) + bytes.fromhex(address[2:])


def _uint_topic(value: int) -> bytes:
    return value.to_bytes(32, "big")


class LogFactory:
    """Builds RawLogEntry objects with real ABI encoding."""

    def __init__(self) -> None:
        self._log_index = 0

    def _next_index(self) -> int:
        self._log_index += 1
        return self._log_index

    def raw(
        self,
        contract: str,
        topics: tuple[bytes, ...],
        data: bytes,
        block: int,
    ) -> RawLogEntry:
        return RawLogEntry(
            contract_address=contract,
            topics=topics,
            data=data,
            block_number=block,
            log_index=self._next_index(),
        )

    def deposit(
        self, contract: str, user: str, pid: int, amount: int, block: int
    ) -> RawLogEntry:
        return self.raw(
            contract,
            (DEPOSIT.selector, _address_topic(user), _uint_topic(pid)),
            abi_encode(["uint256"], [amount]),
            block,
        )

    def withdraw(
        self,
        contract: str,
        user: str,
        pid: int,
        amount: int,
        tax: int,
        block: int,
    ) -> RawLogEntry:
        return self.raw(
            contract,
            (WITHDRAW.selector, _address_topic(user), _uint_topic(pid)),
            abi_encode(["uint256", "uint256"], [amount, tax]),
            block,
        )

    def mint(
        self, contract: str, wallet: str, initial_balance: int, block: int
    ) -> RawLogEntry:
        return self.raw(
            contract,
            (MINT.selector, _address_topic(wallet)),
            abi_encode(["uint256"], [initial_balance]),
            block,
        )

    def transfer(
        self, contract: str, sender: str, recipient: str, value: int, block: int
    ) -> RawLogEntry:
        return self.raw(
            contract,
            (
                TRANSFER_SELECTOR,
                _address_topic(sender),
                _address_topic(recipient),
            ),
            abi_encode(["uint256"], [value]),
            block,
        )


class FakeChainClient:
    """In-memory chain with scripted height, logs and failures."""

    def __init__(self, height: int = 0) -> None:
        self.height = height
        self.logs: dict[str, list[RawLogEntry]] = {}
        self.failing_contracts: set[str] = set()
        self.height_error: Exception | None = None
        self.fetch_calls: list[tuple[str, BlockRange]] = []

    def add_log(self, log: RawLogEntry) -> None:
        self.logs.setdefault(log.contract_address, []).append(log)

    async def current_height(self) -> int:
        if self.height_error is not None:
            raise self.height_error
        return self.height

    async def fetch_logs(
        self, contract_address: str, block_range: BlockRange
    ) -> list[RawLogEntry]:
        self.fetch_calls.append((contract_address, block_range))
        if contract_address in self.failing_contracts:
            raise ChainUnavailable(f"eth_getLogs {contract_address} failed")
        return [
            log
            for log in self.logs.get(contract_address, [])
            if block_range.from_block <= log.block_number <= block_range.to_block
        ]
