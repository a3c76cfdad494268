"""
In-process host for the registry.

Supplies what a blockchain runtime gives a contract: the caller identity,
a flat key-value storage with all-or-nothing commits and a log sink.
"""

from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional

from loguru import logger


class MemoryStorage:
    """Flat ``bytes -> bytes`` key-value storage."""

    def __init__(self):
        self._data: Dict[bytes, bytes] = {}

    def read(self, key: bytes) -> Optional[bytes]:
        return self._data.get(key)

    def write(self, key: bytes, value: bytes) -> Optional[bytes]:
        prev = self._data.get(key)
        self._data[key] = value
        return prev

    def remove(self, key: bytes) -> Optional[bytes]:
        return self._data.pop(key, None)

    def has_key(self, key: bytes) -> bool:
        return key in self._data

    def keys_with_prefix(self, prefix: bytes) -> List[bytes]:
        return sorted(k for k in self._data if k.startswith(prefix))

    def snapshot(self) -> Dict[bytes, bytes]:
        return dict(self._data)

    def __len__(self):
        return len(self._data)

    @contextmanager
    def transaction(self) -> Iterator["MemoryStorage"]:
        """
        Run a block of writes as one unit.

        Any exception raised inside the block restores the storage to the
        state it had on entry and is re-raised.
        """
        saved = self.snapshot()
        try:
            yield self
        except Exception:
            logger.debug("Storage rollback")
            self._data = saved
            raise


class Environment:
    """
    Execution context passed to the contract.

    Args:
        predecessor_account_id: Account calling the contract
        storage: Backing storage. A new empty MemoryStorage if None.

    `logs` is the log sink of the current call, the contract clears it when a
    write call starts.
    """

    def __init__(
        self,
        predecessor_account_id: str = None,
        storage: MemoryStorage = None,
    ):
        self.predecessor_account_id = predecessor_account_id
        self.storage = storage if storage is not None else MemoryStorage()
        self.logs: List[str] = []

    def log(self, message: str):
        self.logs.append(message)
