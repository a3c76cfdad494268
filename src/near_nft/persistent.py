"""Key-prefixed persistent collections on top of the flat storage."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Generic, Iterator, Optional, TypeVar

import base58

from near_nft import constants
from near_nft.environment import MemoryStorage
from near_nft.utils import hash_account_id

V = TypeVar("V")


class StorageKeyTag(IntEnum):
    TOKENS_PER_OWNER = constants.TOKENS_PER_OWNER_TAG
    TOKEN_PER_OWNER_INNER = constants.TOKEN_PER_OWNER_INNER_TAG
    TOKENS_BY_ID = constants.TOKENS_BY_ID_TAG


@dataclass(frozen=True)
class StorageKey:
    """
    Storage prefix of one collection.

    Per-owner token sets are keyed by the sha256 of the owner id, so every
    set gets its own fixed-length namespace that can't overlap another
    owner's or a top level collection's.
    """

    tag: StorageKeyTag
    account_id_hash: bytes = b""

    @classmethod
    def tokens_per_owner(cls) -> "StorageKey":
        return cls(StorageKeyTag.TOKENS_PER_OWNER)

    @classmethod
    def tokens_by_id(cls) -> "StorageKey":
        return cls(StorageKeyTag.TOKENS_BY_ID)

    @classmethod
    def token_per_owner_inner(cls, account_id: str) -> "StorageKey":
        return cls(StorageKeyTag.TOKEN_PER_OWNER_INNER, hash_account_id(account_id))

    def to_bytes(self) -> bytes:
        return bytes([self.tag]) + self.account_id_hash

    def __str__(self):
        return base58.b58encode(self.to_bytes()).decode()


class LookupMap(Generic[V]):
    """
    Map stored under ``prefix || key``.

    Args:
        prefix: Storage prefix of the map
        storage: Backing storage
        serialize: Value to bytes
        deserialize: Bytes to value
    """

    def __init__(
        self,
        prefix: bytes,
        storage: MemoryStorage,
        serialize: Callable[[V], bytes],
        deserialize: Callable[[bytes], V],
    ):
        self.prefix = prefix
        self._storage = storage
        self._serialize = serialize
        self._deserialize = deserialize

    def _key(self, key: str) -> bytes:
        return self.prefix + key.encode("utf-8")

    def get(self, key: str) -> Optional[V]:
        raw = self._storage.read(self._key(key))
        if raw is None:
            return None
        return self._deserialize(raw)

    def insert(self, key: str, value: V) -> Optional[V]:
        prev = self._storage.write(self._key(key), self._serialize(value))
        if prev is None:
            return None
        return self._deserialize(prev)

    def remove(self, key: str) -> Optional[V]:
        prev = self._storage.remove(self._key(key))
        if prev is None:
            return None
        return self._deserialize(prev)

    def __contains__(self, key: str) -> bool:
        return self._storage.has_key(self._key(key))


class UnorderedSet:
    """
    Set of strings, one storage entry per element under ``prefix || e`` and
    the element count under ``prefix || l``. The count entry is removed with
    the last element.
    """

    def __init__(self, prefix: bytes, storage: MemoryStorage):
        self.prefix = prefix
        self._storage = storage
        self._element_prefix = prefix + constants.SET_ELEMENT_MARKER
        self._length_key = prefix + constants.SET_LENGTH_MARKER

    def _key(self, element: str) -> bytes:
        return self._element_prefix + element.encode("utf-8")

    def _set_length(self, length: int):
        if length:
            self._storage.write(self._length_key, str(length).encode())
        else:
            self._storage.remove(self._length_key)

    def insert(self, element: str) -> bool:
        if self._storage.write(self._key(element), b"") is not None:
            return False
        self._set_length(len(self) + 1)
        return True

    def remove(self, element: str) -> bool:
        if self._storage.remove(self._key(element)) is None:
            return False
        self._set_length(len(self) - 1)
        return True

    def __contains__(self, element: str) -> bool:
        return self._storage.has_key(self._key(element))

    def __iter__(self) -> Iterator[str]:
        size = len(self._element_prefix)
        for key in self._storage.keys_with_prefix(self._element_prefix):
            yield key[size:].decode("utf-8")

    def __len__(self):
        raw = self._storage.read(self._length_key)
        return int(raw) if raw else 0

    def is_empty(self) -> bool:
        return len(self) == 0

    def to_set(self) -> set:
        return set(self)
