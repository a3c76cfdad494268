from typing import Optional, Set

from loguru import logger

from near_nft.environment import MemoryStorage
from near_nft.exceptions import TokenNotFoundError
from near_nft.persistent import LookupMap, StorageKey, UnorderedSet


class OwnershipIndex:
    """
    Reverse index from owner id to the ids of the tokens it owns.

    The outer map stores, for each owner, the storage prefix of that owner's
    set. The prefix is derived from the sha256 of the owner id, so reopening
    the set only needs the owner id. Empty sets are dropped from the outer map.
    """

    def __init__(self, storage: MemoryStorage):
        self._storage = storage
        self._tokens_per_owner: LookupMap[bytes] = LookupMap(
            StorageKey.tokens_per_owner().to_bytes(),
            storage,
            serialize=bytes,
            deserialize=bytes,
        )

    def _get_set(self, owner_id: str) -> Optional[UnorderedSet]:
        prefix = self._tokens_per_owner.get(owner_id)
        if prefix is None:
            return None
        return UnorderedSet(prefix, self._storage)

    def _new_set(self, owner_id: str) -> UnorderedSet:
        key = StorageKey.token_per_owner_inner(owner_id)
        logger.debug(f"New token set for @{owner_id} under {key}")
        return UnorderedSet(key.to_bytes(), self._storage)

    def tokens_of(self, owner_id: str) -> Set[str]:
        tokens_set = self._get_set(owner_id)
        if tokens_set is None:
            return set()
        return tokens_set.to_set()

    def has_entry(self, owner_id: str) -> bool:
        return owner_id in self._tokens_per_owner

    def add(self, owner_id: str, token_id: str):
        tokens_set = self._get_set(owner_id) or self._new_set(owner_id)
        tokens_set.insert(token_id)
        self._tokens_per_owner.insert(owner_id, tokens_set.prefix)

    def remove(self, owner_id: str, token_id: str):
        """
        Remove a token from the owner's set, dropping the set once empty.

        Raises:
            TokenNotFoundError: the owner has no set or the token isn't in it
        """
        tokens_set = self._get_set(owner_id)
        if tokens_set is None or not tokens_set.remove(token_id):
            raise TokenNotFoundError(token_id)
        if tokens_set.is_empty():
            self._tokens_per_owner.remove(owner_id)
