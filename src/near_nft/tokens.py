from typing import Optional

from near_nft.models import Token
from near_nft.persistent import LookupMap, StorageKey
from near_nft.environment import MemoryStorage


class TokenStore:
    """Token records by token_id. Records are never deleted."""

    def __init__(self, storage: MemoryStorage):
        self._tokens_by_id: LookupMap[Token] = LookupMap(
            StorageKey.tokens_by_id().to_bytes(),
            storage,
            serialize=lambda token: token.model_dump_json().encode("utf-8"),
            deserialize=Token.model_validate_json,
        )

    def get(self, token_id: str) -> Optional[Token]:
        return self._tokens_by_id.get(token_id)

    def put(self, token_id: str, token: Token) -> Optional[Token]:
        """
        Insert or overwrite a token record.

        Returns:
            The previous record, None if the token_id was free
        """
        return self._tokens_by_id.insert(token_id, token)

    def contains(self, token_id: str) -> bool:
        return token_id in self._tokens_by_id
