from typing import Optional, Set

from loguru import logger

from near_nft.constants import DEFAULT_NFT_METADATA, TRANSFER_LOG
from near_nft.environment import Environment
from near_nft.exceptions import (
    DuplicateTokenIdError,
    SelfTransferRejectedError,
    TokenNotFoundError,
    UnauthorizedError,
)
from near_nft.models import NFTMetadata, Token, TokenMetadata
from near_nft.ownership import OwnershipIndex
from near_nft.tokens import TokenStore


class NftRegistry:
    """
    Token store and ownership index kept in agreement.

    The registry is the only writer of both structures. Every check of a
    write runs before the first mutation, so a raised error leaves storage
    untouched.

    Args:
        env: Execution context holding the storage and the log sink
        metadata: Collection metadata, fixed for the registry lifetime
    """

    def __init__(self, env: Environment, metadata: NFTMetadata = None):
        self._env = env
        self._metadata = metadata or DEFAULT_NFT_METADATA
        self.tokens = TokenStore(env.storage)
        self.owners = OwnershipIndex(env.storage)

    @property
    def metadata(self) -> NFTMetadata:
        return self._metadata

    def get_token(self, token_id: str) -> Optional[Token]:
        return self.tokens.get(token_id)

    def tokens_for_owner(self, owner_id: str) -> Set[str]:
        return self.owners.tokens_of(owner_id)

    def mint(self, token_id: str, metadata: TokenMetadata, caller_id: str) -> Token:
        """
        Create a token owned by the caller.

        Args:
            token_id: New unique token id
            metadata: Token metadata, stored as is
            caller_id: Minting account, becomes the owner

        Returns:
            The stored token

        Raises:
            DuplicateTokenIdError: token_id is already taken
        """
        if self.tokens.contains(token_id):
            raise DuplicateTokenIdError(token_id)
        token = Token(token_id=token_id, owner_id=caller_id, metadata=metadata)
        self.tokens.put(token_id, token)
        self.owners.add(caller_id, token_id)
        logger.info(f"Mint {token_id} to @{caller_id}")
        return token

    def transfer(self, token_id: str, receiver_id: str, caller_id: str):
        """
        Move a token to a new owner.

        Args:
            token_id: Token to transfer
            receiver_id: New owner
            caller_id: Calling account, must be the current owner

        Raises:
            TokenNotFoundError: token_id was never minted
            UnauthorizedError: caller is not the owner
            SelfTransferRejectedError: receiver is the current owner
        """
        token = self.tokens.get(token_id)
        if token is None:
            raise TokenNotFoundError(token_id)
        if caller_id != token.owner_id:
            raise UnauthorizedError(token_id, caller_id, token.owner_id)
        if receiver_id == token.owner_id:
            raise SelfTransferRejectedError(token_id, receiver_id)

        event = TRANSFER_LOG.format(
            token_id=token_id, sender_id=token.owner_id, receiver_id=receiver_id
        )
        self._env.log(event)
        logger.info(event)

        self.owners.remove(token.owner_id, token_id)
        self.owners.add(receiver_id, token_id)
        self.tokens.put(token_id, token.model_copy(update=dict(owner_id=receiver_id)))
