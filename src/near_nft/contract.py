from typing import Callable, Optional, Union

from loguru import logger
from pydantic import ValidationError

from near_nft.environment import Environment
from near_nft.exceptions import (
    InvalidAccountIdError,
    InvalidArgumentsError,
    NftError,
)
from near_nft.models import CallResult, NFTMetadata, Token, TokenMetadata
from near_nft.registry import NftRegistry
from near_nft.utils import is_valid_account_id


class NftContract:
    """
    Call boundary of the token registry.

    Write methods take the caller from ``env.predecessor_account_id``, run in a
    storage transaction and always return a CallResult: a rejected call is
    rolled back, its logs dropped and its error kind reported in the status.
    Arguments that fail model validation are reported as InvalidArguments.
    The environment log sink holds the logs of the latest call only.

    Example:
        >>> env = Environment(predecessor_account_id="nft.near")
        >>> contract = NftContract(env)
        >>> contract.nft_mint("0", {"title": "Mochi Rising"}).success
        True
    """

    def __init__(self, env: Environment, metadata: NFTMetadata = None):
        self.env = env
        self.registry = NftRegistry(env, metadata)

    def _reject(self, method: str, error: NftError) -> CallResult:
        self.env.logs.clear()
        logger.warning(
            f"{method} by @{self.env.predecessor_account_id} rejected: {error.kind} {error}"
        )
        return CallResult.failure(error)

    def _execute(self, method: str, call: Callable) -> CallResult:
        self.env.logs.clear()
        try:
            with self.env.storage.transaction():
                result = call()
        except NftError as e:
            return self._reject(method, e)
        except ValidationError as e:
            reason = "; ".join(
                f"{'.'.join(map(str, err['loc'])) or 'args'}: {err['msg']}"
                for err in e.errors()
            )
            return self._reject(method, InvalidArgumentsError(method, reason))
        return CallResult.success_value(result, list(self.env.logs))

    def nft_metadata(self) -> NFTMetadata:
        return self.registry.metadata

    def nft_token(self, token_id: str) -> Optional[Token]:
        return self.registry.get_token(token_id)

    def nft_mint(
        self, token_id: str, metadata: Union[TokenMetadata, dict]
    ) -> CallResult:
        """
        Mint a token owned by the calling account.

        Args:
            token_id: New unique token id
            metadata: TokenMetadata or its JSON dict form

        Returns:
            CallResult with the new Token as result, or a failure with one of
            InvalidArguments, DuplicateTokenId
        """
        caller_id = self.env.predecessor_account_id

        def call():
            token_metadata = metadata
            if not isinstance(token_metadata, TokenMetadata):
                token_metadata = TokenMetadata.model_validate(token_metadata)
            return self.registry.mint(token_id, token_metadata, caller_id)

        return self._execute("nft_mint", call)

    def nft_transfer(self, receiver_id: str, token_id: str) -> CallResult:
        """
        Transfer a token of the calling account to receiver_id.

        Returns:
            CallResult with a None result, or a failure with one of
            InvalidAccountId, TokenNotFound, Unauthorized, SelfTransferRejected
        """
        caller_id = self.env.predecessor_account_id

        def call():
            if not is_valid_account_id(receiver_id):
                raise InvalidAccountIdError(receiver_id)
            self.registry.transfer(token_id, receiver_id, caller_id)

        return self._execute("nft_transfer", call)
