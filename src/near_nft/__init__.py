"""Token registry with an owner index over a flat key-value storage."""

from near_nft.contract import NftContract
from near_nft.environment import Environment, MemoryStorage
from near_nft.exceptions import (
    DuplicateTokenIdError,
    InvalidAccountIdError,
    InvalidArgumentsError,
    NftError,
    SelfTransferRejectedError,
    TokenNotFoundError,
    UnauthorizedError,
)
from near_nft.models import CallResult, NFTMetadata, Token, TokenMetadata
from near_nft.registry import NftRegistry

__all__ = [
    "NftContract",
    "NftRegistry",
    "Environment",
    "MemoryStorage",
    "CallResult",
    "NFTMetadata",
    "Token",
    "TokenMetadata",
    "NftError",
    "DuplicateTokenIdError",
    "TokenNotFoundError",
    "UnauthorizedError",
    "SelfTransferRejectedError",
    "InvalidAccountIdError",
    "InvalidArgumentsError",
]
