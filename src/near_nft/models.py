import base64
import binascii
from typing import Annotated, Any, List, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, PlainSerializer

from near_nft.exceptions import NftError, parse_error


def _check_base64(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    try:
        base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError):
        raise ValueError(f"{value!r} is not a valid base64 string")
    return value


# Base64VecU8 on the wire
Base64Hash = Annotated[Optional[str], AfterValidator(_check_base64)]

# U64 is a decimal string in JSON, accepted as int or string
U64 = Annotated[
    int,
    Field(ge=0, lt=2**64),
    PlainSerializer(lambda value: str(value), return_type=str),
]


class NFTMetadata(BaseModel):
    """Collection level metadata (NEP-177 standard)."""

    model_config = ConfigDict(frozen=True)

    spec: str  # essentially a version like "nft-1.0.0"
    name: str  # ex. "Mosaics"
    symbol: str  # ex. "MOSAIC"
    icon: Optional[str] = None  # Data URL
    base_uri: Optional[str] = None  # Centralized gateway known to have reliable access to decentralized storage assets referenced by `reference` or `media` URLs
    reference: Optional[str] = None  # URL to a JSON file with more info
    reference_hash: Base64Hash = None  # Base64-encoded sha256 hash of JSON from reference field


class TokenMetadata(BaseModel):
    """
    NFT token metadata model (NEP-177 standard).

    Pairing of `media`/`media_hash` and `reference`/`reference_hash` is the
    caller's responsibility and is not checked here.
    """

    model_config = ConfigDict(frozen=True)

    title: Optional[str] = None  # ex. "Arch Nemesis: Mail Carrier" or "Parcel #5055"
    description: Optional[str] = None  # free-form description
    media: Optional[str] = None  # URL to associated media, preferably to decentralized, content-addressed storage
    media_hash: Base64Hash = None  # Base64-encoded sha256 hash of content referenced by the `media` field
    copies: Optional[U64] = None  # number of copies of this set of metadata in existence when token was minted.
    issued_at: Optional[str] = None  # ISO 8601 datetime when token was issued or minted
    expires_at: Optional[str] = None  # ISO 8601 datetime when token expires
    starts_at: Optional[str] = None  # ISO 8601 datetime when token starts being valid
    updated_at: Optional[str] = None  # ISO 8601 datetime when token was last updated
    extra: Optional[str] = None  # anything extra the NFT wants to store. Can be stringified JSON.
    reference: Optional[str] = None  # URL to an off-chain JSON file with more info.
    reference_hash: Base64Hash = None  # Base64-encoded sha256 hash of JSON from reference field


class Token(BaseModel):
    model_config = ConfigDict(frozen=True)

    token_id: str
    owner_id: str
    metadata: TokenMetadata


class CallResult:
    """
    Outcome of a single write call.

    `status` follows the NEAR execution status layout: either
    ``{"SuccessValue": ...}`` or ``{"Failure": {"kind": ..., "args": ...}}``.
    """

    status: dict
    logs: List[str]
    result: Any

    def __init__(self, status: dict, logs: List[str] = None, result: Any = None):
        self.status = status
        self.logs = logs or []
        self.result = result

    @classmethod
    def success_value(cls, result: Any, logs: List[str]) -> "CallResult":
        value = result.model_dump() if isinstance(result, BaseModel) else result
        return cls(status={"SuccessValue": value}, logs=logs, result=result)

    @classmethod
    def failure(cls, error: NftError) -> "CallResult":
        return cls(
            status={
                "Failure": {
                    "kind": error.kind,
                    "args": error.to_dict(),
                    "message": str(error),
                }
            }
        )

    @property
    def success(self) -> bool:
        return "SuccessValue" in self.status

    @property
    def error(self) -> Optional[NftError]:
        if "Failure" in self.status:
            failure = self.status["Failure"]
            return parse_error(failure["kind"], failure["args"])
        return None
