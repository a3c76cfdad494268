"""Constants for the token registry."""

from near_nft.models import NFTMetadata

# Storage key tags, one byte each, in declaration order of the storage layout
TOKENS_PER_OWNER_TAG = 0
TOKEN_PER_OWNER_INNER_TAG = 1
TOKENS_BY_ID_TAG = 2

# Set element marker inside a per-owner namespace
SET_ELEMENT_MARKER = b"e"
# Element count of a set, kept next to its elements
SET_LENGTH_MARKER = b"l"

# NEAR account id limits
MIN_ACCOUNT_ID_LEN = 2
MAX_ACCOUNT_ID_LEN = 64

DEFAULT_NFT_METADATA = NFTMetadata(
    spec="z-nft-1.0.0",
    name="Blockchain Z-days Demo",
    symbol="ZNFT",
)

TRANSFER_LOG = "Transfer {token_id} from @{sender_id} to @{receiver_id}"
