import re
from hashlib import sha256

from near_nft.constants import MAX_ACCOUNT_ID_LEN, MIN_ACCOUNT_ID_LEN

_ACCOUNT_ID_RE = re.compile(r"^(([a-z\d]+[\-_])*[a-z\d]+\.)*([a-z\d]+[\-_])*[a-z\d]+$")


def hash_account_id(account_id: str) -> bytes:
    """
    Get the 32 byte sha256 digest of an account id.

    Args:
        account_id: NEAR account identifier (e.g., "example.near")

    Returns:
        Raw digest bytes
    """
    return sha256(account_id.encode("utf-8")).digest()


def is_valid_account_id(account_id: str) -> bool:
    """
    Check an account id against the NEAR account id rules.

    Args:
        account_id: Account id to check

    Returns:
        True if the id is 2-64 chars of lowercase alphanumerics split by `.`, `-` or `_`
    """
    if not isinstance(account_id, str):
        return False
    if not MIN_ACCOUNT_ID_LEN <= len(account_id) <= MAX_ACCOUNT_ID_LEN:
        return False
    return _ACCOUNT_ID_RE.match(account_id) is not None
