import pytest
from pydantic import ValidationError

from near_nft.environment import MemoryStorage
from near_nft.exceptions import InvalidArgumentsError, UnauthorizedError, parse_error
from near_nft.models import CallResult, Token, TokenMetadata
from near_nft.persistent import UnorderedSet
from near_nft.utils import is_valid_account_id


def test_metadata_all_optional():
    metadata = TokenMetadata()
    assert metadata.title is None
    assert metadata.reference_hash is None


def test_metadata_unpaired_reference_allowed():
    metadata = TokenMetadata(reference="https://example.com/0.json")
    assert metadata.reference_hash is None


def test_metadata_hash_must_be_base64():
    TokenMetadata(media="ipfs://x", media_hash="bWVkaWE=")
    with pytest.raises(ValidationError):
        TokenMetadata(media_hash="not base64!")


def test_metadata_is_frozen():
    metadata = TokenMetadata(title="Mochi Rising")
    with pytest.raises(ValidationError):
        metadata.title = "Other"


def test_token_json_round_trip():
    token = Token(
        token_id="0",
        owner_id="nft.near",
        metadata=TokenMetadata(title="Mochi Rising", copies=3, extra='{"a": 1}'),
    )
    assert Token.model_validate_json(token.model_dump_json()) == token


def test_call_result_error():
    error = UnauthorizedError("0", "bob.near", "nft.near")
    res = CallResult.failure(error)
    assert not res.success
    rebuilt = res.error
    assert isinstance(rebuilt, UnauthorizedError)
    assert rebuilt.to_dict() == error.to_dict()
    assert str(rebuilt) == str(error)


def test_parse_error_unknown_kind():
    with pytest.raises(KeyError):
        parse_error("Unknown", {})


@pytest.mark.parametrize(
    "account_id,valid",
    [
        ("bob.near", True),
        ("nft_demo-1.testnet", True),
        ("aa", True),
        ("a", False),
        ("Bob.near", False),
        ("bob..near", False),
        (".bob", False),
        ("a" * 65, False),
    ],
)
def test_account_id_validation(account_id, valid):
    assert is_valid_account_id(account_id) is valid


def test_unordered_set_ops():
    storage = MemoryStorage()
    tokens = UnorderedSet(b"\x01prefix", storage)
    assert tokens.is_empty()
    assert tokens.insert("1")
    assert not tokens.insert("1")
    assert "1" in tokens
    assert len(tokens) == 1
    assert tokens.remove("1")
    assert not tokens.remove("1")
    assert tokens.is_empty()


def test_storage_transaction_rollback():
    storage = MemoryStorage()
    storage.write(b"a", b"1")
    with pytest.raises(RuntimeError):
        with storage.transaction():
            storage.write(b"b", b"2")
            storage.remove(b"a")
            raise RuntimeError("abort")
    assert storage.snapshot() == {b"a": b"1"}


def test_copies_serialized_as_string():
    metadata = TokenMetadata(copies=5)
    assert metadata.copies == 5
    assert metadata.model_dump()["copies"] == "5"
    assert '"copies":"5"' in metadata.model_dump_json()
    assert TokenMetadata().model_dump()["copies"] is None


def test_copies_must_fit_u64():
    with pytest.raises(ValidationError):
        TokenMetadata(copies=-1)
    with pytest.raises(ValidationError):
        TokenMetadata(copies=2**64)


def test_invalid_arguments_round_trip():
    error = InvalidArgumentsError("nft_mint", "copies: bad")
    rebuilt = CallResult.failure(error).error
    assert isinstance(rebuilt, InvalidArgumentsError)
    assert rebuilt.reason == "copies: bad"


def test_unordered_set_length_entry():
    storage = MemoryStorage()
    tokens = UnorderedSet(b"\x01prefix", storage)
    tokens.insert("1")
    tokens.insert("2")
    tokens.insert("2")
    assert len(tokens) == 2
    assert storage.read(b"\x01prefixl") == b"2"
    assert tokens.to_set() == {"1", "2"}

    tokens.remove("1")
    tokens.remove("2")
    assert tokens.is_empty()
    assert len(storage) == 0
