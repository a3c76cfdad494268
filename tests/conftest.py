import pytest

from near_nft.contract import NftContract
from near_nft.environment import Environment
from near_nft.models import TokenMetadata


@pytest.fixture
def nft() -> str:
    return "nft.near"


@pytest.fixture
def bob() -> str:
    return "bob.near"


@pytest.fixture
def env(nft) -> Environment:
    return Environment(predecessor_account_id=nft)


@pytest.fixture
def metadata() -> TokenMetadata:
    return TokenMetadata(title="Mochi Rising", description="Limited edition canvas")


@pytest.fixture
def contract(env) -> NftContract:
    return NftContract(env)


@pytest.fixture
def minted(contract, metadata) -> NftContract:
    res = contract.nft_mint("0", metadata)
    assert res.success
    return contract
