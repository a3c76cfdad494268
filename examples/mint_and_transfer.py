"""
Example of minting a token and passing it between accounts.
"""
from loguru import logger

from near_nft import Environment, NftContract


def main():
    env = Environment(predecessor_account_id="nft.near")
    contract = NftContract(env)

    logger.info(contract.nft_metadata())

    res = contract.nft_mint("123", {"title": "New NFT"})
    logger.info(f"Minted {res.result}")

    res = contract.nft_transfer("bob.near", "123")
    logger.info(res.logs)

    env.predecessor_account_id = "bob.near"
    res = contract.nft_transfer("bob.near", "123")
    logger.info(f"Self transfer: {res.status}")

    logger.info(contract.registry.tokens_for_owner("bob.near"))


if __name__ == "__main__":
    main()
