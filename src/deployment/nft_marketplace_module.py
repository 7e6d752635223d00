from src.config import get_settings
from src.deployment.module import build_module


def nft_marketplace_module(membership_nft_address=None):
    membership_nft_address = membership_nft_address or get_settings().MEMBERSHIP_NFT_ADDRESS

    def builder(m):
        nft_marketplace = m.contract("NFTMarketplace", [membership_nft_address], future_id="nft_marketplace")
        return {"nft_marketplace": nft_marketplace}

    return build_module("NFTMarketplaceModule", builder)
