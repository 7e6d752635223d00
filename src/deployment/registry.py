from collections import namedtuple

from src.exceptions import UnknownContractError
from src.services.nft_marketplace import NFTMarketplace
from src.smart_contracts.nft_marketplace_asc1 import NFTMarketplaceASC1

ContractArtifact = namedtuple("ContractArtifact", ["contract", "handle"])

CONTRACTS = {
    "NFTMarketplace": ContractArtifact(contract=NFTMarketplaceASC1, handle=NFTMarketplace),
}


def get_contract(contract_name):
    try:
        return CONTRACTS[contract_name]
    except KeyError:
        raise UnknownContractError(contract_name) from None
