from algosdk import encoding, logic

from src.blockchain_utils.network_interaction import NetworkInteraction
from src.marketplace_interfaces.nft_marketplace import NFTMarketplaceInterface
from src.smart_contracts.nft_marketplace_asc1 import NFTMarketplaceASC1


class NFTMarketplace(NFTMarketplaceInterface):
    """Read-only handle to a deployed NFTMarketplace application."""

    def __init__(self, client, app_id):
        self.client = client
        self.app_id = app_id

    @property
    def app_address(self):
        return logic.get_application_address(self.app_id)

    def _get(self, key):
        return NetworkInteraction.get_global_state(self.client, self.app_id)[key]

    def admin(self):
        return encoding.encode_address(self._get(NFTMarketplaceASC1.Variables.admin))

    def membership_nft(self):
        return encoding.encode_address(self._get(NFTMarketplaceASC1.Variables.membership_nft))

    def marketplace_fee(self):
        return self._get(NFTMarketplaceASC1.Variables.marketplace_fee)

    def number_of_sellers(self):
        return self._get(NFTMarketplaceASC1.Variables.number_of_sellers)

    def number_of_sales(self):
        return self._get(NFTMarketplaceASC1.Variables.number_of_sales)

    def number_of_minted_nfts(self):
        return self._get(NFTMarketplaceASC1.Variables.number_of_minted_nfts)

    def __repr__(self):
        return "NFTMarketplace(app_id={})".format(self.app_id)
