from abc import ABC, abstractmethod


class NFTMarketplaceInterface(ABC):

    @abstractmethod
    def admin(self):
        pass

    @abstractmethod
    def marketplace_fee(self):
        pass

    @abstractmethod
    def number_of_sellers(self):
        pass

    @abstractmethod
    def number_of_sales(self):
        pass

    @abstractmethod
    def number_of_minted_nfts(self):
        pass
