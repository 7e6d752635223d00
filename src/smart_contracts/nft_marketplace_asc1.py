from pyteal import *
from algosdk import encoding, transaction


class NFTMarketplaceASC1:
    class Variables:
        admin = "admin"
        membership_nft = "membership_nft"
        marketplace_fee = "marketplace_fee"
        number_of_sellers = "number_of_sellers"
        number_of_sales = "number_of_sales"
        number_of_minted_nfts = "number_of_minted_nfts"

    class DefaultValues:
        marketplace_fee = 2  # percent

    TEAL_VERSION = 8

    def application_start(self):
        actions = Cond(
            [Txn.application_id() == Int(0), self.app_initialization()],
            [Txn.on_completion() == OnComplete.UpdateApplication, self.admin_only()],
            [Txn.on_completion() == OnComplete.DeleteApplication, self.admin_only()],
            [Txn.on_completion() == OnComplete.CloseOut, Return(Int(1))],
            [Txn.on_completion() == OnComplete.OptIn, Return(Int(0))],
            [Txn.on_completion() == OnComplete.NoOp, Return(Int(0))],
        )
        return actions

    def app_initialization(self):
        """
        CreateAppTxn with one argument: the 32 byte address of the membership NFT contract.
        The sender of the transaction becomes the admin of the marketplace.
        """
        return Seq([
            Assert(Txn.application_args.length() == Int(1)),
            Assert(Len(Txn.application_args[0]) == Int(32)),

            App.globalPut(Bytes(self.Variables.admin), Txn.sender()),
            App.globalPut(Bytes(self.Variables.membership_nft), Txn.application_args[0]),
            App.globalPut(Bytes(self.Variables.marketplace_fee), Int(self.DefaultValues.marketplace_fee)),
            App.globalPut(Bytes(self.Variables.number_of_sellers), Int(0)),
            App.globalPut(Bytes(self.Variables.number_of_sales), Int(0)),
            App.globalPut(Bytes(self.Variables.number_of_minted_nfts), Int(0)),

            Return(Int(1))
        ])

    def admin_only(self):
        return Return(Txn.sender() == App.globalGet(Bytes(self.Variables.admin)))

    def approval_program(self):
        return compileTeal(self.application_start(), mode=Mode.Application, version=self.TEAL_VERSION)

    def clear_program(self):
        return compileTeal(Return(Int(1)), mode=Mode.Application, version=self.TEAL_VERSION)

    @staticmethod
    def encode_args(args):
        # every constructor argument of this contract is an address
        return [encoding.decode_address(address) for address in args]

    @property
    def global_schema(self):
        return transaction.StateSchema(num_uints=4, num_byte_slices=2)

    @property
    def local_schema(self):
        return transaction.StateSchema(num_uints=0, num_byte_slices=0)
