"""In-memory stand-in for the algod client used by the unit tests."""

import base64

from algosdk import encoding, transaction
from algosdk.error import AlgodHTTPError

from src.smart_contracts.nft_marketplace_asc1 import NFTMarketplaceASC1

GENESIS_HASH = "SGO1GKSzyE7IEPItTxCByw9x8FmnrCDexi9/cOUJOiI="


def _b64(value):
    return base64.b64encode(value).decode()


class FakeAlgodClient:
    """
    Confirms every transaction in the round after it is sent. Application create
    transactions get sequential app ids and the global state the NFTMarketplace
    creation branch writes.
    """

    def __init__(self, first_app_id=1001):
        self.next_app_id = first_app_id
        self.compiled = []
        self.sent = []
        self.applications = {}
        self._pending = {}

    def suggested_params(self):
        return transaction.SuggestedParams(fee=1000, first=1, last=1001, gh=GENESIS_HASH,
                                           gen="localnet-v1", flat_fee=True, min_fee=1000)

    def compile(self, source):
        self.compiled.append(source)
        return {"hash": "FAKEHASH", "result": _b64(b"\x08" + source.encode()[:16])}

    def send_transaction(self, signed_txn):
        tx_id = signed_txn.get_txid()
        self.sent.append(signed_txn)
        info = {"confirmed-round": 2, "pool-error": ""}

        txn = signed_txn.transaction
        if isinstance(txn, transaction.ApplicationCreateTxn):
            app_id = self.next_app_id
            self.next_app_id += 1
            self.applications[app_id] = self._initial_state(txn)
            info["application-index"] = app_id

        self._pending[tx_id] = info
        return tx_id

    @staticmethod
    def _initial_state(txn):
        def entry(key, value):
            if isinstance(value, bytes):
                return {"key": _b64(key.encode()), "value": {"type": 1, "bytes": _b64(value), "uint": 0}}
            return {"key": _b64(key.encode()), "value": {"type": 2, "bytes": "", "uint": value}}

        variables = NFTMarketplaceASC1.Variables
        return [
            entry(variables.admin, encoding.decode_address(txn.sender)),
            entry(variables.membership_nft, txn.app_args[0]),
            entry(variables.marketplace_fee, NFTMarketplaceASC1.DefaultValues.marketplace_fee),
            entry(variables.number_of_sellers, 0),
            entry(variables.number_of_sales, 0),
            entry(variables.number_of_minted_nfts, 0),
        ]

    def status(self):
        return {"last-round": 1}

    def status_after_block(self, block_num):
        return {"last-round": block_num}

    def pending_transaction_info(self, tx_id):
        return self._pending[tx_id]

    def application_info(self, app_id):
        if app_id not in self.applications:
            raise AlgodHTTPError("application does not exist", 404)
        return {"id": app_id, "params": {"global-state": self.applications[app_id]}}

    @property
    def created_applications(self):
        return [s for s in self.sent if isinstance(s.transaction, transaction.ApplicationCreateTxn)]
