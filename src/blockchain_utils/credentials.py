import json
import logging
import os

from algosdk import account, mnemonic
from algosdk.kmd import KMDClient
from algosdk.v2client import algod, indexer

from src.blockchain_utils.network_interaction import NetworkInteraction
from src.blockchain_utils.transaction_repository import PaymentTransactionRepository
from src.config import get_settings
from src.exceptions import DeploymentError

logger = logging.getLogger(__name__)

LOCALNET_WALLET = "unencrypted-default-wallet"


def get_client(settings=None):
    settings = settings or get_settings()
    return algod.AlgodClient(settings.ALGOD_TOKEN, settings.ALGOD_ADDRESS)


def get_indexer(settings=None):
    settings = settings or get_settings()
    return indexer.IndexerClient(settings.INDEXER_TOKEN, settings.INDEXER_ADDRESS)


def get_kmd(settings=None):
    settings = settings or get_settings()
    return KMDClient(settings.KMD_TOKEN, settings.KMD_ADDRESS)


def _load_accounts(accounts_file):
    if not os.path.exists(accounts_file):
        return []
    with open(accounts_file, "r") as f:
        return json.load(f)


def add_account_to_config(settings=None):
    """
    Generates a new account and appends it to the accounts file.
    Returns the private key and the address of the new account.
    """
    settings = settings or get_settings()
    private_key, address = account.generate_account()

    accounts = _load_accounts(settings.ACCOUNTS_FILE)
    accounts.append({
        "address": address,
        "mnemonic": mnemonic.from_private_key(private_key),
    })
    with open(settings.ACCOUNTS_FILE, "w") as f:
        json.dump(accounts, f, indent=4)

    logger.info("Account %s added to %s", address, settings.ACCOUNTS_FILE)
    return private_key, address


def get_account_credentials(account_id, settings=None):
    """
    Gets the credentials of the account with the given 1-based id in the accounts file.
    :return: (private key, address, mnemonic)
    """
    settings = settings or get_settings()
    accounts = _load_accounts(settings.ACCOUNTS_FILE)
    if account_id < 1 or account_id > len(accounts):
        raise IndexError("No account with id {} in {}".format(account_id, settings.ACCOUNTS_FILE))

    account_mnemonic = accounts[account_id - 1]["mnemonic"]
    private_key = mnemonic.to_private_key(account_mnemonic)
    return private_key, account.address_from_private_key(private_key), account_mnemonic


def get_localnet_dispenser(client, kmd):
    """Returns (private key, address) of the richest account in the LocalNet default wallet."""
    wallet_id = None
    for wallet in kmd.list_wallets():
        if wallet["name"] == LOCALNET_WALLET:
            wallet_id = wallet["id"]
            break
    if wallet_id is None:
        raise DeploymentError("Wallet {} not found in KMD".format(LOCALNET_WALLET))

    handle = kmd.init_wallet_handle(wallet_id, "")
    try:
        addresses = kmd.list_keys(handle)
        if not addresses:
            raise DeploymentError("Wallet {} holds no accounts".format(LOCALNET_WALLET))
        address = max(addresses, key=lambda a: client.account_info(a).get("amount", 0))
        private_key = kmd.export_key(handle, "", address)
    finally:
        kmd.release_wallet_handle(handle)

    return private_key, address


def get_dispenser(client, settings=None):
    settings = settings or get_settings()
    if settings.DISPENSER_MNEMONIC:
        private_key = mnemonic.to_private_key(settings.DISPENSER_MNEMONIC)
        return private_key, account.address_from_private_key(private_key)
    if settings.NETWORK_NAME == "localnet":
        return get_localnet_dispenser(client, get_kmd(settings))
    raise DeploymentError("No dispenser configured for network {}".format(settings.NETWORK_NAME))


def fund_account(client, address, amount=None, settings=None):
    settings = settings or get_settings()
    dispenser_pk, dispenser_address = get_dispenser(client, settings)

    signed_txn = PaymentTransactionRepository.payment(client=client,
                                                      sender_address=dispenser_address,
                                                      receiver_address=address,
                                                      amount=amount or settings.FUND_AMOUNT,
                                                      sender_private_key=dispenser_pk)
    tx_id, _ = NetworkInteraction.submit_transaction(client, signed_txn, wait_rounds=settings.WAIT_ROUNDS)
    return tx_id
