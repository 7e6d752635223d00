import logging
import pprint as pp

from src.blockchain_utils.credentials import get_client, get_account_credentials, get_indexer, add_account_to_config, \
    fund_account
from src.config import get_settings
from src.deployment.nft_marketplace_module import nft_marketplace_module
from src.deployment.runner import DeploymentRunner, default_journal_path

FUND = True
RESET = False

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
settings = get_settings()

# ------------------------------------------------------------------------------------------ #
# ------------------------------# CREATE CLIENT AND ACCOUNTS #------------------------------ #
# ------------------------------------------------------------------------------------------ #

print("1. Creating admin account credentials and adding them to configuration file...")
add_account_to_config()


print("\n--------------------------------------------")
print("2. Creating client to interact with the network...")
client = get_client()

print("\n--------------------------------------------")
print("3. Get admin credentials and indexer...\n")
admin_pk, admin_address, _ = get_account_credentials(account_id=1)

indexer = get_indexer()

print("Admin credentials:\n- Address: {}".format(admin_address))

if FUND:
    print("\n--------------------------------------------")
    print("3a. Fund admin account...")
    fund_account(client, admin_address)

print("\nCheck account balance...")
print("Admin:\n- address: {}\n- balance:{} microAlgos".format(
    client.account_info(address=admin_address).get("address"),
    client.account_info(address=admin_address).get("amount")
))

# ---------------------------------------------------------------------------------- #
# ------------------------------# DEPLOY MARKETPLACE #------------------------------ #
# ---------------------------------------------------------------------------------- #

print("\n--------------------------------------------")
print("4. Deploying the NFTMarketplace application...")
module = nft_marketplace_module()
runner = DeploymentRunner(client=client,
                          deployer_private_key=admin_pk,
                          journal_path=default_journal_path(settings),
                          wait_rounds=settings.WAIT_ROUNDS)

nft_marketplace = runner.deploy(module, reset=RESET)["nft_marketplace"]

print("Application parameters:\n",
      "- App id: {}\n- App address: {}\n- Membership NFT: {}".format(
          nft_marketplace.app_id,
          nft_marketplace.app_address,
          nft_marketplace.membership_nft()
      ))

print("\n- Application info:")
pp.pprint(indexer.applications(application_id=nft_marketplace.app_id))

# ------------------------------------------------------------------------------------ #
# ------------------------------# CHECK INITIAL STATE #------------------------------ #
# ------------------------------------------------------------------------------------ #

print("\n--------------------------------------------")
print("5. Initial state of the marketplace:")
print("- Admin: {}".format(nft_marketplace.admin()))
print("- Marketplace fee: {}%".format(nft_marketplace.marketplace_fee()))
print("- Number of sellers: {}".format(nft_marketplace.number_of_sellers()))
print("- Number of sales: {}".format(nft_marketplace.number_of_sales()))
print("- Number of minted NFTs: {}".format(nft_marketplace.number_of_minted_nfts()))

print("\n -------------- Demo finished! --------------")
