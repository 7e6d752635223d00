import pytest
from algosdk import account

from fakes import FakeAlgodClient
from src.config import NetworkSettings


@pytest.fixture
def algod_client():
    return FakeAlgodClient()


@pytest.fixture
def deployer():
    """(private key, address) of a freshly generated account."""
    return account.generate_account()


@pytest.fixture
def membership_nft_address():
    _, address = account.generate_account()
    return address


@pytest.fixture
def settings(tmp_path):
    return NetworkSettings(ACCOUNTS_FILE=str(tmp_path / "accounts.json"),
                           DEPLOYMENTS_DIR=str(tmp_path / "deployments"),
                           _env_file=None)
