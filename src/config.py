"""
Module: src/config.py
Description: Network and deployment configuration for the NFT marketplace
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class NetworkSettings(BaseSettings):
    """Connection and deployment settings, defaults target an AlgoKit LocalNet."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # Node endpoints
    ALGOD_ADDRESS: str = Field(default="http://localhost:4001")
    ALGOD_TOKEN: str = Field(default="a" * 64)
    INDEXER_ADDRESS: str = Field(default="http://localhost:8980")
    INDEXER_TOKEN: str = Field(default="a" * 64)
    KMD_ADDRESS: str = Field(default="http://localhost:4002")
    KMD_TOKEN: str = Field(default="a" * 64)
    NETWORK_NAME: str = "localnet"

    # Local files
    ACCOUNTS_FILE: str = "accounts.json"
    DEPLOYMENTS_DIR: str = "deployments"

    # Funding
    DISPENSER_MNEMONIC: Optional[str] = None
    FUND_AMOUNT: int = 10_000_000  # microAlgos

    # NFTMarketplace constructor argument
    MEMBERSHIP_NFT_ADDRESS: str = "Y76M3MSY6DKBRHBL7C3NNDXGS5IIMQVQVUAB6MP4XEMMGVF2QWNPL226CA"

    # Rounds to wait for a transaction to be confirmed
    WAIT_ROUNDS: int = 10


@lru_cache()
def get_settings() -> NetworkSettings:
    return NetworkSettings()
