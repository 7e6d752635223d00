import warnings

import pytest
from algosdk import transaction

from src.blockchain_utils.transaction_repository import ApplicationTransactionRepository, \
    PaymentTransactionRepository


@pytest.fixture
def create_kwargs(algod_client, deployer):
    private_key, _ = deployer
    return dict(client=algod_client,
                creator_private_key=private_key,
                approval_program=b"\x08\x81\x01\x43",
                clear_program=b"\x08\x81\x01\x43",
                global_schema=transaction.StateSchema(num_uints=4, num_byte_slices=2),
                local_schema=transaction.StateSchema(num_uints=0, num_byte_slices=0),
                app_args=[b"\x00" * 32])


def test_create_application_is_signed_by_creator(create_kwargs, deployer):
    _, address = deployer

    signed_txn = ApplicationTransactionRepository.create_application(**create_kwargs)

    assert isinstance(signed_txn, transaction.SignedTransaction)
    assert signed_txn.transaction.sender == address
    assert signed_txn.signature


def test_create_application_unsigned(create_kwargs):
    txn = ApplicationTransactionRepository.create_application(sign_transaction=False, **create_kwargs)

    assert isinstance(txn, transaction.ApplicationCreateTxn)


def test_signing_raises_no_deprecation_warning(create_kwargs, algod_client, deployer):
    private_key, address = deployer

    with warnings.catch_warnings():
        warnings.simplefilter("error", DeprecationWarning)
        ApplicationTransactionRepository.create_application(**create_kwargs)
        PaymentTransactionRepository.payment(client=algod_client,
                                             sender_address=address,
                                             receiver_address=address,
                                             amount=1,
                                             sender_private_key=private_key)
