from algosdk import account, transaction
from algosdk.atomic_transaction_composer import AccountTransactionSigner


def sign(txn, private_key):
    return AccountTransactionSigner(private_key).sign_transactions([txn], [0])[0]


class ApplicationTransactionRepository:

    @classmethod
    def create_application(cls,
                           client,
                           creator_private_key,
                           approval_program,
                           clear_program,
                           global_schema,
                           local_schema,
                           app_args=None,
                           sign_transaction=True):
        """
        Creates an application with the compiled approval and clear programs.
        Returns the signed transaction when sign_transaction is True, the unsigned one otherwise.
        """
        creator_address = account.address_from_private_key(creator_private_key)
        suggested_params = client.suggested_params()

        txn = transaction.ApplicationCreateTxn(sender=creator_address,
                                               sp=suggested_params,
                                               on_complete=transaction.OnComplete.NoOpOC,
                                               approval_program=approval_program,
                                               clear_program=clear_program,
                                               global_schema=global_schema,
                                               local_schema=local_schema,
                                               app_args=app_args)
        if sign_transaction:
            txn = sign(txn, creator_private_key)

        return txn


class PaymentTransactionRepository:

    @classmethod
    def payment(cls,
                client,
                sender_address,
                receiver_address,
                amount,
                sender_private_key,
                sign_transaction=True):
        suggested_params = client.suggested_params()

        txn = transaction.PaymentTxn(sender=sender_address,
                                     sp=suggested_params,
                                     receiver=receiver_address,
                                     amt=amount)
        if sign_transaction:
            txn = sign(txn, sender_private_key)

        return txn
