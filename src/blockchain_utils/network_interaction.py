import base64
import logging

from algosdk import transaction

logger = logging.getLogger(__name__)


class NetworkInteraction:

    @staticmethod
    def compile_program(client, source_code):
        compile_response = client.compile(source_code)
        return base64.b64decode(compile_response["result"])

    @staticmethod
    def submit_transaction(client, signed_transaction, wait_rounds=10):
        tx_id = client.send_transaction(signed_transaction)
        logger.info("Transaction %s submitted, waiting for confirmation", tx_id)

        transaction_info = transaction.wait_for_confirmation(client, tx_id, wait_rounds)
        logger.info("Transaction %s confirmed in round %s", tx_id, transaction_info.get("confirmed-round"))
        return tx_id, transaction_info

    @staticmethod
    def get_global_state(client, app_id):
        """
        Reads the global state of an application and decodes it into a dict.
        Byte values are returned as raw bytes, uint values as int.
        """
        app_info = client.application_info(app_id)
        global_state = {}
        for entry in app_info["params"].get("global-state", []):
            key = base64.b64decode(entry["key"]).decode()
            value = entry["value"]
            if value["type"] == 1:
                global_state[key] = base64.b64decode(value.get("bytes", ""))
            else:
                global_state[key] = value.get("uint", 0)
        return global_state
