import json
import logging
import os
import tempfile

from algosdk import account

from src.blockchain_utils.network_interaction import NetworkInteraction
from src.blockchain_utils.transaction_repository import ApplicationTransactionRepository
from src.deployment.registry import get_contract
from src.exceptions import DeploymentError

logger = logging.getLogger(__name__)


class DeploymentRunner:
    """
    Executes deployment modules against an algod node.

    When journal_path is given, each deployed application is recorded there under
    "<module id>#<future id>" with its contract name and constructor arguments.
    Later runs of the same module reuse the recorded app ids, and refuse to run
    when a recorded future now declares another contract or other arguments.
    """

    def __init__(self, client, deployer_private_key, journal_path=None, wait_rounds=10):
        self.client = client
        self.deployer_private_key = deployer_private_key
        self.deployer_address = account.address_from_private_key(deployer_private_key)
        self.journal_path = journal_path
        self.wait_rounds = wait_rounds

    def _read_journal(self):
        if not self.journal_path or not os.path.exists(self.journal_path):
            return {}
        with open(self.journal_path, "r") as f:
            return json.load(f)

    def _write_journal(self, journal):
        if not self.journal_path:
            return
        directory = os.path.dirname(self.journal_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        f = tempfile.NamedTemporaryFile("w", dir=directory or ".", suffix=".tmp", delete=False)
        try:
            with f:
                json.dump(journal, f, indent=4)
            os.replace(f.name, self.journal_path)
        except Exception:
            os.remove(f.name)
            raise

    def deploy_contract(self, contract_name, args=()):
        """Deploys a single registered contract and returns the app id."""
        artifact = get_contract(contract_name)
        contract = artifact.contract()

        approval_program = NetworkInteraction.compile_program(self.client, contract.approval_program())
        clear_program = NetworkInteraction.compile_program(self.client, contract.clear_program())

        signed_txn = ApplicationTransactionRepository.create_application(client=self.client,
                                                                         creator_private_key=self.deployer_private_key,
                                                                         approval_program=approval_program,
                                                                         clear_program=clear_program,
                                                                         global_schema=contract.global_schema,
                                                                         local_schema=contract.local_schema,
                                                                         app_args=contract.encode_args(args))

        tx_id, transaction_info = NetworkInteraction.submit_transaction(self.client,
                                                                        signed_txn,
                                                                        wait_rounds=self.wait_rounds)
        app_id = transaction_info.get("application-index")
        if not app_id:
            raise DeploymentError("Transaction {} did not create {}".format(tx_id, contract_name))

        logger.info("%s deployed by %s with app id %s", contract_name, self.deployer_address, app_id)
        return app_id

    def _reconcile(self, module, journal):
        """Raises DeploymentError when a journaled future was deployed with another contract or arguments."""
        for future in module.futures.values():
            key = "{}#{}".format(module.module_id, future.future_id)
            entry = journal.get(key)
            if entry is None:
                continue
            if entry["contract_name"] != future.contract_name or entry["args"] != list(future.args):
                raise DeploymentError(
                    "{} was deployed as {}({}) but the module now declares {}({}); "
                    "redeploy with reset=True".format(key,
                                                      entry["contract_name"], ", ".join(map(str, entry["args"])),
                                                      future.contract_name, ", ".join(map(str, future.args))))

    def deploy(self, module, reset=False):
        journal = self._read_journal()
        if reset:
            prefix = "{}#".format(module.module_id)
            journal = {key: entry for key, entry in journal.items() if not key.startswith(prefix)}
            self._write_journal(journal)
        else:
            self._reconcile(module, journal)
        deployed = {}

        for name, future in module.futures.items():
            key = "{}#{}".format(module.module_id, future.future_id)
            artifact = get_contract(future.contract_name)

            if key in journal:
                app_id = journal[key]["app_id"]
                logger.debug("Reusing %s from journal: app id %s", key, app_id)
            else:
                app_id = self.deploy_contract(future.contract_name, future.args)
                journal[key] = {
                    "app_id": app_id,
                    "contract_name": future.contract_name,
                    "args": list(future.args),
                }
                self._write_journal(journal)

            deployed[name] = artifact.handle(self.client, app_id)

        return deployed


def default_journal_path(settings):
    return os.path.join(settings.DEPLOYMENTS_DIR, settings.NETWORK_NAME, "deployed_apps.json")
