class DeploymentError(Exception):
    """Base error raised by the marketplace deployment tooling."""


class UnknownContractError(DeploymentError):
    """Raised when a deployment module references a contract that is not registered."""

    def __init__(self, contract_name):
        super().__init__("Unknown contract: {}".format(contract_name))
        self.contract_name = contract_name
