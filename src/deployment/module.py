"""
Deployment modules.

A deployment module is a named description of the contracts to deploy and
of their constructor arguments. Building a module does not touch the
network; a DeploymentRunner executes it.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Tuple


@dataclass(frozen=True)
class ContractFuture:
    """A contract that will be deployed when the module is executed."""
    future_id: str
    contract_name: str
    args: Tuple[Any, ...] = ()


@dataclass
class DeploymentModule:
    module_id: str
    futures: Dict[str, ContractFuture] = field(default_factory=dict)


class ModuleBuilder:

    def __init__(self, module_id: str):
        self.module_id = module_id
        self._futures: List[ContractFuture] = []

    def contract(self, contract_name: str, args=(), future_id: str = None) -> ContractFuture:
        future = ContractFuture(future_id=future_id or contract_name,
                                contract_name=contract_name,
                                args=tuple(args))
        if any(f.future_id == future.future_id for f in self._futures):
            raise ValueError("Duplicated future id {} in module {}".format(future.future_id, self.module_id))
        self._futures.append(future)
        return future


def build_module(module_id: str, builder: Callable[[ModuleBuilder], Dict[str, ContractFuture]]) -> DeploymentModule:
    """
    Runs builder against a fresh ModuleBuilder. The builder returns the futures
    to expose, keyed by the name the caller will use for the deployed handles.
    """
    m = ModuleBuilder(module_id)
    results = builder(m)
    return DeploymentModule(module_id=module_id, futures=dict(results))
