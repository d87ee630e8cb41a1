# Services package
from .chain_configs import ChainRegistry, get_chain_configs, load_chain_registry, resolve_rpc_url
from .explorer_client import ExplorerClient
from .rpc_client import RpcClient
from .dispatcher import Dispatcher, DispatchResult

__all__ = [
    "ChainRegistry",
    "get_chain_configs",
    "load_chain_registry",
    "resolve_rpc_url",
    "ExplorerClient",
    "RpcClient",
    "Dispatcher",
    "DispatchResult",
]
