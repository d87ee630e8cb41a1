"""
Pytest configuration for gateway tests.
"""
import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.services.chain_configs import ChainRegistry  # noqa: E402
from src.services.dispatcher import Dispatcher  # noqa: E402

VALID_ADDRESS = "0xABCDEF0123456789ABCDEF0123456789ABCDEF01"

TEST_CHAINS = [
    {
        "chainId": 1,
        "name": "Ethereum Mainnet",
        "shortName": "eth",
        "network": "mainnet",
        "explorerBaseUrl": "https://explorer.test/eth/api",
        "rpcUrl": "https://rpc.test/v3/%API_KEY%",
        "nativeCurrency": {"symbol": "ETH", "name": "Ether", "decimals": 18},
    },
    {
        "chainId": 100,
        "name": "Gnosis Chain",
        "shortName": "gno",
        "network": "mainnet",
        "explorerBaseUrl": "https://explorer.test/gnosis/api",
        "rpcUrl": "https://rpc.test/gnosis",
        "nativeCurrency": {"symbol": "xDAI", "name": "xDAI", "decimals": 18},
    },
]


@pytest.fixture
def registry():
    return ChainRegistry.from_dicts(TEST_CHAINS)


@pytest.fixture
def backends():
    """백엔드 클라이언트 대역 (AsyncMock)"""
    explorer = MagicMock()
    explorer.get_assets = AsyncMock(return_value=[])
    explorer.get_transactions = AsyncMock(return_value=[])
    rpc = MagicMock()
    rpc.get_nonce = AsyncMock(return_value=0)
    rpc.estimate_gas = AsyncMock(return_value=21000)
    rpc.block_number = AsyncMock(return_value=1)
    rpc.raw = AsyncMock(return_value={"jsonrpc": "2.0", "id": 1, "result": "0x1"})
    gas_oracle = MagicMock()
    gas_oracle.current = AsyncMock(return_value={})
    price_oracle = MagicMock()
    price_oracle.quote = AsyncMock(return_value={})
    return {"explorer": explorer, "rpc": rpc, "gas_oracle": gas_oracle, "price_oracle": price_oracle}


@pytest.fixture
def dispatcher(registry, backends):
    return Dispatcher(registry=registry, **backends)
