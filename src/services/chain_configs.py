#chain_configs.py

import os
import json
import logging
from types import MappingProxyType
from typing import Iterable, Optional, Tuple

from dotenv import load_dotenv
from pydantic import TypeAdapter

from gateway.configuration import config
from gateway.errors import ChainNotSupported
from gateway.models import ChainConfig

load_dotenv()

logger = logging.getLogger(__name__)

# rpcUrl 템플릿에서 Infura 프로젝트 ID로 치환되는 자리 표시자
API_KEY_PLACEHOLDER = "%API_KEY%"

_CHAIN_LIST_ADAPTER = TypeAdapter(Tuple[ChainConfig, ...])


def get_chain_configs():
    """정적 체인 테이블 (등록 순서 = supported-chains 응답 순서)"""
    return [
        {
            "chainId": 1,
            "name": "Ethereum Mainnet",
            "shortName": "eth",
            "network": "mainnet",
            "explorerBaseUrl": "https://eth.blockscout.com/api",
            "rpcUrl": os.getenv('ETHEREUM_RPC_URL', 'https://mainnet.infura.io/v3/%API_KEY%'),
            "nativeCurrency": {"symbol": "ETH", "name": "Ether", "decimals": 18},
        },
        {
            "chainId": 10,
            "name": "Optimism",
            "shortName": "oeth",
            "network": "mainnet",
            "explorerBaseUrl": "https://optimism.blockscout.com/api",
            "rpcUrl": os.getenv('OPTIMISM_RPC_URL', 'https://mainnet.optimism.io'),
            "nativeCurrency": {"symbol": "ETH", "name": "Ether", "decimals": 18},
        },
        {
            "chainId": 61,
            "name": "Ethereum Classic",
            "shortName": "etc",
            "network": "mainnet",
            "explorerBaseUrl": "https://etc.blockscout.com/api",
            "rpcUrl": os.getenv('ETC_RPC_URL', 'https://etc.rivet.link'),
            "nativeCurrency": {"symbol": "ETC", "name": "Ether Classic", "decimals": 18},
        },
        {
            "chainId": 100,
            "name": "Gnosis Chain",
            "shortName": "gno",
            "network": "mainnet",
            "explorerBaseUrl": "https://gnosis.blockscout.com/api",
            "rpcUrl": os.getenv('GNOSIS_RPC_URL', 'https://rpc.gnosischain.com'),
            "nativeCurrency": {"symbol": "xDAI", "name": "xDAI", "decimals": 18},
        },
        {
            "chainId": 137,
            "name": "Polygon",
            "shortName": "matic",
            "network": "mainnet",
            "explorerBaseUrl": "https://polygon.blockscout.com/api",
            "rpcUrl": os.getenv('POLYGON_RPC_URL', 'https://polygon-rpc.com'),
            "nativeCurrency": {"symbol": "MATIC", "name": "Matic", "decimals": 18},
        },
        {
            "chainId": 8453,
            "name": "Base",
            "shortName": "base",
            "network": "mainnet",
            "explorerBaseUrl": "https://base.blockscout.com/api",
            "rpcUrl": os.getenv('BASE_RPC_URL', 'https://mainnet.base.org'),
            "nativeCurrency": {"symbol": "ETH", "name": "Ether", "decimals": 18},
        },
        {
            "chainId": 42161,
            "name": "Arbitrum One",
            "shortName": "arb1",
            "network": "mainnet",
            "explorerBaseUrl": "https://arbitrum.blockscout.com/api",
            "rpcUrl": os.getenv('ARBITRUM_RPC_URL', 'https://arb1.arbitrum.io/rpc'),
            "nativeCurrency": {"symbol": "ETH", "name": "Ether", "decimals": 18},
        },
        {
            "chainId": 11155111,
            "name": "Ethereum Sepolia",
            "shortName": "sep",
            "network": "sepolia",
            "explorerBaseUrl": "https://eth-sepolia.blockscout.com/api",
            "rpcUrl": os.getenv('SEPOLIA_RPC_URL', 'https://sepolia.infura.io/v3/%API_KEY%'),
            "nativeCurrency": {"symbol": "ETH", "name": "Sepolia Ether", "decimals": 18},
        },
    ]


class ChainRegistry:
    """chainId → ChainConfig 조회 테이블 (생성 후 변경 불가)"""

    def __init__(self, chains: Iterable[ChainConfig]):
        ordered = tuple(chains)
        by_id = {}
        for chain in ordered:
            if chain.chain_id in by_id:
                raise ValueError(f"Duplicate chainId in chain registry: {chain.chain_id}")
            by_id[chain.chain_id] = chain
        self._chains = ordered
        self._by_id = MappingProxyType(by_id)

    @classmethod
    def from_dicts(cls, entries) -> "ChainRegistry":
        return cls(_CHAIN_LIST_ADAPTER.validate_python(entries))

    def lookup(self, chain_id: int) -> ChainConfig:
        try:
            return self._by_id[chain_id]
        except KeyError:
            raise ChainNotSupported(chain_id) from None

    def list(self) -> Tuple[ChainConfig, ...]:
        return self._chains

    def __contains__(self, chain_id) -> bool:
        return chain_id in self._by_id

    def __len__(self) -> int:
        return len(self._chains)


def load_chain_registry(path: Optional[str] = None) -> ChainRegistry:
    """
    프로세스 시작 시 한 번 호출되는 레지스트리 로더

    path(또는 SUPPORTED_CHAINS_FILE)가 지정되면 해당 JSON 파일의 체인 목록을,
    아니면 정적 테이블을 사용합니다.
    """
    path = path or config.SUPPORTED_CHAINS_FILE
    if path:
        with open(path, encoding="utf-8") as f:
            entries = json.load(f)
        logger.info(f"체인 설정 파일 로드: {path}")
    else:
        entries = get_chain_configs()

    registry = ChainRegistry.from_dicts(entries)
    logger.info(f"지원 체인 {len(registry)}개 로드 완료: {[c.chain_id for c in registry.list()]}")
    return registry


def resolve_rpc_url(chain: ChainConfig, api_key: Optional[str] = None) -> str:
    """rpcUrl 템플릿의 %API_KEY%를 실제 키로 치환"""
    key = config.INFURA_PROJECT_ID if api_key is None else api_key
    return chain.rpc_url.replace(API_KEY_PLACEHOLDER, key)
