"""
체인 노드 JSON-RPC 클라이언트
"""
import logging
from typing import Any, List, Optional

from gateway.backend import BackendClient
from gateway.errors import BackendError
from gateway.models import ChainConfig
from .chain_configs import resolve_rpc_url

logger = logging.getLogger(__name__)


class RpcClient(BackendClient):
    """nonce, 가스 추정, 블록 번호, 임의 RPC 호출"""

    name = "rpc"

    def __init__(self, api_key: Optional[str] = None, **kwargs):
        super().__init__(**kwargs)
        self.api_key = api_key

    async def get_nonce(self, address: str, chain: ChainConfig) -> int:
        result = await self._call(chain, "eth_getTransactionCount", [address, "pending"])
        return self._hex_to_int(result)

    async def estimate_gas(self, contract_address: str, data: str, chain: ChainConfig) -> int:
        result = await self._call(chain, "eth_estimateGas", [{"to": contract_address, "data": data}])
        return self._hex_to_int(result)

    async def block_number(self, chain: ChainConfig) -> int:
        result = await self._call(chain, "eth_blockNumber", [])
        return self._hex_to_int(result)

    async def raw(self, chain: ChainConfig, body: Any) -> Any:
        """요청 본문을 그대로 노드에 전달하고 응답 JSON을 그대로 반환"""
        logger.debug(f"[{self.name}:{chain.chain_id}] custom request 전달")
        return await self._post_json(resolve_rpc_url(chain, self.api_key), body)

    async def _call(self, chain: ChainConfig, method: str, params: List[Any]) -> Any:
        payload = {"jsonrpc": "2.0", "method": method, "params": params, "id": 1}
        data = await self._post_json(
            resolve_rpc_url(chain, self.api_key), payload, headers={"Content-Type": "application/json"}
        )
        if not isinstance(data, dict):
            raise self._malformed(f"{method} 응답이 객체가 아님")

        error = data.get("error")
        if error:
            message = error.get("message") if isinstance(error, dict) else str(error)
            logger.warning(f"[{self.name}:{chain.chain_id}] {method} RPC 오류: {message}")
            raise BackendError(message or f"{method} failed", backend=self.name)

        if data.get("result") is None:
            raise self._malformed(f"{method} 응답에 result 없음")
        return data["result"]

    def _hex_to_int(self, value: Any) -> int:
        if not isinstance(value, str) or value[:2] not in ("0x", "0X"):
            raise self._malformed(f"16진수 결과가 아님: {value!r}")
        try:
            return int(value, 16)
        except ValueError:
            raise self._malformed(f"16진수 결과가 아님: {value!r}")
