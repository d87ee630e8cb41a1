"""
블록 익스플로러(Blockscout 호환 API) 클라이언트
"""
import logging
from typing import Any, Dict, List

from gateway.backend import BackendClient
from gateway.errors import BackendError
from gateway.models import ChainConfig

logger = logging.getLogger(__name__)

# status "0"이지만 정상적인 빈 결과를 의미하는 메시지
EMPTY_RESULT_MESSAGES = ("No transactions found", "No tokens found", "No token transfers found")


class ExplorerClient(BackendClient):
    """주소별 자산 잔액 / 트랜잭션 내역 조회"""

    name = "explorer"

    async def get_assets(self, address: str, chain: ChainConfig) -> List[Dict[str, Any]]:
        """기본 자산 잔액을 첫 번째로, 이어서 ERC-20 토큰 잔액 목록을 반환"""
        native = chain.native_currency
        balance = await self._account_call(chain, "balance", address)
        if not isinstance(balance, (str, int)):
            raise self._malformed(f"balance 결과 형식 오류: {balance!r}")

        assets = [{
            "symbol": native.symbol,
            "name": native.name,
            "decimals": str(native.decimals),
            "contractAddress": "",
            "balance": str(balance),
        }]

        tokens = await self._account_call(chain, "tokenlist", address)
        for token in tokens or []:
            if not isinstance(token, dict):
                raise self._malformed(f"tokenlist 항목 형식 오류: {token!r}")
            assets.append({
                "symbol": token.get("symbol", ""),
                "name": token.get("name", ""),
                "decimals": str(token.get("decimals", "")),
                "contractAddress": token.get("contractAddress", ""),
                "balance": str(token.get("balance", "0")),
            })

        logger.debug(f"[{self.name}:{chain.chain_id}] {address} 자산 {len(assets)}개")
        return assets

    async def get_transactions(self, address: str, chain: ChainConfig) -> List[Dict[str, Any]]:
        txs = await self._account_call(chain, "txlist", address)
        if not isinstance(txs, list):
            raise self._malformed(f"txlist 결과 형식 오류: {txs!r}")
        return [self._normalize_tx(tx) for tx in txs]

    def _normalize_tx(self, tx: Any) -> Dict[str, Any]:
        if not isinstance(tx, dict) or not tx.get("hash"):
            raise self._malformed(f"트랜잭션 항목 형식 오류: {tx!r}")
        if tx.get("isError") == "1" or tx.get("txreceipt_status") == "0":
            status = "failed"
        elif tx.get("blockNumber"):
            status = "confirmed"
        else:
            status = "pending"
        return {
            "hash": tx.get("hash"),
            "timestamp": tx.get("timeStamp"),
            "from": tx.get("from"),
            "to": tx.get("to"),
            "nonce": tx.get("nonce"),
            "value": tx.get("value"),
            "gasPrice": tx.get("gasPrice"),
            "gasUsed": tx.get("gasUsed"),
            "blockNumber": tx.get("blockNumber"),
            "status": status,
            "input": tx.get("input", "0x"),
        }

    async def _account_call(self, chain: ChainConfig, action: str, address: str) -> Any:
        params = {"module": "account", "action": action, "address": address}
        data = await self._get_json(chain.explorer_base_url, params=params)
        if not isinstance(data, dict) or "result" not in data:
            raise self._malformed(f"{action} 응답에 result 없음")

        if str(data.get("status")) == "0":
            message = data.get("message") or f"explorer {action} request failed"
            if message in EMPTY_RESULT_MESSAGES:
                return []
            logger.warning(f"[{self.name}:{chain.chain_id}] {action} 실패: {message}")
            raise BackendError(message, backend=self.name)

        return data["result"]
