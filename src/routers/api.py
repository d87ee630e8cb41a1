"""
API 라우터 (계정, 가스, 시세, 블록, 커스텀 RPC, 지원 체인)
"""
from typing import Optional

from fastapi import Query, Request

from src.services.dispatcher import Dispatcher, INVALID_BODY
import logging

logger = logging.getLogger(__name__)


def register_api_routes(app, dispatcher: Dispatcher):
    """API 라우트를 FastAPI 앱에 등록"""

    @app.get("/account-assets")
    async def account_assets(address: Optional[str] = None,
                             chain_id: Optional[str] = Query(None, alias="chainId")):
        """주소의 자산 잔액 조회"""
        result = await dispatcher.get_account_assets(address, chain_id)
        return result.to_response()

    @app.get("/account-transactions")
    async def account_transactions(address: Optional[str] = None,
                                   chain_id: Optional[str] = Query(None, alias="chainId")):
        """주소의 트랜잭션 내역 조회"""
        result = await dispatcher.get_account_transactions(address, chain_id)
        return result.to_response()

    @app.get("/account-nonce")
    async def account_nonce(address: Optional[str] = None,
                            chain_id: Optional[str] = Query(None, alias="chainId")):
        result = await dispatcher.get_account_nonce(address, chain_id)
        return result.to_response()

    @app.get("/gas-limit")
    async def gas_limit(contract_address: Optional[str] = Query(None, alias="contractAddress"),
                        data: Optional[str] = None,
                        chain_id: Optional[str] = Query(None, alias="chainId")):
        """컨트랙트 호출 가스 한도 추정 (data 기본값 0x)"""
        result = await dispatcher.get_gas_limit(contract_address, data, chain_id)
        return result.to_response()

    @app.get("/gas-prices")
    async def gas_prices():
        result = await dispatcher.get_gas_prices()
        return result.to_response()

    @app.get("/eth-prices")
    async def eth_prices(fiat: Optional[str] = None):
        """기본 자산 시세 조회 (fiat 기본값 USD,EUR,GBP)"""
        result = await dispatcher.get_eth_prices(fiat)
        return result.to_response()

    @app.get("/block-number")
    async def block_number(chain_id: Optional[str] = Query(None, alias="chainId")):
        result = await dispatcher.get_block_number(chain_id)
        return result.to_response()

    @app.post("/custom-request")
    async def custom_request(request: Request, chain_id: Optional[str] = Query(None, alias="chainId")):
        """임의 JSON-RPC 요청 본문을 그대로 노드에 전달"""
        try:
            body = await request.json()
        except ValueError as e:
            logger.info(f"custom-request 본문 파싱 실패: {e}")
            body = INVALID_BODY
        result = await dispatcher.forward_custom_rpc(chain_id, body)
        return result.to_response()

    @app.get("/supported-chains")
    async def supported_chains():
        """지원하는 체인 목록 조회"""
        return dispatcher.list_supported_chains().to_response()
