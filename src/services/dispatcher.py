"""
요청 디스패처

각 연산은 입력 검증 → 체인 조회 → 백엔드 호출 1회 → 응답 봉투 변환 순서로 처리됩니다.
"""
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Optional

from fastapi.responses import JSONResponse

from gateway.configuration import config
from gateway.errors import (
    BackendError,
    GatewayError,
    ValidationError,
    invalid_parameter_message,
    success_envelope,
)
from gateway.models import ChainConfig, ErrorKind
from gateway.validators import (
    DEFAULT_FIAT,
    parse_chain_id,
    parse_fiat_list,
    sanitize_address,
    sanitize_hex_payload,
)
from .chain_configs import ChainRegistry

logger = logging.getLogger(__name__)

BackendCall = Callable[[Optional[ChainConfig]], Awaitable[Any]]

# custom-request 본문을 JSON으로 읽지 못했을 때 라우터가 넘기는 값
INVALID_BODY = object()


@dataclass(frozen=True)
class DispatchResult:
    status_code: int
    body: Dict[str, Any]

    @property
    def success(self) -> bool:
        return bool(self.body.get("success"))

    def to_response(self) -> JSONResponse:
        return JSONResponse(status_code=self.status_code, content=self.body)


class Dispatcher:
    """연산별 검증/백엔드 호출/응답 변환"""

    def __init__(self, registry: ChainRegistry, explorer, rpc, gas_oracle, price_oracle,
                 legacy_error_status: bool = False, default_fiat: Optional[str] = None):
        self.registry = registry
        self.explorer = explorer
        self.rpc = rpc
        self.gas_oracle = gas_oracle
        self.price_oracle = price_oracle
        self.legacy_error_status = legacy_error_status
        configured_fiat = default_fiat or config.DEFAULT_FIAT
        self.default_fiat = parse_fiat_list(configured_fiat)
        if self.default_fiat is None:
            logger.warning(f"잘못된 DEFAULT_FIAT 설정({configured_fiat!r}), {DEFAULT_FIAT} 사용")
            self.default_fiat = DEFAULT_FIAT

    # --- 연산 ---

    async def get_account_assets(self, address: Any, chain_id: Any) -> DispatchResult:
        errors: List[str] = []
        address = self._require(sanitize_address(address), "address", errors)
        chain_id = self._require(parse_chain_id(chain_id), "chainId", errors)
        return await self._dispatch(
            "account-assets", errors, chain_id,
            lambda chain: self.explorer.get_assets(address, chain),
        )

    async def get_account_transactions(self, address: Any, chain_id: Any) -> DispatchResult:
        errors: List[str] = []
        address = self._require(sanitize_address(address), "address", errors)
        chain_id = self._require(parse_chain_id(chain_id), "chainId", errors)
        return await self._dispatch(
            "account-transactions", errors, chain_id,
            lambda chain: self.explorer.get_transactions(address, chain),
        )

    async def get_account_nonce(self, address: Any, chain_id: Any) -> DispatchResult:
        errors: List[str] = []
        address = self._require(sanitize_address(address), "address", errors)
        chain_id = self._require(parse_chain_id(chain_id), "chainId", errors)
        return await self._dispatch(
            "account-nonce", errors, chain_id,
            lambda chain: self.rpc.get_nonce(address, chain),
        )

    async def get_gas_limit(self, contract_address: Any, data: Any, chain_id: Any) -> DispatchResult:
        errors: List[str] = []
        contract_address = self._require(sanitize_address(contract_address), "contractAddress", errors)
        data = self._require(sanitize_hex_payload(data), "data", errors)
        chain_id = self._require(parse_chain_id(chain_id), "chainId", errors)
        return await self._dispatch(
            "gas-limit", errors, chain_id,
            lambda chain: self.rpc.estimate_gas(contract_address, data, chain),
        )

    async def get_gas_prices(self) -> DispatchResult:
        return await self._dispatch("gas-prices", [], None, lambda _: self.gas_oracle.current())

    async def get_eth_prices(self, fiat: Any = None) -> DispatchResult:
        errors: List[str] = []
        fiat = self._require(parse_fiat_list(fiat, default=self.default_fiat), "fiat", errors)
        return await self._dispatch("eth-prices", errors, None, lambda _: self.price_oracle.quote(fiat))

    async def get_block_number(self, chain_id: Any) -> DispatchResult:
        errors: List[str] = []
        chain_id = self._require(parse_chain_id(chain_id), "chainId", errors)
        return await self._dispatch(
            "block-number", errors, chain_id,
            lambda chain: self.rpc.block_number(chain),
        )

    async def forward_custom_rpc(self, chain_id: Any, body: Any) -> DispatchResult:
        """본문은 형식 검증 없이 그대로 RPC 노드에 전달"""
        errors: List[str] = []
        chain_id = self._require(parse_chain_id(chain_id), "chainId", errors)
        if body is INVALID_BODY:
            errors.append(invalid_parameter_message("body"))
        return await self._dispatch(
            "custom-request", errors, chain_id,
            lambda chain: self.rpc.raw(chain, body),
        )

    def list_supported_chains(self) -> DispatchResult:
        chains = [chain.to_public_dict() for chain in self.registry.list()]
        return DispatchResult(200, success_envelope(chains))

    # --- 공통 처리 ---

    def failure(self, operation: str, exc: GatewayError) -> DispatchResult:
        if exc.kind == ErrorKind.BACKEND:
            logger.warning(f"[{operation}] 백엔드 오류: {exc.message}")
        elif exc.kind == ErrorKind.INTERNAL:
            logger.error(f"[{operation}] 내부 오류: {exc.message}")
        else:
            logger.info(f"[{operation}] 요청 거부 ({exc.kind.value}): {exc.message}")
        return DispatchResult(exc.http_status(self.legacy_error_status), exc.to_envelope(self.legacy_error_status))

    @staticmethod
    def _require(value: Any, field: str, errors: List[str]) -> Any:
        if value is None:
            errors.append(invalid_parameter_message(field))
        return value

    async def _dispatch(self, operation: str, errors: List[str], chain_id: Optional[int],
                        call: BackendCall) -> DispatchResult:
        if errors:
            return self.failure(operation, ValidationError(errors))

        chain = None
        if chain_id is not None:
            try:
                chain = self.registry.lookup(chain_id)
            except GatewayError as e:
                return self.failure(operation, e)

        try:
            result = await call(chain)
        except GatewayError as e:
            return self.failure(operation, e)
        except Exception as e:
            logger.error(f"[{operation}] 백엔드 호출 중 예외 발생 → {e}", exc_info=True)
            return self.failure(operation, BackendError(str(e) or e.__class__.__name__))

        logger.debug(f"[{operation}] 성공")
        return DispatchResult(200, success_envelope(result))
