"""
외부 백엔드(익스플로러, RPC, 시세 API) 호출 공통 클라이언트
"""
import logging
from typing import Any, Dict, Optional

import certifi
import httpx

from .configuration import config
from .errors import BackendError

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {"User-Agent": "chain-gateway/1.0", "Accept": "application/json"}


class BackendClient:
    """
    httpx 기반 JSON 요청 헬퍼

    모든 실패(타임아웃, 2xx가 아닌 응답, 네트워크 오류, JSON 파싱 실패)는
    BackendError로 변환됩니다. 재시도는 하지 않습니다.
    """

    name: str = "backend"

    def __init__(self, timeout: Optional[float] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.timeout = config.BACKEND_TIMEOUT if timeout is None else timeout
        # 테스트에서 httpx.MockTransport 주입용
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        if self.transport is not None:
            return httpx.AsyncClient(transport=self.transport, timeout=self.timeout)
        return httpx.AsyncClient(verify=certifi.where(), timeout=self.timeout)

    async def _get_json(self, url: str, params: Optional[Dict[str, Any]] = None,
                        headers: Optional[Dict[str, str]] = None) -> Any:
        return await self._request("GET", url, params=params, headers=headers)

    async def _post_json(self, url: str, payload: Any, headers: Optional[Dict[str, str]] = None) -> Any:
        return await self._request("POST", url, json=payload, headers=headers)

    async def _request(self, method: str, url: str, headers: Optional[Dict[str, str]] = None, **kwargs) -> Any:
        request_headers = dict(DEFAULT_HEADERS)
        if headers:
            request_headers.update(headers)

        try:
            async with self._client() as client:
                res = await client.request(method, url, headers=request_headers, **kwargs)
                logger.debug(f"[{self.name}] 응답 상태코드: {res.status_code}")
                res.raise_for_status()
        except httpx.TimeoutException as e:
            logger.warning(f"[{self.name}] 요청 시간 초과 → {e}")
            raise BackendError(f"{self.name} request timed out", backend=self.name) from e
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.warning(f"[{self.name}] HTTP 오류 (상태코드: {status_code}) → {e}")
            raise BackendError(f"{self.name} responded with HTTP {status_code}", backend=self.name) from e
        except httpx.RequestError as e:
            logger.warning(f"[{self.name}] 요청 오류 → {e}")
            raise BackendError(f"{self.name} request failed: {e}", backend=self.name) from e

        try:
            return res.json()
        except ValueError as e:
            logger.warning(f"[{self.name}] JSON 파싱 실패 → {e}. 응답 본문: {res.text[:200]}")
            raise BackendError(f"{self.name} returned a malformed response", backend=self.name) from e

    def _malformed(self, detail: str) -> BackendError:
        logger.warning(f"[{self.name}] 응답 형식 오류: {detail}")
        return BackendError(f"{self.name} returned a malformed response", backend=self.name)
