"""
가스 가격 오라클 (ETH Gas Station 형식)
"""
import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional

from .backend import BackendClient
from .configuration import config

logger = logging.getLogger(__name__)

# (응답 키, 가격 필드, 대기시간 필드)
GAS_LEVELS = (
    ("slow", "safeLow", "safeLowWait"),
    ("average", "average", "avgWait"),
    ("fast", "fast", "fastWait"),
)


class GasStationOracle(BackendClient):
    """현재 가스 가격 조회 서비스"""

    name = "gas price oracle"

    def __init__(self, url: Optional[str] = None, **kwargs):
        super().__init__(**kwargs)
        self.url = url or config.GAS_PRICE_API_URL

    async def current(self) -> Dict[str, Dict[str, Any]]:
        """
        현재 가스 가격

        Returns:
            {"slow": {"time": 10.5, "price": 12.0}, "average": {...}, "fast": {...}}
            time은 분, price는 gwei 단위
        """
        data = await self._get_json(self.url)
        if not isinstance(data, dict):
            raise self._malformed(f"dict가 아닌 응답: {type(data).__name__}")

        result = {}
        for level, price_key, wait_key in GAS_LEVELS:
            # Gas Station은 가격을 0.1 gwei 단위로 내려줌
            price = self._number(data, price_key) / 10
            result[level] = {"time": float(self._number(data, wait_key)), "price": float(price)}
        logger.debug(f"가스 가격: {result}")
        return result

    def _number(self, data: Dict[str, Any], key: str) -> Decimal:
        value = data.get(key)
        if value is None or isinstance(value, bool):
            raise self._malformed(f"'{key}' 필드 없음")
        try:
            return Decimal(str(value))
        except InvalidOperation:
            raise self._malformed(f"'{key}' 값이 숫자가 아님: {value!r}")
