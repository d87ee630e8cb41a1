"""
크립토컴페어(CryptoCompare) API 서비스
기본 자산(ETH)의 현재 법정화폐 시세 조회
"""
import logging
from typing import Dict, Optional

from .backend import BackendClient
from .configuration import config
from .errors import BackendError

logger = logging.getLogger(__name__)


class CryptoComparePriceOracle(BackendClient):
    """크립토컴페어 시세 서비스"""

    name = "price oracle"

    BASE_URL: str = config.PRICE_API_URL
    # API 키는 선택사항 (무료 호출량 내에서는 없어도 동작)
    API_KEY: Optional[str] = config.PRICE_API_KEY

    def __init__(self, base_symbol: str = config.PRICE_BASE_SYMBOL, base_url: Optional[str] = None,
                 api_key: Optional[str] = None, **kwargs):
        super().__init__(**kwargs)
        self.base_symbol = base_symbol.upper()
        self.base_url = base_url or self.BASE_URL
        self.api_key = api_key if api_key is not None else self.API_KEY

    async def quote(self, fiat: str) -> Dict[str, float]:
        """
        기본 자산 시세 조회

        Args:
            fiat: 쉼표로 구분된 법정화폐 심볼 (예: "USD,EUR,GBP")

        Returns:
            {"USD": 3012.5, "EUR": 2788.1, "GBP": 2391.0}
        """
        headers = {}
        if self.api_key:
            headers["authorization"] = f"Apikey {self.api_key}"

        params = {"fsym": self.base_symbol, "tsyms": fiat}
        logger.info(f"크립토컴페어 시세 조회: {self.base_symbol} → {fiat}")
        data = await self._get_json(self.base_url, params=params, headers=headers)

        if not isinstance(data, dict):
            raise self._malformed(f"dict가 아닌 응답: {type(data).__name__}")

        # 크립토컴페어는 오류도 200으로 응답함
        if data.get("Response") == "Error":
            message = data.get("Message") or "price oracle returned an error"
            logger.warning(f"⚠️ 크립토컴페어 오류 응답: {message}")
            raise BackendError(message, backend=self.name)

        prices = {}
        for symbol, price in data.items():
            if not isinstance(price, (int, float)) or isinstance(price, bool):
                raise self._malformed(f"{symbol} 가격이 숫자가 아님: {price!r}")
            prices[symbol] = price
        return prices
