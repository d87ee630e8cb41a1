"""
게이트웨이 설정 관리
"""
import os
import logging
from typing import Optional, List

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() == "true"


class GatewayConfiguration:
    """게이트웨이 설정 클래스"""

    # ========== 실행 환경 ==========
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "production").lower()
    DEBUG_MODE: bool = ENVIRONMENT == "development"

    # 디버그 모드에서는 DEBUG, 그 외에는 INFO
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "DEBUG" if DEBUG_MODE else "INFO").upper()

    HOST: str = os.getenv("HOST", "127.0.0.1" if DEBUG_MODE else "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "5000"))
    RELOAD_ENABLED: bool = _env_bool("RELOAD") if DEBUG_MODE else False

    # ========== 백엔드 설정 ==========
    # rpcUrl 템플릿의 %API_KEY% 자리에 들어갈 Infura 프로젝트 ID
    INFURA_PROJECT_ID: str = os.getenv("INFURA_PROJECT_ID", "")

    # 백엔드 요청 타임아웃 (초)
    BACKEND_TIMEOUT: float = float(os.getenv("BACKEND_TIMEOUT", "10.0"))

    GAS_PRICE_API_URL: str = os.getenv(
        "GAS_PRICE_API_URL", "https://ethgasstation.info/json/ethgasAPI.json"
    )

    # CryptoCompare 시세 API
    PRICE_API_URL: str = os.getenv("PRICE_API_URL", "https://min-api.cryptocompare.com/data/price")
    PRICE_API_KEY: Optional[str] = os.getenv("PRICE_API_KEY")
    PRICE_BASE_SYMBOL: str = os.getenv("PRICE_BASE_SYMBOL", "ETH").upper()
    DEFAULT_FIAT: str = os.getenv("DEFAULT_FIAT", "USD,EUR,GBP")

    # ========== 체인 레지스트리 ==========
    # 지정하면 정적 체인 테이블 대신 JSON 파일을 사용
    SUPPORTED_CHAINS_FILE: Optional[str] = os.getenv("SUPPORTED_CHAINS_FILE")

    # ========== HTTP 설정 ==========
    CORS_ALLOW_ORIGINS: List[str] = [
        origin.strip() for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",") if origin.strip()
    ]

    # true면 모든 실패를 500 / "Internal Server Error"로 응답 (기존 클라이언트 호환)
    LEGACY_ERROR_STATUS: bool = _env_bool("LEGACY_ERROR_STATUS")

    @classmethod
    def log_summary(cls):
        """주요 설정값 로깅 (비밀값 제외)"""
        logger.info(f"환경: {cls.ENVIRONMENT.upper()}, 디버그: {cls.DEBUG_MODE}, 로그 레벨: {cls.LOG_LEVEL}")
        logger.info(f"백엔드 타임아웃: {cls.BACKEND_TIMEOUT}s, 레거시 에러 상태코드: {cls.LEGACY_ERROR_STATUS}")
        if not cls.INFURA_PROJECT_ID:
            logger.warning("INFURA_PROJECT_ID가 설정되지 않았습니다. %API_KEY% 템플릿을 쓰는 RPC는 실패할 수 있습니다.")


config = GatewayConfiguration()
