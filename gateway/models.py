"""
게이트웨이에서 사용하는 타입 정의
"""
from enum import Enum
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_validator

# JSON 클라이언트가 정밀도 손실 없이 표현할 수 있는 최대 정수 (2^53 - 1)
MAX_CHAIN_ID = 9007199254740991


class ErrorKind(str, Enum):
    """에러 유형 분류"""
    VALIDATION = "validation"                  # 잘못된/누락된 입력
    CHAIN_NOT_SUPPORTED = "chain_not_supported"  # 레지스트리에 없는 체인
    BACKEND = "backend"                        # 익스플로러/RPC/시세 호출 실패
    INTERNAL = "internal"                      # 처리 경로 내부 오류


class NativeCurrency(BaseModel):
    """체인의 기본 자산 정보"""
    model_config = ConfigDict(frozen=True)

    symbol: str = Field(min_length=1)
    name: str = ""
    decimals: int = Field(ge=0)


class ChainConfig(BaseModel):
    """체인 하나의 백엔드 설정 (로드 후 변경 불가)"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    chain_id: int = Field(alias="chainId", gt=0, le=MAX_CHAIN_ID)
    name: str = ""
    short_name: str = Field(default="", alias="shortName")
    network: str = ""
    explorer_base_url: str = Field(alias="explorerBaseUrl", min_length=1)
    # %API_KEY% 자리 표시자를 포함할 수 있음
    rpc_url: str = Field(alias="rpcUrl", min_length=1)
    native_currency: NativeCurrency = Field(alias="nativeCurrency")

    @field_validator("explorer_base_url", "rpc_url")
    @classmethod
    def check_http_url(cls, value: str) -> str:
        parsed = urlparse(value)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"http(s) URL이 아님: {value!r}")
        return value

    def to_public_dict(self) -> dict:
        """supported-chains 응답용 camelCase 딕셔너리"""
        return self.model_dump(by_alias=True)
