"""
게이트웨이 에러 타입 및 응답 봉투(envelope) 변환
"""
from typing import Any, Dict, List, Optional

from .models import ErrorKind

LEGACY_STATUS_CODE = 500
LEGACY_ERROR_TITLE = "Internal Server Error"


def success_envelope(result: Any) -> Dict[str, Any]:
    return {"success": True, "result": result}


def error_envelope(error: str, message: str) -> Dict[str, Any]:
    return {"success": False, "error": error, "message": message}


class GatewayError(Exception):
    """모든 게이트웨이 에러의 기본 클래스"""

    kind: ErrorKind = ErrorKind.INTERNAL
    status_code: int = 500
    error: str = "Internal Server Error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def http_status(self, legacy: bool = False) -> int:
        return LEGACY_STATUS_CODE if legacy else self.status_code

    def to_envelope(self, legacy: bool = False) -> Dict[str, Any]:
        return error_envelope(LEGACY_ERROR_TITLE if legacy else self.error, self.message)


class ValidationError(GatewayError):
    """입력값 검증 실패 (필드별 메시지를 모두 모음)"""

    kind = ErrorKind.VALIDATION
    status_code = 400
    error = "Bad Request"

    def __init__(self, messages: List[str]):
        self.messages = list(messages)
        super().__init__("; ".join(self.messages))

    def to_envelope(self, legacy: bool = False) -> Dict[str, Any]:
        # 레거시 응답은 첫 번째 검증 실패만 보고함
        if legacy and self.messages:
            return error_envelope(LEGACY_ERROR_TITLE, self.messages[0])
        return super().to_envelope(legacy)


class ChainNotSupported(GatewayError):
    kind = ErrorKind.CHAIN_NOT_SUPPORTED
    status_code = 404
    error = "Not Found"

    def __init__(self, chain_id: int):
        self.chain_id = chain_id
        super().__init__(f"Chain {chain_id} is not supported")


class BackendError(GatewayError):
    """익스플로러/RPC/시세 백엔드 호출 실패. 메시지는 그대로 호출자에게 전달됨"""

    kind = ErrorKind.BACKEND
    status_code = 502
    error = "Bad Gateway"

    def __init__(self, message: str, backend: Optional[str] = None):
        self.backend = backend
        super().__init__(message)


class InternalError(GatewayError):
    kind = ErrorKind.INTERNAL
    status_code = 500
    error = "Internal Server Error"

    def __init__(self, message: str = "An unexpected error occurred"):
        super().__init__(message)


def invalid_parameter_message(field: str) -> str:
    return f"Missing or invalid {field} parameter"
