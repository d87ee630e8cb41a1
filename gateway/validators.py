"""
요청 입력값 정규화 및 검증

모든 함수는 잘못된 입력에도 예외를 던지지 않고 None(유효하지 않음)을 반환합니다.
"""
import re
from typing import Any, Optional

from .models import MAX_CHAIN_ID

DEFAULT_FIAT = "USD,EUR,GBP"
EMPTY_HEX = "0x"

_ADDRESS_BODY = re.compile(r"[0-9a-fA-F]{40}")
_HEX_BODY = re.compile(r"[0-9a-fA-F]*")
_DIGITS = re.compile(r"[0-9]+")
_FIAT_SYMBOL = re.compile(r"[A-Z0-9]{2,10}")


def _strip_hex_prefix(value: str) -> str:
    if value[:2] in ("0x", "0X"):
        return value[2:]
    return value


def sanitize_address(raw: Any) -> Optional[str]:
    """
    주소 정규화

    0x 접두사 유무와 상관없이 40자리 16진수면 "0x" + 40자리로 반환하고,
    그 외(길이 불일치, 16진수 아닌 문자, 빈 값)는 None을 반환합니다.
    대소문자는 그대로 유지합니다.
    """
    if not isinstance(raw, str):
        return None
    body = _strip_hex_prefix(raw.strip())
    if not _ADDRESS_BODY.fullmatch(body):
        return None
    return EMPTY_HEX + body


def parse_chain_id(raw: Any) -> Optional[int]:
    """체인 ID 파싱 (양의 정수만 허용, 앞뒤 공백 허용)"""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, str):
        text = raw.strip()
        if not _DIGITS.fullmatch(text):
            return None
        value = int(text)
    else:
        return None
    if value <= 0 or value > MAX_CHAIN_ID:
        return None
    return value


def sanitize_hex_payload(raw: Any) -> Optional[str]:
    """
    컨트랙트 호출 데이터 정규화

    값이 없으면 "0x"를 반환합니다. 홀수 길이는 앞에 0을 붙여 짝수로 맞추고,
    16진수가 아닌 문자가 있으면 None을 반환합니다.
    """
    if not isinstance(raw, str):
        return EMPTY_HEX
    body = _strip_hex_prefix(raw.strip())
    if not body:
        return EMPTY_HEX
    if not _HEX_BODY.fullmatch(body):
        return None
    if len(body) % 2:
        body = "0" + body
    return EMPTY_HEX + body


def parse_fiat_list(raw: Any, default: str = DEFAULT_FIAT) -> Optional[str]:
    """쉼표로 구분된 법정화폐 심볼 목록 정규화 (대문자, 중복 제거)"""
    if not isinstance(raw, str) or not raw.strip():
        return default
    symbols = []
    for part in raw.split(","):
        symbol = part.strip().upper()
        if not symbol:
            continue
        if not _FIAT_SYMBOL.fullmatch(symbol):
            return None
        if symbol not in symbols:
            symbols.append(symbol)
    if not symbols:
        return default
    return ",".join(symbols)
