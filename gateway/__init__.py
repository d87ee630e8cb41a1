"""
게이트웨이 공통 모듈 패키지
"""
from .configuration import config, GatewayConfiguration
from .models import ChainConfig, NativeCurrency, ErrorKind
from .errors import (
    GatewayError,
    ValidationError,
    ChainNotSupported,
    BackendError,
    InternalError,
)

__all__ = [
    'config',
    'GatewayConfiguration',
    'ChainConfig',
    'NativeCurrency',
    'ErrorKind',
    'GatewayError',
    'ValidationError',
    'ChainNotSupported',
    'BackendError',
    'InternalError',
]
