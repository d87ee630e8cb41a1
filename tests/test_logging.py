"""
로깅 설정 테스트
"""
import logging

import pytest

from main import LOG_FORMAT, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_levels():
    """루트/게이트웨이 로거 레벨과 httpx 로거 상한 확인"""
    level = setup_logging("DEBUG")

    assert level == logging.DEBUG
    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("gateway").level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.WARNING


def test_setup_logging_unknown_level_falls_back_to_info():
    assert setup_logging("LOUD") == logging.INFO


def test_setup_logging_format():
    setup_logging("INFO")

    formats = [h.formatter._fmt for h in logging.getLogger().handlers if h.formatter]
    assert LOG_FORMAT in formats


def test_module_loggers_propagate_to_root():
    setup_logging("INFO")

    for name in ["uvicorn", "uvicorn.error", "src", "main"]:
        lg = logging.getLogger(name)
        assert lg.propagate is True
        assert lg.handlers == []
