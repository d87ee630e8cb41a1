import uvicorn
import logging
import sys

from dotenv import load_dotenv

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gateway import config
from gateway.cryptocompare import CryptoComparePriceOracle
from gateway.gas_station import GasStationOracle
from src.middleware import SecurityHeadersMiddleware, register_exception_handlers
from src.routers.api import register_api_routes
from src.routers.utility import register_utility_routes
from src.services.chain_configs import load_chain_registry
from src.services.dispatcher import Dispatcher
from src.services.explorer_client import ExplorerClient
from src.services.rpc_client import RpcClient

load_dotenv()

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

logger = logging.getLogger(__name__)


# --- 로깅 설정 ---
def setup_logging(log_level_str: str = config.LOG_LEVEL) -> int:
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True
    )

    httpx_logger = logging.getLogger("httpx")
    httpx_logger.setLevel(logging.WARNING)
    httpx_logger.propagate = True

    for logger_name in ["uvicorn", "uvicorn.access", "uvicorn.error", "uvicorn.asgi",
                        "gateway", "src", "main"]:
        logger_instance = logging.getLogger(logger_name)
        logger_instance.setLevel(log_level)
        logger_instance.propagate = True
        logger_instance.handlers.clear()

    return log_level


# --- FastAPI 앱 초기화 ---
def create_app(registry=None, dispatcher: Dispatcher = None, legacy_error_status: bool = None) -> FastAPI:
    """
    앱 팩토리

    registry/dispatcher를 주입하면 그대로 사용하고, 없으면 설정값으로 생성합니다.
    """
    if legacy_error_status is None:
        legacy_error_status = config.LEGACY_ERROR_STATUS

    if dispatcher is None:
        registry = registry if registry is not None else load_chain_registry()
        dispatcher = Dispatcher(
            registry=registry,
            explorer=ExplorerClient(),
            rpc=RpcClient(),
            gas_oracle=GasStationOracle(),
            price_oracle=CryptoComparePriceOracle(),
            legacy_error_status=legacy_error_status,
            default_fiat=config.DEFAULT_FIAT,
        )

    app = FastAPI(title="Multi-Chain Gateway", version="1.0.0")
    app.state.dispatcher = dispatcher

    app.add_middleware(SecurityHeadersMiddleware, legacy_error_status=legacy_error_status)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ALLOW_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app, legacy_error_status)

    # --- 라우터 등록 ---
    register_utility_routes(app)
    register_api_routes(app, dispatcher)

    @app.on_event("startup")
    async def startup_event():
        logger.info("="*60)
        logger.info("게이트웨이 시작 중...")
        logger.info(f"지원 체인: {[c.chain_id for c in dispatcher.registry.list()]}")
        logger.info("="*60)

    @app.on_event("shutdown")
    async def shutdown_event():
        logger.info("게이트웨이 종료 중...")

    return app


setup_logging()
app = create_app()


if __name__ == "__main__":
    logger.info("="*60)
    config.log_summary()
    logger.info("="*60)

    log_level_str = config.LOG_LEVEL
    uvicorn_log_config = {
        "version": 1, "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": LOG_FORMAT, "datefmt": LOG_DATE_FORMAT},
            "access": {"format": LOG_FORMAT, "datefmt": LOG_DATE_FORMAT},
        },
        "handlers": {
            "default": {"formatter": "default", "class": "logging.StreamHandler", "stream": "ext://sys.stdout"},
            "access": {"formatter": "access", "class": "logging.StreamHandler", "stream": "ext://sys.stdout"},
        },
        "loggers": {
            "uvicorn": {"handlers": ["default"], "level": log_level_str, "propagate": False},
            "uvicorn.error": {"handlers": ["default"], "level": log_level_str, "propagate": False},
            "uvicorn.access": {"handlers": ["access"], "level": log_level_str, "propagate": False},
        },
        "root": {"level": log_level_str, "handlers": ["default"]},
    }

    logger.info(f"서버 시작 (호스트: {config.HOST}, 포트: {config.PORT})")
    uvicorn.run("main:app", host=config.HOST, port=config.PORT, log_level=log_level_str.lower(),
                log_config=uvicorn_log_config, use_colors=False, access_log=True, reload=config.RELOAD_ENABLED)
