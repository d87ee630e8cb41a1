"""
Utility 라우터 (hello, health)
"""
import time

from fastapi.responses import PlainTextResponse


def register_utility_routes(app):
    """Utility 라우트를 FastAPI 앱에 등록"""

    @app.get("/hello", response_class=PlainTextResponse)
    async def hello():
        return PlainTextResponse("Hello World", status_code=200)

    @app.get("/health")
    async def health_check():
        """헬스 체크 엔드포인트"""
        return {"status": "healthy", "timestamp": time.time()}
