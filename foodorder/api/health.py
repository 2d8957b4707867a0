"""
Food Ordering API — Health endpoint
"""
import asyncio

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import text

from foodorder.core.config import get_settings
from foodorder.core.redis_client import ping_redis
from foodorder.schemas.records import utcnow

settings = get_settings()
router = APIRouter(tags=["health"])


async def _check_database() -> None:
    from foodorder.db.database import engine

    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))


@router.get("/health")
async def health_check():
    deps: dict[str, str] = {}
    healthy = True

    if settings.use_memory_store:
        deps["store"] = "ok (memory)"
    else:
        try:
            await asyncio.wait_for(_check_database(), timeout=settings.HEALTH_CHECK_TIMEOUT)
            deps["store"] = "ok"
        except Exception as e:
            deps["store"] = f"error: {str(e)[:100]}"
            healthy = False

    if settings.RATE_LIMIT_ENABLED:
        try:
            await ping_redis()
            deps["redis"] = "ok"
        except Exception as e:
            deps["redis"] = f"error: {str(e)[:100]}"
            healthy = False

    return JSONResponse(
        content={
            "success": healthy,
            "message": "Server is running" if healthy else "Server is degraded",
            "data": {
                "status": "healthy" if healthy else "degraded",
                "service": settings.SERVICE_NAME,
                "version": settings.SERVICE_VERSION,
                "timestamp": utcnow().isoformat(),
                "dependencies": deps,
            },
        },
        status_code=200 if healthy else 503,
    )
