"""
Food Ordering API — FastAPI application entrypoint
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from foodorder.api import auth, foods, health, orders, restaurants, users
from foodorder.core.config import get_settings
from foodorder.core.errors import register_exception_handlers
from foodorder.core.redis_client import close_redis
from foodorder.middleware.auth import JWTAuthMiddleware
from foodorder.middleware.rate_limiter import SlidingWindowRateLimiter

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.use_memory_store:
        logger.warning("Using the in-memory store; data is lost on restart")
        yield
        await close_redis()
        return

    from foodorder.db.database import Base, engine
    import foodorder.models  # noqa: F401  registers the tables on Base.metadata

    # Startup: create tables (use migrations for schema changes in production)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    await close_redis()
    await engine.dispose()


app = FastAPI(
    title="Food Ordering API",
    description="Users, restaurants, menus and priced orders with role-based access.",
    version=settings.SERVICE_VERSION,
    lifespan=lifespan,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url=None,
)

# ── CORS ──────────────────────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.CLIENT_URL],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ── Rate Limiting + JWT (the last one added runs first) ───────────────────────
app.add_middleware(SlidingWindowRateLimiter)
app.add_middleware(JWTAuthMiddleware)

# ── Prometheus Metrics ────────────────────────────────────────────────────────
if settings.METRICS_ENABLED:
    Instrumentator().instrument(app).expose(app, endpoint="/metrics")

register_exception_handlers(app)

# ── Routers ───────────────────────────────────────────────────────────────────
for module in (auth, users, restaurants, foods, orders, health):
    app.include_router(module.router, prefix=settings.API_PREFIX)


@app.get("/")
async def root():
    return {"service": settings.SERVICE_NAME, "version": settings.SERVICE_VERSION}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("foodorder.main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)
