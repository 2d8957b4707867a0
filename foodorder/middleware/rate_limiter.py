"""
Food Ordering API — Sliding window login rate limiter (Redis-backed)

RATE_LIMIT_MAX_ATTEMPTS login attempts per RATE_LIMIT_WINDOW_SECONDS per email.
Uses sorted sets (ZADD/ZREMRANGEBYSCORE/ZCARD) for a true sliding window.
"""
import json
import time

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request as StarletteRequest

from foodorder.core.config import get_settings
from foodorder.core.errors import error_body
from foodorder.core.redis_client import get_redis

settings = get_settings()

RATE_LIMIT_PREFIX = "ratelimit:login:"


def _tracking_key(body: bytes, client_host: str) -> str:
    """Lowercased email from the JSON body, or the client address when there is none."""
    try:
        email = json.loads(body).get("email")
    except (ValueError, AttributeError):
        email = None
    return str(email or client_host).lower()


def login_paths() -> set[str]:
    path = f"{settings.API_PREFIX}/auth/login"
    return {path, f"{path}/"}


class SlidingWindowRateLimiter(BaseHTTPMiddleware):
    """
    Applies only to POST {API_PREFIX}/auth/login.
    Key is the email in the request body, falling back to the client IP.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        if not settings.RATE_LIMIT_ENABLED:
            return await call_next(request)
        if request.method != "POST" or request.url.path not in login_paths():
            return await call_next(request)

        body = await request.body()
        client_host = request.client.host if request.client else "unknown"
        key = RATE_LIMIT_PREFIX + _tracking_key(body, client_host)

        redis = get_redis()
        now = time.time()
        window_start = now - settings.RATE_LIMIT_WINDOW_SECONDS

        pipe = redis.pipeline()
        pipe.zremrangebyscore(key, "-inf", window_start)
        pipe.zcard(key)
        pipe.zadd(key, {str(now): now})
        pipe.expire(key, settings.RATE_LIMIT_WINDOW_SECONDS + 1)
        results = await pipe.execute()

        attempt_count = results[1]  # count before this attempt

        if attempt_count >= settings.RATE_LIMIT_MAX_ATTEMPTS:
            return JSONResponse(
                status_code=429,
                content=error_body(
                    f"Too many login attempts. Maximum {settings.RATE_LIMIT_MAX_ATTEMPTS} "
                    f"attempts per {settings.RATE_LIMIT_WINDOW_SECONDS} seconds.",
                    "RateLimited",
                    retry_after_seconds=settings.RATE_LIMIT_WINDOW_SECONDS,
                ),
                headers={"Retry-After": str(settings.RATE_LIMIT_WINDOW_SECONDS)},
            )

        # Re-attach consumed body so the route can read it
        async def receive():
            return {"type": "http.request", "body": body, "more_body": False}

        return await call_next(StarletteRequest(request.scope, receive))
