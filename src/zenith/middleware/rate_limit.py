"""Rate limiting middleware — Redis-based fixed window per minute.

Learn: Each client IP gets a counter key like
"zenith:rl:{ip}:{bucket}:{minute}". Login and registration share a
stricter "auth" bucket (10/min by default) to slow down password
guessing; everything else falls in the "api" bucket.

Skips rate limiting when Redis is not initialized (e.g., in tests) and
lets requests through if Redis errors mid-flight.
"""

import time

import structlog
from redis.exceptions import RedisError
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from zenith.db.redis import get_redis

logger = structlog.get_logger()

AUTH_PATHS = ("/api/auth/login", "/api/users")


def bucket_for(method: str, path: str) -> str:
    # Only POST /api/users registers; GETs under it are ordinary reads
    if method == "POST" and path.rstrip("/") in AUTH_PATHS:
        return "auth"
    return "api"


def window_key(client_ip: str, bucket: str, now: float) -> str:
    return f"zenith:rl:{client_ip}:{bucket}:{int(now // 60)}"


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Redis-based rate limiting per IP per minute."""

    def __init__(self, app, default_rpm: int = 100, auth_rpm: int = 10):
        super().__init__(app)
        self.default_rpm = default_rpm
        self.auth_rpm = auth_rpm

    async def dispatch(self, request: Request, call_next) -> Response:
        try:
            redis = get_redis()
        except RuntimeError:
            return await call_next(request)

        client_ip = request.client.host if request.client else "unknown"
        bucket = bucket_for(request.method, request.url.path)
        rpm = self.auth_rpm if bucket == "auth" else self.default_rpm
        key = window_key(client_ip, bucket, time.time())

        try:
            count = await redis.incr(key)
            if count == 1:
                await redis.expire(key, 120)  # 2-min TTL for safety
        except RedisError as e:
            logger.warning("rate_limit.redis_error", error=str(e))
            return await call_next(request)

        if count > rpm:
            logger.info("rate_limit.exceeded", client_ip=client_ip, bucket=bucket)
            return JSONResponse(
                status_code=429,
                content={"detail": "Rate limit exceeded. Try again later."},
                headers={"Retry-After": "60"},
            )

        response = await call_next(request)
        response.headers["X-RateLimit-Limit"] = str(rpm)
        response.headers["X-RateLimit-Remaining"] = str(max(0, rpm - count))
        return response
