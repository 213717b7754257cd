"""FastAPI application factory.

Learn: App factory pattern — create_app() returns a configured FastAPI
instance. Lifespan manages startup/shutdown (Redis, database pool).
Middleware, CORS, exception handlers and routers all registered here.

The TokenIssuer is built from settings exactly once, here, and stored
on app.state. Routes reach it through auth.dependencies.get_token_issuer.
"""

from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from redis.exceptions import RedisError

from zenith import __version__
from zenith.api import api_router
from zenith.auth.jwt import TokenIssuer
from zenith.config import Settings, settings as default_settings
from zenith.errors import HTTP_STATUS, ServiceError

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown lifecycle.

    Learn: Anything before `yield` runs at startup, after `yield` runs
    at shutdown.
    """
    cfg: Settings = app.state.settings
    logger.info(
        "zenith.starting",
        version=__version__,
        environment=cfg.environment,
        port=cfg.port,
        token_lifetime_minutes=cfg.token_lifetime_minutes,
    )

    from zenith.db.redis import close_redis, init_redis
    try:
        await init_redis()
        logger.info("zenith.redis_connected", url=cfg.redis_url)
    except (RedisError, OSError) as e:
        # Redis is optional; only rate limiting depends on it
        logger.warning("zenith.redis_unavailable", error=str(e))

    yield

    logger.info("zenith.shutdown")
    await close_redis()

    from zenith.db.engine import engine
    await engine.dispose()


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    """Translate a service error kind into its HTTP status."""
    return JSONResponse(
        status_code=HTTP_STATUS[exc.kind],
        content={"detail": exc.detail, "error": exc.kind.value},
    )


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Missing or malformed fields are a plain 400 Bad Request."""
    return JSONResponse(
        status_code=400,
        content={
            "detail": jsonable_encoder(exc.errors()),
            "error": "invalid_argument",
        },
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build and return the FastAPI application."""
    cfg = settings or default_settings

    app = FastAPI(
        title="Zenith",
        description="Booking backend — accounts, tasks and travel catalog",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = cfg
    app.state.token_issuer = TokenIssuer.from_settings(cfg)

    # ── Middleware stack ──────────────────────────────────────
    # Note: Starlette middleware executes in reverse order of registration.
    # Request flow: CORS → RateLimit → Security → RequestId → handler

    from zenith.middleware.rate_limit import RateLimitMiddleware
    from zenith.middleware.request_id import RequestIdMiddleware
    from zenith.middleware.security import SecurityHeadersMiddleware

    app.add_middleware(RequestIdMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        RateLimitMiddleware,
        default_rpm=cfg.rate_limit_rpm,
        auth_rpm=cfg.rate_limit_auth_rpm,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(api_router)

    return app


# Default app instance (used by uvicorn: zenith.main:app)
app = create_app()
