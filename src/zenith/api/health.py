"""Health check endpoint.

Learn: Verifies the server is running and the database answers.
Redis is reported but never makes the service unhealthy; it only
backs rate limiting.
"""

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from zenith import __version__
from zenith.db.engine import get_db
from zenith.db.redis import get_redis

router = APIRouter()


@router.get("/health")
async def health_check(db: AsyncSession = Depends(get_db)):
    """Check server health and dependency connectivity."""
    checks = {"server": "ok", "version": __version__}

    try:
        await db.execute(text("SELECT 1"))
        checks["database"] = "ok"
    except (SQLAlchemyError, OSError) as e:
        checks["database"] = f"error: {e}"

    try:
        get_redis()
        checks["redis"] = "ok"
    except RuntimeError:
        checks["redis"] = "disabled"

    status = "healthy" if checks["database"] == "ok" else "degraded"
    return {"status": status, **checks}
