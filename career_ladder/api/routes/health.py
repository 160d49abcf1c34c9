"""
Health check routes.
"""
from datetime import datetime, timezone
from typing import Dict

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import text
import redis.asyncio as redis

from career_ladder.core.database import get_db
from career_ladder.core.config import settings
from career_ladder.core.logging import get_logger
from career_ladder.schemas.base import BaseSchema

router = APIRouter(tags=["health"])
logger = get_logger(__name__)

HEALTHY = "healthy"
SKIPPED = "skipped"


class HealthResponse(BaseSchema):
    """Health check response."""

    status: str
    version: str
    environment: str
    timestamp: str
    checks: Dict[str, str]


async def _check_database(db: AsyncSession) -> str:
    try:
        await db.execute(text("SELECT 1"))
    except Exception as e:
        logger.warning("health_database_unreachable", exc_type=type(e).__name__)
        return f"unhealthy: {type(e).__name__}"
    return HEALTHY


async def _check_rate_limit_store() -> str:
    """Redis only matters when the rate limiter keeps its counters there."""
    storage_uri = settings.limiter_storage_uri
    if not storage_uri.startswith(("redis://", "rediss://")):
        return SKIPPED

    client = redis.from_url(storage_uri)
    try:
        await client.ping()
    except Exception as e:
        logger.warning("health_redis_unreachable", exc_type=type(e).__name__)
        return f"unhealthy: {type(e).__name__}"
    finally:
        await client.aclose()
    return HEALTHY


@router.get("/health", response_model=HealthResponse)
async def health_check(db: AsyncSession = Depends(get_db)):
    """
    Store and rate-limit backend status for monitoring.

    Reports "degraded" rather than failing when a dependency is down.
    """
    checks = {
        "database": await _check_database(db),
        "redis": await _check_rate_limit_store(),
    }
    ok = all(v in (HEALTHY, SKIPPED) for v in checks.values())

    return HealthResponse(
        status=HEALTHY if ok else "degraded",
        version=settings.app_version,
        environment=settings.environment,
        timestamp=datetime.now(timezone.utc).isoformat(),
        checks=checks,
    )
