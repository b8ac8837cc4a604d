"""Liveness and readiness endpoints.

/health answers while the process is up. /healthz reports each backing
service; the API is ready when the database and Redis (if configured) answer.
"""

from typing import Any

import redis.asyncio as aioredis
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from sqlalchemy import text

from backend.app.config import Settings, get_settings
from backend.app.db.engine import get_async_engine

router = APIRouter()


async def check_db(settings: Settings) -> tuple[bool, str]:
    """Run a trivial query on the app engine.

    Returns:
        (is_ok, status_message)
    """
    try:
        async with get_async_engine().connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as e:
        return (False, f"error: {type(e).__name__}")

    return (True, "ok")


async def check_redis(settings: Settings) -> tuple[bool, str]:
    """Ping Redis when a URL is configured.

    Returns:
        (is_ok, status_message)
    """
    if not settings.redis_url:
        return (True, "not_configured")

    client = aioredis.from_url(settings.redis_url)
    try:
        await client.ping()
    except Exception as e:
        return (False, f"error: {type(e).__name__}")
    finally:
        await client.aclose()

    return (True, "ok")


def mail_transport(settings: Settings) -> str:
    """Which transport confirmation mail goes through."""
    return f"smtp://{settings.smtp_host}:{settings.smtp_port}" if settings.smtp_host else "log_only"


@router.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe, 200 while the process runs."""
    return {"status": "ok"}


@router.get("/healthz", response_model=None)
async def healthz() -> dict[str, Any] | JSONResponse:
    """Readiness probe.

    Returns:
        200 with component status when DB and Redis answer, 503 otherwise.
        Mail is reported but never fails readiness.
    """
    settings = get_settings()

    db_ok, db_status = await check_db(settings)
    redis_ok, redis_status = await check_redis(settings)

    body = {
        "status": "ok" if db_ok and redis_ok else "degraded",
        "components": {
            "db": db_status,
            "redis": redis_status,
            "mail": mail_transport(settings),
        },
    }

    if not (db_ok and redis_ok):
        return JSONResponse(body, status_code=status.HTTP_503_SERVICE_UNAVAILABLE)

    return body
