"""
Restaurant Ordering API: Health Routes
=========================================

What:  Two public liveness probes.
         GET /ping   → {status:"ok", time}: the database's CURRENT_TIMESTAMP,
                       so a 200 proves a round trip to the database
         GET /health → service status, version, database reachability, uptime
Why:   /ping is the quick smoke test; /health is what container health
       checks and load balancers poll. /health always answers 200 and reports
       an unreachable database in the body.
"""

import logging
import time

from fastapi import APIRouter, Depends
from sqlalchemy import func, select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app import __version__
from app.database import get_db_session
from app.schemas.common import ERROR_RESPONSES, HealthResponse, PingResponse
from app.services.resource_service import database_errors

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Module load time, used for uptime reporting
_start_time = time.time()


@router.get(
    "/ping",
    response_model=PingResponse,
    responses={500: ERROR_RESPONSES[500]},
    summary="Database round-trip check",
)
async def ping(db: AsyncSession = Depends(get_db_session)) -> PingResponse:
    async with database_errors("Database", "ping"):
        result = await db.execute(select(func.current_timestamp()))
        now = result.scalar_one()
    return PingResponse(time=now)


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(db: AsyncSession = Depends(get_db_session)) -> HealthResponse:
    """
    Runs SELECT 1. A failure marks the service unhealthy but the endpoint
    still answers 200 with the status in the body.
    """
    db_status = "connected"
    overall = "healthy"
    try:
        await db.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        await db.rollback()
        db_status = "disconnected"
        overall = "unhealthy"
        logger.warning("Health check: database unreachable: %s", e)

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
