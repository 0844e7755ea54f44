"""
Aviary Backend — Health Check Route
=====================================

What:  Health check endpoint for monitoring and load balancer health checks.
How:   Runs SELECT 1 against the database and counts the birds table.
Who:   Called by Docker health checks, load balancers, and monitoring systems.

Status levels:
    - healthy:   Database reachable (HTTP 200)
    - unhealthy: Database unreachable (HTTP 503, stop routing traffic)
"""

import logging
import time

from fastapi import APIRouter, Response
from sqlalchemy import text

from app import __version__
from app.schemas.bird import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Database unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(response: Response) -> HealthResponse:
    """
    Check the health of the service and its database.

    The bird count is reported for convenience; it is None when the birds
    table is missing (e.g. migrations not yet applied) or the database is down.
    """
    from app.database import async_session_factory
    from app.exceptions import DatabaseError
    from app.services.bird_service import bird_service

    db_status = "connected"
    overall = "healthy"
    bird_count = None

    try:
        async with async_session_factory() as session:
            await session.execute(text("SELECT 1"))
            try:
                bird_count = await bird_service.count_birds(session)
            except DatabaseError as e:
                logger.warning("Health check: birds table unavailable: %s", e.message)
    except Exception as e:
        db_status = "disconnected"
        overall = "unhealthy"
        logger.warning("Health check: database unreachable: %s", str(e))

    if overall == "unhealthy":
        response.status_code = 503

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        bird_count=bird_count,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
