"""Health check endpoints."""

from fastapi import APIRouter

from catalog import __version__
from catalog.config import settings
from catalog.infra.database import verify_db_connection
from catalog.infra.logging import get_logger
from catalog.schemas.common import HealthResponse

router = APIRouter()
logger = get_logger(__name__)


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Basic health check.

    Returns 200 if service is running.
    """
    return HealthResponse(
        status="healthy",
        version=__version__,
        environment=settings.environment,
        checks={},
    )


@router.get("/health/ready", response_model=HealthResponse)
async def health_ready() -> HealthResponse:
    """Readiness check.

    Verifies the products database is reachable.
    """
    checks: dict[str, bool] = {}

    try:
        checks["database"] = await verify_db_connection()
    except Exception as e:
        logger.warning("Database health check failed", error=str(e))
        checks["database"] = False

    all_healthy = all(checks.values()) if checks else True

    return HealthResponse(
        status="healthy" if all_healthy else "degraded",
        version=__version__,
        environment=settings.environment,
        checks=checks,
    )


@router.get("/health/live", response_model=HealthResponse)
async def health_live() -> HealthResponse:
    """Liveness check."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        environment=settings.environment,
        checks={"alive": True},
    )
