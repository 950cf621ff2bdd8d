"""Health check API endpoint."""

from fastapi import APIRouter, Depends, Response

from ..core.schemas.common import HealthCheckResponse
from ..core.services import HealthService
from ..database import Database, get_database

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthCheckResponse)
async def health_check(response: Response, database: Database = Depends(get_database)):
    """Process liveness plus store connectivity."""
    health_service = HealthService(database)
    health = await health_service.get_health_status()
    if health.status != "ok":
        response.status_code = 503
    return health
