"""Health service implementation."""

from sqlalchemy.exc import SQLAlchemyError

from ...database import Database
from ..logging import get_logger
from ..schemas.common import HealthCheckResponse
from .interfaces import IHealthService

logger = get_logger("services.health")


class HealthService(IHealthService):
    """Health check service implementation."""

    def __init__(self, database: Database):
        self.database = database

    async def get_health_status(self) -> HealthCheckResponse:
        try:
            await self.database.ping()
        except (SQLAlchemyError, OSError) as exc:
            logger.error("Database health check failed", exc_info=exc)
            return self._status("degraded", "disconnected")

        return self._status("ok", "connected")

    def _status(self, status: str, connection: str) -> HealthCheckResponse:
        return HealthCheckResponse(status=status, database=connection, mongo=connection, db=self.database.name)
