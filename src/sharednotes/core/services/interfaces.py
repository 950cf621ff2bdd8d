"""
Service interfaces for sharednotes.
"""

from abc import ABC, abstractmethod

from ..schemas.common import HealthCheckResponse
from ..schemas.notes import NoteResponse, NoteWrite


class INoteService(ABC):
    """Note service: read and upsert by name."""

    @abstractmethod
    async def get_note(self, name: str) -> NoteResponse:
        """Get note by name, raising NoteNotFoundError if never written."""
        pass

    @abstractmethod
    async def save_note(self, name: str, request: NoteWrite) -> NoteResponse:
        """Create or fully replace the note content."""
        pass


class IHealthService(ABC):
    """Health check service."""

    @abstractmethod
    async def get_health_status(self) -> HealthCheckResponse:
        """Get app and store health status."""
        pass
