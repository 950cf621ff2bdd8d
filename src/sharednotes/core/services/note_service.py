"""Note service implementation."""

from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import NoteNotFoundError
from ..logging import get_logger
from ..repositories.note_repository import NoteRepository
from ..schemas.notes import NoteResponse, NoteWrite
from .interfaces import INoteService

logger = get_logger("services.notes")


class NoteService(INoteService):
    """Note service implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.note_repo = NoteRepository(session)

    async def get_note(self, name: str) -> NoteResponse:
        note = await self.note_repo.get_by_name(name)
        if note is None:
            raise NoteNotFoundError(name)
        return NoteResponse.from_note(note)

    async def save_note(self, name: str, request: NoteWrite) -> NoteResponse:
        """Upsert; last write wins, no merge."""
        note = await self.note_repo.upsert(name, request.content)
        logger.debug("Note saved", extra={"note_name": name, "content_length": len(note.content)})
        return NoteResponse.from_note(note)
