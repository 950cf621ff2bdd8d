"""Notes API endpoints."""

from typing import Annotated, Optional

from fastapi import APIRouter, Body, Depends, Path
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.exceptions import NoteNotFoundError, StoreUnavailableError
from ..core.logging import get_logger
from ..core.schemas.common import MessageResponse
from ..core.schemas.notes import NoteResponse, NoteWrite
from ..core.services import NoteService
from ..database import get_db_session

router = APIRouter(prefix="/notes", tags=["notes"])
logger = get_logger("api.notes")

# ":path" so an encoded "/" inside a note name still reaches the handler
NOTE_PATH = "/{note_name:path}"
NoteName = Annotated[str, Path(min_length=1, description="Note name, used verbatim as the key")]


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=MessageResponse(message=message).model_dump())


@router.get(
    NOTE_PATH,
    response_model=NoteResponse,
    responses={404: {"model": MessageResponse}, 500: {"model": MessageResponse}},
)
async def get_note(
    note_name: NoteName,
    session: AsyncSession = Depends(get_db_session),
):
    """Get a note by name."""
    note_service = NoteService(session)
    try:
        return await note_service.get_note(note_name)
    except NoteNotFoundError:
        return _message(404, "Note not found")
    except StoreUnavailableError:
        logger.error("Error loading note", exc_info=True, extra={"note_name": note_name})
        return _message(500, "Error loading note")


@router.put(
    NOTE_PATH,
    response_model=NoteResponse,
    responses={500: {"model": MessageResponse}},
)
async def save_note(
    note_name: NoteName,
    request: Optional[NoteWrite] = Body(default=None),
    session: AsyncSession = Depends(get_db_session),
):
    """Create or overwrite a note."""
    note_service = NoteService(session)
    try:
        return await note_service.save_note(note_name, request or NoteWrite())
    except StoreUnavailableError:
        logger.error("Error saving note", exc_info=True, extra={"note_name": note_name})
        return _message(500, "Error saving note")
