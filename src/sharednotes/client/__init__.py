"""Async client: HTTP access to notes and debounced autosave."""

from .api import NoteSnapshot, NotesApiClient, NotesApiError, normalize_note_name, note_path
from .autosave import AutosaveController

__all__ = [
    "AutosaveController",
    "NoteSnapshot",
    "NotesApiClient",
    "NotesApiError",
    "normalize_note_name",
    "note_path",
]
