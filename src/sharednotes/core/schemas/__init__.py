"""Pydantic schemas for API requests and responses."""

from .common import HealthCheckResponse, MessageResponse
from .notes import NoteResponse, NoteWrite, format_timestamp

__all__ = [
    "HealthCheckResponse",
    "MessageResponse",
    "NoteResponse",
    "NoteWrite",
    "format_timestamp",
]
