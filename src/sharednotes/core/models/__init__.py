"""
Database models for sharednotes.

Models included:
    - Note: a named text blob, created on first write and never deleted
"""

from .base import BaseModel
from .note import Note

__all__ = [
    "BaseModel",
    "Note",
]
