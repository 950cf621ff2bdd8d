"""
Note schemas.

These define the JSON contract of the notes endpoints. Field names go out in
camelCase (noteName, updatedAt) to match what browser clients expect.
"""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, model_validator
from pydantic.alias_generators import to_camel

from ..models.note import Note


def format_timestamp(value: datetime) -> str:
    """ISO-8601 in UTC with a trailing Z."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


class NoteWrite(BaseModel):
    """Note write request schema.

    Never rejects: a missing body, a missing content field, a non-string
    content or a body that is not an object all mean empty content.
    """

    content: str = Field(default="", description="Full note text, replaces what is stored")

    @model_validator(mode="before")
    @classmethod
    def coerce_content(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return {"content": ""}
        content = data.get("content")
        return {"content": content if isinstance(content, str) else ""}

    model_config = ConfigDict(
        json_schema_extra={"example": {"content": "Groceries:\n- milk\n- eggs"}}
    )


class NoteResponse(BaseModel):
    """Note response schema."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "noteName": "groceries",
                "content": "Groceries:\n- milk\n- eggs",
                "updatedAt": "2025-09-13T10:30:00.123456Z",
            }
        },
    )

    note_name: str
    content: str
    updated_at: datetime

    @field_serializer("updated_at")
    def serialize_updated_at(self, value: datetime) -> str:
        return format_timestamp(value)

    @classmethod
    def from_note(cls, note: Note) -> "NoteResponse":
        return cls(note_name=note.name, content=note.content or "", updated_at=note.updated_at)
