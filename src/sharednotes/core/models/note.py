# Note model - one row per note name
from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel


class Note(BaseModel):
    """Named text blob. The name is the lookup key and is stored verbatim."""

    __tablename__ = "notes"

    # case and whitespace are significant, no normalisation here
    name: Mapped[str] = mapped_column(String(1024), unique=True, index=True, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")

    def __repr__(self) -> str:
        truncated = self.name if len(self.name) <= 30 else (self.name[:30] + "...")
        return f"<Note(name='{truncated}', updated_at={self.updated_at})>"
