"""Note repository for database operations."""

import uuid
from typing import Any, Optional

from sqlalchemy import case, select
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import StoreUnavailableError
from ..models.base import utc_now
from ..models.note import Note

# dialects with a native INSERT ... ON CONFLICT DO UPDATE
_UPSERT_INSERTS = {
    "postgresql": postgresql_insert,
    "sqlite": sqlite_insert,
}


class NoteRepository:
    """Repository for note database operations.

    Every driver or connectivity failure is re-raised as StoreUnavailableError;
    nothing is retried here.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_name(self, name: str) -> Optional[Note]:
        """Get note by name, None if it was never written."""
        stmt = select(Note).where(Note.name == name)
        try:
            result = await self.session.execute(stmt)
        except (SQLAlchemyError, OSError) as exc:
            raise StoreUnavailableError(f"Failed to load note {name!r}") from exc
        return result.scalar_one_or_none()

    async def upsert(self, name: str, content: Any) -> Note:
        """Create the note or replace its content in one atomic statement.

        created_at is only written on insert. updated_at never moves
        backwards even if the server clock does.
        """
        if not isinstance(content, str):
            content = ""

        now = utc_now()
        insert = self._dialect_insert()
        stmt = insert(Note).values(
            id=uuid.uuid4(),
            name=name,
            content=content,
            created_at=now,
            updated_at=now,
        )
        notes = Note.__table__
        stmt = stmt.on_conflict_do_update(
            index_elements=[notes.c.name],
            set_={
                "content": stmt.excluded.content,
                "updated_at": case(
                    (notes.c.updated_at > stmt.excluded.updated_at, notes.c.updated_at),
                    else_=stmt.excluded.updated_at,
                ),
            },
        ).returning(Note)

        try:
            result = await self.session.scalars(stmt, execution_options={"populate_existing": True})
            note = result.one()
            await self.session.commit()
        except (SQLAlchemyError, OSError) as exc:
            raise StoreUnavailableError(f"Failed to save note {name!r}") from exc
        return note

    def _dialect_insert(self):
        dialect = self.session.bind.dialect.name
        try:
            return _UPSERT_INSERTS[dialect]
        except KeyError:
            raise StoreUnavailableError(f"Atomic upsert is not supported on {dialect!r}") from None
