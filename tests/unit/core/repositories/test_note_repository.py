"""Unit tests for NoteRepository against in-memory SQLite."""

import asyncio
from datetime import timedelta
from types import SimpleNamespace

import pytest
from sqlalchemy import select
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import create_async_engine

from sharednotes.core.exceptions import StoreUnavailableError
from sharednotes.core.models import Note
from sharednotes.core.repositories import note_repository
from sharednotes.core.repositories.note_repository import NoteRepository
from sharednotes.database import Database


class FailingSession:
    """Session whose every query fails like a dropped connection."""

    def __init__(self, dialect="sqlite"):
        self.bind = SimpleNamespace(dialect=SimpleNamespace(name=dialect))
        self.commits = 0

    async def execute(self, stmt, *args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("connection refused"))

    async def scalars(self, stmt, *args, **kwargs):
        raise OperationalError("INSERT", {}, Exception("connection refused"))

    async def commit(self):
        self.commits += 1


async def test_get_missing_note_returns_none(test_session):
    repo = NoteRepository(test_session)
    assert await repo.get_by_name("never-written") is None


async def test_upsert_creates_note(test_session):
    repo = NoteRepository(test_session)

    note = await repo.upsert("groceries", "milk")

    assert note.name == "groceries"
    assert note.content == "milk"
    assert note.created_at == note.updated_at
    assert note.updated_at.tzinfo is not None

    fetched = await repo.get_by_name("groceries")
    assert fetched is not None
    assert fetched.content == "milk"


async def test_upsert_replaces_content_and_keeps_created_at(test_session):
    repo = NoteRepository(test_session)

    first = await repo.upsert("n", "hello")
    created_at, first_updated = first.created_at, first.updated_at
    first_id = first.id

    await asyncio.sleep(0.001)
    second = await repo.upsert("n", "hello world")

    assert second.id == first_id
    assert second.content == "hello world"
    assert second.created_at == created_at
    assert second.updated_at >= first_updated


async def test_repeated_upsert_with_same_content_is_idempotent(test_session):
    repo = NoteRepository(test_session)

    first = await repo.upsert("same", "c")
    created_at = first.created_at
    previous = first.updated_at

    for _ in range(3):
        note = await repo.upsert("same", "c")
        assert note.content == "c"
        assert note.created_at == created_at
        assert note.updated_at >= previous
        previous = note.updated_at


async def test_updated_at_never_moves_backwards(test_session, monkeypatch):
    repo = NoteRepository(test_session)
    first = await repo.upsert("clock", "a")
    first_updated = first.updated_at

    # server clock jumps back an hour
    earlier = first_updated - timedelta(hours=1)
    monkeypatch.setattr(note_repository, "utc_now", lambda: earlier)

    second = await repo.upsert("clock", "b")
    assert second.content == "b"
    assert second.updated_at == first_updated


@pytest.mark.parametrize("content", [None, 123, ["a"], {"x": 1}])
async def test_upsert_coerces_non_string_content(test_session, content):
    repo = NoteRepository(test_session)
    note = await repo.upsert("coerced", content)
    assert note.content == ""


async def test_names_are_case_sensitive_and_isolated(test_session):
    repo = NoteRepository(test_session)

    await repo.upsert("A", "upper")
    await repo.upsert(" A ", "padded")

    assert (await repo.get_by_name("A")).content == "upper"
    assert (await repo.get_by_name(" A ")).content == "padded"
    assert await repo.get_by_name("a") is None


async def test_get_wraps_driver_errors():
    repo = NoteRepository(FailingSession())
    with pytest.raises(StoreUnavailableError) as exc_info:
        await repo.get_by_name("x")
    assert isinstance(exc_info.value.__cause__, OperationalError)


async def test_upsert_wraps_driver_errors():
    session = FailingSession()
    repo = NoteRepository(session)
    with pytest.raises(StoreUnavailableError):
        await repo.upsert("x", "y")
    assert session.commits == 0


async def test_upsert_refuses_dialect_without_native_upsert():
    repo = NoteRepository(FailingSession(dialect="mssql"))
    with pytest.raises(StoreUnavailableError, match="not supported"):
        await repo.upsert("x", "y")


@pytest.fixture
async def file_database(tmp_path):
    """Real file so every session gets its own connection."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'notes.db'}")
    db = Database(engine, name="notes")
    await db.create_tables()
    try:
        yield db
    finally:
        await db.dispose()


async def test_concurrent_upserts_leave_one_consistent_row(file_database):
    contents = [f"v{i}" for i in range(20)]

    async def write(content):
        async with file_database.session_factory() as session:
            return await NoteRepository(session).upsert("n", content)

    results = await asyncio.gather(*(write(c) for c in contents), return_exceptions=True)
    assert [r for r in results if isinstance(r, BaseException)] == []

    async with file_database.session_factory() as session:
        rows = (await session.scalars(select(Note).where(Note.name == "n"))).all()

    assert len(rows) == 1
    stored = rows[0]
    assert stored.content in contents
    assert stored.created_at <= stored.updated_at
    assert {r.id for r in results} == {stored.id}
    assert min(r.created_at for r in results) == stored.created_at
