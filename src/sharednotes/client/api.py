"""Async HTTP client for the notes API."""

from datetime import datetime
from typing import Optional
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from ..config import get_settings


class NotesApiError(Exception):
    """Network failure or an unexpected response from the notes API."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class NoteSnapshot(BaseModel):
    """A note as returned by the server."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    note_name: Optional[str] = None
    content: str = ""
    updated_at: Optional[datetime] = None

    @field_validator("content", mode="before")
    @classmethod
    def default_content(cls, v):
        return v if isinstance(v, str) else ""


def normalize_note_name(raw: str) -> str:
    """Trim a name typed by a user; empty names are refused."""
    name = raw.strip()
    if not name:
        raise ValueError("Note name cannot be empty")
    return name


def note_path(name: str) -> str:
    """Path of a note with the whole name percent-encoded, "/" included."""
    return f"/notes/{quote(name, safe='')}"


class NotesApiClient:
    """Thin wrapper over httpx.AsyncClient for GET/PUT of a note."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        settings = get_settings()
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=base_url or settings.api_base_url,
            timeout=timeout or settings.request_timeout_seconds,
        )

    async def __aenter__(self) -> "NotesApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def get_note(self, name: str) -> Optional[NoteSnapshot]:
        """Fetch a note; None means it has never been saved."""
        response = await self._request("GET", name)
        if response.status_code == 404:
            return None
        return self._snapshot(response)

    async def put_note(self, name: str, content: str) -> NoteSnapshot:
        """Overwrite the note with the full text."""
        response = await self._request("PUT", name, json={"content": content})
        return self._snapshot(response)

    async def _request(self, method: str, name: str, **kwargs) -> httpx.Response:
        try:
            return await self._client.request(method, note_path(name), **kwargs)
        except httpx.HTTPError as exc:
            raise NotesApiError(f"{method} {name!r} failed: {exc}") from exc

    @staticmethod
    def _snapshot(response: httpx.Response) -> NoteSnapshot:
        if not response.is_success:
            try:
                message = response.json().get("message")
            except (ValueError, AttributeError):
                message = None
            raise NotesApiError(message or "Unknown error", status_code=response.status_code)
        try:
            return NoteSnapshot.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise NotesApiError("Malformed response from notes API", status_code=response.status_code) from exc
