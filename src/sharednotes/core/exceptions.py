"""Domain exceptions raised by the store and service layers."""


class SharedNotesError(Exception):
    """Base class for sharednotes errors."""


class NoteNotFoundError(SharedNotesError):
    """Raised when a note name has never been written."""

    def __init__(self, name: str):
        super().__init__(f"Note {name!r} not found")
        self.name = name


class StoreUnavailableError(SharedNotesError):
    """Raised when the database cannot be reached or a query fails."""
