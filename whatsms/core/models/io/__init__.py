"""Request and response bodies of the HTTP API, kept apart from the table entities."""

from .contact_notes import (
    CamelModel,
    ContactNoteCreate,
    ContactNoteRead,
    NoteAuthorRead,
)

__all__ = [
    "CamelModel",
    "ContactNoteCreate",
    "ContactNoteRead",
    "NoteAuthorRead",
]
