"""
Contact note I/O models for API requests and responses.

These models define the JSON contract of the notes endpoints. Keys are
camelCase on the wire (``contactId``, ``createdAt``); snake_case names are
accepted on input as well.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel

from whatsms.core.database.repositories.contact_notes import NoteWithAuthor


class CamelModel(BaseModel):
    """Base schema serializing field names as camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


def _utc_isoformat(value: datetime) -> str:
    # Stored timestamps are naive UTC
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class NoteAuthorRead(CamelModel):
    """Public view of a note author. The password hash is never exposed."""

    id: int
    username: str
    name: Optional[str] = None
    created_at: datetime

    @field_serializer("created_at", when_used="json")
    def _created_at_utc(self, value: datetime) -> str:
        return _utc_isoformat(value)


class ContactNoteRead(CamelModel):
    """Schema for reading a contact note, author embedded."""

    id: int
    contact_id: int
    author_id: Optional[int] = None
    content: str
    created_at: datetime
    author: Optional[NoteAuthorRead] = None

    @field_serializer("created_at", when_used="json")
    def _created_at_utc(self, value: datetime) -> str:
        return _utc_isoformat(value)

    @classmethod
    def from_row(cls, row: NoteWithAuthor) -> "ContactNoteRead":
        note = row.note
        return cls(
            id=note.id,
            contact_id=note.contact_id,
            author_id=note.author_id,
            content=note.content,
            created_at=note.created_at,
            author=NoteAuthorRead.model_validate(row.author) if row.author is not None else None,
        )


class ContactNoteCreate(CamelModel):
    """Schema for creating a contact note."""

    contact_id: int = Field(description="Contact the note is attached to")
    author_id: Optional[int] = Field(default=None, description="Author user id; falsy values mean no author")
    content: str = Field(min_length=1, description="Note text")

    @field_validator("author_id", mode="before")
    @classmethod
    def _falsy_author_is_none(cls, value: Any) -> Any:
        if not value:
            return None
        return value

    @field_validator("content")
    @classmethod
    def _content_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("content must not be blank")
        return value
