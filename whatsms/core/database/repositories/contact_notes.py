"""
Contact note repository.

Data access for internal notes, always returning each note together with
its author so the API can embed it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.contact_notes import ContactNote
from ..entities.users import User
from .base import AsyncBaseRepository


@dataclass(frozen=True)
class NoteWithAuthor:
    """A note row joined with its (optional) author row."""

    note: ContactNote
    author: Optional[User]


class ContactNoteRepository(AsyncBaseRepository[ContactNote]):
    """Repository for contact note data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, ContactNote)

    async def list_for_contact(self, contact_id: int) -> List[NoteWithAuthor]:
        """Get all notes of a contact, newest first.

        Args:
            contact_id: Contact identifier

        Returns:
            Notes with their authors, ordered by creation time descending
        """
        stmt = (
            select(ContactNote, User)
            .outerjoin(User, User.id == ContactNote.author_id)
            .where(ContactNote.contact_id == contact_id)
            .order_by(ContactNote.created_at.desc(), ContactNote.id.desc())  # type: ignore[attr-defined,union-attr]
        )
        result = await self.session.execute(stmt)
        return [NoteWithAuthor(note=note, author=author) for note, author in result.all()]

    async def add_note(self, contact_id: int, content: str, author_id: Optional[int] = None) -> NoteWithAuthor:
        """Create a note and load its author.

        Args:
            contact_id: Contact the note is attached to
            content: Note text
            author_id: Optional author (user) identifier

        Returns:
            The persisted note with its author
        """
        note = await self.create(ContactNote(contact_id=contact_id, author_id=author_id, content=content))
        author = await self.session.get(User, author_id) if author_id is not None else None
        return NoteWithAuthor(note=note, author=author)
