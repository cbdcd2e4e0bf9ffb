"""
API endpoints for contact notes.

Internal notes are short texts written by team members about a contact.
Notes can be listed per contact (newest first) and created; each note is
returned with its author embedded.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from whatsms.core.database import get_session
from whatsms.core.database.repositories import ContactNoteRepository
from whatsms.core.logging_config import get_logger
from whatsms.core.models.io import ContactNoteCreate, ContactNoteRead

logger = get_logger(__name__)

router = APIRouter()


@router.get(
    "/contact/{contact_id}",
    response_model=list[ContactNoteRead],
    summary="List Contact Notes",
    description="Retrieve all notes of a contact, newest first, each with its author.",
    response_description="A list of note objects.",
    responses={
        200: {"description": "Notes retrieved successfully"},
        500: {"description": "Notes could not be read from the database"},
    },
)
async def list_contact_notes(
    contact_id: int,
    session: AsyncSession = Depends(get_session),
) -> list[ContactNoteRead]:
    """
    List notes for a contact.

    An unknown contact simply has no notes.

    - **contact_id**: The contact whose notes are returned.
    """
    try:
        rows = await ContactNoteRepository(session).list_for_contact(contact_id)
    except SQLAlchemyError as e:
        logger.error(f"Failed to fetch notes for contact {contact_id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch notes",
        ) from e
    return [ContactNoteRead.from_row(row) for row in rows]


@router.post(
    "",
    response_model=ContactNoteRead,
    status_code=status.HTTP_201_CREATED,
    summary="Add Contact Note",
    description="Attach a new note to a contact. The author is optional.",
    response_description="The created note with its author.",
    responses={
        201: {"description": "Note created successfully"},
        422: {"description": "Invalid note data"},
        500: {"description": "Note could not be stored"},
    },
)
async def create_contact_note(
    note_data: ContactNoteCreate,
    session: AsyncSession = Depends(get_session),
) -> ContactNoteRead:
    """
    Create a contact note.

    - **contactId**: The contact the note belongs to.
    - **authorId**: Optional author user id; empty or zero means no author.
    - **content**: The note text.
    """
    try:
        row = await ContactNoteRepository(session).add_note(
            contact_id=note_data.contact_id,
            content=note_data.content,
            author_id=note_data.author_id,
        )
    except SQLAlchemyError as e:
        await session.rollback()
        logger.error(f"Failed to create note for contact {note_data.contact_id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create note",
        ) from e
    logger.debug(f"Created note {row.note.id} for contact {row.note.contact_id}")
    return ContactNoteRead.from_row(row)
