"""
Repository layer.

Data access objects wrapping an ``AsyncSession``, one per table.
"""

from .base import AsyncBaseRepository
from .contact_notes import ContactNoteRepository, NoteWithAuthor
from .system_config import SystemConfigRepository
from .users import UserRepository

__all__ = [
    "AsyncBaseRepository",
    "ContactNoteRepository",
    "NoteWithAuthor",
    "SystemConfigRepository",
    "UserRepository",
]
