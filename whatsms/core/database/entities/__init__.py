"""
Database entity models.

One module per table of the shared CRM schema used by this service:

- users: Note authors
- contacts: Contacts that notes are attached to
- contact_notes: Internal notes about contacts
- system_config: Key/value system settings
"""

from .contact_notes import ContactNote
from .contacts import Contact
from .system_config import SystemConfig
from .users import User

__all__ = [
    "Contact",
    "ContactNote",
    "SystemConfig",
    "User",
]
