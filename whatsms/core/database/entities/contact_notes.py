"""
Contact note entity model.

Internal notes written by team members about a contact.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

import sqlalchemy as sa
from sqlmodel import Field

from ..base import Base, utc_now_naive


class ContactNote(Base, table=True):
    """Internal note attached to a contact.

    Table: ContactNote
    """

    __tablename__ = "ContactNote"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)

    contact_id: int = Field(foreign_key="Contact.id", index=True, sa_column_kwargs={"name": "contactId"})
    author_id: Optional[int] = Field(default=None, foreign_key="User.id", sa_column_kwargs={"name": "authorId"})

    content: str = Field(description="Note text")

    created_at: datetime = Field(
        default_factory=utc_now_naive, sa_type=sa.DateTime(), sa_column_kwargs={"name": "createdAt"}
    )

    def __repr__(self) -> str:
        return f"ContactNote(id={self.id}, contact_id={self.contact_id}, author_id={self.author_id})"
