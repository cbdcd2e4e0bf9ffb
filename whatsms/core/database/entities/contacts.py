"""
Contact entity model.

Contacts are owned by the wider CRM; this service only references them
from notes.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

import sqlalchemy as sa
from sqlmodel import Field

from ..base import Base, utc_now_naive


class Contact(Base, table=True):
    """CRM contact.

    Table: Contact
    """

    __tablename__ = "Contact"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    name: Optional[str] = Field(default=None)
    phone: str = Field(unique=True, description="Phone number with country code")

    created_at: datetime = Field(
        default_factory=utc_now_naive, sa_type=sa.DateTime(), sa_column_kwargs={"name": "createdAt"}
    )

    def __repr__(self) -> str:
        return f"Contact(id={self.id}, phone={self.phone})"
