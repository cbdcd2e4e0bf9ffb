"""
User entity model.

Users are the authors of contact notes. Only the columns read by this
service are mapped.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

import sqlalchemy as sa
from sqlmodel import Field

from ..base import Base, utc_now_naive


class User(Base, table=True):
    """Application user.

    Table: User
    """

    __tablename__ = "User"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    username: str = Field(unique=True, description="Login name")
    name: Optional[str] = Field(default=None, description="Display name")
    password: str = Field(description="Password hash")

    created_at: datetime = Field(
        default_factory=utc_now_naive, sa_type=sa.DateTime(), sa_column_kwargs={"name": "createdAt"}
    )

    def __repr__(self) -> str:
        return f"User(id={self.id}, username={self.username})"
