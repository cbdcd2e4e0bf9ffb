"""
System configuration entity model.

Key/value pairs edited from the settings screen, including the WhatsApp
credentials (``accessToken``, ``phoneNumberId``).
"""

from __future__ import annotations

from typing import Optional

from sqlmodel import Field

from ..base import Base


class SystemConfig(Base, table=True):
    """Single configuration entry.

    Table: SystemConfig
    """

    __tablename__ = "SystemConfig"
    __table_args__ = ({"extend_existing": True},)

    key: str = Field(primary_key=True)
    value: str
    description: Optional[str] = Field(default=None)

    def __repr__(self) -> str:
        return f"SystemConfig(key={self.key})"
