"""Declarative base shared by the CRM tables."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import ConfigDict
from sqlmodel import SQLModel


class Base(SQLModel):
    """Metadata holder for every table in `entities`."""

    model_config = ConfigDict(arbitrary_types_allowed=True)


def utc_now_naive() -> datetime:
    """UTC now without tzinfo; the shared schema stores naive timestamps."""
    return datetime.now(timezone.utc).replace(tzinfo=None)
