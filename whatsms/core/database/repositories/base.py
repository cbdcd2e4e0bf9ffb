"""
Generic repository over one SQLModel table.

Concrete repositories subclass ``AsyncBaseRepository`` with their entity
and add table-specific queries. All of them share the caller's
``AsyncSession``; writes commit immediately.
"""

from __future__ import annotations

from typing import Generic, Optional, Type, TypeVar

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, select

EntityType = TypeVar("EntityType", bound=SQLModel)


class AsyncBaseRepository(Generic[EntityType]):
    """Insert, lookup by primary key and row count for ``model``."""

    def __init__(self, session: AsyncSession, model: Type[EntityType]) -> None:
        self.session = session
        self.model = model

    async def create(self, entity: EntityType) -> EntityType:
        """Insert ``entity`` and return it with database defaults (id) loaded.

        Args:
            entity: Unsaved entity

        Returns:
            The same instance, refreshed after commit
        """
        self.session.add(entity)
        await self.session.commit()
        await self.session.refresh(entity)
        return entity

    async def get_by_id(self, entity_id: str | int) -> Optional[EntityType]:
        return await self.session.get(self.model, entity_id)

    async def count(self) -> int:
        """Number of rows in the table."""
        result = await self.session.execute(select(func.count()).select_from(self.model))
        return int(result.scalar_one())
