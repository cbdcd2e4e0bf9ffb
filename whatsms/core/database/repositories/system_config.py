"""
System configuration repository.

Reads and upserts the key/value rows of the ``SystemConfig`` table.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Iterable

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.system_config import SystemConfig
from .base import AsyncBaseRepository


def config_value_to_str(value: Any) -> str:
    """Stringify a JSON value the way the Node front end expects to read it back.

    ``true``/``false``/``null`` stay lowercase and integral floats lose their
    fraction; objects and arrays are stored as JSON.
    """
    if isinstance(value, str):
        return value
    if value is None or isinstance(value, (bool, dict, list)):
        return json.dumps(value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class SystemConfigRepository(AsyncBaseRepository[SystemConfig]):
    """Repository for system configuration entries using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, SystemConfig)

    async def get_map(self) -> Dict[str, str]:
        """Return every configuration entry as a ``{key: value}`` map."""
        result = await self.session.execute(select(SystemConfig))
        return {entry.key: entry.value for entry in result.scalars().all()}

    async def get_values(self, keys: Iterable[str]) -> Dict[str, str]:
        """Return the values of the given keys; absent keys are omitted.

        Args:
            keys: Configuration keys to look up

        Returns:
            Map of found keys to their values
        """
        result = await self.session.execute(select(SystemConfig).where(SystemConfig.key.in_(list(keys))))  # type: ignore[attr-defined]
        return {entry.key: entry.value for entry in result.scalars().all()}

    async def upsert_many(self, values: Dict[str, Any]) -> None:
        """Insert or update several entries in a single transaction.

        Values are stored as strings. New entries get a generated description.

        Args:
            values: Map of keys to new values
        """
        try:
            for key, value in values.items():
                entry = await self.session.get(SystemConfig, key)
                if entry is None:
                    entry = SystemConfig(key=key, value=config_value_to_str(value), description=f"Config for {key}")
                else:
                    entry.value = config_value_to_str(value)
                self.session.add(entry)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
