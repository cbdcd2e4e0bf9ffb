"""User repository. Users are only counted (database diagnostic) and joined as note authors."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.users import User
from .base import AsyncBaseRepository


class UserRepository(AsyncBaseRepository[User]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, User)
