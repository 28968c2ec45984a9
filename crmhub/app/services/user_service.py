"""
CRMHub User Service
"""

from typing import Any, Dict

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import storage_guard
from ..core.exceptions import NotFound
from ..models import Role, User


class UserService:
    """Lookups for users and their roles (no authentication)"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_user_with_role(self, username: str) -> Dict[str, Any]:
        """User row joined with its role; the credential column is never returned"""
        users = User.__table__
        roles = Role.__table__

        query = (
            select(
                users.c.id,
                users.c.username,
                users.c.role_id,
                users.c.department,
                roles.c.name.label("role_name"),
                roles.c.level.label("role_level"),
                roles.c.permissions,
            )
            .select_from(users.join(roles, users.c.role_id == roles.c.id))
            .where(users.c.username == username)
        )

        async with storage_guard(self.db, "get user"):
            result = await self.db.execute(query)
            row = result.mappings().one_or_none()

        if row is None:
            raise NotFound(f"User {username} not found", username=username)
        return dict(row)
