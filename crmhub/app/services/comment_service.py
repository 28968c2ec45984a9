"""
CRMHub Comment Service
Append-only comment threads attached to records
"""

from typing import Any, Dict, List, Optional

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from ..core.database import storage_guard
from ..core.exceptions import ConstraintViolation, NotFound
from ..models import Comment, User
from .record_service import resolve_table

logger = structlog.get_logger()


class CommentService:
    """Service for comment threads on any record module"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_for(self, entity_type: str, entity_id: int) -> List[Dict[str, Any]]:
        """All comments on a record, newest first, with the author's username"""
        resolve_table(entity_type)
        comments = Comment.__table__
        users = User.__table__

        query = (
            select(comments, users.c.username)
            .select_from(comments.outerjoin(users, comments.c.user_id == users.c.id))
            .where(comments.c.entity_type == entity_type, comments.c.entity_id == entity_id)
            .order_by(comments.c.created_at.desc(), comments.c.id.desc())
        )

        async with storage_guard(self.db, "list comments"):
            result = await self.db.execute(query)
            rows = result.mappings().all()

        return [dict(row) for row in rows]

    async def post(
        self,
        entity_type: str,
        entity_id: int,
        user_id: int,
        content: str,
        parent_id: Optional[int] = None,
    ) -> int:
        """Append a comment; a reply must point at a comment in the same thread"""
        resolve_table(entity_type)

        if parent_id is not None:
            await self._check_parent(entity_type, entity_id, parent_id)

        stmt = insert(Comment.__table__).values(
            entity_type=entity_type,
            entity_id=entity_id,
            user_id=user_id,
            content=content,
            parent_id=parent_id,
        )

        async with storage_guard(self.db, "post comment"):
            result = await self.db.execute(stmt)
            await self.db.commit()

        comment_id = result.inserted_primary_key[0]
        logger.info(
            "Comment posted",
            comment_id=comment_id,
            entity_type=entity_type,
            entity_id=entity_id,
            parent_id=parent_id
        )
        return comment_id

    async def _check_parent(self, entity_type: str, entity_id: int, parent_id: int) -> None:
        comments = Comment.__table__
        query = select(comments.c.entity_type, comments.c.entity_id).where(comments.c.id == parent_id)

        async with storage_guard(self.db, "check parent comment"):
            result = await self.db.execute(query)
            parent = result.one_or_none()

        if parent is None:
            raise NotFound(f"Parent comment {parent_id} not found", parent_id=parent_id)
        if (parent.entity_type, parent.entity_id) != (entity_type, entity_id):
            raise ConstraintViolation(
                "Parent comment belongs to a different record",
                parent_id=parent_id,
                entity_type=entity_type,
                entity_id=entity_id,
            )
