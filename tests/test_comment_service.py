"""
Test comment threads and the follow-up log
"""

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession

from crmhub.app.core.exceptions import ConstraintViolation, InvalidModule, NotFound
from crmhub.app.core.seed import seed_if_empty
from crmhub.app.services.comment_service import CommentService
from crmhub.app.services.follow_up_service import FollowUpService
from crmhub.app.services.record_service import RecordService


@pytest_asyncio.fixture
async def lead_id(db_session: AsyncSession) -> int:
    await seed_if_empty(db_session)
    return await RecordService(db_session).create_record("leads", {"name": "Acme", "owner_id": 1})


async def test_post_then_list(db_session: AsyncSession, lead_id: int):
    """Test a posted comment is listed with its author's username."""
    service = CommentService(db_session)
    comment_id = await service.post("leads", lead_id, 1, "hi")

    comments = await service.list_for("leads", lead_id)
    assert len(comments) == 1
    assert comments[0]["id"] == comment_id
    assert comments[0]["content"] == "hi"
    assert comments[0]["username"] == "admin"
    assert comments[0]["parent_id"] is None


async def test_comments_are_scoped_and_newest_first(db_session: AsyncSession, lead_id: int):
    service = CommentService(db_session)
    first = await service.post("leads", lead_id, 1, "first")
    second = await service.post("leads", lead_id, 1, "second")
    await service.post("customers", lead_id, 1, "same id, other module")

    comments = await service.list_for("leads", lead_id)
    assert [comment["id"] for comment in comments] == [second, first]


async def test_reply_links_to_parent(db_session: AsyncSession, lead_id: int):
    service = CommentService(db_session)
    parent = await service.post("leads", lead_id, 1, "question")
    reply = await service.post("leads", lead_id, 1, "answer", parent_id=parent)

    comments = {comment["id"]: comment for comment in await service.list_for("leads", lead_id)}
    assert comments[reply]["parent_id"] == parent


async def test_reply_to_missing_parent(db_session: AsyncSession, lead_id: int):
    service = CommentService(db_session)

    with pytest.raises(NotFound):
        await service.post("leads", lead_id, 1, "orphan", parent_id=42)

    assert await service.list_for("leads", lead_id) == []


async def test_reply_across_threads_is_rejected(db_session: AsyncSession, lead_id: int):
    service = CommentService(db_session)
    elsewhere = await service.post("customers", 1, 1, "customer thread")

    with pytest.raises(ConstraintViolation):
        await service.post("leads", lead_id, 1, "misplaced", parent_id=elsewhere)


async def test_comment_by_unknown_user_is_still_listed(db_session: AsyncSession, lead_id: int):
    service = CommentService(db_session)
    await service.post("leads", lead_id, 99, "ghost")

    comments = await service.list_for("leads", lead_id)
    assert comments[0]["user_id"] == 99
    assert comments[0]["username"] is None


async def test_comment_on_invalid_module(db_session: AsyncSession):
    service = CommentService(db_session)

    with pytest.raises(InvalidModule):
        await service.post("users", 1, 1, "nope")
    with pytest.raises(InvalidModule):
        await service.list_for("users", 1)


async def test_follow_up_log(db_session: AsyncSession, lead_id: int):
    service = FollowUpService(db_session)
    first = await service.record("leads", lead_id, 1, method="电话", result="有意向", content="Called")
    second = await service.record("leads", lead_id, 1, method="拜访", content="On-site visit")

    follow_ups = await service.list_for("leads", lead_id)
    assert [follow_up["id"] for follow_up in follow_ups] == [second, first]
    assert follow_ups[1]["method"] == "电话"
    assert follow_ups[1]["username"] == "admin"
