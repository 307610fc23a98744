"""과제 완료 처리 upsert 테스트 (실제 DB)"""
import pytest
from unittest.mock import MagicMock

from app.crud import completion as completion_crud
from app.exceptions import StoreError
from app.models.user_assignment_completion import UserAssignmentCompletion


@pytest.mark.asyncio
async def test_mark_completed_only_once(test_db_session, regular_user, assignment):
    """첫 완료 처리는 True, 이미 완료된 행에 대한 재시도는 False"""
    first = await completion_crud.mark_completed(test_db_session, regular_user.id, assignment)
    await test_db_session.commit()

    second = await completion_crud.mark_completed(test_db_session, regular_user.id, assignment)
    await test_db_session.commit()

    assert first is True
    assert second is False

    completion = await completion_crud.get_completion(test_db_session, regular_user.id, assignment)
    assert completion.is_completed is True
    assert completion.completed_at is not None


@pytest.mark.asyncio
async def test_mark_completed_updates_incomplete_row(test_db_session, regular_user, assignment):
    """미완료 상태로 남아 있던 행은 완료로 갱신"""
    test_db_session.add(
        UserAssignmentCompletion(user_id=regular_user.id, assignment_id=assignment, is_completed=False)
    )
    await test_db_session.commit()

    assert await completion_crud.mark_completed(test_db_session, regular_user.id, assignment) is True
    await test_db_session.commit()

    user_id = regular_user.id
    test_db_session.expire_all()
    completion = await completion_crud.get_completion(test_db_session, user_id, assignment)
    assert completion.is_completed is True


@pytest.mark.asyncio
async def test_mark_completed_unsupported_dialect():
    """upsert를 지원하지 않는 DB면 StoreError"""
    session = MagicMock()
    session.get_bind.return_value.dialect.name = "mysql"

    with pytest.raises(StoreError):
        await completion_crud.mark_completed(session, 1, 1)

    session.execute.assert_not_called()
