import logging

from sqlalchemy import func, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import StoreError
from app.models.user_assignment_completion import UserAssignmentCompletion

logger = logging.getLogger(__name__)

# ON CONFLICT ... DO UPDATE ... WHERE 를 지원하는 방언
_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


async def get_completion(
    session: AsyncSession,
    user_id: int,
    assignment_id: int,
) -> UserAssignmentCompletion | None:
    """사용자-과제 완료 기록 조회"""
    stmt = select(UserAssignmentCompletion).where(
        UserAssignmentCompletion.user_id == user_id,
        UserAssignmentCompletion.assignment_id == assignment_id,
    )
    result = await session.execute(stmt)
    return result.scalar_one_or_none()


async def mark_completed(
    session: AsyncSession,
    user_id: int,
    assignment_id: int,
) -> bool:
    """완료 처리 (조건부 upsert)

    완료 기록이 없으면 생성하고, 있으면 아직 완료되지 않은 경우에만 갱신합니다.
    (user_id, assignment_id) 유니크 제약으로 동시 제출은 직렬화되며,
    이미 완료된 경우 영향받은 행이 0이므로 False를 반환합니다.
    """
    dialect_name = session.get_bind().dialect.name
    insert = _UPSERT_INSERTS.get(dialect_name)
    if insert is None:
        raise StoreError(f"완료 처리 upsert를 지원하지 않는 DB입니다: {dialect_name}")

    stmt = insert(UserAssignmentCompletion).values(
        user_id=user_id,
        assignment_id=assignment_id,
        is_completed=True,
        completed_at=func.now(),
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=["user_id", "assignment_id"],
        set_={
            "is_completed": True,
            "completed_at": func.now(),
            "updated_at": func.now(),
        },
        where=UserAssignmentCompletion.is_completed.is_(False),
    )
    result = await session.execute(stmt)
    logger.debug(
        f"완료 처리 upsert: user_id={user_id}, assignment_id={assignment_id}, rowcount={result.rowcount}"
    )
    return result.rowcount > 0
