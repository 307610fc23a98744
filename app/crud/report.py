"""진행률/통계 집계 쿼리 (읽기 전용)"""
from typing import Sequence

from sqlalchemy import Row, and_, case, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.category import Category
from app.models.question import Question
from app.models.test_assignment import AssignmentCategory, TestAssignment
from app.models.user_assignment_completion import UserAssignmentCompletion
from app.models.user_response import ResponseStatus, UserResponse


def _status_count(status: ResponseStatus):
    return func.coalesce(
        func.sum(case((UserResponse.status == status.value, 1), else_=0)),
        0,
    )


def response_stat_columns() -> tuple:
    """응답 수 + 상태별 응답 수 집계 컬럼"""
    return (
        func.count(UserResponse.id).label("total_responses"),
        _status_count(ResponseStatus.SURE_CORRECT).label("sure_correct"),
        _status_count(ResponseStatus.NOT_SURE_CORRECT).label("not_sure_correct"),
        _status_count(ResponseStatus.SURE_INCORRECT).label("sure_incorrect"),
        _status_count(ResponseStatus.NOT_SURE_INCORRECT).label("not_sure_incorrect"),
    )


async def get_user_overall_stats(session: AsyncSession, user_id: int) -> Row:
    """사용자 전체 응답 집계"""
    stmt = (
        select(
            func.count(UserResponse.assignment_id.distinct()).label("total_assignments"),
            func.count(Question.category_id.distinct()).label("total_categories"),
            *response_stat_columns(),
        )
        .select_from(UserResponse)
        .join(Question, Question.id == UserResponse.question_id)
        .where(UserResponse.user_id == user_id)
    )
    result = await session.execute(stmt)
    return result.one()


async def get_user_category_progress(session: AsyncSession, user_id: int) -> Sequence[Row]:
    """모든 카테고리별 사용자 진행률 (응답 없는 카테고리 포함, 이름 순)"""
    stmt = (
        select(
            Category.id.label("category_id"),
            Category.name.label("category_name"),
            func.count(Question.id.distinct()).label("total_questions"),
            func.count(UserResponse.question_id.distinct()).label("attempted_questions"),
            *response_stat_columns(),
        )
        .select_from(Category)
        .outerjoin(Question, Question.category_id == Category.id)
        .outerjoin(
            UserResponse,
            and_(UserResponse.question_id == Question.id, UserResponse.user_id == user_id),
        )
        .group_by(Category.id, Category.name)
        .order_by(Category.name, Category.id)
    )
    result = await session.execute(stmt)
    return result.all()


async def get_attempted_assignments(session: AsyncSession, user_id: int) -> Sequence[Row]:
    """사용자가 응답한 적 있는 과제 (완료 여부 포함, 최신 순)"""
    attempted = (
        select(UserResponse.id)
        .where(
            UserResponse.assignment_id == TestAssignment.id,
            UserResponse.user_id == user_id,
        )
        .correlate(TestAssignment)
        .exists()
    )
    stmt = (
        select(
            TestAssignment.id,
            TestAssignment.name,
            TestAssignment.created_at,
            UserAssignmentCompletion.is_completed,
            UserAssignmentCompletion.completed_at,
        )
        .outerjoin(
            UserAssignmentCompletion,
            and_(
                UserAssignmentCompletion.assignment_id == TestAssignment.id,
                UserAssignmentCompletion.user_id == user_id,
            ),
        )
        .where(attempted)
        .order_by(TestAssignment.created_at.desc(), TestAssignment.id.desc())
    )
    result = await session.execute(stmt)
    return result.all()


async def get_assignment_stats(session: AsyncSession, user_id: int, assignment_id: int) -> Row:
    """과제 단위 응답 집계"""
    stmt = (
        select(*response_stat_columns())
        .select_from(UserResponse)
        .where(
            UserResponse.user_id == user_id,
            UserResponse.assignment_id == assignment_id,
        )
    )
    result = await session.execute(stmt)
    return result.one()


async def get_assignment_category_stats(
    session: AsyncSession,
    user_id: int,
    assignment_id: int,
) -> Sequence[Row]:
    """과제 내 카테고리별 응답 집계"""
    stmt = (
        select(
            Category.id.label("category_id"),
            Category.name.label("category_name"),
            *response_stat_columns(),
        )
        .select_from(UserResponse)
        .join(Question, Question.id == UserResponse.question_id)
        .join(Category, Category.id == Question.category_id)
        .where(
            UserResponse.user_id == user_id,
            UserResponse.assignment_id == assignment_id,
        )
        .group_by(Category.id, Category.name)
        .order_by(Category.id)
    )
    result = await session.execute(stmt)
    return result.all()


async def get_assignment_completion_rows(session: AsyncSession, user_id: int) -> Sequence[Row]:
    """모든 과제의 사용자 완료 여부 + 출제 규모 + sure_correct 응답 수 (생성 순)"""
    quota = (
        select(
            AssignmentCategory.assignment_id,
            func.count(AssignmentCategory.id).label("category_count"),
            func.sum(AssignmentCategory.question_count).label("total_questions"),
        )
        .group_by(AssignmentCategory.assignment_id)
        .subquery()
    )
    mastered = (
        select(
            UserResponse.assignment_id,
            func.count(UserResponse.id).label("mastered_questions"),
        )
        .where(
            UserResponse.user_id == user_id,
            UserResponse.status == ResponseStatus.SURE_CORRECT.value,
        )
        .group_by(UserResponse.assignment_id)
        .subquery()
    )
    stmt = (
        select(
            TestAssignment.id,
            TestAssignment.name,
            TestAssignment.created_at,
            UserAssignmentCompletion.is_completed,
            UserAssignmentCompletion.completed_at,
            func.coalesce(quota.c.category_count, 0).label("category_count"),
            func.coalesce(quota.c.total_questions, 0).label("total_questions"),
            func.coalesce(mastered.c.mastered_questions, 0).label("mastered_questions"),
        )
        .outerjoin(
            UserAssignmentCompletion,
            and_(
                UserAssignmentCompletion.assignment_id == TestAssignment.id,
                UserAssignmentCompletion.user_id == user_id,
            ),
        )
        .outerjoin(quota, quota.c.assignment_id == TestAssignment.id)
        .outerjoin(mastered, mastered.c.assignment_id == TestAssignment.id)
        .order_by(TestAssignment.created_at, TestAssignment.id)
    )
    result = await session.execute(stmt)
    return result.all()
