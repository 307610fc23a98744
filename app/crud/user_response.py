from typing import Sequence

from sqlalchemy import Row, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.category import Category
from app.models.question import Question
from app.models.user_response import ResponseStatus, UserResponse


async def create_user_response(
    session: AsyncSession,
    user_id: int,
    question_id: int,
    assignment_id: int,
    answer: str,
    is_sure: bool,
    status: ResponseStatus,
) -> UserResponse:
    """응답 기록 추가 (커밋은 호출자 책임)"""
    response = UserResponse(
        user_id=user_id,
        question_id=question_id,
        assignment_id=assignment_id,
        answer=answer,
        is_sure=is_sure,
        status=status.value,
    )
    session.add(response)
    await session.flush()
    return response


async def get_responses_with_questions(
    session: AsyncSession,
    user_id: int,
    assignment_id: int,
) -> Sequence[Row]:
    """과제의 사용자 응답 + 문제/카테고리 정보 (응답 순)"""
    stmt = (
        select(
            UserResponse,
            Question,
            Category.name.label("category_name"),
        )
        .join(Question, Question.id == UserResponse.question_id)
        .join(Category, Category.id == Question.category_id)
        .where(
            UserResponse.user_id == user_id,
            UserResponse.assignment_id == assignment_id,
        )
        .order_by(UserResponse.created_at, UserResponse.id)
    )
    result = await session.execute(stmt)
    return result.all()


async def get_recent_responses(
    session: AsyncSession,
    user_id: int,
    limit: int,
) -> Sequence[Row]:
    """사용자의 최근 응답 (최신 순)"""
    stmt = (
        select(
            UserResponse,
            Question.question,
            Question.correct_answer,
            Category.name.label("category_name"),
        )
        .join(Question, Question.id == UserResponse.question_id)
        .join(Category, Category.id == Question.category_id)
        .where(UserResponse.user_id == user_id)
        .order_by(UserResponse.created_at.desc(), UserResponse.id.desc())
        .limit(limit)
    )
    result = await session.execute(stmt)
    return result.all()


async def get_status_counts(
    session: AsyncSession,
    user_id: int,
    question_id: int,
) -> dict[str, int]:
    """사용자-문제별 응답 상태 횟수"""
    stmt = (
        select(UserResponse.status, func.count(UserResponse.id))
        .where(
            UserResponse.user_id == user_id,
            UserResponse.question_id == question_id,
        )
        .group_by(UserResponse.status)
        .order_by(UserResponse.status)
    )
    result = await session.execute(stmt)
    return {status: count for status, count in result.all()}
