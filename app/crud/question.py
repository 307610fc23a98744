import json
from typing import Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.question import Question
from app.models.user_response import ResponseStatus, UserResponse
from app.schemas.question import QuestionCreate


def mastered_by_user(user_id: int):
    """Question 행에 상관된 '사용자가 숙달함' 조건 (sure_correct 응답이 1건 이상)"""
    return (
        select(UserResponse.id)
        .where(
            UserResponse.question_id == Question.id,
            UserResponse.user_id == user_id,
            UserResponse.status == ResponseStatus.SURE_CORRECT.value,
        )
        .correlate(Question)
        .exists()
    )


def _build_question(
    data: QuestionCreate,
    long_content_file_path: str | None = None,
    question_media_path: str | None = None,
) -> Question:
    return Question(
        category_id=data.category_id,
        question=data.question,
        question_media_path=question_media_path,
        options=json.dumps(data.options, ensure_ascii=False),
        correct_answer=data.correct_answer,
        short_content=data.short_content,
        long_content_text=data.long_content_text,
        long_content_file_path=long_content_file_path,
    )


async def create_question(
    session: AsyncSession,
    data: QuestionCreate,
    long_content_file_path: str | None = None,
    question_media_path: str | None = None,
) -> Question:
    """문제 생성 (커밋은 호출자 책임)"""
    question = _build_question(data, long_content_file_path, question_media_path)
    session.add(question)
    await session.flush()
    return question


async def bulk_create_questions(
    session: AsyncSession,
    items: Sequence[QuestionCreate],
) -> list[Question]:
    """문제 일괄 생성 (첨부 파일 없음)"""
    questions = [_build_question(item) for item in items]
    session.add_all(questions)
    await session.flush()
    return questions


async def get_question_by_id(session: AsyncSession, question_id: int) -> Question | None:
    """ID로 문제 조회"""
    result = await session.execute(select(Question).where(Question.id == question_id))
    return result.scalar_one_or_none()


async def get_questions_by_category_id(
    session: AsyncSession,
    category_id: int,
    limit: int | None = None,
) -> Sequence[Question]:
    """카테고리별 문제 목록 (ID 순)"""
    stmt = select(Question).where(Question.category_id == category_id).order_by(Question.id)
    if limit is not None:
        stmt = stmt.limit(limit)
    result = await session.execute(stmt)
    return result.scalars().all()


async def get_random_unmastered_questions(
    session: AsyncSession,
    user_id: int,
    category_id: int,
    count: int,
) -> Sequence[Question]:
    """카테고리에서 사용자가 숙달하지 않은 문제를 최대 count개 랜덤 추출"""
    stmt = (
        select(Question)
        .where(
            Question.category_id == category_id,
            ~mastered_by_user(user_id),
        )
        .order_by(func.random())
        .limit(count)
    )
    result = await session.execute(stmt)
    return result.scalars().all()
