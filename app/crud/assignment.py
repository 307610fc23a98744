from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload, selectinload

from app.crud.question import mastered_by_user
from app.models.question import Question
from app.models.test_assignment import AssignmentCategory, TestAssignment


async def create_assignment(
    session: AsyncSession,
    name: str,
    admin_id: int | None = None,
) -> TestAssignment:
    """과제 생성 (커밋은 호출자 책임)"""
    assignment = TestAssignment(name=name, admin_id=admin_id)
    session.add(assignment)
    await session.flush()
    return assignment


async def create_assignment_category(
    session: AsyncSession,
    assignment_id: int,
    category_id: int,
    question_count: int,
) -> AssignmentCategory:
    """과제-카테고리 출제 문항 수 생성"""
    assignment_category = AssignmentCategory(
        assignment_id=assignment_id,
        category_id=category_id,
        question_count=question_count,
    )
    session.add(assignment_category)
    await session.flush()
    return assignment_category


async def get_assignment_by_id(
    session: AsyncSession,
    assignment_id: int,
    load_categories: bool = False,
) -> TestAssignment | None:
    """ID로 과제 조회

    Args:
        session: 데이터베이스 세션
        assignment_id: 과제 ID
        load_categories: 카테고리 구성(및 카테고리명)을 eager load할지 여부
    """
    stmt = select(TestAssignment).where(TestAssignment.id == assignment_id)

    if load_categories:
        stmt = stmt.options(
            selectinload(TestAssignment.categories).joinedload(AssignmentCategory.category),
        )

    result = await session.execute(stmt)
    return result.scalar_one_or_none()


async def get_all_assignments(session: AsyncSession) -> Sequence[TestAssignment]:
    """모든 과제 조회 (카테고리 구성 포함, 생성 순)"""
    stmt = (
        select(TestAssignment)
        .options(selectinload(TestAssignment.categories).joinedload(AssignmentCategory.category))
        .order_by(TestAssignment.created_at, TestAssignment.id)
    )
    result = await session.execute(stmt)
    return result.scalars().all()


async def get_assignments_with_unmastered_questions(
    session: AsyncSession,
    user_id: int,
) -> Sequence[TestAssignment]:
    """숙달하지 않은 문제가 1개 이상 남은 카테고리를 가진 과제 목록"""
    has_unmastered_question = (
        select(Question.id)
        .where(
            Question.category_id == AssignmentCategory.category_id,
            ~mastered_by_user(user_id),
        )
        .correlate(AssignmentCategory)
        .exists()
    )
    has_open_category = (
        select(AssignmentCategory.id)
        .where(
            AssignmentCategory.assignment_id == TestAssignment.id,
            has_unmastered_question,
        )
        .correlate(TestAssignment)
        .exists()
    )
    stmt = (
        select(TestAssignment)
        .where(has_open_category)
        .order_by(TestAssignment.created_at, TestAssignment.id)
    )
    result = await session.execute(stmt)
    return result.scalars().all()
