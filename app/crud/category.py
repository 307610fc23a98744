from typing import Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.category import Category
from app.models.question import Question


async def create_category(session: AsyncSession, name: str) -> Category:
    """카테고리 생성 (커밋은 호출자 책임)"""
    category = Category(name=name)
    session.add(category)
    await session.flush()
    return category


async def get_category_by_id(session: AsyncSession, category_id: int) -> Category | None:
    """ID로 카테고리 조회"""
    result = await session.execute(select(Category).where(Category.id == category_id))
    return result.scalar_one_or_none()


async def get_all_categories(session: AsyncSession) -> Sequence[Category]:
    """모든 카테고리 조회"""
    result = await session.execute(select(Category).order_by(Category.id))
    return result.scalars().all()


async def get_existing_category_ids(session: AsyncSession, category_ids: list[int]) -> set[int]:
    """주어진 ID 중 실제 존재하는 카테고리 ID"""
    if not category_ids:
        return set()
    result = await session.execute(select(Category.id).where(Category.id.in_(category_ids)))
    return set(result.scalars().all())


async def get_question_counts_by_category_ids(
    session: AsyncSession,
    category_ids: list[int],
) -> dict[int, int]:
    """카테고리별 문제 개수 (문제가 없는 카테고리는 0)"""
    if not category_ids:
        return {}
    stmt = (
        select(Question.category_id, func.count(Question.id))
        .where(Question.category_id.in_(category_ids))
        .group_by(Question.category_id)
    )
    result = await session.execute(stmt)
    counts = {category_id: 0 for category_id in category_ids}
    for category_id, count in result.all():
        counts[category_id] = count
    return counts
