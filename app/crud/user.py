from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import User
from app.models.user_response import UserResponse


async def create_user(
    session: AsyncSession,
    email: str,
    password_hash: str,
    is_admin: bool = False,
) -> User:
    """사용자 생성 (커밋은 호출자 책임)"""
    user = User(email=email, password_hash=password_hash, is_admin=is_admin)
    session.add(user)
    await session.flush()
    return user


async def get_user_by_id(session: AsyncSession, user_id: int) -> User | None:
    """ID로 사용자 조회"""
    result = await session.execute(select(User).where(User.id == user_id))
    return result.scalar_one_or_none()


async def get_user_by_email(session: AsyncSession, email: str) -> User | None:
    """이메일로 사용자 조회"""
    result = await session.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def get_regular_users_with_activity(session: AsyncSession) -> list[dict]:
    """관리자가 아닌 사용자 목록 (응답 수, 응시 과제 수 포함, 최근 가입 순)"""
    stmt = (
        select(
            User.id,
            User.email,
            User.created_at,
            func.count(UserResponse.id).label("total_questions_attempted"),
            func.count(UserResponse.assignment_id.distinct()).label("total_assignments_attempted"),
        )
        .outerjoin(UserResponse, UserResponse.user_id == User.id)
        .where(User.is_admin.is_(False))
        .group_by(User.id, User.email, User.created_at)
        .order_by(User.created_at.desc(), User.id.desc())
    )
    result = await session.execute(stmt)

    users = []
    for row in result.all():
        users.append({
            "id": row.id,
            "email": row.email,
            "created_at": row.created_at,
            "total_questions_attempted": row.total_questions_attempted or 0,
            "total_assignments_attempted": row.total_assignments_attempted or 0,
        })
    return users
