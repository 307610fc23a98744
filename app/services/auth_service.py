import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.security import hash_password_async, verify_password_async
from app.crud import user as user_crud
from app.exceptions import EmailAlreadyRegisteredError, InvalidCredentialsError
from app.models.user import User
from app.schemas import user as user_schema

logger = logging.getLogger(__name__)


class CredentialStore:
    """이메일/비밀번호 검증 (Argon2 해시 비교)"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def authenticate(self, email: str, password: str) -> User | None:
        user = await user_crud.get_user_by_email(self.session, email)
        if not user:
            return None
        if not await verify_password_async(password, user.password_hash):
            return None
        return user

    async def verify(self, email: str, password: str) -> bool:
        return await self.authenticate(email, password) is not None


async def register(
    session: AsyncSession,
    request: user_schema.RegisterRequest,
) -> user_schema.RegisterResponse:
    """회원가입"""
    existing = await user_crud.get_user_by_email(session, request.email)
    if existing:
        raise EmailAlreadyRegisteredError(request.email)

    password_hash = await hash_password_async(request.password)
    try:
        user = await user_crud.create_user(
            session,
            email=request.email,
            password_hash=password_hash,
            is_admin=request.is_admin,
        )
        await session.commit()
    except IntegrityError:
        # 동시 가입으로 유니크 제약 위반
        await session.rollback()
        raise EmailAlreadyRegisteredError(request.email)

    logger.info(f"회원가입: user_id={user.id}, is_admin={user.is_admin}")
    return user_schema.RegisterResponse(user_id=user.id)


async def login(
    session: AsyncSession,
    request: user_schema.LoginRequest,
) -> user_schema.LoginResponse:
    """로그인 (토큰 발급 없음)"""
    user = await CredentialStore(session).authenticate(request.email, request.password)
    if not user:
        logger.warning(f"로그인 실패: email={request.email}")
        raise InvalidCredentialsError()

    return user_schema.LoginResponse(user=user_schema.UserInfo.model_validate(user))
