"""비밀번호 해시/검증 (Argon2)"""
import asyncio
import logging

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError

logger = logging.getLogger(__name__)

_password_hasher = PasswordHasher()


def hash_password(plain_password: str) -> str:
    """평문 비밀번호를 salt 포함 Argon2 해시로 변환"""
    return _password_hasher.hash(plain_password)


def verify_password(plain_password: str, password_hash: str) -> bool:
    """평문 비밀번호와 해시 비교"""
    try:
        return _password_hasher.verify(password_hash, plain_password)
    except VerifyMismatchError:
        return False
    except (InvalidHashError, VerificationError) as e:
        logger.warning(f"비밀번호 해시 검증 오류: {e.__class__.__name__}")
        return False


async def hash_password_async(plain_password: str) -> str:
    # Argon2는 CPU 바운드이므로 이벤트 루프 밖에서 실행
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, hash_password, plain_password)


async def verify_password_async(plain_password: str, password_hash: str) -> bool:
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, verify_password, plain_password, password_hash)
