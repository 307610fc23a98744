from pydantic import EmailStr, Field

from app.schemas.common import CamelModel, SuccessResponse


class RegisterRequest(CamelModel):
    """회원가입 요청 스키마"""
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=128)
    is_admin: bool = False


class RegisterResponse(SuccessResponse):
    user_id: int


class LoginRequest(CamelModel):
    """로그인 요청 스키마"""
    email: str
    password: str


class UserInfo(CamelModel):
    id: int
    email: str
    is_admin: bool


class LoginResponse(SuccessResponse):
    user: UserInfo
