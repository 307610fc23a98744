from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.base import get_db
from app.schemas import user as user_schema
from app.services import auth_service

router = APIRouter(prefix="/user", tags=["user"])


@router.post("/register", response_model=user_schema.RegisterResponse, status_code=status.HTTP_201_CREATED)
async def register(
    request: user_schema.RegisterRequest,
    db: AsyncSession = Depends(get_db),
):
    """회원가입 API"""
    return await auth_service.register(db, request)


@router.post("/login", response_model=user_schema.LoginResponse)
async def login(
    request: user_schema.LoginRequest,
    db: AsyncSession = Depends(get_db),
):
    """로그인 API"""
    return await auth_service.login(db, request)
