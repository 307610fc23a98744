from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.base import get_db
from app.schemas import report as report_schema
from app.services import report_service

router = APIRouter(prefix="/admin", tags=["admin-users"])


@router.get("/users/{user_id}/history", response_model=report_schema.UserHistoryResponse)
async def get_user_history(
    user_id: int,
    db: AsyncSession = Depends(get_db),
):
    """사용자 응시 이력 조회 API"""
    return await report_service.get_user_history(db, user_id)


@router.get(
    "/users/{user_id}/questions/{question_id}/mastery",
    response_model=report_schema.QuestionMasteryResponse,
)
async def get_question_mastery(
    user_id: int,
    question_id: int,
    db: AsyncSession = Depends(get_db),
):
    """사용자-문제 숙달 현황 조회 API"""
    return await report_service.get_question_mastery(db, user_id, question_id)


@router.get("/getAllRegularUsers", response_model=report_schema.RegularUserListResponse)
async def get_all_regular_users(
    db: AsyncSession = Depends(get_db),
):
    """일반 사용자 목록 조회 API"""
    return await report_service.list_regular_users(db)
