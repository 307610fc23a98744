from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.base import get_db
from app.schemas import (
    assignment as assignment_schema,
    report as report_schema,
    submission as submission_schema,
)
from app.services import delivery_service, report_service, submission_service

router = APIRouter(prefix="/user", tags=["user-assignments"])


@router.get("/{user_id}/assignments", response_model=assignment_schema.AvailableAssignmentListResponse)
async def get_assignments(
    user_id: int,
    db: AsyncSession = Depends(get_db),
):
    """풀 수 있는 과제 목록 조회 API"""
    return await delivery_service.get_available_assignments(db, user_id)


@router.get(
    "/{user_id}/assignments/completion-details",
    response_model=report_schema.CompletionDetailsResponse,
)
async def get_completion_details(
    user_id: int,
    db: AsyncSession = Depends(get_db),
):
    """과제별 완료 현황 조회 API"""
    return await report_service.get_completion_details(db, user_id)


@router.get(
    "/{user_id}/assignments/{assignment_id}/questions",
    response_model=assignment_schema.AssignmentQuestionsResponse,
)
async def get_assignment_questions(
    user_id: int,
    assignment_id: int,
    db: AsyncSession = Depends(get_db),
):
    """과제 문제 출제 API"""
    return await delivery_service.get_assignment_questions(db, user_id, assignment_id)


@router.post(
    "/{user_id}/assignments/{assignment_id}/submit",
    response_model=submission_schema.SubmitResponse,
)
async def submit_assignment(
    user_id: int,
    assignment_id: int,
    request: submission_schema.SubmitRequest,
    db: AsyncSession = Depends(get_db),
):
    """과제 제출 API"""
    return await submission_service.submit_assignment(db, user_id, assignment_id, request)


@router.get(
    "/{user_id}/assignments/{assignment_id}/results",
    response_model=submission_schema.AssignmentResultResponse,
)
async def get_assignment_results(
    user_id: int,
    assignment_id: int,
    db: AsyncSession = Depends(get_db),
):
    """과제 결과 조회 API"""
    return await submission_service.get_assignment_results(db, user_id, assignment_id)


@router.get("/{user_id}/progress", response_model=report_schema.UserProgressResponse)
async def get_progress(
    user_id: int,
    db: AsyncSession = Depends(get_db),
):
    """사용자 진행률 조회 API"""
    return await report_service.get_user_progress(db, user_id)
