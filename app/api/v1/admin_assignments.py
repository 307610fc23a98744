from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.base import get_db
from app.schemas import assignment as assignment_schema
from app.services import content_service

router = APIRouter(prefix="/admin/assignments", tags=["admin-assignments"])


@router.post(
    "",
    response_model=assignment_schema.AssignmentCreateResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_assignment(
    request: assignment_schema.AssignmentCreateRequest,
    db: AsyncSession = Depends(get_db),
):
    """과제 생성 API"""
    return await content_service.create_assignment(db, request)


@router.get("", response_model=assignment_schema.AssignmentListResponse)
async def get_assignments(
    db: AsyncSession = Depends(get_db),
):
    """과제 목록 조회 API"""
    return await content_service.list_assignments(db)


@router.get("/{assignment_id}", response_model=assignment_schema.AssignmentDetailResponse)
async def get_assignment(
    assignment_id: int,
    db: AsyncSession = Depends(get_db),
):
    """과제 상세 조회 API"""
    return await content_service.get_assignment_details(db, assignment_id)
