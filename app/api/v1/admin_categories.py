from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.base import get_db
from app.schemas import category as category_schema, question as question_schema
from app.services import content_service

router = APIRouter(prefix="/admin/categories", tags=["admin-categories"])


@router.post(
    "",
    response_model=category_schema.CategoryCreateResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_category(
    request: category_schema.CategoryCreateRequest,
    db: AsyncSession = Depends(get_db),
):
    """카테고리 생성 API"""
    return await content_service.create_category(db, request)


@router.get("", response_model=category_schema.CategoryListResponse)
async def get_categories(
    db: AsyncSession = Depends(get_db),
):
    """카테고리 목록 조회 API"""
    return await content_service.list_categories(db)


@router.get("/{category_id}/questions", response_model=question_schema.CategoryQuestionListResponse)
async def get_category_questions(
    category_id: int,
    db: AsyncSession = Depends(get_db),
):
    """카테고리별 문제 목록 조회 API"""
    return await content_service.list_category_questions(db, category_id)
