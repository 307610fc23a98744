from datetime import datetime

from pydantic import Field

from app.schemas.common import CamelModel, SuccessResponse


class CategoryCreateRequest(CamelModel):
    """카테고리 생성 요청 스키마"""
    name: str = Field(..., min_length=1, max_length=255, description="카테고리명")


class CategoryCreateResponse(SuccessResponse):
    category_id: int


class CategoryResponse(CamelModel):
    """카테고리 응답 스키마"""
    id: int
    name: str
    created_at: datetime


class CategoryListResponse(SuccessResponse):
    categories: list[CategoryResponse]
