from datetime import datetime

from pydantic import Field, field_validator

from app.schemas.common import CamelModel, SuccessResponse
from app.schemas.question import DeliveredQuestionResponse, QuestionResponse


class AssignmentCreateRequest(CamelModel):
    """과제 생성 요청 스키마"""
    admin_id: int | None = Field(None, description="생성한 관리자 ID")
    name: str = Field(..., min_length=1, max_length=255, description="과제명")
    category_questions: dict[int, int] = Field(
        default_factory=dict,
        description="카테고리 ID → 출제 문항 수",
    )

    @field_validator("category_questions")
    @classmethod
    def validate_question_counts(cls, v: dict[int, int]) -> dict[int, int]:
        for category_id, question_count in v.items():
            if question_count < 1:
                raise ValueError(f"출제 문항 수는 1 이상이어야 합니다: category_id={category_id}")
        return v


class AssignmentCategoryCreated(CamelModel):
    id: int
    category_id: int
    question_count: int


class AssignmentCreateResponse(SuccessResponse):
    assignment_id: int
    assignment_categories: list[AssignmentCategoryCreated]


class AssignmentCategoryResponse(CamelModel):
    """과제 카테고리 구성 응답 스키마"""
    category_id: int
    category_name: str
    question_count: int


class AssignmentResponse(CamelModel):
    """과제 응답 스키마"""
    id: int
    name: str
    created_at: datetime
    categories: list[AssignmentCategoryResponse] = Field(default_factory=list)


class AssignmentListResponse(SuccessResponse):
    assignments: list[AssignmentResponse]


class AssignmentCategoryDetail(AssignmentCategoryResponse):
    questions: list[QuestionResponse]


class AssignmentDetail(CamelModel):
    """과제 상세 (카테고리별 문제 포함)"""
    id: int
    admin_id: int | None
    name: str
    created_at: datetime
    categories: list[AssignmentCategoryDetail]


class AssignmentDetailResponse(SuccessResponse):
    assignment: AssignmentDetail


class AvailableAssignment(CamelModel):
    """사용자가 풀 수 있는 과제"""
    id: int
    name: str
    created_at: datetime


class AvailableAssignmentListResponse(SuccessResponse):
    assignments: list[AvailableAssignment]


class DeliveredCategory(CamelModel):
    """카테고리별 출제 문제 묶음"""
    category_id: int
    category_name: str
    questions: list[DeliveredQuestionResponse]


class AssignmentQuestionsResponse(SuccessResponse):
    questions: list[DeliveredCategory]
