from datetime import datetime

from pydantic import Field

from app.models.user_response import ResponseStatus
from app.schemas.common import CamelModel, SuccessResponse


class ResponseItem(CamelModel):
    """문항별 답안"""
    question_id: int = Field(..., description="문제 ID")
    answer: str = Field(..., description="사용자 답안")
    is_sure: bool = Field(..., description="확신 여부")


class SubmitRequest(CamelModel):
    """과제 제출 요청 스키마"""
    responses: list[ResponseItem] = Field(..., min_length=1)


class LongContent(CamelModel):
    text: str | None
    file_path: str | None


class Feedback(CamelModel):
    """응답 상태별 피드백 (not_sure_correct → short, 오답 → long)"""
    short: str | None = None
    long: LongContent | None = None


class SubmissionResult(CamelModel):
    """문항별 채점 결과"""
    question_id: int
    status: ResponseStatus
    correct_answer: str
    user_answer: str
    is_sure: bool
    feedback: Feedback | None = None


class SubmitResponse(SuccessResponse):
    results: list[SubmissionResult]
    assignment_completed: bool


class ResultResponseItem(SubmissionResult):
    """결과 조회용 문항 (문제 정보 포함)"""
    question: str
    options: list[str]
    category: str
    response_time: datetime


class AssignmentResult(CamelModel):
    id: int
    name: str
    completed_at: datetime | None
    responses: list[ResultResponseItem]


class AssignmentResultResponse(SuccessResponse):
    assignment: AssignmentResult
