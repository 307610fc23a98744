import json
from datetime import datetime

from pydantic import Field, field_validator, model_validator

from app.schemas.common import CamelModel, SuccessResponse


def parse_options(value) -> list[str]:
    """DB의 JSON 문자열 options를 리스트로 변환"""
    if isinstance(value, str):
        try:
            parsed = json.loads(value)
        except (json.JSONDecodeError, TypeError):
            return []
        return [str(opt) for opt in parsed] if isinstance(parsed, list) else []
    return value


class QuestionCreate(CamelModel):
    """문제 생성 스키마 (단건 폼 / 일괄 등록 공통)"""
    category_id: int = Field(..., description="카테고리 ID")
    question: str = Field(..., min_length=1, description="문제 내용")
    options: list[str] = Field(..., min_length=1, description="선택지 목록")
    correct_answer: str = Field(..., min_length=1, description="정답 (선택지 문자열)")
    short_content: str | None = Field(None, description="확신 없이 맞힌 경우 보여줄 요약 해설")
    long_content_text: str | None = Field(None, description="틀린 경우 보여줄 상세 해설")

    @field_validator("options", mode="before")
    @classmethod
    def decode_options(cls, v):
        # multipart 폼에서는 JSON 배열 문자열로 전달됨
        if isinstance(v, str):
            try:
                v = json.loads(v)
            except json.JSONDecodeError:
                raise ValueError("options는 JSON 배열이어야 합니다")
            if not isinstance(v, list):
                raise ValueError("options는 JSON 배열이어야 합니다")
        return v


class QuestionBulkCreateRequest(CamelModel):
    """문제 일괄 등록 요청 스키마"""
    questions: list[QuestionCreate] = Field(..., min_length=1)

    @model_validator(mode="before")
    @classmethod
    def decode_questions(cls, data):
        """questions가 JSON 문자열로 오는 경우 리스트로 변환"""
        if isinstance(data, dict) and isinstance(data.get("questions"), str):
            try:
                data = {**data, "questions": json.loads(data["questions"])}
            except json.JSONDecodeError:
                raise ValueError("questions는 JSON 배열이어야 합니다")
        return data


class QuestionCreateResponse(SuccessResponse):
    question_id: int


class QuestionBulkCreateResponse(SuccessResponse):
    affected_rows: int


class QuestionResponse(CamelModel):
    """문제 응답 스키마 (관리자용, 정답/해설 포함)"""
    id: int
    category_id: int
    question: str
    question_media_path: str | None
    options: list[str]
    correct_answer: str
    short_content: str | None
    long_content_text: str | None
    long_content_file_path: str | None
    created_at: datetime

    @field_validator("options", mode="before")
    @classmethod
    def decode_options(cls, v):
        return parse_options(v)


class DeliveredQuestionResponse(CamelModel):
    """출제용 문제 응답 스키마 (정답/해설 제외)"""
    id: int
    category_id: int
    question: str
    question_media_path: str | None
    options: list[str]

    @field_validator("options", mode="before")
    @classmethod
    def decode_options(cls, v):
        return parse_options(v)


class CategoryQuestionListResponse(SuccessResponse):
    questions: list[QuestionResponse]
