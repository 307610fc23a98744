from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import InvalidRequestError
from app.models.base import get_db
from app.schemas import question as question_schema
from app.services import content_service

router = APIRouter(prefix="/admin/questions", tags=["admin-questions"])


@router.post(
    "",
    response_model=question_schema.QuestionCreateResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_question(
    category_id: int = Form(..., alias="categoryId"),
    question: str = Form(...),
    options: str = Form(..., description="선택지 JSON 배열 문자열"),
    correct_answer: str = Form(..., alias="correctAnswer"),
    short_content: str | None = Form(None, alias="shortContent"),
    long_content_text: str | None = Form(None, alias="longContentText"),
    long_content_file: UploadFile | None = File(None, alias="longContentFile"),
    question_media: UploadFile | None = File(None, alias="questionMedia"),
    db: AsyncSession = Depends(get_db),
):
    """문제 생성 API (multipart, 해설 파일/문제 미디어 첨부 가능)"""
    try:
        data = question_schema.QuestionCreate(
            category_id=category_id,
            question=question,
            options=options,
            correct_answer=correct_answer,
            short_content=short_content,
            long_content_text=long_content_text,
        )
    except ValidationError as e:
        messages = "; ".join(err["msg"] for err in e.errors())
        raise InvalidRequestError(f"문제 입력값이 올바르지 않습니다: {messages}")

    return await content_service.create_question(
        db,
        data,
        long_content_file=long_content_file,
        question_media=question_media,
    )


@router.post(
    "/bulk",
    response_model=question_schema.QuestionBulkCreateResponse,
    status_code=status.HTTP_201_CREATED,
)
async def bulk_create_questions(
    request: question_schema.QuestionBulkCreateRequest,
    db: AsyncSession = Depends(get_db),
):
    """문제 일괄 등록 API"""
    return await content_service.bulk_create_questions(db, request)
