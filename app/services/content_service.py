import logging

from fastapi import UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from app.crud import (
    assignment as assignment_crud,
    category as category_crud,
    question as question_crud,
    user as user_crud,
)
from app.exceptions import (
    AssignmentNotFoundError,
    CategoryNotFoundError,
    InvalidRequestError,
)
from app.schemas import (
    assignment as assignment_schema,
    category as category_schema,
    question as question_schema,
)
from app.services import upload_service

logger = logging.getLogger(__name__)


async def create_category(
    session: AsyncSession,
    request: category_schema.CategoryCreateRequest,
) -> category_schema.CategoryCreateResponse:
    """카테고리 생성"""
    category = await category_crud.create_category(session, request.name)
    await session.commit()
    logger.info(f"카테고리 생성: category_id={category.id}, name={category.name}")
    return category_schema.CategoryCreateResponse(category_id=category.id)


async def list_categories(session: AsyncSession) -> category_schema.CategoryListResponse:
    """카테고리 목록 조회"""
    categories = await category_crud.get_all_categories(session)
    return category_schema.CategoryListResponse(
        categories=[category_schema.CategoryResponse.model_validate(c) for c in categories]
    )


async def list_category_questions(
    session: AsyncSession,
    category_id: int,
) -> question_schema.CategoryQuestionListResponse:
    """카테고리별 문제 목록 조회"""
    category = await category_crud.get_category_by_id(session, category_id)
    if not category:
        raise CategoryNotFoundError(category_id)

    questions = await question_crud.get_questions_by_category_id(session, category_id)
    return question_schema.CategoryQuestionListResponse(
        questions=[question_schema.QuestionResponse.model_validate(q) for q in questions]
    )


async def create_question(
    session: AsyncSession,
    data: question_schema.QuestionCreate,
    long_content_file: UploadFile | None = None,
    question_media: UploadFile | None = None,
) -> question_schema.QuestionCreateResponse:
    """문제 생성 (해설 파일/문제 미디어 첨부 가능)"""
    category = await category_crud.get_category_by_id(session, data.category_id)
    if not category:
        raise CategoryNotFoundError(data.category_id)

    long_content_file_path = await upload_service.save_upload(long_content_file)
    question_media_path = await upload_service.save_upload(question_media)

    try:
        question = await question_crud.create_question(
            session,
            data,
            long_content_file_path=long_content_file_path,
            question_media_path=question_media_path,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        upload_service.remove_upload(long_content_file_path)
        upload_service.remove_upload(question_media_path)
        raise

    logger.info(f"문제 생성: question_id={question.id}, category_id={data.category_id}")
    return question_schema.QuestionCreateResponse(question_id=question.id)


async def bulk_create_questions(
    session: AsyncSession,
    request: question_schema.QuestionBulkCreateRequest,
) -> question_schema.QuestionBulkCreateResponse:
    """문제 일괄 등록 (하나라도 실패하면 전체 롤백)"""
    category_ids = sorted({q.category_id for q in request.questions})
    existing_ids = await category_crud.get_existing_category_ids(session, category_ids)
    missing_ids = [category_id for category_id in category_ids if category_id not in existing_ids]
    if missing_ids:
        raise CategoryNotFoundError(missing_ids[0])

    try:
        questions = await question_crud.bulk_create_questions(session, request.questions)
        await session.commit()
    except Exception as e:
        logger.error(f"문제 일괄 등록 실패: {e.__class__.__name__}", exc_info=True)
        await session.rollback()
        raise

    logger.info(f"문제 일괄 등록: affected_rows={len(questions)}")
    return question_schema.QuestionBulkCreateResponse(affected_rows=len(questions))


async def create_assignment(
    session: AsyncSession,
    request: assignment_schema.AssignmentCreateRequest,
) -> assignment_schema.AssignmentCreateResponse:
    """과제 생성

    카테고리별 출제 문항 수는 해당 카테고리의 문제 개수를 넘을 수 없습니다.
    과제와 카테고리 구성은 하나의 트랜잭션으로 저장됩니다.
    """
    if request.admin_id is not None:
        admin = await user_crud.get_user_by_id(session, request.admin_id)
        if not admin or not admin.is_admin:
            raise InvalidRequestError(f"관리자 계정이 아닙니다: {request.admin_id}")

    category_ids = list(request.category_questions.keys())
    existing_ids = await category_crud.get_existing_category_ids(session, category_ids)
    for category_id in category_ids:
        if category_id not in existing_ids:
            raise CategoryNotFoundError(category_id)

    question_counts = await category_crud.get_question_counts_by_category_ids(session, category_ids)
    for category_id, question_count in request.category_questions.items():
        available = question_counts.get(category_id, 0)
        if question_count > available:
            logger.warning(
                f"출제 문항 수 초과: category_id={category_id}, "
                f"요청={question_count}, 보유={available}"
            )
            raise InvalidRequestError(
                f"카테고리({category_id})의 문제 개수({available})보다 많은 문항({question_count})을 출제할 수 없습니다"
            )

    try:
        assignment = await assignment_crud.create_assignment(
            session,
            name=request.name,
            admin_id=request.admin_id,
        )
        created = []
        for category_id, question_count in request.category_questions.items():
            assignment_category = await assignment_crud.create_assignment_category(
                session,
                assignment_id=assignment.id,
                category_id=category_id,
                question_count=question_count,
            )
            created.append(assignment_category)
        await session.commit()
    except Exception as e:
        logger.error(f"과제 생성 실패: {e.__class__.__name__}", exc_info=True)
        await session.rollback()
        raise

    logger.info(f"과제 생성: assignment_id={assignment.id}, categories={len(created)}")
    return assignment_schema.AssignmentCreateResponse(
        assignment_id=assignment.id,
        assignment_categories=[
            assignment_schema.AssignmentCategoryCreated.model_validate(ac) for ac in created
        ],
    )


def _category_summaries(assignment) -> list[assignment_schema.AssignmentCategoryResponse]:
    return [
        assignment_schema.AssignmentCategoryResponse(
            category_id=ac.category_id,
            category_name=ac.category.name,
            question_count=ac.question_count,
        )
        for ac in assignment.categories
    ]


async def list_assignments(session: AsyncSession) -> assignment_schema.AssignmentListResponse:
    """과제 목록 조회 (카테고리 구성 포함)"""
    assignments = await assignment_crud.get_all_assignments(session)
    return assignment_schema.AssignmentListResponse(
        assignments=[
            assignment_schema.AssignmentResponse(
                id=a.id,
                name=a.name,
                created_at=a.created_at,
                categories=_category_summaries(a),
            )
            for a in assignments
        ]
    )


async def get_assignment_details(
    session: AsyncSession,
    assignment_id: int,
) -> assignment_schema.AssignmentDetailResponse:
    """과제 상세 조회 (카테고리별 앞쪽 question_count개 문제 포함)"""
    assignment = await assignment_crud.get_assignment_by_id(session, assignment_id, load_categories=True)
    if not assignment:
        raise AssignmentNotFoundError(assignment_id)

    categories = []
    for summary in _category_summaries(assignment):
        questions = await question_crud.get_questions_by_category_id(
            session,
            summary.category_id,
            limit=summary.question_count,
        )
        categories.append(
            assignment_schema.AssignmentCategoryDetail(
                **summary.model_dump(),
                questions=[question_schema.QuestionResponse.model_validate(q) for q in questions],
            )
        )

    return assignment_schema.AssignmentDetailResponse(
        assignment=assignment_schema.AssignmentDetail(
            id=assignment.id,
            admin_id=assignment.admin_id,
            name=assignment.name,
            created_at=assignment.created_at,
            categories=categories,
        )
    )
