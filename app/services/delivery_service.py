import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.crud import (
    assignment as assignment_crud,
    question as question_crud,
    user as user_crud,
)
from app.exceptions import AssignmentNotFoundError, UserNotFoundError
from app.schemas import assignment as assignment_schema, question as question_schema

logger = logging.getLogger(__name__)


async def _ensure_user(session: AsyncSession, user_id: int) -> None:
    user = await user_crud.get_user_by_id(session, user_id)
    if not user:
        raise UserNotFoundError(user_id)


async def get_available_assignments(
    session: AsyncSession,
    user_id: int,
) -> assignment_schema.AvailableAssignmentListResponse:
    """숙달하지 않은 문제가 남아 있는 과제 목록"""
    await _ensure_user(session, user_id)

    assignments = await assignment_crud.get_assignments_with_unmastered_questions(session, user_id)
    return assignment_schema.AvailableAssignmentListResponse(
        assignments=[assignment_schema.AvailableAssignment.model_validate(a) for a in assignments]
    )


async def get_assignment_questions(
    session: AsyncSession,
    user_id: int,
    assignment_id: int,
) -> assignment_schema.AssignmentQuestionsResponse:
    """과제 문제 출제

    카테고리별로 사용자가 숙달하지 않은 문제를 최대 question_count개 랜덤 추출합니다.
    남은 문제가 없는 카테고리는 결과에서 제외됩니다.
    """
    await _ensure_user(session, user_id)

    assignment = await assignment_crud.get_assignment_by_id(session, assignment_id, load_categories=True)
    if not assignment:
        raise AssignmentNotFoundError(assignment_id)

    delivered = []
    for assignment_category in assignment.categories:
        questions = await question_crud.get_random_unmastered_questions(
            session,
            user_id=user_id,
            category_id=assignment_category.category_id,
            count=assignment_category.question_count,
        )
        if not questions:
            logger.debug(
                f"숙달 완료 카테고리 제외: user_id={user_id}, "
                f"category_id={assignment_category.category_id}"
            )
            continue

        delivered.append(
            assignment_schema.DeliveredCategory(
                category_id=assignment_category.category_id,
                category_name=assignment_category.category.name,
                questions=[question_schema.DeliveredQuestionResponse.model_validate(q) for q in questions],
            )
        )

    logger.info(
        f"과제 출제: user_id={user_id}, assignment_id={assignment_id}, "
        f"categories={len(delivered)}, questions={sum(len(c.questions) for c in delivered)}"
    )
    return assignment_schema.AssignmentQuestionsResponse(questions=delivered)
