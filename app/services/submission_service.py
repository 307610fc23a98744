import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.crud import (
    assignment as assignment_crud,
    completion as completion_crud,
    question as question_crud,
    user as user_crud,
    user_response as user_response_crud,
)
from app.exceptions import (
    AlreadyCompletedError,
    AssignmentNotCompletedError,
    AssignmentNotFoundError,
    BaseAppError,
    QuestionNotFoundError,
    StoreError,
    UserNotFoundError,
)
from app.models.question import Question
from app.models.user_response import ResponseStatus
from app.schemas import submission as submission_schema
from app.schemas.question import parse_options

logger = logging.getLogger(__name__)


def classify_response(is_correct: bool, is_sure: bool) -> ResponseStatus:
    """(정답 여부, 확신 여부) → 응답 상태"""
    if is_sure:
        return ResponseStatus.SURE_CORRECT if is_correct else ResponseStatus.SURE_INCORRECT
    return ResponseStatus.NOT_SURE_CORRECT if is_correct else ResponseStatus.NOT_SURE_INCORRECT


def derive_feedback(status: ResponseStatus, question: Question) -> submission_schema.Feedback | None:
    """응답 상태별 피드백

    - sure_correct: 없음
    - not_sure_correct: 요약 해설(short)
    - sure_incorrect / not_sure_incorrect: 상세 해설(long)
    """
    if status == ResponseStatus.SURE_CORRECT:
        return None
    if status == ResponseStatus.NOT_SURE_CORRECT:
        return submission_schema.Feedback(short=question.short_content)
    return submission_schema.Feedback(
        long=submission_schema.LongContent(
            text=question.long_content_text,
            file_path=question.long_content_file_path,
        )
    )


async def submit_assignment(
    session: AsyncSession,
    user_id: int,
    assignment_id: int,
    request: submission_schema.SubmitRequest,
) -> submission_schema.SubmitResponse:
    """과제 제출

    응답 기록과 완료 처리는 하나의 트랜잭션으로 처리되며,
    실패 시 이번 요청의 모든 기록이 롤백됩니다. 완료된 과제는 다시 제출할 수 없습니다.
    """
    user = await user_crud.get_user_by_id(session, user_id)
    if not user:
        raise UserNotFoundError(user_id)

    assignment = await assignment_crud.get_assignment_by_id(session, assignment_id)
    if not assignment:
        raise AssignmentNotFoundError(assignment_id)

    # 쓰기 전에 완료 여부 확인
    completion = await completion_crud.get_completion(session, user_id, assignment_id)
    if completion and completion.is_completed:
        logger.warning(f"완료된 과제 재제출 거부: user_id={user_id}, assignment_id={assignment_id}")
        raise AlreadyCompletedError(user_id, assignment_id)

    try:
        results = []
        for item in request.responses:
            question = await question_crud.get_question_by_id(session, item.question_id)
            if not question:
                raise QuestionNotFoundError(item.question_id)

            is_correct = item.answer == question.correct_answer
            status = classify_response(is_correct, item.is_sure)

            await user_response_crud.create_user_response(
                session,
                user_id=user_id,
                question_id=item.question_id,
                assignment_id=assignment_id,
                answer=item.answer,
                is_sure=item.is_sure,
                status=status,
            )

            results.append(
                submission_schema.SubmissionResult(
                    question_id=item.question_id,
                    status=status,
                    correct_answer=question.correct_answer,
                    user_answer=item.answer,
                    is_sure=item.is_sure,
                    feedback=derive_feedback(status, question),
                )
            )

        # 동시 제출 시 선행 트랜잭션이 완료 처리했다면 영향 행이 0
        if not await completion_crud.mark_completed(session, user_id, assignment_id):
            raise AlreadyCompletedError(user_id, assignment_id)

        await session.commit()
    except BaseAppError as e:
        logger.warning(
            f"과제 제출 롤백: user_id={user_id}, assignment_id={assignment_id}, "
            f"reason={e.__class__.__name__}: {e.message}"
        )
        await session.rollback()
        raise
    except SQLAlchemyError as e:
        logger.error(
            f"과제 제출 중 DB 오류: user_id={user_id}, assignment_id={assignment_id}",
            exc_info=True,
        )
        await session.rollback()
        raise StoreError(f"과제 제출 저장 중 오류가 발생했습니다: {e.__class__.__name__}") from e
    except Exception:
        logger.error(
            f"과제 제출 중 예상치 못한 오류: user_id={user_id}, assignment_id={assignment_id}",
            exc_info=True,
        )
        await session.rollback()
        raise

    logger.info(
        f"과제 제출 완료: user_id={user_id}, assignment_id={assignment_id}, responses={len(results)}"
    )
    return submission_schema.SubmitResponse(results=results, assignment_completed=True)


async def get_assignment_results(
    session: AsyncSession,
    user_id: int,
    assignment_id: int,
) -> submission_schema.AssignmentResultResponse:
    """완료한 과제의 채점 결과 조회"""
    completion = await completion_crud.get_completion(session, user_id, assignment_id)
    if not completion or not completion.is_completed:
        raise AssignmentNotCompletedError(user_id, assignment_id)

    assignment = await assignment_crud.get_assignment_by_id(session, assignment_id)
    if not assignment:
        raise AssignmentNotFoundError(assignment_id)

    rows = await user_response_crud.get_responses_with_questions(session, user_id, assignment_id)

    responses = []
    for response, question, category_name in rows:
        status = ResponseStatus(response.status)
        responses.append(
            submission_schema.ResultResponseItem(
                question_id=response.question_id,
                status=status,
                correct_answer=question.correct_answer,
                user_answer=response.answer,
                is_sure=response.is_sure,
                feedback=derive_feedback(status, question),
                question=question.question,
                options=parse_options(question.options),
                category=category_name,
                response_time=response.created_at,
            )
        )

    return submission_schema.AssignmentResultResponse(
        assignment=submission_schema.AssignmentResult(
            id=assignment.id,
            name=assignment.name,
            completed_at=completion.completed_at,
            responses=responses,
        )
    )
