import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.crud import (
    question as question_crud,
    report as report_crud,
    user as user_crud,
    user_response as user_response_crud,
)
from app.exceptions import QuestionNotFoundError, UserNotFoundError
from app.models.user_response import ResponseStatus
from app.schemas import report as report_schema

logger = logging.getLogger(__name__)


def percentage(part: int, total: int) -> int:
    """part / total 을 반올림한 정수 % (0~100, total이 0이면 0)"""
    if total <= 0:
        return 0
    # 정수 연산으로 사사오입
    value = (200 * part + total) // (2 * total)
    return max(0, min(100, value))


def build_response_stats(row) -> dict:
    """상태별 응답 수 집계 행 → ResponseStats 필드"""
    total = row.total_responses or 0
    sure_correct = row.sure_correct or 0
    not_sure_correct = row.not_sure_correct or 0
    sure_incorrect = row.sure_incorrect or 0
    not_sure_incorrect = row.not_sure_incorrect or 0

    correct = sure_correct + not_sure_correct
    confident = sure_correct + sure_incorrect
    return {
        "total_responses": total,
        "correct_answers": correct,
        "incorrect_answers": sure_incorrect + not_sure_incorrect,
        "confident_responses": confident,
        "unsure_responses": not_sure_correct + not_sure_incorrect,
        "mastered_questions": sure_correct,
        "sure_correct": sure_correct,
        "not_sure_correct": not_sure_correct,
        "sure_incorrect": sure_incorrect,
        "not_sure_incorrect": not_sure_incorrect,
        "accuracy": percentage(correct, total),
        "confidence": percentage(confident, total),
        "mastery": percentage(sure_correct, total),
    }


async def _ensure_user(session: AsyncSession, user_id: int) -> None:
    user = await user_crud.get_user_by_id(session, user_id)
    if not user:
        raise UserNotFoundError(user_id)


async def get_user_progress(
    session: AsyncSession,
    user_id: int,
) -> report_schema.UserProgressResponse:
    """사용자 진행률 (전체 / 카테고리별 / 최근 활동)"""
    await _ensure_user(session, user_id)

    overall_row = await report_crud.get_user_overall_stats(session, user_id)
    overall_stats = report_schema.OverallProgressStats(
        total_assignments=overall_row.total_assignments or 0,
        total_categories=overall_row.total_categories or 0,
        **build_response_stats(overall_row),
    )

    categories = []
    for row in await report_crud.get_user_category_progress(session, user_id):
        total_questions = row.total_questions or 0
        attempted_questions = row.attempted_questions or 0
        categories.append(
            report_schema.CategoryProgress(
                category_id=row.category_id,
                category_name=row.category_name,
                total_questions=total_questions,
                attempted_questions=attempted_questions,
                completion_percentage=percentage(attempted_questions, total_questions),
                **build_response_stats(row),
            )
        )

    recent_activity = []
    recent_rows = await user_response_crud.get_recent_responses(
        session, user_id, settings.recent_activity_limit
    )
    for response, question_text, correct_answer, category_name in recent_rows:
        recent_activity.append(
            report_schema.RecentActivity(
                response_id=response.id,
                question_id=response.question_id,
                question=question_text,
                category=category_name,
                user_answer=response.answer,
                correct_answer=correct_answer,
                status=ResponseStatus(response.status),
                is_correct=response.answer == correct_answer,
                response_time=response.created_at,
            )
        )

    return report_schema.UserProgressResponse(
        progress=report_schema.UserProgress(
            overall_stats=overall_stats,
            categories=categories,
            recent_activity=recent_activity,
        )
    )


async def get_completion_details(
    session: AsyncSession,
    user_id: int,
) -> report_schema.CompletionDetailsResponse:
    """과제별 완료 여부 및 숙달 현황"""
    await _ensure_user(session, user_id)

    assignments = []
    for row in await report_crud.get_assignment_completion_rows(session, user_id):
        total_questions = row.total_questions or 0
        mastered_questions = row.mastered_questions or 0
        assignments.append(
            report_schema.AssignmentCompletionDetail(
                id=row.id,
                name=row.name,
                created_at=row.created_at,
                is_completed=bool(row.is_completed),
                completed_at=row.completed_at,
                stats=report_schema.CompletionStats(
                    total_categories=row.category_count or 0,
                    total_questions=total_questions,
                    mastered_questions=mastered_questions,
                    mastery_percentage=percentage(mastered_questions, total_questions),
                ),
            )
        )
    return report_schema.CompletionDetailsResponse(assignments=assignments)


async def get_user_history(
    session: AsyncSession,
    user_id: int,
) -> report_schema.UserHistoryResponse:
    """관리자용 사용자 응시 이력 (과제별 / 카테고리별 / 전체)"""
    await _ensure_user(session, user_id)

    assignments = []
    for row in await report_crud.get_attempted_assignments(session, user_id):
        stats_row = await report_crud.get_assignment_stats(session, user_id, row.id)
        category_rows = await report_crud.get_assignment_category_stats(session, user_id, row.id)
        assignments.append(
            report_schema.AssignmentHistory(
                id=row.id,
                name=row.name,
                created_at=row.created_at,
                is_completed=bool(row.is_completed),
                completed_at=row.completed_at,
                stats=report_schema.ResponseStats(**build_response_stats(stats_row)),
                categories=[
                    report_schema.CategoryStats(
                        category_id=c.category_id,
                        category_name=c.category_name,
                        **build_response_stats(c),
                    )
                    for c in category_rows
                ],
            )
        )

    overall_row = await report_crud.get_user_overall_stats(session, user_id)
    return report_schema.UserHistoryResponse(
        user_id=user_id,
        assignments=assignments,
        overall_stats=report_schema.HistoryOverallStats(
            total_assignments=overall_row.total_assignments or 0,
            **build_response_stats(overall_row),
        ),
    )


async def get_question_mastery(
    session: AsyncSession,
    user_id: int,
    question_id: int,
) -> report_schema.QuestionMasteryResponse:
    """사용자-문제 숙달 여부 및 상태별 응답 횟수"""
    await _ensure_user(session, user_id)
    question = await question_crud.get_question_by_id(session, question_id)
    if not question:
        raise QuestionNotFoundError(question_id)

    counts = await user_response_crud.get_status_counts(session, user_id, question_id)
    mastery = [
        report_schema.QuestionMasteryEntry(status=ResponseStatus(status), attempt_count=count)
        for status, count in counts.items()
    ]
    return report_schema.QuestionMasteryResponse(
        user_id=user_id,
        question_id=question_id,
        mastered=counts.get(ResponseStatus.SURE_CORRECT.value, 0) > 0,
        mastery=mastery,
    )


async def list_regular_users(session: AsyncSession) -> report_schema.RegularUserListResponse:
    """일반 사용자 목록 (응답 수 / 응시 과제 수 포함)"""
    users = await user_crud.get_regular_users_with_activity(session)
    summaries = [report_schema.RegularUserSummary.model_validate(u) for u in users]
    return report_schema.RegularUserListResponse(users=summaries, count=len(summaries))
