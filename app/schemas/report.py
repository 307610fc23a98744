from datetime import datetime

from app.models.user_response import ResponseStatus
from app.schemas.common import CamelModel, SuccessResponse


class ResponseStats(CamelModel):
    """응답 집계 (정확도/확신도/숙달도는 0~100 정수 %)"""
    total_responses: int = 0
    correct_answers: int = 0
    incorrect_answers: int = 0
    confident_responses: int = 0
    unsure_responses: int = 0
    # sure_correct 응답 수 (같은 문제의 중복 응답도 합산)
    mastered_questions: int = 0
    sure_correct: int = 0
    not_sure_correct: int = 0
    sure_incorrect: int = 0
    not_sure_incorrect: int = 0
    accuracy: int = 0
    confidence: int = 0
    mastery: int = 0


class OverallProgressStats(ResponseStats):
    total_assignments: int = 0
    total_categories: int = 0


class CategoryProgress(ResponseStats):
    category_id: int
    category_name: str
    total_questions: int
    attempted_questions: int
    completion_percentage: int


class RecentActivity(CamelModel):
    response_id: int
    question_id: int
    question: str
    category: str
    user_answer: str
    correct_answer: str
    status: ResponseStatus
    is_correct: bool
    response_time: datetime


class UserProgress(CamelModel):
    overall_stats: OverallProgressStats
    categories: list[CategoryProgress]
    recent_activity: list[RecentActivity]


class UserProgressResponse(SuccessResponse):
    progress: UserProgress


class CompletionStats(CamelModel):
    total_categories: int
    total_questions: int
    mastered_questions: int
    mastery_percentage: int


class AssignmentCompletionDetail(CamelModel):
    id: int
    name: str
    created_at: datetime
    is_completed: bool
    completed_at: datetime | None
    stats: CompletionStats


class CompletionDetailsResponse(SuccessResponse):
    assignments: list[AssignmentCompletionDetail]


class CategoryStats(ResponseStats):
    category_id: int
    category_name: str


class AssignmentHistory(CamelModel):
    """관리자용 사용자 과제 이력"""
    id: int
    name: str
    created_at: datetime
    is_completed: bool
    completed_at: datetime | None
    stats: ResponseStats
    categories: list[CategoryStats]


class HistoryOverallStats(ResponseStats):
    total_assignments: int = 0


class UserHistoryResponse(SuccessResponse):
    user_id: int
    assignments: list[AssignmentHistory]
    overall_stats: HistoryOverallStats


class QuestionMasteryEntry(CamelModel):
    status: ResponseStatus
    attempt_count: int


class QuestionMasteryResponse(SuccessResponse):
    user_id: int
    question_id: int
    mastered: bool
    mastery: list[QuestionMasteryEntry]


class RegularUserSummary(CamelModel):
    id: int
    email: str
    created_at: datetime
    total_questions_attempted: int
    total_assignments_attempted: int


class RegularUserListResponse(SuccessResponse):
    users: list[RegularUserSummary]
    count: int
