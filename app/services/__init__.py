from app.services.auth_service import CredentialStore, login, register
from app.services.content_service import (
    bulk_create_questions,
    create_assignment,
    create_category,
    create_question,
    get_assignment_details,
    list_assignments,
    list_categories,
    list_category_questions,
)
from app.services.delivery_service import (
    get_assignment_questions,
    get_available_assignments,
)
from app.services.report_service import (
    get_completion_details,
    get_question_mastery,
    get_user_history,
    get_user_progress,
    list_regular_users,
)
from app.services.submission_service import (
    classify_response,
    derive_feedback,
    get_assignment_results,
    submit_assignment,
)

__all__ = [
    "CredentialStore",
    "register",
    "login",
    "create_category",
    "list_categories",
    "list_category_questions",
    "create_question",
    "bulk_create_questions",
    "create_assignment",
    "list_assignments",
    "get_assignment_details",
    "get_available_assignments",
    "get_assignment_questions",
    "classify_response",
    "derive_feedback",
    "submit_assignment",
    "get_assignment_results",
    "get_user_progress",
    "get_completion_details",
    "get_user_history",
    "get_question_mastery",
    "list_regular_users",
]
