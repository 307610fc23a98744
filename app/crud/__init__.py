from app.crud.assignment import (
    create_assignment,
    create_assignment_category,
    get_all_assignments,
    get_assignment_by_id,
    get_assignments_with_unmastered_questions,
)
from app.crud.category import (
    create_category,
    get_all_categories,
    get_category_by_id,
    get_existing_category_ids,
    get_question_counts_by_category_ids,
)
from app.crud.completion import (
    get_completion,
    mark_completed,
)
from app.crud.question import (
    bulk_create_questions,
    create_question,
    get_question_by_id,
    get_questions_by_category_id,
    get_random_unmastered_questions,
)
from app.crud.user import (
    create_user,
    get_regular_users_with_activity,
    get_user_by_email,
    get_user_by_id,
)
from app.crud.user_response import (
    create_user_response,
    get_recent_responses,
    get_responses_with_questions,
    get_status_counts,
)

__all__ = [
    "create_category",
    "get_category_by_id",
    "get_all_categories",
    "get_existing_category_ids",
    "get_question_counts_by_category_ids",
    "create_question",
    "bulk_create_questions",
    "get_question_by_id",
    "get_questions_by_category_id",
    "get_random_unmastered_questions",
    "create_assignment",
    "create_assignment_category",
    "get_assignment_by_id",
    "get_all_assignments",
    "get_assignments_with_unmastered_questions",
    "create_user",
    "get_user_by_id",
    "get_user_by_email",
    "get_regular_users_with_activity",
    "create_user_response",
    "get_responses_with_questions",
    "get_recent_responses",
    "get_status_counts",
    "get_completion",
    "mark_completed",
]
