from app.models.base import Base, get_db
from app.models.category import Category
from app.models.question import Question
from app.models.test_assignment import AssignmentCategory, TestAssignment
from app.models.user import User
from app.models.user_assignment_completion import UserAssignmentCompletion
from app.models.user_response import ResponseStatus, UserResponse

__all__ = [
    "Base",
    "Category",
    "Question",
    "User",
    "TestAssignment",
    "AssignmentCategory",
    "UserResponse",
    "ResponseStatus",
    "UserAssignmentCompletion",
    "get_db",
]
