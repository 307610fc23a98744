from app.schemas.assignment import (
    AssignmentCreateRequest,
    AssignmentCreateResponse,
    AssignmentDetailResponse,
    AssignmentListResponse,
    AssignmentQuestionsResponse,
    AvailableAssignmentListResponse,
)
from app.schemas.category import (
    CategoryCreateRequest,
    CategoryCreateResponse,
    CategoryListResponse,
)
from app.schemas.common import ErrorResponse, SuccessResponse
from app.schemas.question import (
    CategoryQuestionListResponse,
    QuestionBulkCreateRequest,
    QuestionBulkCreateResponse,
    QuestionCreate,
    QuestionCreateResponse,
)
from app.schemas.report import (
    CompletionDetailsResponse,
    QuestionMasteryResponse,
    RegularUserListResponse,
    ResponseStats,
    UserHistoryResponse,
    UserProgressResponse,
)
from app.schemas.submission import (
    AssignmentResultResponse,
    Feedback,
    SubmitRequest,
    SubmitResponse,
)
from app.schemas.user import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
)

__all__ = [
    "SuccessResponse",
    "ErrorResponse",
    "CategoryCreateRequest",
    "CategoryCreateResponse",
    "CategoryListResponse",
    "QuestionCreate",
    "QuestionCreateResponse",
    "QuestionBulkCreateRequest",
    "QuestionBulkCreateResponse",
    "CategoryQuestionListResponse",
    "AssignmentCreateRequest",
    "AssignmentCreateResponse",
    "AssignmentListResponse",
    "AssignmentDetailResponse",
    "AvailableAssignmentListResponse",
    "AssignmentQuestionsResponse",
    "SubmitRequest",
    "SubmitResponse",
    "Feedback",
    "AssignmentResultResponse",
    "ResponseStats",
    "UserProgressResponse",
    "CompletionDetailsResponse",
    "UserHistoryResponse",
    "QuestionMasteryResponse",
    "RegularUserListResponse",
    "RegisterRequest",
    "RegisterResponse",
    "LoginRequest",
    "LoginResponse",
]
