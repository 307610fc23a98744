import enum

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base, TimestampMixin


class ResponseStatus(str, enum.Enum):
    """(정답 여부, 확신 여부)로 결정되는 응답 상태"""
    SURE_CORRECT = "sure_correct"
    SURE_INCORRECT = "sure_incorrect"
    NOT_SURE_CORRECT = "not_sure_correct"
    NOT_SURE_INCORRECT = "not_sure_incorrect"

    @property
    def is_correct(self) -> bool:
        return self in (ResponseStatus.SURE_CORRECT, ResponseStatus.NOT_SURE_CORRECT)

    @property
    def is_sure(self) -> bool:
        return self in (ResponseStatus.SURE_CORRECT, ResponseStatus.SURE_INCORRECT)


class UserResponse(Base, TimestampMixin):
    """사용자 응답 로그 (추가 전용)"""
    __tablename__ = "user_responses"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    question_id: Mapped[int] = mapped_column(ForeignKey("questions.id"), nullable=False, index=True)
    assignment_id: Mapped[int] = mapped_column(ForeignKey("test_assignments.id"), nullable=False, index=True)
    answer: Mapped[str] = mapped_column(Text, nullable=False)
    is_sure: Mapped[bool] = mapped_column(nullable=False)
    status: Mapped[str] = mapped_column(String(32), nullable=False, index=True)

    question: Mapped["Question"] = relationship("Question", back_populates="responses")
