from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base, TimestampMixin


class UserAssignmentCompletion(Base, TimestampMixin):
    """사용자별 과제 완료 여부 (user, assignment 당 1행, upsert 대상)"""
    __tablename__ = "user_assignment_completions"
    __table_args__ = (
        UniqueConstraint("user_id", "assignment_id", name="uq_user_assignment_completions_user_assignment"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False)
    assignment_id: Mapped[int] = mapped_column(ForeignKey("test_assignments.id"), nullable=False)
    is_completed: Mapped[bool] = mapped_column(default=False, nullable=False)
    completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), default=None)
