from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base, TimestampMixin


class Question(Base, TimestampMixin):
    __tablename__ = "questions"

    id: Mapped[int] = mapped_column(primary_key=True)
    category_id: Mapped[int] = mapped_column(ForeignKey("categories.id"), nullable=False, index=True)
    question: Mapped[str] = mapped_column(Text, nullable=False)
    question_media_path: Mapped[str | None] = mapped_column(String(512), default=None)
    # 선택지 문자열 목록 (JSON 배열 문자열)
    options: Mapped[str] = mapped_column(Text, nullable=False)
    correct_answer: Mapped[str] = mapped_column(Text, nullable=False)
    # 찍어서 맞힌 경우(not_sure_correct) 노출
    short_content: Mapped[str | None] = mapped_column(Text, default=None)
    # 오답인 경우 노출
    long_content_text: Mapped[str | None] = mapped_column(Text, default=None)
    long_content_file_path: Mapped[str | None] = mapped_column(String(512), default=None)

    category: Mapped["Category"] = relationship("Category", back_populates="questions")
    responses: Mapped[list["UserResponse"]] = relationship("UserResponse", back_populates="question")
