"""
Feedback model for storing the evaluation of one interview for one user.
"""
from datetime import datetime
from sqlalchemy import Column, String, Float, Text, DateTime, ForeignKey, JSON, UniqueConstraint
from sqlalchemy.types import TypeDecorator
from app.db.base import Base
from app.db.models.user import generate_id


class EvaluatorTimestamp(TypeDecorator):
    """
    Timestamp column that never fails on load.

    SQLite keeps timestamps as text, and rows written by other evaluators may
    hold values that do not parse. There the raw text is handed back as-is and
    the feedback schema decides what it means.
    """
    impl = DateTime(timezone=True)
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == "sqlite":
            return dialect.type_descriptor(String())
        return dialect.type_descriptor(DateTime(timezone=True))

    def process_bind_param(self, value, dialect):
        if dialect.name == "sqlite" and isinstance(value, datetime):
            return value.isoformat(sep=" ")
        return value


class Feedback(Base):
    """
    Evaluation of an interview attempt.

    category_scores holds a list of {"name", "score", "comment"} objects;
    strengths and areas_for_improvement hold lists of strings. Any of the
    three may be NULL for rows written by older evaluators.
    """
    __tablename__ = "feedback"

    id = Column(String(64), primary_key=True, index=True, default=generate_id)
    interview_id = Column(String(64), ForeignKey("interviews.id"), nullable=False, index=True)
    user_id = Column(String(64), ForeignKey("users.id"), nullable=False, index=True)

    total_score = Column(Float, nullable=False)
    final_assessment = Column(Text, nullable=True)
    category_scores = Column(JSON, nullable=True)
    strengths = Column(JSON, nullable=True)
    areas_for_improvement = Column(JSON, nullable=True)

    # Set by the evaluator, so no server default
    created_at = Column(EvaluatorTimestamp(), nullable=True)

    __table_args__ = (
        UniqueConstraint("interview_id", "user_id", name="uq_feedback_interview_user"),
    )

    def __repr__(self):
        return f"<Feedback(id={self.id}, interview_id={self.interview_id}, user_id={self.user_id})>"
