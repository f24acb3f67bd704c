"""
Database lookups backing the feedback page.

Each lookup returns a pydantic snapshot, or None when no row matches. Any
other failure (connection loss, bad schema) propagates to the caller.
"""
import logging
from typing import Optional
from sqlalchemy.orm import Session

from app.db.models.user import User
from app.db.models.interview import Interview as InterviewRecord
from app.db.models.feedback import Feedback as FeedbackRecord
from app.schemas.feedback import Identity, Interview, Feedback

logger = logging.getLogger(__name__)


def get_user_by_id(db: Session, user_id: str) -> Optional[Identity]:
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        logger.debug(f"User not found: user_id={user_id}")
        return None
    return Identity.model_validate(user)


def get_interview_by_id(db: Session, interview_id: str) -> Optional[Interview]:
    """Fetch an interview by its opaque id."""
    interview = db.query(InterviewRecord).filter(InterviewRecord.id == interview_id).first()
    if not interview:
        logger.debug(f"Interview not found: interview_id={interview_id}")
        return None
    return Interview.model_validate(interview)


def get_feedback_by_interview_id(db: Session, interview_id: str, user_id: str) -> Optional[Feedback]:
    """Fetch the feedback a user received for an interview."""
    feedback = (
        db.query(FeedbackRecord)
        .filter(
            FeedbackRecord.interview_id == interview_id,
            FeedbackRecord.user_id == user_id,
        )
        .first()
    )
    if not feedback:
        return None
    return Feedback.model_validate(feedback)
