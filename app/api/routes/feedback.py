"""
Interview feedback page endpoint.
"""
import logging
from typing import Optional, Union
from fastapi import APIRouter, Depends
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from app.core.auth_dependency import get_db, get_session_token, resolve_identity
from app.schemas.report import EmptyFeedbackView, FeedbackReportView
from app.services.feedback_page import FeedbackPageContext, Redirect, build_feedback_page
from app.services.lookups import get_interview_by_id, get_feedback_by_interview_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/interview", tags=["Feedback"])


def get_page_context(
    token: Optional[str] = Depends(get_session_token),
    db: Session = Depends(get_db),
) -> FeedbackPageContext:
    """Bind the page lookups to this request's session token and database session."""
    return FeedbackPageContext(
        resolve_identity=lambda: resolve_identity(token, db),
        resolve_interview=lambda interview_id: get_interview_by_id(db, interview_id),
        resolve_feedback=lambda interview_id, user_id: get_feedback_by_interview_id(db, interview_id, user_id),
    )


@router.get(
    "/{id}/feedback",
    response_model=Union[FeedbackReportView, EmptyFeedbackView],
    responses={307: {"description": "Redirect to / when signed out or the interview does not exist"}},
)
def get_interview_feedback(
    id: str,
    context: FeedbackPageContext = Depends(get_page_context),
):
    """
    Feedback page for an interview.

    Redirects to "/" for anonymous users and unknown interviews. Otherwise
    returns the empty state when the user has no feedback yet, or the full
    breakdown.
    """
    result = build_feedback_page(id, context)
    if isinstance(result, Redirect):
        return RedirectResponse(url=result.route)
    return result
