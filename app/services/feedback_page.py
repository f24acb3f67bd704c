"""
Feedback page flow.

The page runs three dependent lookups in order:

1. Access guard: resolve the current identity, redirect to "/" without one.
2. Subject resolver: resolve the interview by id, redirect to "/" if missing.
3. Feedback resolver: resolve feedback for (interview id, user id) and render
   the empty state or the full report.

Each step returns a Redirect or a Continue carrying the resolved value. The
flow stops at the first Redirect, so later lookups never run after a failed
gate. Lookup faults (database errors and the like) are not caught here.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar, Union

from app.schemas.feedback import Identity, Interview, Feedback
from app.schemas.report import EmptyFeedbackView, FeedbackReportView
from app.services.report_renderer import DASHBOARD_ROUTE, render_empty_view, render_report_view

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Redirect:
    """Stop handling the request and send the client to route."""
    route: str


@dataclass(frozen=True)
class Continue(Generic[T]):
    """Step succeeded; value feeds the next step."""
    value: T


StepResult = Union[Redirect, Continue]
PageView = Union[EmptyFeedbackView, FeedbackReportView]
PageResult = Union[Redirect, EmptyFeedbackView, FeedbackReportView]


@dataclass(frozen=True)
class FeedbackPageContext:
    """
    Per-request collaborators for the page.

    Built fresh for every request, so nothing resolved for one request is
    visible to another.
    """
    resolve_identity: Callable[[], Optional[Identity]]
    resolve_interview: Callable[[str], Optional[Interview]]
    resolve_feedback: Callable[[str, str], Optional[Feedback]]


def guard_access(context: FeedbackPageContext) -> StepResult:
    identity = context.resolve_identity()
    if identity is None:
        logger.info(f"No authenticated user, redirecting to {DASHBOARD_ROUTE}")
        return Redirect(DASHBOARD_ROUTE)
    return Continue(identity)


def resolve_subject(context: FeedbackPageContext, interview_id: str) -> StepResult:
    interview = context.resolve_interview(interview_id)
    if interview is None:
        logger.info(f"Interview not found: interview_id={interview_id}, redirecting to {DASHBOARD_ROUTE}")
        return Redirect(DASHBOARD_ROUTE)
    return Continue(interview)


def resolve_feedback_view(
    context: FeedbackPageContext,
    interview_id: str,
    identity: Identity,
    interview: Interview,
) -> PageView:
    feedback = context.resolve_feedback(interview_id, identity.id)
    if feedback is None:
        logger.debug(f"No feedback yet: interview_id={interview_id}, user_id={identity.id}")
        return render_empty_view(interview_id)
    return render_report_view(interview_id, interview, feedback)


def build_feedback_page(interview_id: str, context: FeedbackPageContext) -> PageResult:
    """
    Run the page flow for one request.

    Returns a Redirect, an EmptyFeedbackView or a FeedbackReportView.
    """
    access = guard_access(context)
    if isinstance(access, Redirect):
        return access

    subject = resolve_subject(context, interview_id)
    if isinstance(subject, Redirect):
        return subject

    return resolve_feedback_view(context, interview_id, access.value, subject.value)
