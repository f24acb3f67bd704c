"""
Feedback page rendering.

Turns the resolved interview and feedback records into the page view models.
Rendering is a pure function of its inputs: nothing passed in is modified,
and the same inputs always produce the same view.
"""
import re
from datetime import datetime
from typing import Optional, Union

from app.schemas.feedback import Interview, Feedback
from app.schemas.report import (
    NavLink,
    CategoryBreakdownItem,
    FeedbackSummary,
    EmptyFeedbackView,
    FeedbackReportView,
)

DASHBOARD_ROUTE = "/"
DATE_PLACEHOLDER = "N/A"
EMPTY_STATE_HEADING = "No feedback found for this interview."
WORD_START = re.compile(r"(^|\s)(\S)")


def interview_route(interview_id: str) -> str:
    return f"/interview/{interview_id}"


def format_score(score: Optional[Union[int, float]]) -> str:
    """Render a score as '{score}/100', dropping a trailing '.0'. A missing score renders as '/100'."""
    if score is None:
        return "/100"
    if isinstance(score, float) and score.is_integer():
        score = int(score)
    return f"{score}/100"


def format_created_at(created_at: Optional[datetime]) -> str:
    """
    Format a timestamp like 'Jan 5, 2025 3:07 PM'.

    Only an absent timestamp falls back to the placeholder; the value is shown
    in whatever timezone it carries.
    """
    if created_at is None:
        return DATE_PLACEHOLDER
    hour = created_at.hour % 12 or 12
    meridiem = "AM" if created_at.hour < 12 else "PM"
    return (
        f"{created_at:%b} {created_at.day}, {created_at.year} "
        f"{hour}:{created_at:%M} {meridiem}"
    )


def display_role(role: str) -> str:
    """Capitalize the first letter of every word, leaving the rest untouched."""
    return WORD_START.sub(lambda match: match.group(1) + match.group(2).upper(), role)


def render_empty_view(interview_id: str) -> EmptyFeedbackView:
    return EmptyFeedbackView(
        heading=EMPTY_STATE_HEADING,
        actions=[NavLink(label="Back to Interview", href=interview_route(interview_id))],
    )


def render_report_view(interview_id: str, interview: Interview, feedback: Feedback) -> FeedbackReportView:
    """Build the full breakdown for an interview that has feedback."""
    breakdown = []
    for ordinal, category in enumerate(feedback.category_scores, start=1):
        score = format_score(category.score)
        breakdown.append(CategoryBreakdownItem(
            ordinal=ordinal,
            name=category.name,
            score=score,
            heading=f"{ordinal}. {category.name} ({score})",
            comment=category.comment,
        ))

    return FeedbackReportView(
        title=f"Feedback on the Interview - {display_role(interview.role)} Interview",
        summary=FeedbackSummary(
            overall_impression=format_score(feedback.total_score),
            date=format_created_at(feedback.created_at),
        ),
        final_assessment=feedback.final_assessment,
        breakdown=breakdown,
        strengths=list(feedback.strengths),
        areas_for_improvement=list(feedback.areas_for_improvement),
        actions=[
            NavLink(label="Back to dashboard", href=DASHBOARD_ROUTE),
            NavLink(label="Retake Interview", href=interview_route(interview_id)),
        ],
    )
