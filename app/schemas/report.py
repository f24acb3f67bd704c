"""
Pydantic schemas for the rendered feedback page.
"""
from typing import Literal, List
from pydantic import BaseModel, Field


class NavLink(BaseModel):
    """A navigation action on the page."""
    label: str = Field(..., description="Button text")
    href: str = Field(..., description="Target route")


class CategoryBreakdownItem(BaseModel):
    """One rendered line of the interview breakdown."""
    ordinal: int = Field(..., ge=1, description="1-based position in the breakdown")
    name: str = Field(..., description="Category name")
    score: str = Field(..., description="Score rendered as '{score}/100'")
    heading: str = Field(..., description="Rendered '{ordinal}. {name} ({score}/100)' line")
    comment: str = Field(..., description="Evaluator comment, unformatted")


class FeedbackSummary(BaseModel):
    """Overall impression and date line."""
    overall_impression: str = Field(..., description="Total score rendered as '{score}/100'")
    date: str = Field(..., description="Formatted creation date, or 'N/A'")


class EmptyFeedbackView(BaseModel):
    """Rendered when the user has no feedback for the interview yet."""
    view: Literal["empty"] = "empty"
    heading: str = Field(..., description="Empty-state heading")
    actions: List[NavLink] = Field(..., description="Navigation actions")


class FeedbackReportView(BaseModel):
    """Full feedback breakdown for one interview attempt."""
    view: Literal["report"] = "report"
    title: str = Field(..., description="Page title including the interview role")
    summary: FeedbackSummary
    final_assessment: str = Field(..., description="Narrative assessment, unformatted")
    breakdown: List[CategoryBreakdownItem] = Field(default_factory=list)
    strengths: List[str] = Field(default_factory=list)
    areas_for_improvement: List[str] = Field(default_factory=list)
    actions: List[NavLink] = Field(..., description="Navigation actions")

    class Config:
        json_schema_extra = {
            "example": {
                "view": "report",
                "title": "Feedback on the Interview - Frontend Interview",
                "summary": {"overall_impression": "82/100", "date": "Jan 5, 2025 3:07 PM"},
                "final_assessment": "Solid performance.",
                "breakdown": [
                    {
                        "ordinal": 1,
                        "name": "Communication",
                        "score": "90/100",
                        "heading": "1. Communication (90/100)",
                        "comment": "Clear."
                    }
                ],
                "strengths": ["Clarity"],
                "areas_for_improvement": ["Depth"],
                "actions": [
                    {"label": "Back to dashboard", "href": "/"},
                    {"label": "Retake Interview", "href": "/interview/i1"}
                ]
            }
        }
