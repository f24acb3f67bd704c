"""
Pydantic schemas for the records the feedback page reads.

These are the shapes the identity, interview and feedback lookups hand back.
Collections are always lists here: NULL or missing values coming out of
storage are normalized to [] on the way in. Feedback fields are read
leniently, one at a time: an unreadable score or timestamp becomes None
without failing the rest of the record.
"""
import logging
from typing import Optional, List
from datetime import datetime
from pydantic import BaseModel, Field, TypeAdapter, ValidationError, field_validator

logger = logging.getLogger(__name__)

_datetime_adapter = TypeAdapter(datetime)


def _empty_if_none(value):
    return [] if value is None else value


def _as_list(value) -> list:
    """Anything that is not a list or tuple counts as an empty collection."""
    if isinstance(value, (list, tuple)):
        return list(value)
    if value is not None:
        logger.warning(f"Expected a list, got {type(value).__name__}; treating as empty")
    return []


def _text_items(value) -> List[str]:
    """Drop None entries and turn remaining scalars into strings."""
    return [item if isinstance(item, str) else str(item) for item in _as_list(value) if item is not None]


def _lenient_score(value) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        logger.warning(f"Unreadable score {value!r}; rendering without a value")
        return None


def _lenient_text(value) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


class Identity(BaseModel):
    """The authenticated user making the request."""
    id: str = Field(..., description="User ID")
    name: Optional[str] = Field(None, description="Display name")
    email: Optional[str] = Field(None, description="Email address")

    class Config:
        from_attributes = True
        frozen = True


class Interview(BaseModel):
    """Read-only snapshot of an interview record."""
    id: str = Field(..., description="Interview ID")
    role: str = Field(..., description="Role the interview targets (e.g. frontend)")
    user_id: Optional[str] = Field(None, description="Owner of the interview")
    level: Optional[str] = Field(None, description="Seniority level")
    type: Optional[str] = Field(None, description="Interview type")
    techstack: List[str] = Field(default_factory=list, description="Technologies covered")
    questions: List[str] = Field(default_factory=list, description="Questions asked")
    finalized: bool = Field(default=False, description="Whether the interview is ready")
    created_at: Optional[datetime] = Field(None, description="Creation time")

    @field_validator("techstack", "questions", mode="before")
    @classmethod
    def normalize_lists(cls, v):
        return _empty_if_none(v)

    @field_validator("finalized", mode="before")
    @classmethod
    def normalize_finalized(cls, v):
        return bool(v)

    class Config:
        from_attributes = True
        frozen = True


class CategoryScore(BaseModel):
    """Score and comment for one evaluation category."""
    name: str = Field(default="", description="Category name (e.g. Communication Skills)")
    score: Optional[float] = Field(None, description="Category score out of 100, None when unreadable")
    comment: str = Field(default="", description="Evaluator comment")

    @field_validator("name", "comment", mode="before")
    @classmethod
    def normalize_text(cls, v):
        return _lenient_text(v)

    @field_validator("score", mode="before")
    @classmethod
    def normalize_score(cls, v):
        return _lenient_score(v)

    class Config:
        from_attributes = True
        frozen = True


class Feedback(BaseModel):
    """Evaluation of one interview for one user."""
    interview_id: str = Field(..., description="Interview the feedback belongs to")
    user_id: str = Field(..., description="User the feedback belongs to")
    total_score: Optional[float] = Field(None, description="Overall score out of 100, None when unreadable")
    created_at: Optional[datetime] = Field(None, description="When the feedback was produced, None when unreadable")
    final_assessment: str = Field(default="", description="Narrative assessment")
    category_scores: List[CategoryScore] = Field(default_factory=list, description="Per-category breakdown, in evaluator order")
    strengths: List[str] = Field(default_factory=list, description="Strengths, in evaluator order")
    areas_for_improvement: List[str] = Field(default_factory=list, description="Improvement areas, in evaluator order")

    @field_validator("total_score", mode="before")
    @classmethod
    def normalize_total_score(cls, v):
        return _lenient_score(v)

    @field_validator("created_at", mode="before")
    @classmethod
    def normalize_created_at(cls, v):
        if v is None or isinstance(v, datetime):
            return v
        try:
            return _datetime_adapter.validate_python(v)
        except ValidationError:
            logger.warning(f"Unreadable feedback timestamp {v!r}; rendering placeholder")
            return None

    @field_validator("category_scores", mode="before")
    @classmethod
    def normalize_categories(cls, v):
        # Entries that are not mappings or ORM-like objects carry no category
        return [item for item in _as_list(v) if item is not None and not isinstance(item, (str, int, float, list))]

    @field_validator("strengths", "areas_for_improvement", mode="before")
    @classmethod
    def normalize_text_lists(cls, v):
        return _text_items(v)

    @field_validator("final_assessment", mode="before")
    @classmethod
    def normalize_assessment(cls, v):
        return _lenient_text(v)

    class Config:
        from_attributes = True
        frozen = True
        json_schema_extra = {
            "example": {
                "interview_id": "i1",
                "user_id": "u1",
                "total_score": 82,
                "created_at": "2025-01-05T15:07:00Z",
                "final_assessment": "Solid performance.",
                "category_scores": [
                    {"name": "Communication", "score": 90, "comment": "Clear."}
                ],
                "strengths": ["Clarity"],
                "areas_for_improvement": ["Depth"]
            }
        }
