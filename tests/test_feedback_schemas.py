"""
Tests for the record schemas the feedback page consumes.
"""
from datetime import datetime

from app.schemas.feedback import Interview, Feedback


def test_null_collections_become_empty_lists():
    feedback = Feedback(
        interview_id="i1",
        user_id="u1",
        total_score=50,
        final_assessment=None,
        category_scores=None,
        strengths=None,
        areas_for_improvement=None,
    )

    assert feedback.category_scores == []
    assert feedback.strengths == []
    assert feedback.areas_for_improvement == []
    assert feedback.final_assessment == ""
    assert feedback.created_at is None


def test_missing_collections_default_to_empty_lists():
    feedback = Feedback(interview_id="i1", user_id="u1", total_score=50)

    assert feedback.category_scores == []
    assert feedback.strengths == []
    assert feedback.areas_for_improvement == []


def test_category_without_comment():
    feedback = Feedback(
        interview_id="i1",
        user_id="u1",
        total_score=50,
        category_scores=[{"name": "Communication", "score": 90, "comment": None}],
    )

    assert feedback.category_scores[0].comment == ""


def test_interview_optional_fields():
    interview = Interview(id="i1", role="frontend", techstack=None, questions=None, finalized=None)

    assert interview.techstack == []
    assert interview.questions == []
    assert interview.finalized is False


def test_unreadable_category_fields_degrade_per_field():
    feedback = Feedback(
        interview_id="i1",
        user_id="u1",
        total_score=50,
        category_scores=[
            {"name": "Communication", "score": None, "comment": "Clear."},
            {"score": "80", "comment": "Fine."},
            {"name": "Depth", "score": "high"},
            None,
        ],
    )

    assert [(c.name, c.score, c.comment) for c in feedback.category_scores] == [
        ("Communication", None, "Clear."),
        ("", 80.0, "Fine."),
        ("Depth", None, ""),
    ]


def test_list_entries_are_cleaned():
    feedback = Feedback(
        interview_id="i1",
        user_id="u1",
        total_score=50,
        strengths=["a", 7, None],
        areas_for_improvement="not a list",
    )

    assert feedback.strengths == ["a", "7"]
    assert feedback.areas_for_improvement == []


def test_created_at_parsing_is_lenient():
    parsed = Feedback(interview_id="i1", user_id="u1", total_score=50, created_at="2025-01-05 15:07:00")
    unreadable = Feedback(interview_id="i1", user_id="u1", total_score=50, created_at="not-a-date")

    assert parsed.created_at == datetime(2025, 1, 5, 15, 7)
    assert unreadable.created_at is None


def test_unreadable_total_score():
    assert Feedback(interview_id="i1", user_id="u1", total_score="n/a").total_score is None
