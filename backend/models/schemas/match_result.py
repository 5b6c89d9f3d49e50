"""Scorer output: composite match score plus its supporting sub-scores."""

from enum import Enum

from models.schemas.base import CamelModel


class Recommendation(str, Enum):
    RECOMMEND = "recommend"
    MAYBE = "maybe"
    REJECT = "reject"


class MatchResult(CamelModel):
    """Structured output of the match scorer.

    All scores are integers on a 0-100 scale. ``location_fit`` is None when
    either side's location is unknown.
    """
    overall_match: int = 0
    skills_match: int = 0
    experience_match: int = 0
    education_match: int = 0
    keyword_match: int = 0
    location_fit: bool | None = None
    location_score: int = 0
    recency_score: int = 0
    matched_skills: list[str] = []
    missing_skills: list[str] = []
    experience_gap: float | None = None  # years short of the minimum
    ai_recommendation: Recommendation | None = None
    ai_reasoning: str | None = None
    ai_key_points: list[str] = []
    preset: str = ""
