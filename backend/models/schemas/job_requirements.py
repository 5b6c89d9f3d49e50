"""Scorer input: the parts of a job posting that affect matching."""

from models.schemas.base import CamelModel


class JobRequirements(CamelModel):
    """Job-side input of the match scorer."""
    required_skills: list[str] = []
    preferred_skills: list[str] = []
    location: str | None = None
    remote_type: str | None = None  # none, hybrid, full
    min_experience_years: float | None = None
    required_education: str | None = None
    keyword_phrases: list[str] = []
