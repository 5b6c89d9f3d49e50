"""Scorer input: the parts of an applicant profile that affect matching."""

from datetime import datetime

from models.schemas.base import CamelModel


class CandidateFeatures(CamelModel):
    """Candidate-side input of the match scorer.

    Every field is optional; the scorer falls back to neutral defaults.
    """
    skills: list[str] = []
    location: str | None = None
    experience_years: float | None = None
    education: list[str] = []  # free-text entries, e.g. "BS Computer Science"
    summary: str = ""
    experience: list[str] = []  # free-text work history entries
    experience_level: str | None = None  # entry, junior, mid, senior, ...
    applied_at: datetime | None = None
