"""Stored records for jobs, resumes, applications and scan results.

These mirror the rows the job board keeps in its database, reduced to the
columns the matching endpoints read.
"""

import uuid
from datetime import datetime, timezone

from pydantic import Field

from models.schemas.base import CamelModel
from models.schemas.candidate import CandidateFeatures
from models.schemas.job_requirements import JobRequirements
from models.schemas.match_result import MatchResult

# Minimum years implied by a job's experience level
_LEVEL_MIN_YEARS = {
    "entry": 0.0,
    "junior": 1.0,
    "mid": 3.0,
    "middle": 3.0,
    "senior": 5.0,
    "executive": 8.0,
    "lead": 8.0,
}


def min_years_for_level(experience_level: str | None) -> float | None:
    """Minimum experience implied by a level label, None if unknown."""
    if not experience_level:
        return None
    return _LEVEL_MIN_YEARS.get(experience_level.strip().lower())


def _new_id() -> str:
    return uuid.uuid4().hex


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class JobRecord(CamelModel):
    id: str = Field(default_factory=_new_id)
    title: str
    company: str = ""
    location: str | None = None
    remote_type: str | None = None
    experience_level: str | None = None
    min_experience_years: float | None = Field(default=None, ge=0)
    required_skills: list[str] = []
    preferred_skills: list[str] = []
    required_education: str | None = None
    keyword_phrases: list[str] = []

    def to_requirements(self) -> JobRequirements:
        min_years = self.min_experience_years
        if min_years is None:
            min_years = min_years_for_level(self.experience_level)
        return JobRequirements(
            required_skills=self.required_skills,
            preferred_skills=self.preferred_skills,
            location=self.location,
            remote_type=self.remote_type,
            min_experience_years=min_years,
            required_education=self.required_education,
            keyword_phrases=self.keyword_phrases,
        )


class ResumeRecord(CamelModel):
    id: str = Field(default_factory=_new_id)
    user_id: str | None = None
    file_name: str = ""
    candidate_name: str = ""
    email: str | None = None
    location: str | None = None
    skills: list[str] = []
    education: list[str] = []
    summary: str = ""
    experience: list[str] = []
    total_experience_years: float | None = Field(default=None, ge=0)
    experience_level: str | None = None

    def to_candidate(self, applied_at: datetime | None = None) -> CandidateFeatures:
        return CandidateFeatures(
            skills=self.skills,
            location=self.location,
            experience_years=self.total_experience_years,
            education=self.education,
            summary=self.summary,
            experience=self.experience,
            experience_level=self.experience_level,
            applied_at=applied_at,
        )


class ApplicationRecord(CamelModel):
    id: str = Field(default_factory=_new_id)
    job_id: str
    resume_id: str
    status: str = "pending"
    stage: str = "applied"
    priority: int = 0
    applied_at: datetime = Field(default_factory=_utcnow)


class ScanResultRecord(CamelModel):
    id: str = Field(default_factory=_new_id)
    resume_id: str
    job_id: str
    scan_type: str = "manual"
    scan_date: datetime = Field(default_factory=_utcnow)
    result: MatchResult
    weights: dict[str, float] = {}
    custom_criteria: dict = {}
