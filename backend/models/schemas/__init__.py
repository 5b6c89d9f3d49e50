"""Pydantic contracts shared by the scorer, the services and the API."""

from models.schemas.candidate import CandidateFeatures
from models.schemas.job_requirements import JobRequirements
from models.schemas.match_result import MatchResult, Recommendation
from models.schemas.records import (
    ApplicationRecord,
    JobRecord,
    ResumeRecord,
    ScanResultRecord,
)
from models.schemas.scan_criteria import ScanCriteria

__all__ = [
    "CandidateFeatures",
    "JobRequirements",
    "ScanCriteria",
    "MatchResult",
    "Recommendation",
    "JobRecord",
    "ResumeRecord",
    "ApplicationRecord",
    "ScanResultRecord",
]
