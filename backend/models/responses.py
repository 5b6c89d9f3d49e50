from datetime import datetime

from models.schemas.base import CamelModel
from models.schemas.match_result import MatchResult


class ApplicantSummary(CamelModel):
    id: str
    candidate_name: str = ""
    email: str | None = None
    location: str | None = None
    skills: list[str] = []


class JobSummary(CamelModel):
    id: str
    title: str = ""
    company: str = ""
    location: str | None = None
    experience_level: str | None = None


class ApplicationItem(CamelModel):
    id: str
    job_id: str
    resume_id: str
    status: str
    stage: str
    priority: int = 0
    applied_at: datetime | None = None
    job_match_score: int | None = None  # None when the resume or job is gone
    applicant: ApplicantSummary | None = None
    job: JobSummary | None = None


class Pagination(CamelModel):
    page: int
    limit: int
    total: int
    pages: int


class ApplicationsResponse(CamelModel):
    applications: list[ApplicationItem] = []
    pagination: Pagination


class ResumeInfo(CamelModel):
    id: str
    file_name: str = ""
    candidate_name: str = "Unknown"
    email: str | None = None
    experience_years: float | None = None
    experience_level: str | None = None


class ScanResult(MatchResult):
    """A stored scan: the match result plus what was scanned and when."""
    id: str
    resume_id: str
    job_id: str
    scan_type: str = "manual"
    scan_date: datetime | None = None
    weights: dict[str, float] = {}
    resume_info: ResumeInfo | None = None
    job_info: JobSummary | None = None


class ScanResponse(CamelModel):
    success: bool = True
    scan_result: ScanResult


class ScanListResponse(CamelModel):
    success: bool = True
    scan_results: list[ScanResult] = []
