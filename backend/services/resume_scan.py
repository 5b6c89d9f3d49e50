"""Resume scan: score one stored resume against one job and keep the result.

Flow:
    resume_id + job_id
      ├─ load resume and job            (404 if either is missing)
      ├─ resolve scan criteria          (stored per job, created on first scan)
      ├─ scorer.score(detailed-scan)    → MatchResult
      └─ store ScanResultRecord         → ScanResult (with resume/job info)
"""

import logging
from datetime import datetime

from exceptions import JobNotFoundError, ResumeNotFoundError
from models.requests import CustomCriteria
from models.responses import ResumeInfo, ScanResult
from models.schemas.records import JobRecord, ScanResultRecord
from models.schemas.scan_criteria import (
    DEFAULT_EDUCATION_WEIGHT,
    DEFAULT_EXPERIENCE_WEIGHT,
    DEFAULT_KEYWORD_WEIGHT,
    DEFAULT_LOCATION_WEIGHT,
    DEFAULT_SKILLS_WEIGHT,
    ScanCriteria,
)
from services.applications import job_summary
from services.matching import scorer
from services.matching.presets import DETAILED_SCAN
from services.store import RecordStore

logger = logging.getLogger(__name__)


def resolve_criteria(
    store: RecordStore,
    job: JobRecord,
    custom: CustomCriteria,
    scan_type: str,
) -> ScanCriteria:
    """Return the job's stored criteria, creating them on first use.

    Custom weights only apply when the criteria are first created; a zero
    or missing weight falls back to the default.
    """
    existing = store.get_criteria(job.id)
    if existing is not None:
        return existing

    requirements = job.to_requirements()
    criteria = ScanCriteria(
        skills_weight=custom.skills_weight or DEFAULT_SKILLS_WEIGHT,
        experience_weight=custom.experience_weight or DEFAULT_EXPERIENCE_WEIGHT,
        education_weight=custom.education_weight or DEFAULT_EDUCATION_WEIGHT,
        keyword_weight=custom.keyword_weight or DEFAULT_KEYWORD_WEIGHT,
        location_weight=custom.location_weight or DEFAULT_LOCATION_WEIGHT,
        must_have_skills=requirements.required_skills,
        nice_to_have_skills=requirements.preferred_skills,
        min_experience_years=requirements.min_experience_years,
        required_education=requirements.required_education,
        keyword_phrases=requirements.keyword_phrases,
        enable_ai_scanning=scan_type == "ai",
    )
    logger.info("Created scan criteria for job %s (ai=%s)", job.id, criteria.enable_ai_scanning)
    return store.save_criteria(job.id, criteria)


def _to_scan_result(store: RecordStore, record: ScanResultRecord) -> ScanResult:
    resume = store.get_resume(record.resume_id)
    job = store.get_job(record.job_id)

    resume_info = None
    if resume is not None:
        resume_info = ResumeInfo(
            id=resume.id,
            file_name=resume.file_name,
            candidate_name=resume.candidate_name or "Unknown",
            email=resume.email,
            experience_years=resume.total_experience_years,
            experience_level=resume.experience_level,
        )

    return ScanResult(
        **record.result.model_dump(),
        id=record.id,
        resume_id=record.resume_id,
        job_id=record.job_id,
        scan_type=record.scan_type,
        scan_date=record.scan_date,
        weights=record.weights,
        resume_info=resume_info,
        job_info=job_summary(job) if job else None,
    )


def scan(
    store: RecordStore,
    resume_id: str,
    job_id: str,
    scan_type: str = "manual",
    custom_criteria: CustomCriteria | None = None,
    as_of: datetime | None = None,
) -> ScanResult:
    resume = store.get_resume(resume_id)
    if resume is None:
        raise ResumeNotFoundError(f"Resume not found: {resume_id}")
    job = store.get_job(job_id)
    if job is None:
        raise JobNotFoundError(f"Job not found: {job_id}")

    custom = custom_criteria or CustomCriteria()
    criteria = resolve_criteria(store, job, custom, scan_type)
    if scan_type != "ai" and criteria.enable_ai_scanning:
        criteria = criteria.model_copy(update={"enable_ai_scanning": False})

    result = scorer.score(
        resume.to_candidate(),
        job.to_requirements(),
        criteria,
        preset=DETAILED_SCAN,
        as_of=as_of,
    )

    record = store.add_scan_result(ScanResultRecord(
        resume_id=resume.id,
        job_id=job.id,
        scan_type=scan_type,
        result=result,
        weights=criteria.weights(),
        custom_criteria=custom.model_dump(exclude_none=True),
    ))
    logger.info(
        "Scanned resume %s against job %s: overall=%d recommendation=%s",
        resume.id, job.id, result.overall_match,
        result.ai_recommendation.value if result.ai_recommendation else None,
    )
    return _to_scan_result(store, record)


def list_scans(
    store: RecordStore,
    resume_id: str | None = None,
    job_id: str | None = None,
    limit: int = 10,
) -> list[ScanResult]:
    """Stored scans, best overall match first."""
    records = [
        r for r in store.list_scan_results()
        if (resume_id is None or r.resume_id == resume_id)
        and (job_id is None or r.job_id == job_id)
    ]
    records.sort(key=lambda r: r.result.overall_match, reverse=True)
    return [_to_scan_result(store, r) for r in records[:limit]]
