"""ATS applications list: filtering, paging, match scores and CSV export."""

import csv
import io
import logging
import math
from datetime import datetime

from models.responses import (
    ApplicantSummary,
    ApplicationItem,
    ApplicationsResponse,
    JobSummary,
    Pagination,
)
from models.schemas.records import ApplicationRecord, JobRecord, ResumeRecord
from services.matching import scorer
from services.matching.features import as_utc
from services.matching.presets import QUICK_LIST
from services.store import RecordStore

logger = logging.getLogger(__name__)

EXPORT_COLUMNS = [
    "Application ID",
    "Candidate Name",
    "Email",
    "Job Title",
    "Status",
    "Stage",
    "Applied At",
    "Match Score",
]


def job_summary(job: JobRecord) -> JobSummary:
    return JobSummary(
        id=job.id,
        title=job.title,
        company=job.company,
        location=job.location,
        experience_level=job.experience_level,
    )


def _applicant_summary(resume: ResumeRecord) -> ApplicantSummary:
    return ApplicantSummary(
        id=resume.id,
        candidate_name=resume.candidate_name,
        email=resume.email,
        location=resume.location,
        skills=resume.skills,
    )


def score_application(
    store: RecordStore,
    application: ApplicationRecord,
    as_of: datetime | None = None,
) -> int | None:
    """Quick-list match score, or None if the resume or job is missing."""
    resume = store.get_resume(application.resume_id)
    job = store.get_job(application.job_id)
    if resume is None or job is None:
        return None

    result = scorer.score(
        resume.to_candidate(applied_at=application.applied_at),
        job.to_requirements(),
        preset=QUICK_LIST,
        as_of=as_of,
    )
    return result.overall_match


def _select(
    store: RecordStore,
    job_id: str | None,
    status: str | None,
    stage: str | None,
) -> list[ApplicationRecord]:
    """Filter, then order by priority desc and most recent first."""
    apps = [
        a for a in store.list_applications()
        if (job_id is None or a.job_id == job_id)
        and (status is None or a.status == status)
        and (stage is None or a.stage == stage)
    ]
    apps.sort(key=lambda a: as_utc(a.applied_at), reverse=True)
    apps.sort(key=lambda a: a.priority, reverse=True)
    return apps


def _to_item(
    store: RecordStore,
    application: ApplicationRecord,
    as_of: datetime | None,
) -> ApplicationItem:
    resume = store.get_resume(application.resume_id)
    job = store.get_job(application.job_id)
    return ApplicationItem(
        id=application.id,
        job_id=application.job_id,
        resume_id=application.resume_id,
        status=application.status,
        stage=application.stage,
        priority=application.priority,
        applied_at=application.applied_at,
        job_match_score=score_application(store, application, as_of),
        applicant=_applicant_summary(resume) if resume else None,
        job=job_summary(job) if job else None,
    )


def list_applications(
    store: RecordStore,
    job_id: str | None = None,
    status: str | None = None,
    stage: str | None = None,
    page: int = 1,
    limit: int = 20,
    as_of: datetime | None = None,
) -> ApplicationsResponse:
    apps = _select(store, job_id, status, stage)
    total = len(apps)
    start = (page - 1) * limit
    items = [_to_item(store, a, as_of) for a in apps[start:start + limit]]

    logger.info(
        "Listed %d of %d applications (page=%d, limit=%d, job=%s)",
        len(items), total, page, limit, job_id,
    )
    return ApplicationsResponse(
        applications=items,
        pagination=Pagination(
            page=page,
            limit=limit,
            total=total,
            pages=math.ceil(total / limit) if limit > 0 else 0,
        ),
    )


def export_applications_csv(
    store: RecordStore,
    job_id: str | None = None,
    status: str | None = None,
    stage: str | None = None,
    as_of: datetime | None = None,
) -> str:
    """Render every matching application as CSV, match score included."""
    buf = io.StringIO()
    writer = csv.writer(buf)
    writer.writerow(EXPORT_COLUMNS)

    apps = _select(store, job_id, status, stage)
    for app in apps:
        item = _to_item(store, app, as_of)
        writer.writerow([
            item.id,
            item.applicant.candidate_name if item.applicant else "",
            (item.applicant.email or "") if item.applicant else "",
            item.job.title if item.job else "",
            item.status,
            item.stage,
            item.applied_at.isoformat() if item.applied_at else "",
            "" if item.job_match_score is None else item.job_match_score,
        ])

    logger.info("Exported %d applications to CSV", len(apps))
    return buf.getvalue()
