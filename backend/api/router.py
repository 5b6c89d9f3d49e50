import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import Response
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_record_store
from config import settings
from exceptions import JobNotFoundError, ResumeNotFoundError
from models.requests import ScanRequest
from models.responses import ApplicationsResponse, ScanListResponse, ScanResponse
from models.schemas.records import ApplicationRecord, JobRecord, ResumeRecord
from services import applications, resume_scan
from services.store import RecordStore

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health")
async def health(store: RecordStore = Depends(get_record_store)):
    return {
        "status": "ok",
        "jobs": len(store.list_jobs()),
        "applications": len(store.list_applications()),
    }


# ---------------------------------------------------------------------------
# Record registration
# ---------------------------------------------------------------------------

@router.post("/jobs", response_model=JobRecord, status_code=201)
async def create_job(job: JobRecord, store: RecordStore = Depends(get_record_store)):
    return store.add_job(job)


@router.post("/resumes", response_model=ResumeRecord, status_code=201)
async def create_resume(resume: ResumeRecord, store: RecordStore = Depends(get_record_store)):
    return store.add_resume(resume)


@router.post("/applications", response_model=ApplicationRecord, status_code=201)
async def create_application(
    application: ApplicationRecord,
    store: RecordStore = Depends(get_record_store),
):
    if store.get_job(application.job_id) is None:
        raise JobNotFoundError(f"Job not found: {application.job_id}")
    if store.get_resume(application.resume_id) is None:
        raise ResumeNotFoundError(f"Resume not found: {application.resume_id}")
    return store.add_application(application)


# ---------------------------------------------------------------------------
# ATS applications list
# ---------------------------------------------------------------------------

@router.get("/applications", response_model=ApplicationsResponse)
@limiter.limit(settings.rate_limit)
async def list_applications(
    request: Request,
    job_id: str | None = Query(default=None, alias="jobId"),
    status: str | None = Query(default=None),
    stage: str | None = Query(default=None),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=settings.default_page_size, ge=1),
    store: RecordStore = Depends(get_record_store),
):
    if limit > settings.max_page_size:
        raise HTTPException(
            status_code=400,
            detail=f"limit too large (max {settings.max_page_size})",
        )
    return applications.list_applications(
        store, job_id=job_id, status=status, stage=stage, page=page, limit=limit
    )


@router.get("/applications/export")
@limiter.limit(settings.rate_limit)
async def export_applications(
    request: Request,
    job_id: str | None = Query(default=None, alias="jobId"),
    status: str | None = Query(default=None),
    stage: str | None = Query(default=None),
    store: RecordStore = Depends(get_record_store),
):
    body = applications.export_applications_csv(store, job_id=job_id, status=status, stage=stage)
    return Response(
        content=body,
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="applications.csv"'},
    )


# ---------------------------------------------------------------------------
# Resume scan
# ---------------------------------------------------------------------------

@router.post("/resume/scan", response_model=ScanResponse)
@limiter.limit(settings.rate_limit)
async def scan_resume(
    request: Request,
    body: ScanRequest,
    store: RecordStore = Depends(get_record_store),
):
    result = resume_scan.scan(
        store,
        body.resume_id,
        body.job_id,
        scan_type=body.scan_type,
        custom_criteria=body.custom_criteria,
    )
    return ScanResponse(scan_result=result)


@router.get("/resume/scan", response_model=ScanListResponse)
async def list_resume_scans(
    resume_id: str | None = Query(default=None, alias="resumeId"),
    job_id: str | None = Query(default=None, alias="jobId"),
    limit: int = Query(default=settings.scan_history_limit, ge=1),
    store: RecordStore = Depends(get_record_store),
):
    if limit > settings.max_page_size:
        raise HTTPException(
            status_code=400,
            detail=f"limit too large (max {settings.max_page_size})",
        )
    results = resume_scan.list_scans(store, resume_id=resume_id, job_id=job_id, limit=limit)
    return ScanListResponse(scan_results=results)
