"""In-process record store for jobs, resumes, applications and scans.

Stands in for the job board's database at the service seam. One shared
instance per process, created on first use.
"""

import logging
import threading

from models.schemas.records import (
    ApplicationRecord,
    JobRecord,
    ResumeRecord,
    ScanResultRecord,
)
from models.schemas.scan_criteria import ScanCriteria

logger = logging.getLogger(__name__)


class RecordStore:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._jobs: dict[str, JobRecord] = {}
        self._resumes: dict[str, ResumeRecord] = {}
        self._applications: dict[str, ApplicationRecord] = {}
        self._criteria: dict[str, ScanCriteria] = {}
        self._scans: list[ScanResultRecord] = []

    # --- jobs -------------------------------------------------------------

    def add_job(self, job: JobRecord) -> JobRecord:
        with self._lock:
            self._jobs[job.id] = job
        logger.debug("Stored job %s", job.id)
        return job

    def get_job(self, job_id: str) -> JobRecord | None:
        return self._jobs.get(job_id)

    def list_jobs(self) -> list[JobRecord]:
        with self._lock:
            return list(self._jobs.values())

    # --- resumes ----------------------------------------------------------

    def add_resume(self, resume: ResumeRecord) -> ResumeRecord:
        with self._lock:
            self._resumes[resume.id] = resume
        logger.debug("Stored resume %s", resume.id)
        return resume

    def get_resume(self, resume_id: str) -> ResumeRecord | None:
        return self._resumes.get(resume_id)

    # --- applications -----------------------------------------------------

    def add_application(self, application: ApplicationRecord) -> ApplicationRecord:
        with self._lock:
            self._applications[application.id] = application
        logger.debug("Stored application %s", application.id)
        return application

    def list_applications(self) -> list[ApplicationRecord]:
        with self._lock:
            return list(self._applications.values())

    # --- scan criteria / results ------------------------------------------

    def get_criteria(self, job_id: str) -> ScanCriteria | None:
        return self._criteria.get(job_id)

    def save_criteria(self, job_id: str, criteria: ScanCriteria) -> ScanCriteria:
        with self._lock:
            self._criteria[job_id] = criteria
        return criteria

    def add_scan_result(self, record: ScanResultRecord) -> ScanResultRecord:
        with self._lock:
            self._scans.append(record)
        return record

    def list_scan_results(self) -> list[ScanResultRecord]:
        with self._lock:
            return list(self._scans)

    def clear(self) -> None:
        """Drop every record. Useful for testing."""
        with self._lock:
            self._jobs.clear()
            self._resumes.clear()
            self._applications.clear()
            self._criteria.clear()
            self._scans.clear()


_store: RecordStore | None = None


def get_store() -> RecordStore:
    global _store
    if _store is None:
        _store = RecordStore()
    return _store
