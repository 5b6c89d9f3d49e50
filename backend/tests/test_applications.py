"""Tests for the ATS applications list and CSV export."""

import csv
import io
from datetime import datetime, timezone

from models.schemas.records import ApplicationRecord
from services.applications import (
    EXPORT_COLUMNS,
    export_applications_csv,
    list_applications,
    score_application,
)

AS_OF = datetime(2024, 6, 30, tzinfo=timezone.utc)


class TestListApplications:
    def test_orders_by_priority_then_recency(self, seeded_store):
        page = list_applications(seeded_store, as_of=AS_OF)
        assert [a.id for a in page.applications] == ["app-2", "app-1"]

    def test_match_scores(self, seeded_store):
        page = list_applications(seeded_store, as_of=AS_OF)
        scores = {a.id: a.job_match_score for a in page.applications}
        # app-1: 0.5*50 + 0.15*100 + 0.2*85 + 0.1*100 + 0.05*100
        assert scores["app-1"] == 72
        # app-2: 0.5*0 + 0.15*0 + 0.2*40 + 0.1*40 + 0.05*40
        assert scores["app-2"] == 14

    def test_summaries_attached(self, seeded_store):
        page = list_applications(seeded_store, as_of=AS_OF)
        item = next(a for a in page.applications if a.id == "app-1")
        assert item.applicant.candidate_name == "Maria Santos"
        assert item.job.title == "Frontend Engineer"

    def test_filters(self, seeded_store):
        assert [a.id for a in list_applications(seeded_store, status="reviewed").applications] == ["app-2"]
        assert list_applications(seeded_store, job_id="other").applications == []
        assert list_applications(seeded_store, stage="interview").pagination.total == 0

    def test_pagination(self, seeded_store):
        page = list_applications(seeded_store, page=2, limit=1, as_of=AS_OF)
        assert [a.id for a in page.applications] == ["app-1"]
        assert page.pagination.total == 2
        assert page.pagination.pages == 2

    def test_page_past_end_is_empty(self, seeded_store):
        page = list_applications(seeded_store, page=5, limit=20)
        assert page.applications == []
        assert page.pagination.pages == 1

    def test_orphaned_application_has_no_score(self, seeded_store):
        orphan = seeded_store.add_application(
            ApplicationRecord(id="app-3", job_id="job-1", resume_id="deleted")
        )
        assert score_application(seeded_store, orphan) is None

        item = next(
            a for a in list_applications(seeded_store).applications if a.id == "app-3"
        )
        assert item.job_match_score is None
        assert item.applicant is None


class TestExportApplications:
    def test_csv_rows(self, seeded_store):
        body = export_applications_csv(seeded_store, as_of=AS_OF)
        rows = list(csv.reader(io.StringIO(body)))
        assert rows[0] == EXPORT_COLUMNS
        assert len(rows) == 3

        by_id = {r[0]: r for r in rows[1:]}
        assert by_id["app-2"][1] == "Jose Cruz"
        assert by_id["app-2"][-1] == "14"
        assert by_id["app-1"][2] == "maria@example.com"
        assert by_id["app-1"][-1] == "72"

    def test_empty_store(self, store):
        rows = list(csv.reader(io.StringIO(export_applications_csv(store))))
        assert rows == [EXPORT_COLUMNS]
