"""
Pytest configuration and shared fixtures for the Job Application Tracker tests.
"""
import os
from datetime import datetime, timezone
from typing import Dict, List, Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

os.environ.setdefault("TESTING", "true")

from job_tracker_app.backend.main import app
from job_tracker_app.backend.models.db.database import Base, build_engine
from job_tracker_app.backend.schemas import JobApplication, JobDraft, JobStatus
from job_tracker_app.backend.services.sql_table import SqlJobsTable
from job_tracker_app.backend.services.table_client import (
    JobsTable,
    RemoteOperationError,
    get_jobs_table,
)


class FakeJobsTable(JobsTable):
    """In-memory substitute for the remote table that records every call."""

    def __init__(self, rows: Optional[List[JobApplication]] = None):
        self.rows: List[JobApplication] = list(rows or [])
        self.calls: List[tuple] = []
        self.failures: Dict[str, str] = {}
        self._next_id = max([r.id for r in self.rows], default=0) + 1

    def fail(self, operation: str, message: str) -> None:
        self.failures[operation] = message

    def _check(self, operation: str) -> None:
        if operation in self.failures:
            raise RemoteOperationError(self.failures[operation])

    def select_all(self) -> List[JobApplication]:
        self.calls.append(("select_all",))
        self._check("select_all")
        return list(self.rows)

    def insert(self, draft: JobDraft) -> JobApplication:
        self.calls.append(("insert", draft))
        self._check("insert")
        row = JobApplication(
            id=self._next_id,
            applied_date=datetime(2024, 3, 7, 12, 0, tzinfo=timezone.utc),
            **draft.model_dump(),
        )
        self._next_id += 1
        self.rows.insert(0, row)
        return row

    def update(self, job_id: int, draft: JobDraft) -> None:
        self.calls.append(("update", job_id, draft))
        self._check("update")
        self.rows = [r.with_draft(draft) if r.id == job_id else r for r in self.rows]

    def delete(self, job_id: int) -> None:
        self.calls.append(("delete", job_id))
        self._check("delete")
        self.rows = [r for r in self.rows if r.id != job_id]

    def call_names(self) -> List[str]:
        return [c[0] for c in self.calls]


# Sample Data Fixtures
@pytest.fixture
def sample_jobs() -> List[JobApplication]:
    """Two stored applications, newest first."""
    return [
        JobApplication(
            id=2,
            company_name="Globex",
            role_title="Data Engineer",
            location="Berlin",
            source_url="https://globex.example.com/jobs/42",
            platform="LinkedIn",
            status=JobStatus.INTERVIEWING,
            applied_date=datetime(2024, 2, 14, 9, 30, tzinfo=timezone.utc),
            notes="Recruiter call booked",
        ),
        JobApplication(
            id=1,
            company_name="Initech",
            role_title="Backend Developer",
            location="Remote",
            source_url="",
            platform="Manual",
            status=JobStatus.REJECTED,
            applied_date=datetime(2024, 1, 3, 8, 0, tzinfo=timezone.utc),
            notes=None,
        ),
    ]


@pytest.fixture
def fake_table(sample_jobs) -> FakeJobsTable:
    return FakeJobsTable(sample_jobs)


@pytest.fixture
def empty_table() -> FakeJobsTable:
    return FakeJobsTable()


# SQL Backend Setup
@pytest.fixture(scope="function")
def test_db_engine():
    """Create a test database engine using SQLite in memory."""
    engine = build_engine("sqlite:///:memory:")
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def sql_table(test_db_engine) -> SqlJobsTable:
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_db_engine)
    return SqlJobsTable(TestingSessionLocal)


# Web Fixtures
def _client_for(jobs_table: JobsTable):
    app.dependency_overrides[get_jobs_table] = lambda: jobs_table
    app.state.job_table = None
    return TestClient(app)


@pytest.fixture(scope="function")
def test_client(fake_table):
    """Test client whose remote table is the populated fake."""
    client = _client_for(fake_table)
    yield client
    app.dependency_overrides.clear()
    app.state.job_table = None


@pytest.fixture(scope="function")
def empty_client(empty_table):
    """Test client whose remote table starts empty."""
    client = _client_for(empty_table)
    yield client
    app.dependency_overrides.clear()
    app.state.job_table = None


@pytest.fixture
def job_form() -> Dict[str, str]:
    return {
        "company_name": "Acme",
        "role_title": "Engineer",
        "location": "",
        "source_url": "",
        "platform": "Manual",
        "status": "Applied",
        "notes": "",
    }
