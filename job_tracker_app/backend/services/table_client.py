"""
Remote table client interface.

Every backend exposes the same four queries against the jobs table and
reports any failure as a RemoteOperationError carrying a readable message.
"""
import logging
from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Any, Dict, Iterable, List

from pydantic import ValidationError

from ..config.settings import get_settings
from ..schemas import JobApplication, JobDraft

logger = logging.getLogger(__name__)


class RemoteOperationError(Exception):
    """A query against the remote table failed."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class JobsTable(ABC):
    """Handle to the remote jobs table."""

    @abstractmethod
    def select_all(self) -> List[JobApplication]:
        """All rows, most recently created first."""

    @abstractmethod
    def insert(self, draft: JobDraft) -> JobApplication:
        """Insert one row and return it as stored (with id and applied_date)."""

    @abstractmethod
    def update(self, job_id: int, draft: JobDraft) -> None:
        """Replace every editable field of the row with the given id."""

    @abstractmethod
    def delete(self, job_id: int) -> None:
        """Permanently remove the row with the given id."""


def parse_rows(rows: Iterable[Any]) -> List[JobApplication]:
    """Validate raw rows (dicts or ORM objects) into JobApplication models."""
    try:
        return [JobApplication.model_validate(row) for row in rows]
    except ValidationError as e:
        logger.error("Remote table returned a malformed row: %s", e)
        raise RemoteOperationError(f"Malformed row returned by remote table: {e}") from e


def draft_payload(draft: JobDraft) -> Dict[str, Any]:
    """Draft fields as they travel on the wire."""
    return draft.model_dump(mode="json")


@lru_cache()
def get_jobs_table() -> JobsTable:
    """
    Build the configured table client once per process.
    Used as a FastAPI dependency so tests can override it with a substitute.
    """
    settings = get_settings()

    if settings.table_backend == "rest":
        from .rest_table import RestJobsTable
        logger.info("Using REST jobs table at %s", settings.rest_table_url)
        return RestJobsTable(
            table_url=settings.rest_table_url,
            api_key=settings.supabase_key or "",
            timeout=settings.request_timeout_seconds,
        )

    from .sql_table import SqlJobsTable
    from ..models.db.database import SessionLocal
    logger.info("Using SQL jobs table")
    return SqlJobsTable(SessionLocal)
