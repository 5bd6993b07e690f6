import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..schemas import JobApplication
from .table_client import JobsTable, RemoteOperationError

logger = logging.getLogger(__name__)


@dataclass
class ListViewResult:
    jobs: List[JobApplication] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def load_jobs(jobs_table: JobsTable) -> ListViewResult:
    """
    Initial page load: one select of every row, newest first.
    A failure yields the error message and no rows.
    """
    try:
        jobs = jobs_table.select_all()
    except RemoteOperationError as e:
        logger.error("Error loading jobs: %s", e.message)
        return ListViewResult(error=e.message)

    logger.info("Loaded %d job applications", len(jobs))
    return ListViewResult(jobs=jobs)
