"""
Interactive record table.

Owns the in-memory copy of the jobs list together with the add/edit dialog
state and the draft bound to the record form. Local state is mutated only
after the remote call it mirrors has succeeded.
"""
import logging
from typing import Any, Callable, List, Optional

from ..schemas import JobApplication, JobDraft
from .table_client import JobsTable, RemoteOperationError

logger = logging.getLogger(__name__)

DELETE_CONFIRMATION = "Are you sure you want to delete this application?"


class JobTable:
    def __init__(self, jobs_table: JobsTable, initial_jobs: List[JobApplication],
                 on_alert: Optional[Callable[[str], None]] = None):
        self.jobs_table = jobs_table
        self.jobs: List[JobApplication] = list(initial_jobs)
        self.is_dialog_open = False
        self.editing_job: Optional[JobApplication] = None
        self.draft = JobDraft()
        self.alerts: List[str] = []
        self._on_alert = on_alert

    @property
    def is_editing(self) -> bool:
        return self.editing_job is not None

    def _alert(self, message: str) -> None:
        self.alerts.append(message)
        if self._on_alert:
            self._on_alert(message)

    def drain_alerts(self) -> List[str]:
        """Pending alerts, removed from the queue."""
        alerts, self.alerts = self.alerts, []
        return alerts

    def find(self, job_id: int) -> JobApplication:
        for job in self.jobs:
            if job.id == job_id:
                return job
        raise KeyError(job_id)

    # Dialog

    def open_add_dialog(self) -> None:
        self.editing_job = None
        self.draft = JobDraft()
        self.is_dialog_open = True

    def open_edit_dialog(self, job: JobApplication) -> None:
        self.editing_job = job
        self.draft = job.to_draft()
        self.is_dialog_open = True

    def open_edit_dialog_by_id(self, job_id: int) -> None:
        self.open_edit_dialog(self.find(job_id))

    def close_dialog(self) -> None:
        """Cancel: discard the draft and the edit target without any remote call."""
        self.is_dialog_open = False
        self.editing_job = None
        self.draft = JobDraft()

    def update_draft(self, field: str, value: Any) -> None:
        """Bind one form input to its draft field."""
        if field not in JobDraft.model_fields:
            raise AttributeError(f"JobDraft has no field '{field}'")
        setattr(self.draft, field, value)

    # Remote operations

    def delete(self, job_id: int, confirm: Callable[[str], bool]) -> bool:
        """Delete after user confirmation. Returns True when the row was removed."""
        if not confirm(DELETE_CONFIRMATION):
            logger.debug("Delete of job %s declined", job_id)
            return False

        try:
            self.jobs_table.delete(job_id)
        except RemoteOperationError as e:
            self._alert(f"Error deleting job: {e.message}")
            return False

        self.jobs = [j for j in self.jobs if j.id != job_id]
        logger.info("Deleted job %s", job_id)
        return True

    def submit(self) -> bool:
        """
        Update the edit target, or insert a new row when adding.
        On success the local list mirrors the change and the dialog closes;
        on failure an alert is raised and the dialog keeps its mode and draft.
        Only an open dialog can be submitted.
        """
        if not self.is_dialog_open:
            logger.warning("Ignoring submit while the dialog is closed")
            return False

        draft = self.draft.model_copy()
        try:
            if self.editing_job is not None:
                job_id = self.editing_job.id
                self.jobs_table.update(job_id, draft)
                self.jobs = [j.with_draft(draft) if j.id == job_id else j for j in self.jobs]
                logger.info("Updated job %s", job_id)
            else:
                created = self.jobs_table.insert(draft)
                self.jobs = [created] + self.jobs
                logger.info("Created job %s", created.id)
        except RemoteOperationError as e:
            self._alert(f"Error saving job: {e.message}")
            return False

        self.is_dialog_open = False
        return True
