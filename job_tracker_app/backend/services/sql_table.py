import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from ..models.db import job as job_model
from ..schemas import JobApplication, JobDraft
from .table_client import JobsTable, RemoteOperationError, draft_payload, parse_rows

logger = logging.getLogger(__name__)


def _error_message(error: SQLAlchemyError) -> str:
    # DBAPI errors wrap the driver's message in .orig
    return str(getattr(error, "orig", None) or error)


class SqlJobsTable(JobsTable):
    """Jobs table reached through SQLAlchemy (hosted Postgres, or SQLite locally)."""

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def select_all(self) -> List[JobApplication]:
        db: Session = self._session_factory()
        try:
            rows = (
                db.query(job_model.Job)
                .order_by(job_model.Job.created_at.desc(), job_model.Job.id.desc())
                .all()
            )
            return parse_rows(rows)
        except SQLAlchemyError as e:
            logger.error("Select on jobs failed: %s", e)
            raise RemoteOperationError(_error_message(e)) from e
        finally:
            db.close()

    def insert(self, draft: JobDraft) -> JobApplication:
        db: Session = self._session_factory()
        try:
            db_job = job_model.Job(**draft_payload(draft))
            db.add(db_job)
            db.commit()
            db.refresh(db_job)
            return parse_rows([db_job])[0]
        except SQLAlchemyError as e:
            db.rollback()
            logger.error("Insert into jobs failed: %s", e)
            raise RemoteOperationError(_error_message(e)) from e
        finally:
            db.close()

    def update(self, job_id: int, draft: JobDraft) -> None:
        db: Session = self._session_factory()
        try:
            # Filter-based update: a missing id matches nothing and is not an error
            db.query(job_model.Job).filter(job_model.Job.id == job_id).update(
                draft_payload(draft), synchronize_session=False
            )
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error("Update of job %s failed: %s", job_id, e)
            raise RemoteOperationError(_error_message(e)) from e
        finally:
            db.close()

    def delete(self, job_id: int) -> None:
        db: Session = self._session_factory()
        try:
            db.query(job_model.Job).filter(job_model.Job.id == job_id).delete(
                synchronize_session=False
            )
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error("Delete of job %s failed: %s", job_id, e)
            raise RemoteOperationError(_error_message(e)) from e
        finally:
            db.close()
