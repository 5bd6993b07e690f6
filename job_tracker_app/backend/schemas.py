from datetime import datetime
from enum import Enum
from typing import Optional, List

from pydantic import BaseModel, ConfigDict


class JobStatus(str, Enum):
    APPLIED = "Applied"
    INTERVIEWING = "Interviewing"
    OFFER = "Offer"
    REJECTED = "Rejected"
    GHOSTED = "Ghosted"


STATUS_CHOICES: List[str] = [s.value for s in JobStatus]

DEFAULT_PLATFORM = "Manual"


# Draft Schemas
class JobDraft(BaseModel):
    """Editable fields of a job application, bound to the record form."""
    company_name: str = ""
    role_title: str = ""
    location: str = ""
    source_url: str = ""
    platform: str = DEFAULT_PLATFORM
    status: JobStatus = JobStatus.APPLIED
    notes: str = ""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")


EDITABLE_FIELDS: List[str] = list(JobDraft.model_fields)


# Job Application Schemas
class JobApplication(BaseModel):
    """One row of the remote jobs table."""
    id: int
    company_name: str
    role_title: str
    location: Optional[str] = ""
    source_url: Optional[str] = ""
    platform: Optional[str] = DEFAULT_PLATFORM
    status: JobStatus = JobStatus.APPLIED
    applied_date: Optional[datetime] = None
    notes: Optional[str] = None

    model_config = ConfigDict(from_attributes=True, extra="ignore")

    def to_draft(self) -> JobDraft:
        return JobDraft(
            company_name=self.company_name,
            role_title=self.role_title,
            location=self.location or "",
            source_url=self.source_url or "",
            platform=self.platform or "",
            status=self.status,
            notes=self.notes or "",
        )

    def with_draft(self, draft: JobDraft) -> "JobApplication":
        """Copy of this row with every editable field replaced by the draft."""
        return self.model_copy(update=draft.model_dump())
