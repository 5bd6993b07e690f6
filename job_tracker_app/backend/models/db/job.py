from sqlalchemy import Column, Integer, String, Text, DateTime, func
from .database import Base
from ...schemas import DEFAULT_PLATFORM, JobStatus


class Job(Base):
    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, index=True)
    company_name = Column(String(255), nullable=False)
    role_title = Column(String(255), nullable=False)
    location = Column(String(255), default="")
    source_url = Column(String(1024), default="")
    platform = Column(String(50), default=DEFAULT_PLATFORM)
    status = Column(String(20), default=JobStatus.APPLIED.value, nullable=False)
    applied_date = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)
