from datetime import datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo

from ..schemas import JobStatus

EMPTY_MESSAGE = 'No applications found. Click "Add Job" to start!'


def status_badge_variant(status: JobStatus) -> str:
    if status == JobStatus.REJECTED:
        return "destructive"
    if status == JobStatus.OFFER:
        return "default"
    return "secondary"


def format_applied_date(value: Optional[datetime], display_timezone: str = "UTC") -> str:
    """
    US short date (e.g. 3/7/2024) in the viewer's time zone.
    Naive timestamps, as SQLite returns them, are taken to be UTC.
    """
    if value is None:
        return ""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    local = value.astimezone(ZoneInfo(display_timezone))
    return f"{local.month}/{local.day}/{local.year}"


def dialog_title(is_editing: bool) -> str:
    return "Edit Application" if is_editing else "Add New Application"


def submit_label(is_editing: bool) -> str:
    return "Save Changes" if is_editing else "Create Application"
