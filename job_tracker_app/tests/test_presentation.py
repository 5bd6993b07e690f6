from datetime import datetime, timezone

from job_tracker_app.backend.schemas import JobStatus
from job_tracker_app.backend.services import presentation


def test_status_badge_variants():
    assert presentation.status_badge_variant(JobStatus.REJECTED) == "destructive"
    assert presentation.status_badge_variant(JobStatus.OFFER) == "default"
    for status in (JobStatus.APPLIED, JobStatus.INTERVIEWING, JobStatus.GHOSTED):
        assert presentation.status_badge_variant(status) == "secondary"


def test_applied_date_is_us_short_date():
    assert presentation.format_applied_date(datetime(2024, 3, 7, 23, 59)) == "3/7/2024"
    assert presentation.format_applied_date(datetime(2023, 12, 25)) == "12/25/2023"
    assert presentation.format_applied_date(None) == ""


def test_applied_date_uses_display_timezone():
    late_evening_new_york = datetime(2024, 3, 8, 2, 0, tzinfo=timezone.utc)
    assert presentation.format_applied_date(late_evening_new_york) == "3/8/2024"
    assert presentation.format_applied_date(late_evening_new_york, "America/New_York") == "3/7/2024"
    # Naive timestamps are read as UTC
    assert presentation.format_applied_date(datetime(2024, 3, 8, 2, 0), "America/New_York") == "3/7/2024"
    assert presentation.format_applied_date(datetime(2024, 3, 7, 20, 0), "Asia/Tokyo") == "3/8/2024"


def test_dialog_labels():
    assert presentation.dialog_title(is_editing=True) == "Edit Application"
    assert presentation.dialog_title(is_editing=False) == "Add New Application"
    assert presentation.submit_label(is_editing=True) == "Save Changes"
    assert presentation.submit_label(is_editing=False) == "Create Application"
