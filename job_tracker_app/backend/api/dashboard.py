"""
Dashboard page: the list view plus the interactive record table and its form.
"""
import logging
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, Form, HTTPException, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from pydantic import ValidationError

from ..config.settings import get_settings
from ..schemas import DEFAULT_PLATFORM, STATUS_CHOICES
from ..services import presentation
from ..services.job_table import DELETE_CONFIRMATION, JobTable
from ..services.list_view import load_jobs
from ..services.table_client import JobsTable, get_jobs_table

logger = logging.getLogger(__name__)
router = APIRouter()

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))
templates.env.filters["badge_variant"] = presentation.status_badge_variant


def _applied_date(value):
    return presentation.format_applied_date(value, get_settings().display_timezone)


templates.env.filters["applied_date"] = _applied_date


def get_job_table(request: Request) -> Optional[JobTable]:
    return getattr(request.app.state, "job_table", None)


def render_dashboard(request: Request, table: JobTable) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "dashboard.html",
        {
            "table": table,
            "alerts": table.drain_alerts(),
            "status_choices": STATUS_CHOICES,
            "dialog_title": presentation.dialog_title(table.is_editing),
            "submit_label": presentation.submit_label(table.is_editing),
            "empty_message": presentation.EMPTY_MESSAGE,
            "delete_confirmation": DELETE_CONFIRMATION,
        },
    )


def to_dashboard() -> RedirectResponse:
    return RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/", response_class=HTMLResponse)
def dashboard(request: Request, jobs_table: JobsTable = Depends(get_jobs_table)):
    """
    Load every job application and render the dashboard.
    A load failure replaces the whole page with the error message.
    """
    result = load_jobs(jobs_table)
    if not result.ok:
        request.app.state.job_table = None
        return templates.TemplateResponse(
            request,
            "error.html",
            {"message": result.error},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    table = JobTable(jobs_table, result.jobs)
    request.app.state.job_table = table
    return render_dashboard(request, table)


@router.get("/jobs/new", response_class=HTMLResponse)
def open_add_dialog(request: Request, table: Optional[JobTable] = Depends(get_job_table)):
    if table is None:
        return to_dashboard()
    table.open_add_dialog()
    return render_dashboard(request, table)


@router.get("/jobs/{job_id}/edit", response_class=HTMLResponse)
def open_edit_dialog(job_id: int, request: Request, table: Optional[JobTable] = Depends(get_job_table)):
    if table is None:
        return to_dashboard()
    try:
        table.open_edit_dialog_by_id(job_id)
    except KeyError:
        raise HTTPException(status_code=404, detail="Job application not found")
    return render_dashboard(request, table)


@router.post("/jobs/dialog/close", response_class=HTMLResponse)
def close_dialog(request: Request, table: Optional[JobTable] = Depends(get_job_table)):
    if table is None:
        return to_dashboard()
    table.close_dialog()
    return render_dashboard(request, table)


@router.post("/jobs/submit", response_class=HTMLResponse)
def submit_job(
    request: Request,
    company_name: str = Form(""),
    role_title: str = Form(""),
    location: str = Form(""),
    source_url: str = Form(""),
    platform: str = Form(DEFAULT_PLATFORM),
    job_status: str = Form(STATUS_CHOICES[0], alias="status"),
    notes: str = Form(""),
    table: Optional[JobTable] = Depends(get_job_table),
):
    """Bind the posted form into the draft, then insert or update."""
    if table is None:
        return to_dashboard()
    if not table.is_dialog_open:
        # Replayed post (reload after submit, or after cancel)
        return to_dashboard()

    fields = {
        "company_name": company_name,
        "role_title": role_title,
        "location": location,
        "source_url": source_url,
        "platform": platform,
        "status": job_status,
        "notes": notes,
    }
    try:
        for name, value in fields.items():
            table.update_draft(name, value)
    except ValidationError as e:
        logger.warning("Rejected job form: %s", e)
        raise HTTPException(status_code=422, detail=str(e))

    table.submit()
    return render_dashboard(request, table)


@router.post("/jobs/{job_id}/delete", response_class=HTMLResponse)
def delete_job(
    job_id: int,
    request: Request,
    confirmed: str = Form("false"),
    table: Optional[JobTable] = Depends(get_job_table),
):
    """The browser's confirmation prompt fills `confirmed` before posting."""
    if table is None:
        return to_dashboard()
    table.delete(job_id, confirm=lambda _message: confirmed.lower() == "true")
    return render_dashboard(request, table)
