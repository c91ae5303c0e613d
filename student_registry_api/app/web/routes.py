"""
FastAPI router serving the HTML page.

The page is rendered with the records already in the store so it shows
data even before its script runs.  Creating a record, refreshing the
table and showing error messages happen in the browser through the
JSON API at ``/records``.
"""

from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from student_registry_api.app.core.errors import StoreError
from student_registry_api.app.services.student_service import StudentService, get_student_service

router = APIRouter()
templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent / "templates"))


@router.get("/", response_class=HTMLResponse, name="index")
async def get_index(
    request: Request,
    service: StudentService = Depends(get_student_service),
) -> HTMLResponse:
    """Render the form and the table of current records."""
    error = ""
    try:
        students = await service.list_students()
    except StoreError as e:
        students = []
        error = e.message
    context = {
        "request": request,
        "students": students,
        "error": error,
        "title": request.app.state.settings.project_name,
    }
    return templates.TemplateResponse(request, "index.html", context)
