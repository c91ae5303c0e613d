"""
Student record endpoints for API v1.

``GET`` lists every record newest first and ``POST`` creates one.  Both
answer with the ``{"success": ..., ...}`` envelope consumed by the web
page.  Failures are raised by ``StudentService`` and rendered by the
exception handlers registered in ``main.create_app``.
"""

from fastapi import APIRouter, Depends, status

from student_registry_api.app.schemas.student import (
    StudentCreate,
    StudentCreateResponse,
    StudentListResponse,
    ErrorResponse,
)
from student_registry_api.app.services.student_service import StudentService, get_student_service

router = APIRouter()

CREATED_MESSAGE = "Student record created"


@router.get(
    "",
    response_model=StudentListResponse,
    responses={500: {"model": ErrorResponse}},
)
async def list_students(
    service: StudentService = Depends(get_student_service),
) -> StudentListResponse:
    """Return all student records, most recently created first."""
    students = await service.list_students()
    return StudentListResponse(data=students)


@router.post(
    "",
    response_model=StudentCreateResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def create_student(
    student_in: StudentCreate,
    service: StudentService = Depends(get_student_service),
) -> StudentCreateResponse:
    """Create a student record.

    Returns 400 when a field is missing or the external code is already
    registered, and 500 when the database fails.
    """
    student = await service.create_student(student_in)
    return StudentCreateResponse(message=CREATED_MESSAGE, data=student)
