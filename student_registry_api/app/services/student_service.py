"""
Business logic for student records.

``StudentService`` lists records newest first and creates new ones.
Creation validates the payload in two steps before touching the
database: every field must be present and non-empty, and the external
code must not already be registered.  The lookup only provides a
friendly error; the ``UNIQUE`` constraint on ``external_code`` is what
actually prevents duplicates, so a constraint violation raised by the
insert is reported with the same ``ConflictError``.

Store failures are logged and re-raised as ``StoreError``; nothing is
retried.
"""

import logging
import sqlite3
from typing import List

from fastapi import Depends

from ..core.db import DuplicateCodeError, StudentStore, get_store
from ..core.errors import (
    LIST_FAILED_MESSAGE,
    ConflictError,
    StoreError,
    ValidationError,
)
from ..schemas.student import StudentCreate, StudentRead


logger = logging.getLogger(__name__)


class StudentService:
    """Service for listing and creating student records."""

    def __init__(self, store: StudentStore) -> None:
        self.store = store

    async def list_students(self) -> List[StudentRead]:
        """Return all records ordered by ``created_at`` descending."""
        try:
            return self.store.find_all()
        except sqlite3.Error as e:
            logger.error("Error fetching students: %s", e, exc_info=True)
            raise StoreError(LIST_FAILED_MESSAGE) from e

    async def create_student(self, data: StudentCreate) -> StudentRead:
        """Validate ``data`` and insert a new record.

        Raises
        ------
        ValidationError
            A field is missing or empty.  The store is not accessed.
        ConflictError
            The external code is already registered.
        StoreError
            Any other database failure during lookup or insert.
        """
        if not all(_is_present(value) for value in (data.name, data.external_code, data.category)):
            logger.info("Rejected student with missing fields")
            raise ValidationError()

        try:
            existing = self.store.find_by_code(data.external_code)
            if existing is not None:
                logger.info("Rejected duplicate external code %s", data.external_code)
                raise ConflictError()
            student = self.store.insert(data.name, data.external_code, data.category)
        except DuplicateCodeError as e:
            logger.info("External code %s registered concurrently", data.external_code)
            raise ConflictError() from e
        except sqlite3.Error as e:
            logger.error("Error creating student: %s", e, exc_info=True)
            raise StoreError() from e

        logger.info("Created student %s (%s)", student.id, student.external_code)
        return student


def _is_present(value) -> bool:
    return value is not None and value != ""


def get_student_service(store: StudentStore = Depends(get_store)) -> StudentService:
    """FastAPI dependency building a service around the shared store."""
    return StudentService(store)
