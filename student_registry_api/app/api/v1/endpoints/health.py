"""
Health endpoint for API v1.

Reports that the process is serving and that the record store answers
queries.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from student_registry_api.app.core.db import StudentStore, get_store

router = APIRouter()


@router.get("", response_model=Dict[str, Any])
async def health(store: StudentStore = Depends(get_store)) -> Dict[str, Any]:
    return {"status": "ok", "records": store.count()}
