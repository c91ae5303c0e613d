"""
Pydantic models for student records.

``StudentCreate`` describes the request body of ``POST /records``.  Its
fields are optional at the schema level so that a missing value reaches
the service, which reports every absent or blank field with the same
"missing required field" error.  The schema still rejects values that
are not strings.

``StudentRead`` is the persisted record returned by the API.  JSON keys
use camelCase (``externalCode``, ``createdAt``) while Python attributes
use snake_case.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, StrictStr


class StudentCreate(BaseModel):
    """Schema for creating a student record."""

    name: Optional[StrictStr] = Field(None, examples=["Ana"])
    external_code: Optional[StrictStr] = Field(None, alias="externalCode", examples=["X1"])
    category: Optional[StrictStr] = Field(None, examples=["CS"])


class StudentRead(BaseModel):
    """Schema for reading a student record from the API."""

    id: int
    name: str
    external_code: str = Field(..., alias="externalCode")
    category: str
    created_at: str = Field(..., alias="createdAt")

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }


class StudentListResponse(BaseModel):
    success: bool = True
    data: List[StudentRead]


class StudentCreateResponse(BaseModel):
    success: bool = True
    message: str
    data: StudentRead


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
