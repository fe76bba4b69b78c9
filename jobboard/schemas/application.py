"""
schemas/application.py
----------------------
Pydantic models for job applications.

The applicant-facing read model omits the company's internal memo.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from jobboard.models.application import ApplicationStatus


class ApplicationCreate(BaseModel):
    job_id: str
    applicant_message: str = Field(..., min_length=1, max_length=8000)
    include_documents: bool = False

    @field_validator("applicant_message")
    @classmethod
    def strip_message(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("applicant_message is required")
        return v


class BulkApplicationCreate(BaseModel):
    """
    Apply to several jobs with one message. Ids that are not uuids are
    dropped; an empty remainder or a blank message is rejected with 400
    by the service, like the other applicant-side input checks.
    """
    job_ids: list[str] = Field(default_factory=list, max_length=100)
    applicant_message: str = Field(default="", max_length=8000)
    include_documents: bool = False


class CreatedApplication(BaseModel):
    id: str
    job_id: str

    model_config = {"from_attributes": True}


class BulkApplicationResponse(BaseModel):
    created: list[CreatedApplication]


class ApplicationStatusUpdate(BaseModel):
    status: ApplicationStatus
    memo: Optional[str] = Field(default=None, max_length=8000)


class MyApplicationRead(BaseModel):
    id: str
    job_id: str
    organization_id: str
    applicant_message: str
    status: str
    include_documents: bool
    created_at: datetime

    model_config = {"from_attributes": True}


class ApplicationRead(MyApplicationRead):
    applicant_user_id: str
    applicant_name: str
    applicant_email: str
    applicant_phone: Optional[str]
    memo: Optional[str]
    has_resume: bool = False
    has_cv: bool = False

    @classmethod
    def from_row(cls, row) -> "ApplicationRead":
        data = cls.model_validate(row)
        data.has_resume = bool(row.include_documents and row.resume_path)
        data.has_cv = bool(row.include_documents and row.cv_path)
        return data


class ApplicationListResponse(BaseModel):
    total: int
    items: list[ApplicationRead]


class MyApplicationListResponse(BaseModel):
    total: int
    items: list[MyApplicationRead]
