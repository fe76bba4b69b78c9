"""
schemas/job.py
--------------
Pydantic models for job postings.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from jobboard.models.job import JobStatus


def _blank_to_none(v: Optional[str]) -> Optional[str]:
    if v is None:
        return None
    v = v.strip()
    return v or None


class JobWrite(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    location: Optional[str] = Field(default=None, max_length=255)
    employment_type: Optional[str] = Field(default=None, max_length=100)
    salary: Optional[str] = Field(default=None, max_length=100)
    status: JobStatus = JobStatus.draft

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title is required")
        return v

    @field_validator("description", "location", "employment_type", "salary")
    @classmethod
    def blanks(cls, v: Optional[str]) -> Optional[str]:
        return _blank_to_none(v)


class JobCreate(JobWrite):
    # Honoured only for platform super-admins; tenant members always write
    # into their own organization.
    organization_id: Optional[str] = None


class JobRead(BaseModel):
    id: str
    organization_id: str
    title: str
    description: Optional[str]
    location: Optional[str]
    employment_type: Optional[str]
    salary: Optional[str]
    status: str
    created_at: datetime

    model_config = {"from_attributes": True}


class JobListResponse(BaseModel):
    total: int
    items: list[JobRead]
