"""
schemas/organization.py
-----------------------
Request/response models for organization onboarding (super-admin only).

Naming convention:
  OrganizationCreate → inbound request body
  OrganizationRead   → outbound response body
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from jobboard.core.validators import normalize_slug


class OrganizationCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, examples=["Acme Corp"])
    slug: str = Field(..., min_length=1, max_length=255, examples=["acme-corp"])
    category: Optional[str] = Field(default=None, max_length=100)

    # First tenant admin, created together with the organization
    admin_email: EmailStr
    admin_password: str = Field(..., min_length=8, max_length=128)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name is required")
        return v

    @field_validator("slug")
    @classmethod
    def clean_slug(cls, v: str) -> str:
        slug = normalize_slug(v)
        if not slug:
            raise ValueError("slug is required")
        return slug

    @field_validator("category")
    @classmethod
    def blank_category(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return v.strip() or None


class OrganizationRead(BaseModel):
    id: str
    name: str
    slug: str
    category: Optional[str]
    created_at: datetime

    model_config = {"from_attributes": True}


class CreatedAdminRead(BaseModel):
    user_id: str
    email: str
    role: str
    organization_id: str


class OrganizationCreated(BaseModel):
    organization: OrganizationRead
    created_admin_user: CreatedAdminRead


class OrganizationSummary(BaseModel):
    organization: OrganizationRead
    job_count: int
    application_count: int
    member_count: int
