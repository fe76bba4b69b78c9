"""
schemas/user.py
---------------
Pydantic models for sign-up, login, and the current-user profile.

Security note:
  - hashed_password is NEVER included in any response schema.
  - Passwords require min 8 chars; enforce stronger rules in production.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator


class SignupRequest(BaseModel):
    """Applicant self-registration. Creates a User and an applicant profile."""
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=128)
    display_name: str = Field(..., min_length=1, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=50)

    @field_validator("display_name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("display_name is required")
        return v


class UserRead(BaseModel):
    id: str
    email: str
    created_at: datetime

    model_config = {"from_attributes": True}


class AccessRead(BaseModel):
    """Resolved role of the caller, as returned by /auth/me."""
    role: str
    tenant_id: Optional[str] = None
    level: Optional[str] = None


class MeResponse(BaseModel):
    user: UserRead
    access: AccessRead


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int  # seconds
    user: UserRead


class FileUrlResponse(BaseModel):
    url: str
    expires_in: int


class UploadResponse(BaseModel):
    ok: bool = True
    kind: str
    path: str
