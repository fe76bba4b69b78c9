"""
schemas/review.py
-----------------
Pydantic models for organization reviews.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class ReviewCreate(BaseModel):
    organization_id: str
    rating: int = Field(..., ge=1, le=5)
    title: Optional[str] = Field(default=None, max_length=255)
    body: str = Field(..., min_length=1, max_length=8000)

    @field_validator("title")
    @classmethod
    def blank_title(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return v.strip() or None

    @field_validator("body")
    @classmethod
    def strip_body(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("body is required")
        return v


class ReviewRead(BaseModel):
    id: str
    organization_id: str
    applicant_user_id: str
    rating: int
    title: Optional[str]
    body: str
    created_at: datetime

    model_config = {"from_attributes": True}


class ReviewListResponse(BaseModel):
    reviews: list[ReviewRead]


class ReviewCreatedResponse(BaseModel):
    ok: bool = True
    review: ReviewRead
