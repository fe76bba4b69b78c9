"""
schemas/favorite.py
-------------------
Pydantic models for saved jobs.
"""

from datetime import datetime

from pydantic import BaseModel


class FavoriteCreate(BaseModel):
    job_id: str


class FavoriteRead(BaseModel):
    id: str
    job_id: str
    job_title: str
    organization_name: str
    created_at: datetime


class FavoriteListResponse(BaseModel):
    items: list[FavoriteRead]


class OkResponse(BaseModel):
    ok: bool = True
