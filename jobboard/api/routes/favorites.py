"""
api/routes/favorites.py
-----------------------
The caller's saved jobs.

GET    /favorites           — My saved jobs, newest first.
POST   /favorites           — Save a published job (idempotent).
DELETE /favorites/{job_id}  — Unsave a job.
"""

from fastapi import APIRouter

from jobboard.access.policy import Action
from jobboard.core.validators import require_uuid
from jobboard.dependencies import Context
from jobboard.schemas.favorite import (
    FavoriteCreate,
    FavoriteListResponse,
    FavoriteRead,
    OkResponse,
)
from jobboard.services.favorite_service import FavoriteService

router = APIRouter(prefix="/favorites", tags=["Favorites"])


@router.get("", response_model=FavoriteListResponse, summary="List my saved jobs")
async def list_favorites(ctx: Context) -> FavoriteListResponse:
    await ctx.require(Action.READ_OWN_APPLICANT_DATA)
    user = await ctx.require_user()
    rows = await FavoriteService.list_mine(ctx.db, user)
    return FavoriteListResponse(
        items=[
            FavoriteRead(
                id=favorite.id,
                job_id=job.id,
                job_title=job.title,
                organization_name=organization.name,
                created_at=favorite.created_at,
            )
            for favorite, job, organization in rows
        ]
    )


@router.post("", response_model=OkResponse, summary="Save a job")
async def add_favorite(body: FavoriteCreate, ctx: Context) -> OkResponse:
    job_id = require_uuid(body.job_id, "job_id")
    await ctx.require(Action.WRITE_OWN_APPLICANT_DATA)
    user = await ctx.require_user()
    await FavoriteService.add(ctx.db, user, job_id)
    return OkResponse()


@router.delete("/{job_id}", response_model=OkResponse, summary="Unsave a job")
async def remove_favorite(job_id: str, ctx: Context) -> OkResponse:
    job_id = require_uuid(job_id, "job_id")
    await ctx.require(Action.WRITE_OWN_APPLICANT_DATA)
    user = await ctx.require_user()
    await FavoriteService.remove(ctx.db, user, job_id)
    return OkResponse()
