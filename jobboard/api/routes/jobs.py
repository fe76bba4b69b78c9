"""
api/routes/jobs.py
------------------
Public job board.

GET /jobs       — Published jobs, newest first (paginated).
GET /jobs/{id}  — One job. Drafts and closed jobs are visible only to
                  members of the owning organization; everyone else gets 404.
"""

from fastapi import APIRouter, Query

from jobboard.core.validators import require_uuid
from jobboard.dependencies import Context
from jobboard.schemas.job import JobListResponse, JobRead
from jobboard.services.job_service import JobService

router = APIRouter(prefix="/jobs", tags=["Jobs"])


@router.get("", response_model=JobListResponse, summary="List published jobs")
async def list_jobs(
    ctx: Context,
    skip: int = Query(default=0, ge=0),
    limit: int = Query(default=20, ge=1, le=100),
) -> JobListResponse:
    total, jobs = await JobService.list_published(ctx.db, skip=skip, limit=limit)
    return JobListResponse(total=total, items=[JobRead.model_validate(j) for j in jobs])


@router.get("/{job_id}", response_model=JobRead, summary="Get a job posting")
async def get_job(job_id: str, ctx: Context) -> JobRead:
    job_id = require_uuid(job_id, "job id")
    job = await JobService.get_visible(ctx.db, await ctx.role(), job_id, ctx.policy)
    return JobRead.model_validate(job)
