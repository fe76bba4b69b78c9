"""
api/routes/admin_jobs.py
------------------------
Tenant-side job management.

GET   /admin/jobs        — Jobs of the caller's organization (all statuses).
POST  /admin/jobs        — Create a job in the caller's organization.
GET   /admin/jobs/{id}   — One job of the caller's organization.
PATCH /admin/jobs/{id}   — Edit a job of the caller's organization.

Platform super-admins must name the target organization (organization_id
query parameter, or body field on create). For tenant members that value
is ignored; their own organization is always used.
"""

from typing import Optional

from fastapi import APIRouter, Query, status

from jobboard.access.policy import Action
from jobboard.core.validators import optional_uuid, require_uuid
from jobboard.dependencies import Context
from jobboard.models.job import JobStatus
from jobboard.schemas.job import JobCreate, JobListResponse, JobRead, JobWrite
from jobboard.services.job_service import JobService

router = APIRouter(prefix="/admin/jobs", tags=["Admin: Jobs"])


@router.get("", response_model=JobListResponse, summary="List my organization's jobs")
async def list_jobs(
    ctx: Context,
    organization_id: Optional[str] = Query(default=None),
    status_filter: Optional[JobStatus] = Query(default=None, alias="status"),
    skip: int = Query(default=0, ge=0),
    limit: int = Query(default=50, ge=1, le=200),
) -> JobListResponse:
    hint = optional_uuid(organization_id, "organization_id")
    decision = await ctx.require(Action.READ_TENANT_JOBS, hint)
    total, jobs = await JobService.list_for_tenant(
        ctx.db, decision, status=status_filter, skip=skip, limit=limit
    )
    return JobListResponse(total=total, items=[JobRead.model_validate(j) for j in jobs])


@router.post(
    "",
    response_model=JobRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a job",
)
async def create_job(body: JobCreate, ctx: Context) -> JobRead:
    hint = optional_uuid(body.organization_id, "organization_id")
    decision = await ctx.require(Action.WRITE_TENANT_JOBS, hint)
    job = await JobService.create(ctx.db, decision, body)
    return JobRead.model_validate(job)


@router.get("/{job_id}", response_model=JobRead, summary="Get one of my organization's jobs")
async def get_job(
    job_id: str,
    ctx: Context,
    organization_id: Optional[str] = Query(default=None),
) -> JobRead:
    job_id = require_uuid(job_id, "job id")
    hint = optional_uuid(organization_id, "organization_id")
    decision = await ctx.require(Action.READ_TENANT_JOBS, hint)
    job = await JobService.get_for_tenant(ctx.db, decision, job_id)
    return JobRead.model_validate(job)


@router.patch("/{job_id}", response_model=JobRead, summary="Edit a job")
async def update_job(
    job_id: str,
    body: JobWrite,
    ctx: Context,
    organization_id: Optional[str] = Query(default=None),
) -> JobRead:
    job_id = require_uuid(job_id, "job id")
    hint = optional_uuid(organization_id, "organization_id")
    decision = await ctx.require(Action.WRITE_TENANT_JOBS, hint)
    job = await JobService.update(ctx.db, decision, job_id, body)
    return JobRead.model_validate(job)
