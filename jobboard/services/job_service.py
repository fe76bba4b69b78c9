"""
services/job_service.py
-----------------------
Job postings: the public board and tenant-side management.

Every tenant-side query goes through the row-scope helpers with the
Decision produced for the caller; the organization a job is written into is
the decision's scope, never a value from the request body.
"""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from jobboard.access.policy import AccessPolicy, Action, Decision, authorize
from jobboard.access.roles import RoleResult
from jobboard.access.scope import scoped_get, scoped_query, scoped_write_target
from jobboard.core.errors import ResourceNotFoundError
from jobboard.core.logging import get_logger
from jobboard.models.job import Job, JobStatus
from jobboard.schemas.job import JobWrite

logger = get_logger(__name__)


class JobService:

    # ── Public board ──────────────────────────────────────────────────────────

    @staticmethod
    async def list_published(
        db: AsyncSession, skip: int = 0, limit: int = 20
    ) -> tuple[int, list[Job]]:
        base_filter = Job.status == JobStatus.published.value

        count_result = await db.execute(
            select(func.count()).select_from(Job).where(base_filter)
        )
        total = count_result.scalar_one()

        result = await db.execute(
            select(Job)
            .where(base_filter)
            .order_by(Job.created_at.desc())
            .offset(skip)
            .limit(limit)
        )
        return total, list(result.scalars().all())

    @staticmethod
    async def get_visible(
        db: AsyncSession,
        role: RoleResult,
        job_id: str,
        policy: AccessPolicy | None = None,
    ) -> Job:
        """
        A published job, or an unpublished one when the caller is a member of
        the owning organization. Anything else is reported as not found.
        """
        job = (await db.execute(select(Job).where(Job.id == job_id))).scalar_one_or_none()
        if job is None:
            raise ResourceNotFoundError()
        if job.status == JobStatus.published.value:
            return job

        decision = authorize(role, Action.READ_TENANT_JOBS, None, policy)
        if decision.permits_tenant(job.organization_id):
            return job
        raise ResourceNotFoundError()

    # ── Tenant side ───────────────────────────────────────────────────────────

    @staticmethod
    async def list_for_tenant(
        db: AsyncSession,
        decision: Decision,
        status: JobStatus | None = None,
        skip: int = 0,
        limit: int = 50,
    ) -> tuple[int, list[Job]]:
        stmt = scoped_query(select(Job), Job, decision)
        count_stmt = scoped_query(select(func.count()).select_from(Job), Job, decision)
        if status is not None:
            stmt = stmt.where(Job.status == status.value)
            count_stmt = count_stmt.where(Job.status == status.value)

        total = (await db.execute(count_stmt)).scalar_one()
        result = await db.execute(
            stmt.order_by(Job.created_at.desc()).offset(skip).limit(limit)
        )
        return total, list(result.scalars().all())

    @staticmethod
    async def get_for_tenant(db: AsyncSession, decision: Decision, job_id: str) -> Job:
        return await scoped_get(db, Job, job_id, decision)

    @staticmethod
    async def create(db: AsyncSession, decision: Decision, data: JobWrite) -> Job:
        job = Job(
            organization_id=decision.scope_tenant_id,
            title=data.title,
            description=data.description,
            location=data.location,
            employment_type=data.employment_type,
            salary=data.salary,
            status=data.status.value,
        )
        db.add(job)
        await db.flush()
        await db.refresh(job)
        logger.info("Job created", job_id=job.id, tenant_id=job.organization_id)
        return job

    @staticmethod
    async def update(
        db: AsyncSession, decision: Decision, job_id: str, data: JobWrite
    ) -> Job:
        job = await scoped_write_target(db, Job, job_id, decision)
        job.title = data.title
        job.description = data.description
        job.location = data.location
        job.employment_type = data.employment_type
        job.salary = data.salary
        job.status = data.status.value
        await db.flush()
        await db.refresh(job)
        logger.info("Job updated", job_id=job.id, tenant_id=job.organization_id)
        return job
