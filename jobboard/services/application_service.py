"""
services/application_service.py
-------------------------------
Applying to jobs (applicant side) and reviewing applications (tenant side).

Critical security invariant:
  organization_id on an application is copied from the job row at creation
  time. Tenant-side reads and writes always pass through the row-scope
  helpers, so a guessed application id from another tenant behaves exactly
  like a missing one.
"""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from jobboard.access.policy import Decision
from jobboard.access.scope import scoped_get, scoped_query, scoped_write_target
from jobboard.core.errors import InvalidInputError, ResourceNotFoundError
from jobboard.core.logging import get_logger
from jobboard.core.validators import is_uuid, require_uuid
from jobboard.models.application import Application, ApplicationStatus
from jobboard.models.job import Job, JobStatus
from jobboard.models.user import Applicant, User
from jobboard.schemas.application import (
    ApplicationCreate,
    ApplicationStatusUpdate,
    BulkApplicationCreate,
)
from jobboard.services.user_service import UserService

logger = get_logger(__name__)


class ApplicationService:

    # ── Applicant side ────────────────────────────────────────────────────────

    @staticmethod
    async def _applicant_for(
        db: AsyncSession, user: User, include_documents: bool
    ) -> Applicant:
        applicant = await UserService.get_applicant(db, user.id)
        if applicant is None:
            raise InvalidInputError("Applicant profile not found")
        if include_documents and not (applicant.resume_path or applicant.cv_path):
            raise InvalidInputError("No documents uploaded to the applicant profile")
        return applicant

    @staticmethod
    def _build(
        job: Job, applicant: Applicant, message: str, include_documents: bool
    ) -> Application:
        return Application(
            job_id=job.id,
            organization_id=job.organization_id,
            applicant_user_id=applicant.id,
            applicant_name=applicant.display_name,
            applicant_email=applicant.email,
            applicant_phone=applicant.phone,
            applicant_message=message,
            status=ApplicationStatus.new.value,
            include_documents=include_documents,
            resume_path=applicant.resume_path if include_documents else None,
            cv_path=applicant.cv_path if include_documents else None,
        )

    @staticmethod
    async def apply(
        db: AsyncSession, user: User, job_id: str, data: ApplicationCreate
    ) -> Application:
        applicant = await ApplicationService._applicant_for(db, user, data.include_documents)

        job = (await db.execute(select(Job).where(Job.id == job_id))).scalar_one_or_none()
        # Unpublished jobs do not exist as far as applicants are concerned.
        if job is None or job.status != JobStatus.published.value:
            raise ResourceNotFoundError()

        application = ApplicationService._build(
            job, applicant, data.applicant_message, data.include_documents
        )
        db.add(application)
        await db.flush()
        await db.refresh(application)
        logger.info(
            "Application submitted",
            application_id=application.id,
            job_id=job.id,
            tenant_id=job.organization_id,
        )
        return application

    @staticmethod
    async def apply_bulk(
        db: AsyncSession, user: User, data: BulkApplicationCreate
    ) -> list[Application]:
        """
        One application per published job in `data.job_ids`. Unknown and
        unpublished ids are skipped; each row takes its tenant from its job.
        """
        job_ids = list(dict.fromkeys(
            require_uuid(job_id, "job_id") for job_id in data.job_ids if is_uuid(job_id)
        ))
        message = data.applicant_message.strip()
        if not job_ids:
            raise InvalidInputError("job_ids is required")
        if not message:
            raise InvalidInputError("applicant_message is required")

        applicant = await ApplicationService._applicant_for(db, user, data.include_documents)

        result = await db.execute(
            select(Job).where(Job.id.in_(job_ids), Job.status == JobStatus.published.value)
        )
        jobs = list(result.scalars().all())
        if not jobs:
            raise InvalidInputError("No acceptable jobs")

        applications = [
            ApplicationService._build(job, applicant, message, data.include_documents)
            for job in jobs
        ]
        db.add_all(applications)
        await db.flush()
        logger.info(
            "Bulk applications submitted",
            user_id=user.id,
            requested=len(job_ids),
            created=len(applications),
        )
        return applications

    @staticmethod
    async def list_mine(
        db: AsyncSession, user: User, skip: int = 0, limit: int = 20
    ) -> tuple[int, list[Application]]:
        base_filter = Application.applicant_user_id == user.id
        total = (
            await db.execute(select(func.count()).select_from(Application).where(base_filter))
        ).scalar_one()
        result = await db.execute(
            select(Application)
            .where(base_filter)
            .order_by(Application.created_at.desc())
            .offset(skip)
            .limit(limit)
        )
        return total, list(result.scalars().all())

    @staticmethod
    async def get_mine(db: AsyncSession, user: User, application_id: str) -> Application:
        result = await db.execute(
            select(Application).where(
                Application.id == application_id,
                Application.applicant_user_id == user.id,
            )
        )
        application = result.scalar_one_or_none()
        if application is None:
            raise ResourceNotFoundError()
        return application

    # ── Tenant side ───────────────────────────────────────────────────────────

    @staticmethod
    async def list_for_tenant(
        db: AsyncSession,
        decision: Decision,
        status: ApplicationStatus | None = None,
        job_id: str | None = None,
        skip: int = 0,
        limit: int = 50,
    ) -> tuple[int, list[Application]]:
        stmt = scoped_query(select(Application), Application, decision)
        count_stmt = scoped_query(
            select(func.count()).select_from(Application), Application, decision
        )
        if status is not None:
            stmt = stmt.where(Application.status == status.value)
            count_stmt = count_stmt.where(Application.status == status.value)
        if job_id is not None:
            stmt = stmt.where(Application.job_id == job_id)
            count_stmt = count_stmt.where(Application.job_id == job_id)

        total = (await db.execute(count_stmt)).scalar_one()
        result = await db.execute(
            stmt.order_by(Application.created_at.desc()).offset(skip).limit(limit)
        )
        return total, list(result.scalars().all())

    @staticmethod
    async def get_for_tenant(
        db: AsyncSession, decision: Decision, application_id: str
    ) -> Application:
        return await scoped_get(db, Application, application_id, decision)

    @staticmethod
    async def update_status(
        db: AsyncSession,
        decision: Decision,
        application_id: str,
        data: ApplicationStatusUpdate,
    ) -> Application:
        application = await scoped_write_target(db, Application, application_id, decision)
        application.status = data.status.value
        if data.memo is not None:
            application.memo = data.memo.strip() or None
        await db.flush()
        await db.refresh(application)
        logger.info(
            "Application status changed",
            application_id=application.id,
            status=application.status,
            tenant_id=application.organization_id,
        )
        return application
