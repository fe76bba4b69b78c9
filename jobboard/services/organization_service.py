"""
services/organization_service.py
--------------------------------
Organization onboarding and platform-wide organization views.

Onboarding spans three tables: organizations, users, admin_users. Each step
runs in its own savepoint; when a later step fails the rows created by the
earlier steps are deleted in reverse order before the error is re-raised,
so an organization is never left behind without its admin.
"""

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from jobboard.access.policy import Decision
from jobboard.access.scope import scoped_get, scoped_query
from jobboard.core.logging import get_logger
from jobboard.models.application import Application
from jobboard.models.job import Job
from jobboard.models.membership import AdminRole, AdminUser, OrganizationMember
from jobboard.models.organization import Organization
from jobboard.models.user import User
from jobboard.schemas.organization import OrganizationCreate
from jobboard.services.user_service import UserService

logger = get_logger(__name__)

_CONFLICTS = {
    "organization": "Organization slug '{slug}' already exists",
    "user": "Email '{email}' is already registered",
    "membership": "Could not bind '{email}' as organization admin",
}


class OrganizationService:

    @staticmethod
    async def create_with_admin(
        db: AsyncSession, data: OrganizationCreate
    ) -> tuple[Organization, User, AdminUser]:
        """
        Create an organization and its first tenant_admin.

        Raises ValueError on a uniqueness conflict in any step. Other store
        errors propagate after compensation.
        """
        created: list = []
        step = "organization"
        try:
            org = Organization(name=data.name, slug=data.slug, category=data.category)
            async with db.begin_nested():
                db.add(org)
                await db.flush()
                await db.refresh(org)
            created.append(org)

            step = "user"
            async with db.begin_nested():
                user = await UserService.create_account(
                    db, data.admin_email, data.admin_password
                )
            created.append(user)

            step = "membership"
            admin = AdminUser(
                user_id=user.id,
                role=AdminRole.tenant_admin.value,
                organization_id=org.id,
            )
            async with db.begin_nested():
                db.add(admin)
                await db.flush()
        except SQLAlchemyError as exc:
            logger.warning(
                "Organization onboarding failed, compensating",
                step=step,
                created=len(created),
                error=str(exc),
            )
            await OrganizationService._compensate(db, created)
            if isinstance(exc, IntegrityError):
                raise ValueError(
                    _CONFLICTS[step].format(slug=data.slug, email=data.admin_email)
                ) from exc
            raise

        logger.info(
            "Organization onboarded",
            organization_id=org.id,
            admin_user_id=user.id,
        )
        return org, user, admin

    @staticmethod
    async def _compensate(db: AsyncSession, created: list) -> None:
        for obj in reversed(created):
            await db.delete(obj)
            await db.flush()
            logger.info("Compensated onboarding row", row=repr(obj))

    @staticmethod
    async def list_organizations(
        db: AsyncSession, decision: Decision
    ) -> list[Organization]:
        stmt = scoped_query(select(Organization), Organization, decision)
        result = await db.execute(stmt.order_by(Organization.created_at.desc()))
        return list(result.scalars().all())

    @staticmethod
    async def summarize(
        db: AsyncSession, decision: Decision, organization_id: str
    ) -> dict:
        org = await scoped_get(db, Organization, organization_id, decision)

        async def count(model) -> int:
            result = await db.execute(
                select(func.count())
                .select_from(model)
                .where(model.organization_id == org.id)
            )
            return result.scalar_one()

        admins = await db.execute(
            select(func.count())
            .select_from(AdminUser)
            .where(
                AdminUser.organization_id == org.id,
                AdminUser.role == AdminRole.tenant_admin.value,
            )
        )
        return {
            "organization": org,
            "job_count": await count(Job),
            "application_count": await count(Application),
            "member_count": admins.scalar_one() + await count(OrganizationMember),
        }
