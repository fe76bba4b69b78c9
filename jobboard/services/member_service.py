"""
services/member_service.py
--------------------------
Team management on the secondary membership table.

Members are always written into the caller's resolved tenant. A user that
already belongs to a different organization cannot be moved by another
tenant's admin: that lookup goes through the row-scope check and fails as
not found.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from jobboard.access.policy import Decision
from jobboard.access.scope import scoped_query, scoped_write_target
from jobboard.core.errors import ResourceNotFoundError
from jobboard.core.logging import get_logger
from jobboard.models.membership import AdminUser, OrganizationMember
from jobboard.models.user import User
from jobboard.schemas.team import MemberUpsert

logger = get_logger(__name__)


class MemberService:

    @staticmethod
    async def list_members(
        db: AsyncSession, decision: Decision
    ) -> list[OrganizationMember]:
        stmt = scoped_query(select(OrganizationMember), OrganizationMember, decision)
        result = await db.execute(stmt.order_by(OrganizationMember.created_at.desc()))
        return list(result.scalars().all())

    @staticmethod
    async def upsert_member(
        db: AsyncSession, decision: Decision, user_id: str, data: MemberUpsert
    ) -> OrganizationMember:
        user = (await db.execute(select(User).where(User.id == user_id))).scalar_one_or_none()
        if user is None:
            raise ResourceNotFoundError()

        # Platform operators are managed outside tenant teams.
        admin_row = (
            await db.execute(select(AdminUser).where(AdminUser.user_id == user_id))
        ).scalar_one_or_none()
        if admin_row is not None:
            raise ValueError("User is already registered as an admin user")

        existing = (
            await db.execute(
                select(OrganizationMember.id).where(OrganizationMember.user_id == user_id)
            )
        ).scalar_one_or_none()

        if existing is not None:
            member = await scoped_write_target(db, OrganizationMember, existing, decision)
            member.role = data.role.value
        else:
            member = OrganizationMember(
                organization_id=decision.scope_tenant_id,
                user_id=user_id,
                role=data.role.value,
            )
            db.add(member)

        await db.flush()
        await db.refresh(member)
        logger.info(
            "Team member saved",
            member_user_id=user_id,
            role=member.role,
            tenant_id=member.organization_id,
        )
        return member
