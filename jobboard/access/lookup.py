"""
access/lookup.py
----------------
Role lookup: which tenant (if any) a user acts for, and at what level.

Resolution order:
  1. admin_users (primary). platform_super_admin wins outright and is never
     tenant-scoped. tenant_admin counts only with a non-null organization_id;
     a tenant_admin row without one is treated as no match.
  2. organization_members (secondary), consulted when the primary table
     yields nothing usable.
  3. Otherwise the user is a plain Applicant.

Pure read. Results are never cached across requests so that a revoked
membership takes effect on the next call.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from jobboard.access.roles import (
    Applicant,
    MemberLevel,
    PlatformSuperAdmin,
    RoleResult,
    TenantMember,
    Unauthenticated,
)
from jobboard.core.logging import get_logger
from jobboard.models.membership import AdminRole, AdminUser, MemberRole, OrganizationMember

logger = get_logger(__name__)

# Legacy rows use bare "admin" / "staff".
_LEVEL_BY_MEMBER_ROLE = {
    MemberRole.tenant_admin.value: MemberLevel.admin,
    MemberRole.tenant_staff.value: MemberLevel.staff,
    "admin": MemberLevel.admin,
    "staff": MemberLevel.staff,
}


def role_from_rows(
    user_id: str,
    admin_row: AdminUser | None,
    member_row: OrganizationMember | None,
) -> RoleResult:
    """Reconcile the two membership rows of one user into a RoleResult."""
    if admin_row is not None:
        if admin_row.role == AdminRole.platform_super_admin.value:
            return PlatformSuperAdmin(user_id=user_id)
        if admin_row.role == AdminRole.tenant_admin.value and admin_row.organization_id:
            return TenantMember(
                user_id=user_id,
                tenant_id=admin_row.organization_id,
                level=MemberLevel.admin,
            )

    if member_row is not None and member_row.organization_id:
        level = _LEVEL_BY_MEMBER_ROLE.get((member_row.role or "").strip().lower())
        if level is not None:
            return TenantMember(
                user_id=user_id,
                tenant_id=member_row.organization_id,
                level=level,
            )

    return Applicant(user_id=user_id)


async def resolve_role(db: AsyncSession, user_id: str | None) -> RoleResult:
    if not user_id:
        return Unauthenticated()

    admin_row = (
        await db.execute(select(AdminUser).where(AdminUser.user_id == user_id))
    ).scalar_one_or_none()

    if admin_row is not None and admin_row.role == AdminRole.platform_super_admin.value:
        return PlatformSuperAdmin(user_id=user_id)

    if admin_row is not None and admin_row.role == AdminRole.tenant_admin.value:
        if admin_row.organization_id:
            return role_from_rows(user_id, admin_row, None)
        logger.warning("Tenant admin row without organization ignored", user_id=user_id)

    member_row = (
        await db.execute(
            select(OrganizationMember).where(OrganizationMember.user_id == user_id)
        )
    ).scalar_one_or_none()

    return role_from_rows(user_id, admin_row, member_row)
