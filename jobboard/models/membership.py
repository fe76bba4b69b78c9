"""
models/membership.py
--------------------
The two membership relations that bind a user to a tenant.

  admin_users          Primary. One row per user. Holds the platform
                       super-admin marker, or a tenant_admin bound to one
                       organization.
  organization_members Secondary. Many members per organization with
                       tenant_admin / tenant_staff roles.

Both are read-only to the access layer. jobboard.access.lookup.resolve_role
is the single place that reconciles them.
"""

from enum import Enum as PyEnum
from typing import Optional

from sqlalchemy import ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from jobboard.db.base import Base, TenantScoped, TimestampMixin, UUIDPrimaryKey


class AdminRole(str, PyEnum):
    platform_super_admin = "platform_super_admin"
    tenant_admin = "tenant_admin"


class MemberRole(str, PyEnum):
    tenant_admin = "tenant_admin"
    tenant_staff = "tenant_staff"


class AdminUser(Base, TimestampMixin):
    __tablename__ = "admin_users"

    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), primary_key=True
    )
    role: Mapped[str] = mapped_column(String(40), nullable=False)
    # Required when role is tenant_admin; ignored for platform_super_admin.
    organization_id: Mapped[Optional[str]] = mapped_column(
        String(36),
        ForeignKey("organizations.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<AdminUser user_id={self.user_id} role={self.role}>"


class OrganizationMember(Base, UUIDPrimaryKey, TenantScoped, TimestampMixin):
    __tablename__ = "organization_members"
    __table_args__ = (UniqueConstraint("user_id", name="uq_organization_members_user"),)

    organization_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("organizations.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    role: Mapped[str] = mapped_column(String(40), nullable=False)

    def __repr__(self) -> str:
        return (
            f"<OrganizationMember org={self.organization_id} "
            f"user={self.user_id} role={self.role}>"
        )
