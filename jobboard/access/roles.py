"""
access/roles.py
---------------
Result types of role lookup.

A RoleResult is one of four frozen value objects. Callers branch on the
type with isinstance; none of them carries mutable state, so comparing two
lookups for the same user is a plain equality check.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union


class MemberLevel(str, Enum):
    admin = "admin"
    staff = "staff"


@dataclass(frozen=True)
class Unauthenticated:
    pass


@dataclass(frozen=True)
class Applicant:
    user_id: str


@dataclass(frozen=True)
class TenantMember:
    user_id: str
    tenant_id: str
    level: MemberLevel

    @property
    def is_admin(self) -> bool:
        return self.level is MemberLevel.admin


@dataclass(frozen=True)
class PlatformSuperAdmin:
    user_id: str


RoleResult = Union[Unauthenticated, Applicant, TenantMember, PlatformSuperAdmin]


def user_id_of(role: RoleResult) -> str | None:
    return getattr(role, "user_id", None)


def describe(role: RoleResult) -> dict:
    """Flat key/values for structured logs."""
    data: dict = {"role": type(role).__name__}
    if isinstance(role, TenantMember):
        data.update(tenant_id=role.tenant_id, level=role.level.value)
    user_id = user_id_of(role)
    if user_id:
        data["user_id"] = user_id
    return data
