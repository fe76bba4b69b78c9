"""
access/__init__.py
------------------
Tenant authorization pipeline:

    identity -> resolve_role -> authorize -> scoped_query / scoped_write_target
"""

from jobboard.access.context import RequestContext
from jobboard.access.lookup import resolve_role
from jobboard.access.policy import (
    ALL_TENANTS,
    AccessPolicy,
    Action,
    ConversationAccess,
    Decision,
    authorize,
    authorize_application_file,
    authorize_conversation,
    authorize_profile_file,
)
from jobboard.access.roles import (
    Applicant,
    MemberLevel,
    PlatformSuperAdmin,
    RoleResult,
    TenantMember,
    Unauthenticated,
)
from jobboard.access.scope import scoped_get, scoped_query, scoped_write_target

__all__ = [
    "ALL_TENANTS",
    "AccessPolicy",
    "Action",
    "Applicant",
    "ConversationAccess",
    "Decision",
    "MemberLevel",
    "PlatformSuperAdmin",
    "RequestContext",
    "RoleResult",
    "TenantMember",
    "Unauthenticated",
    "authorize",
    "authorize_application_file",
    "authorize_conversation",
    "authorize_profile_file",
    "resolve_role",
    "scoped_get",
    "scoped_query",
    "scoped_write_target",
]
