"""
access/policy.py
----------------
Access decisions: role x action -> allow/deny plus the tenant scope that
every subsequent query must be filtered by.

Decision table, first match wins:

  Unauthenticated      deny everything
  (any signed-in user) own applicant data, scope None (rows keyed by user id)
  PlatformSuperAdmin   platform-admin-*      -> scope ALL
                       tenant jobs/apps      -> only with an explicit target
                                                tenant, scope pinned to it
  TenantMember admin   tenant jobs/apps, conversations -> scope = own tenant
  TenantMember staff   reads and conversations; job and application writes
                       only when the policy sets staff_can_write; team
                       writes never
  Applicant            nothing tenant-scoped; conversations only through
                       authorize_conversation's ownership path

A tenant member's scope is always the resolved tenant. Any tenant id the
caller supplies is ignored unless the caller is a super-admin.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol

from jobboard.access.roles import (
    PlatformSuperAdmin,
    RoleResult,
    TenantMember,
    Unauthenticated,
    describe,
    user_id_of,
)
from jobboard.core.config import settings
from jobboard.core.logging import get_logger
from jobboard.models.conversation import SenderType

logger = get_logger("jobboard.access")

ALL_TENANTS = "ALL"


class Action(str, Enum):
    READ_OWN_APPLICANT_DATA = "read-own-applicant-data"
    WRITE_OWN_APPLICANT_DATA = "write-own-applicant-data"
    READ_TENANT_JOBS = "read-tenant-jobs"
    WRITE_TENANT_JOBS = "write-tenant-jobs"
    READ_TENANT_APPLICATIONS = "read-tenant-applications"
    WRITE_TENANT_APPLICATIONS = "write-tenant-applications"
    READ_TENANT_MEMBERS = "read-tenant-members"
    WRITE_TENANT_MEMBERS = "write-tenant-members"
    READ_CONVERSATION = "read-conversation"
    WRITE_CONVERSATION = "write-conversation"
    PLATFORM_ADMIN_READ = "platform-admin-read"
    PLATFORM_ADMIN_WRITE = "platform-admin-write"


OWN_DATA_ACTIONS = frozenset({Action.READ_OWN_APPLICANT_DATA, Action.WRITE_OWN_APPLICANT_DATA})
TENANT_READ_ACTIONS = frozenset(
    {Action.READ_TENANT_JOBS, Action.READ_TENANT_APPLICATIONS, Action.READ_TENANT_MEMBERS}
)
TENANT_WRITE_ACTIONS = frozenset(
    {Action.WRITE_TENANT_JOBS, Action.WRITE_TENANT_APPLICATIONS, Action.WRITE_TENANT_MEMBERS}
)
# Never opened to staff, whatever the policy says.
ADMIN_ONLY_ACTIONS = frozenset({Action.WRITE_TENANT_MEMBERS})
CONVERSATION_ACTIONS = frozenset({Action.READ_CONVERSATION, Action.WRITE_CONVERSATION})
PLATFORM_ACTIONS = frozenset({Action.PLATFORM_ADMIN_READ, Action.PLATFORM_ADMIN_WRITE})

FILE_KINDS = ("resume", "cv")


@dataclass(frozen=True)
class AccessPolicy:
    staff_can_write: bool = False
    super_admin_tenant_writes: bool = True

    @classmethod
    def from_settings(cls) -> "AccessPolicy":
        return cls(
            staff_can_write=settings.STAFF_CAN_WRITE,
            super_admin_tenant_writes=settings.SUPER_ADMIN_TENANT_WRITES,
        )


@dataclass(frozen=True)
class Decision:
    allow: bool
    scope_tenant_id: Optional[str] = None
    reason: Optional[str] = None

    @property
    def covers_all_tenants(self) -> bool:
        return self.allow and self.scope_tenant_id == ALL_TENANTS

    def permits_tenant(self, tenant_id: Optional[str]) -> bool:
        """True when a row owned by tenant_id falls inside this decision's scope."""
        if not self.allow or not tenant_id:
            return False
        return self.scope_tenant_id == ALL_TENANTS or self.scope_tenant_id == tenant_id


def _deny(reason: str) -> Decision:
    return Decision(allow=False, scope_tenant_id=None, reason=reason)


def authorize(
    role: RoleResult,
    action: Action,
    resource_tenant_hint: Optional[str] = None,
    policy: Optional[AccessPolicy] = None,
) -> Decision:
    policy = policy or AccessPolicy.from_settings()
    action = Action(action)
    decision = _decide(role, action, resource_tenant_hint, policy)

    if not decision.allow:
        logger.info("Access denied", action=action.value, reason=decision.reason, **describe(role))
    return decision


def _decide(
    role: RoleResult,
    action: Action,
    hint: Optional[str],
    policy: AccessPolicy,
) -> Decision:
    if isinstance(role, Unauthenticated):
        return _deny("unauthenticated")

    if action in OWN_DATA_ACTIONS:
        return Decision(allow=True, scope_tenant_id=None)

    if isinstance(role, PlatformSuperAdmin):
        if action in PLATFORM_ACTIONS:
            return Decision(allow=True, scope_tenant_id=ALL_TENANTS)
        if action in TENANT_READ_ACTIONS or action in TENANT_WRITE_ACTIONS:
            if not hint or hint == ALL_TENANTS:
                return _deny("explicit target tenant required")
            if action in TENANT_WRITE_ACTIONS and not policy.super_admin_tenant_writes:
                return _deny("super-admin tenant writes disabled")
            logger.info(
                "Super-admin acting on tenant",
                action=action.value,
                user_id=role.user_id,
                target_tenant_id=hint,
            )
            return Decision(allow=True, scope_tenant_id=hint)
        return _deny("super-admin is not a conversation participant")

    if isinstance(role, TenantMember):
        if action in PLATFORM_ACTIONS:
            return _deny("platform admin only")
        if action in TENANT_WRITE_ACTIONS and not role.is_admin:
            if action in ADMIN_ONLY_ACTIONS or not policy.staff_can_write:
                return _deny("tenant admin only")
        return Decision(allow=True, scope_tenant_id=role.tenant_id)

    # Applicant
    return _deny("no tenant membership")


# ── Conversations ─────────────────────────────────────────────────────────────

class ConversationOwner(Protocol):
    organization_id: str
    applicant_user_id: str


@dataclass(frozen=True)
class ConversationAccess:
    allow: bool
    sender_type: Optional[str] = None  # SenderType value


def authorize_conversation(
    role: RoleResult,
    owner: Optional[ConversationOwner],
    action: Action = Action.READ_CONVERSATION,
    policy: Optional[AccessPolicy] = None,
) -> ConversationAccess:
    """
    Two independent paths, either one grants access:
      company    caller's resolved tenant owns the application (staff or admin)
      applicant  caller is the application's applicant
    Fails closed when the owning application could not be loaded.
    """
    action = Action(action)
    if action not in CONVERSATION_ACTIONS:
        raise ValueError(f"{action.value} is not a conversation action")

    if owner is None or isinstance(role, Unauthenticated):
        return ConversationAccess(allow=False)

    company_decision = _decide(role, action, None, policy or AccessPolicy.from_settings())
    is_company = company_decision.permits_tenant(owner.organization_id)

    caller_id = user_id_of(role)
    is_applicant = caller_id is not None and caller_id == owner.applicant_user_id

    if is_company:
        return ConversationAccess(allow=True, sender_type=SenderType.company.value)
    if is_applicant:
        return ConversationAccess(allow=True, sender_type=SenderType.applicant.value)

    logger.info("Conversation access denied", action=action.value, **describe(role))
    return ConversationAccess(allow=False)


# ── Document links ────────────────────────────────────────────────────────────

class ApplicantFiles(Protocol):
    id: str
    resume_path: Optional[str]
    cv_path: Optional[str]


class ApplicationFiles(Protocol):
    organization_id: str
    include_documents: bool
    resume_path: Optional[str]
    cv_path: Optional[str]


def _path_for(record, kind: str) -> Optional[str]:
    if kind not in FILE_KINDS:
        raise ValueError(f"Unknown file kind: {kind}")
    return record.resume_path if kind == "resume" else record.cv_path


def authorize_profile_file(
    role: RoleResult, profile: Optional[ApplicantFiles], kind: str
) -> Optional[str]:
    """Storage path the caller may get a signed URL for, or None."""
    caller_id = user_id_of(role)
    if profile is None or caller_id is None or profile.id != caller_id:
        return None
    return _path_for(profile, kind)


def authorize_application_file(
    decision: Decision, application: Optional[ApplicationFiles], kind: str
) -> Optional[str]:
    """
    Storage path of a document attached to an application, or None.

    `decision` must come from authorize(..., READ_TENANT_APPLICATIONS).
    Documents count as attached only when the applicant opted in AND a path
    was copied onto the application.
    """
    if application is None or not decision.permits_tenant(application.organization_id):
        return None
    if not application.include_documents:
        return None
    return _path_for(application, kind)
