"""
access/context.py
-----------------
Per-request access context.

Identity and role are resolved lazily, at most once per request, and the
results live only on this object. Handlers validate their input first and
then call `require()`, so malformed requests never reach the auth or
membership lookups.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from jobboard.access.lookup import resolve_role
from jobboard.access.policy import ALL_TENANTS, AccessPolicy, Action, Decision, authorize
from jobboard.access.roles import PlatformSuperAdmin, RoleResult, Unauthenticated
from jobboard.access.scope import scoped_get
from jobboard.core.errors import ForbiddenError, NotAuthenticatedError
from jobboard.core.logging import bind_request_context
from jobboard.core.security import subject_from_token
from jobboard.models.organization import Organization
from jobboard.models.user import User

_UNSET = object()


class RequestContext:

    def __init__(
        self,
        db: AsyncSession,
        token: Optional[str],
        policy: Optional[AccessPolicy] = None,
    ) -> None:
        self.db = db
        self._token = token
        self.policy = policy or AccessPolicy.from_settings()
        self._user = _UNSET
        self._role = _UNSET

    async def current_user(self) -> Optional[User]:
        if self._user is _UNSET:
            user_id = subject_from_token(self._token)
            user = None
            if user_id:
                user = (
                    await self.db.execute(select(User).where(User.id == user_id))
                ).scalar_one_or_none()
            if user is not None:
                bind_request_context(user_id=user.id)
            self._user = user
        return self._user

    async def role(self) -> RoleResult:
        if self._role is _UNSET:
            user = await self.current_user()
            self._role = (
                await resolve_role(self.db, user.id) if user is not None else Unauthenticated()
            )
        return self._role

    async def require_user(self) -> User:
        user = await self.current_user()
        if user is None:
            raise NotAuthenticatedError()
        return user

    async def authorize(self, action: Action, tenant_hint: Optional[str] = None) -> Decision:
        return authorize(await self.role(), action, tenant_hint, self.policy)

    async def require(self, action: Action, tenant_hint: Optional[str] = None) -> Decision:
        """
        authorize(), turning a deny into 401 (no session) or 403 (whole route).
        A super-admin target that names no organization is a 404.
        """
        role = await self.role()
        if isinstance(role, Unauthenticated):
            raise NotAuthenticatedError()
        decision = authorize(role, action, tenant_hint, self.policy)
        if not decision.allow:
            raise ForbiddenError()
        target = decision.scope_tenant_id
        if isinstance(role, PlatformSuperAdmin) and target not in (None, ALL_TENANTS):
            # An explicit target must name a real organization.
            await scoped_get(self.db, Organization, target, decision)
        return decision
