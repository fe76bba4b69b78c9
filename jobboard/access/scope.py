"""
access/scope.py
---------------
Row-scope enforcement for tenant-owned tables.

Handlers never build `organization_id == ...` filters themselves. They take
a Decision from authorize() and pass their statement or target id through
one of these helpers:

  scoped_query         list/read statements: adds the tenant filter
  scoped_get           one row by id, inside the caller's scope
  scoped_write_target  one row by id for update/delete: the tenant id of the
                       *fetched* row is compared with the scope before the
                       row is handed back for mutation

Out-of-scope rows raise ResourceNotFoundError, the same outcome as a
missing row, so guessing ids reveals nothing about other tenants.
"""

from typing import Type, TypeVar

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from jobboard.access.policy import ALL_TENANTS, Decision
from jobboard.core.errors import ForbiddenError, ResourceNotFoundError
from jobboard.core.logging import get_logger

logger = get_logger("jobboard.access")

ModelT = TypeVar("ModelT")


def tenant_column(model):
    """Column holding the owning tenant id (see db.base.TenantScoped)."""
    key = getattr(model, "__tenant_key__", None)
    if key is None:
        raise TypeError(f"{model.__name__} is not tenant-scoped")
    return getattr(model, key)


def _require_scope(decision: Decision) -> str:
    if not decision.allow or not decision.scope_tenant_id:
        raise ForbiddenError()
    return decision.scope_tenant_id


def scoped_query(stmt: Select, model, decision: Decision) -> Select:
    """Attach the tenant filter for `model`, or none when the scope is ALL."""
    scope = _require_scope(decision)
    if scope == ALL_TENANTS:
        return stmt
    return stmt.where(tenant_column(model) == scope)


async def scoped_get(
    db: AsyncSession, model: Type[ModelT], resource_id: str, decision: Decision
) -> ModelT:
    if not decision.allow:
        raise ResourceNotFoundError()
    stmt = scoped_query(select(model).where(model.id == resource_id), model, decision)
    row = (await db.execute(stmt)).scalar_one_or_none()
    if row is None:
        raise ResourceNotFoundError()
    return row


async def scoped_write_target(
    db: AsyncSession, model: Type[ModelT], resource_id: str, decision: Decision
) -> ModelT:
    """
    Fetch-and-authorize in one step for a mutation.

    The row is locked (FOR UPDATE where the backend supports it) and its own
    tenant column is checked against the scope; the id alone is never
    trusted.
    """
    if not decision.allow:
        raise ResourceNotFoundError()
    _require_scope(decision)

    stmt = select(model).where(model.id == resource_id).with_for_update()
    row = (await db.execute(stmt)).scalar_one_or_none()
    if row is None:
        raise ResourceNotFoundError()

    owner = getattr(row, getattr(model, "__tenant_key__"))
    if not decision.permits_tenant(owner):
        logger.warning(
            "Cross-tenant write blocked",
            model=model.__name__,
            resource_id=resource_id,
            scope_tenant_id=decision.scope_tenant_id,
        )
        raise ResourceNotFoundError()
    return row
