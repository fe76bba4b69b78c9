"""
api/routes/super_admin.py
-------------------------
Platform operator endpoints.

GET  /super/organizations       — All organizations.
POST /super/organizations       — Onboard an organization with its first admin.
GET  /super/organizations/{id}  — Organization with job/application/member counts.
"""

from fastapi import APIRouter, HTTPException, status

from jobboard.access.policy import Action
from jobboard.core.validators import require_uuid
from jobboard.dependencies import Context
from jobboard.models.membership import AdminRole
from jobboard.schemas.organization import (
    CreatedAdminRead,
    OrganizationCreate,
    OrganizationCreated,
    OrganizationRead,
    OrganizationSummary,
)
from jobboard.services.organization_service import OrganizationService

router = APIRouter(prefix="/super/organizations", tags=["Platform Admin"])


@router.get("", response_model=list[OrganizationRead], summary="List all organizations")
async def list_organizations(ctx: Context) -> list[OrganizationRead]:
    decision = await ctx.require(Action.PLATFORM_ADMIN_READ)
    orgs = await OrganizationService.list_organizations(ctx.db, decision)
    return [OrganizationRead.model_validate(o) for o in orgs]


@router.post(
    "",
    response_model=OrganizationCreated,
    status_code=status.HTTP_201_CREATED,
    summary="Onboard a new organization and its first admin",
)
async def create_organization(body: OrganizationCreate, ctx: Context) -> OrganizationCreated:
    await ctx.require(Action.PLATFORM_ADMIN_WRITE)
    try:
        org, user, admin = await OrganizationService.create_with_admin(ctx.db, body)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))

    return OrganizationCreated(
        organization=OrganizationRead.model_validate(org),
        created_admin_user=CreatedAdminRead(
            user_id=user.id,
            email=user.email,
            role=AdminRole.tenant_admin.value,
            organization_id=admin.organization_id,
        ),
    )


@router.get(
    "/{organization_id}",
    response_model=OrganizationSummary,
    summary="Organization details with counts",
)
async def get_organization(organization_id: str, ctx: Context) -> OrganizationSummary:
    organization_id = require_uuid(organization_id, "organization id")
    decision = await ctx.require(Action.PLATFORM_ADMIN_READ)
    summary = await OrganizationService.summarize(ctx.db, decision, organization_id)
    return OrganizationSummary(
        organization=OrganizationRead.model_validate(summary["organization"]),
        job_count=summary["job_count"],
        application_count=summary["application_count"],
        member_count=summary["member_count"],
    )
