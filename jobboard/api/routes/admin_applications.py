"""
api/routes/admin_applications.py
--------------------------------
Tenant-side application review.

GET   /admin/applications                 — Applications received.
GET   /admin/applications/{id}            — One application.
PATCH /admin/applications/{id}/status     — Change status / memo.
GET   /admin/applications/{id}/file-url   — Signed URL for an attached document.

Applications of other organizations are reported as 404, whether the id
exists or not.
"""

from typing import Optional

from fastapi import APIRouter, Query

from jobboard.access.policy import FILE_KINDS, Action, authorize_application_file
from jobboard.core.errors import InvalidInputError, ResourceNotFoundError
from jobboard.core.storage import signed_url_issuer
from jobboard.core.validators import optional_uuid, require_uuid
from jobboard.dependencies import Context
from jobboard.models.application import ApplicationStatus
from jobboard.schemas.application import (
    ApplicationListResponse,
    ApplicationRead,
    ApplicationStatusUpdate,
)
from jobboard.schemas.user import FileUrlResponse
from jobboard.services.application_service import ApplicationService

router = APIRouter(prefix="/admin/applications", tags=["Admin: Applications"])


@router.get("", response_model=ApplicationListResponse, summary="List received applications")
async def list_applications(
    ctx: Context,
    organization_id: Optional[str] = Query(default=None),
    job_id: Optional[str] = Query(default=None),
    status_filter: Optional[ApplicationStatus] = Query(default=None, alias="status"),
    skip: int = Query(default=0, ge=0),
    limit: int = Query(default=50, ge=1, le=200),
) -> ApplicationListResponse:
    hint = optional_uuid(organization_id, "organization_id")
    job_id = optional_uuid(job_id, "job_id")
    decision = await ctx.require(Action.READ_TENANT_APPLICATIONS, hint)
    total, items = await ApplicationService.list_for_tenant(
        ctx.db, decision, status=status_filter, job_id=job_id, skip=skip, limit=limit
    )
    return ApplicationListResponse(
        total=total, items=[ApplicationRead.from_row(a) for a in items]
    )


@router.get(
    "/{application_id}",
    response_model=ApplicationRead,
    summary="Get a received application",
)
async def get_application(
    application_id: str,
    ctx: Context,
    organization_id: Optional[str] = Query(default=None),
) -> ApplicationRead:
    application_id = require_uuid(application_id, "application id")
    hint = optional_uuid(organization_id, "organization_id")
    decision = await ctx.require(Action.READ_TENANT_APPLICATIONS, hint)
    application = await ApplicationService.get_for_tenant(ctx.db, decision, application_id)
    return ApplicationRead.from_row(application)


@router.patch(
    "/{application_id}/status",
    response_model=ApplicationRead,
    summary="Update application status",
)
async def update_status(
    application_id: str,
    body: ApplicationStatusUpdate,
    ctx: Context,
    organization_id: Optional[str] = Query(default=None),
) -> ApplicationRead:
    application_id = require_uuid(application_id, "application id")
    hint = optional_uuid(organization_id, "organization_id")
    decision = await ctx.require(Action.WRITE_TENANT_APPLICATIONS, hint)
    application = await ApplicationService.update_status(
        ctx.db, decision, application_id, body
    )
    return ApplicationRead.from_row(application)


@router.get(
    "/{application_id}/file-url",
    response_model=FileUrlResponse,
    summary="Signed download URL for a document attached to an application",
)
async def application_file_url(
    application_id: str,
    ctx: Context,
    kind: str = Query(default=""),
    organization_id: Optional[str] = Query(default=None),
) -> FileUrlResponse:
    application_id = require_uuid(application_id, "application id")
    hint = optional_uuid(organization_id, "organization_id")
    kind = kind.strip()
    if kind not in FILE_KINDS:
        raise InvalidInputError("kind must be resume or cv")

    decision = await ctx.require(Action.READ_TENANT_APPLICATIONS, hint)
    application = await ApplicationService.get_for_tenant(ctx.db, decision, application_id)

    path = authorize_application_file(decision, application, kind)
    if not path:
        raise ResourceNotFoundError("File not attached")
    return FileUrlResponse(
        url=signed_url_issuer.issue(path), expires_in=signed_url_issuer.expires_in
    )
