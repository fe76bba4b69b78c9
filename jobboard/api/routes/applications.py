"""
api/routes/applications.py
--------------------------
Applicant-side endpoints. Everything here is keyed by the caller's own
user id; no tenant scope is involved.

POST /applications               — Apply to a published job.
POST /applications/bulk          — Apply to several published jobs at once.
GET  /my/applications            — The caller's applications.
GET  /my/applications/{id}       — One of the caller's applications.
GET  /profile/file-url?kind=     — Signed URL for the caller's own resume/cv.
POST /profile/upload             — Upload the caller's resume or cv (multipart).
"""

from fastapi import APIRouter, File, Form, Query, UploadFile, status

from jobboard.access.policy import FILE_KINDS, Action, authorize_profile_file
from jobboard.core.errors import InvalidInputError, ResourceNotFoundError
from jobboard.core.storage import signed_url_issuer
from jobboard.core.validators import require_uuid
from jobboard.dependencies import Context
from jobboard.schemas.application import (
    ApplicationCreate,
    BulkApplicationCreate,
    BulkApplicationResponse,
    CreatedApplication,
    MyApplicationListResponse,
    MyApplicationRead,
)
from jobboard.schemas.user import FileUrlResponse, UploadResponse
from jobboard.services.application_service import ApplicationService
from jobboard.services.profile_service import ProfileService
from jobboard.services.user_service import UserService

router = APIRouter(tags=["Applications"])


@router.post(
    "/applications",
    response_model=MyApplicationRead,
    status_code=status.HTTP_201_CREATED,
    summary="Apply to a published job",
)
async def apply(body: ApplicationCreate, ctx: Context) -> MyApplicationRead:
    job_id = require_uuid(body.job_id, "job_id")
    await ctx.require(Action.WRITE_OWN_APPLICANT_DATA)
    user = await ctx.require_user()
    application = await ApplicationService.apply(ctx.db, user, job_id, body)
    return MyApplicationRead.model_validate(application)


@router.post(
    "/applications/bulk",
    response_model=BulkApplicationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Apply to several published jobs with one message",
)
async def apply_bulk(body: BulkApplicationCreate, ctx: Context) -> BulkApplicationResponse:
    await ctx.require(Action.WRITE_OWN_APPLICANT_DATA)
    user = await ctx.require_user()
    applications = await ApplicationService.apply_bulk(ctx.db, user, body)
    return BulkApplicationResponse(
        created=[CreatedApplication.model_validate(a) for a in applications]
    )


@router.get(
    "/my/applications",
    response_model=MyApplicationListResponse,
    summary="List my applications",
)
async def list_my_applications(
    ctx: Context,
    skip: int = Query(default=0, ge=0),
    limit: int = Query(default=20, ge=1, le=100),
) -> MyApplicationListResponse:
    await ctx.require(Action.READ_OWN_APPLICANT_DATA)
    user = await ctx.require_user()
    total, items = await ApplicationService.list_mine(ctx.db, user, skip=skip, limit=limit)
    return MyApplicationListResponse(
        total=total, items=[MyApplicationRead.model_validate(a) for a in items]
    )


@router.get(
    "/my/applications/{application_id}",
    response_model=MyApplicationRead,
    summary="Get one of my applications",
)
async def get_my_application(application_id: str, ctx: Context) -> MyApplicationRead:
    application_id = require_uuid(application_id, "application id")
    await ctx.require(Action.READ_OWN_APPLICANT_DATA)
    user = await ctx.require_user()
    application = await ApplicationService.get_mine(ctx.db, user, application_id)
    return MyApplicationRead.model_validate(application)


@router.get(
    "/profile/file-url",
    response_model=FileUrlResponse,
    summary="Signed download URL for my own resume or cv",
)
async def my_file_url(ctx: Context, kind: str = Query(default="")) -> FileUrlResponse:
    kind = kind.strip()
    if kind not in FILE_KINDS:
        raise InvalidInputError("kind must be resume or cv")

    await ctx.require(Action.READ_OWN_APPLICANT_DATA)
    user = await ctx.require_user()
    profile = await UserService.get_applicant(ctx.db, user.id)

    path = authorize_profile_file(await ctx.role(), profile, kind)
    if not path:
        raise ResourceNotFoundError("File not uploaded")
    return FileUrlResponse(
        url=signed_url_issuer.issue(path), expires_in=signed_url_issuer.expires_in
    )


@router.post(
    "/profile/upload",
    response_model=UploadResponse,
    summary="Upload my resume or cv",
)
async def upload_document(
    ctx: Context,
    file: UploadFile = File(...),
    kind: str = Form(default=""),
) -> UploadResponse:
    kind = kind.strip()
    if kind not in FILE_KINDS:
        raise InvalidInputError("kind must be resume or cv")

    await ctx.require(Action.WRITE_OWN_APPLICANT_DATA)
    user = await ctx.require_user()
    path = await ProfileService.save_document(ctx.db, user, kind, file)
    return UploadResponse(kind=kind, path=path)
