"""
api/routes/team.py
------------------
Organization team management (secondary membership table).

GET  /admin/team  — Members of the caller's organization (admin or staff).
POST /admin/team  — Add or re-role a member (tenant admin only).
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from jobboard.access.policy import Action
from jobboard.core.validators import optional_uuid, require_uuid
from jobboard.dependencies import Context
from jobboard.schemas.team import MemberRead, MemberUpsert
from jobboard.services.member_service import MemberService

router = APIRouter(prefix="/admin/team", tags=["Admin: Team"])


@router.get("", response_model=list[MemberRead], summary="List team members")
async def list_team(
    ctx: Context,
    organization_id: Optional[str] = Query(default=None),
) -> list[MemberRead]:
    hint = optional_uuid(organization_id, "organization_id")
    decision = await ctx.require(Action.READ_TENANT_MEMBERS, hint)
    members = await MemberService.list_members(ctx.db, decision)
    return [MemberRead.model_validate(m) for m in members]


@router.post(
    "",
    response_model=MemberRead,
    status_code=status.HTTP_201_CREATED,
    summary="Add or update a team member",
)
async def upsert_member(
    body: MemberUpsert,
    ctx: Context,
    organization_id: Optional[str] = Query(default=None),
) -> MemberRead:
    user_id = require_uuid(body.user_id, "user_id")
    hint = optional_uuid(organization_id, "organization_id")
    decision = await ctx.require(Action.WRITE_TENANT_MEMBERS, hint)
    try:
        member = await MemberService.upsert_member(ctx.db, decision, user_id, body)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))
    return MemberRead.model_validate(member)
