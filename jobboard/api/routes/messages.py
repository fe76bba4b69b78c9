"""
api/routes/messages.py
----------------------
Applicant ↔ company message threads, one per application.

GET  /messages?application_id=  — Thread (created on first access).
POST /messages                  — Post into a thread. The sender type is
                                  "company" for members of the owning
                                  organization, "applicant" otherwise.

Callers who are neither the applicant nor a member of the owning
organization get 404, as do unknown application ids.
"""

from fastapi import APIRouter, Query, status

from jobboard.access.policy import Action
from jobboard.access.roles import Unauthenticated
from jobboard.core.errors import NotAuthenticatedError
from jobboard.core.validators import require_uuid
from jobboard.dependencies import Context
from jobboard.schemas.conversation import (
    ConversationRead,
    MessageCreate,
    MessageRead,
    ThreadResponse,
)
from jobboard.services.conversation_service import ConversationService

router = APIRouter(prefix="/messages", tags=["Messages"])


@router.get("", response_model=ThreadResponse, summary="Read the thread of an application")
async def get_thread(
    ctx: Context,
    application_id: str = Query(default=""),
) -> ThreadResponse:
    application_id = require_uuid(application_id, "application_id")
    role = await ctx.role()
    if isinstance(role, Unauthenticated):
        raise NotAuthenticatedError()

    conversation, _ = await ConversationService.open(
        ctx.db, role, application_id, Action.READ_CONVERSATION, ctx.policy
    )
    messages = await ConversationService.list_messages(ctx.db, conversation)
    return ThreadResponse(
        conversation=ConversationRead.model_validate(conversation),
        messages=[MessageRead.model_validate(m) for m in messages],
    )


@router.post(
    "",
    response_model=MessageRead,
    status_code=status.HTTP_201_CREATED,
    summary="Post a message to the thread of an application",
)
async def post_message(body: MessageCreate, ctx: Context) -> MessageRead:
    application_id = require_uuid(body.application_id, "application_id")
    role = await ctx.role()
    if isinstance(role, Unauthenticated):
        raise NotAuthenticatedError()

    message = await ConversationService.post(
        ctx.db, role, application_id, body.body, ctx.policy
    )
    return MessageRead.model_validate(message)
