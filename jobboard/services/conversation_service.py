"""
services/conversation_service.py
--------------------------------
Applicant ↔ company message threads.

Access is decided against the *application* row, loaded by id alone, with
authorize_conversation's two paths (owning tenant member, or the
application's applicant). An unknown application id is denied, never
treated as an empty thread.
"""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from jobboard.access.policy import AccessPolicy, Action, authorize_conversation
from jobboard.access.roles import RoleResult, user_id_of
from jobboard.core.errors import ResourceNotFoundError
from jobboard.core.logging import get_logger
from jobboard.models.application import Application
from jobboard.models.conversation import Conversation, ConversationMessage

logger = get_logger(__name__)


class ConversationService:

    @staticmethod
    async def open(
        db: AsyncSession,
        role: RoleResult,
        application_id: str,
        action: Action = Action.READ_CONVERSATION,
        policy: AccessPolicy | None = None,
    ) -> tuple[Conversation, str]:
        """
        Authorize the caller and return (conversation, sender_type).
        The conversation row is created on first access.
        """
        application = (
            await db.execute(select(Application).where(Application.id == application_id))
        ).scalar_one_or_none()

        access = authorize_conversation(role, application, action, policy)
        if not access.allow:
            raise ResourceNotFoundError()

        conversation = await ConversationService._find(db, application.id)
        if conversation is None:
            conversation = await ConversationService.create(db, application)
        return conversation, access.sender_type

    @staticmethod
    async def _find(db: AsyncSession, application_id: str) -> Conversation | None:
        return (
            await db.execute(
                select(Conversation).where(Conversation.application_id == application_id)
            )
        ).scalar_one_or_none()

    @staticmethod
    async def create(db: AsyncSession, application: Application) -> Conversation:
        """
        Insert the thread for `application`. Two first accesses can race on
        the unique application_id; the loser gets the winner's row.
        """
        conversation = Conversation(
            application_id=application.id,
            organization_id=application.organization_id,
            applicant_user_id=application.applicant_user_id,
        )
        try:
            async with db.begin_nested():
                db.add(conversation)
        except IntegrityError:
            existing = await ConversationService._find(db, application.id)
            if existing is None:
                raise
            return existing
        logger.info(
            "Conversation created",
            conversation_id=conversation.id,
            application_id=application.id,
        )
        return conversation

    @staticmethod
    async def list_messages(
        db: AsyncSession, conversation: Conversation
    ) -> list[ConversationMessage]:
        result = await db.execute(
            select(ConversationMessage)
            .where(ConversationMessage.conversation_id == conversation.id)
            .order_by(ConversationMessage.created_at.asc())
        )
        return list(result.scalars().all())

    @staticmethod
    async def post(
        db: AsyncSession,
        role: RoleResult,
        application_id: str,
        body: str,
        policy: AccessPolicy | None = None,
    ) -> ConversationMessage:
        conversation, sender_type = await ConversationService.open(
            db, role, application_id, Action.WRITE_CONVERSATION, policy
        )
        message = ConversationMessage(
            conversation_id=conversation.id,
            sender_type=sender_type,
            sender_user_id=user_id_of(role),
            body=body,
        )
        db.add(message)
        await db.flush()
        await db.refresh(message)
        logger.info(
            "Message posted",
            conversation_id=conversation.id,
            sender_type=sender_type,
        )
        return message
