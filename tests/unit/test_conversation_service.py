"""Tests for lazy thread creation."""

from sqlalchemy import func, select

from jobboard.models import Conversation
from jobboard.services.conversation_service import ConversationService
from tests.factories import make_applicant, make_application, make_job, make_org


class TestCreate:
    """Tests for ConversationService.create."""

    async def test_first_create_inserts(self, db) -> None:
        org = await make_org(db)
        application = await make_application(db, await make_job(db, org), await make_applicant(db))

        conversation = await ConversationService.create(db, application)
        await db.commit()

        assert conversation.application_id == application.id
        assert conversation.organization_id == org.id

    async def test_losing_insert_returns_existing_row(self, db, session_factory) -> None:
        """A thread inserted by a concurrent request is reused, not duplicated."""
        org = await make_org(db)
        application = await make_application(db, await make_job(db, org), await make_applicant(db))
        async with session_factory() as other:
            winner = await ConversationService.create(other, application)
            await other.commit()
            winner_id = winner.id

        conversation = await ConversationService.create(db, application)
        await db.commit()

        count = await db.scalar(
            select(func.count())
            .select_from(Conversation)
            .where(Conversation.application_id == application.id)
        )
        assert conversation.id == winner_id
        assert count == 1
