"""
services/favorite_service.py
----------------------------
Saved jobs. Every statement is keyed by the caller's own user id, so one
user can neither see nor remove another user's favorites.
"""

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from jobboard.core.errors import ResourceNotFoundError
from jobboard.core.logging import get_logger
from jobboard.models.favorite import Favorite
from jobboard.models.job import Job, JobStatus
from jobboard.models.organization import Organization
from jobboard.models.user import User

logger = get_logger(__name__)


class FavoriteService:

    @staticmethod
    async def _find(db: AsyncSession, user_id: str, job_id: str) -> Favorite | None:
        result = await db.execute(
            select(Favorite).where(
                Favorite.applicant_user_id == user_id, Favorite.job_id == job_id
            )
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def add(db: AsyncSession, user: User, job_id: str) -> Favorite:
        """Save a published job. Saving it again is a no-op."""
        job = (await db.execute(select(Job).where(Job.id == job_id))).scalar_one_or_none()
        if job is None or job.status != JobStatus.published.value:
            raise ResourceNotFoundError()

        existing = await FavoriteService._find(db, user.id, job_id)
        if existing is not None:
            return existing

        favorite = Favorite(applicant_user_id=user.id, job_id=job_id)
        try:
            async with db.begin_nested():
                db.add(favorite)
        except IntegrityError:
            existing = await FavoriteService._find(db, user.id, job_id)
            if existing is None:
                raise
            return existing
        logger.info("Job saved", user_id=user.id, job_id=job_id)
        return favorite

    @staticmethod
    async def remove(db: AsyncSession, user: User, job_id: str) -> None:
        await db.execute(
            delete(Favorite).where(
                Favorite.applicant_user_id == user.id, Favorite.job_id == job_id
            )
        )

    @staticmethod
    async def list_mine(
        db: AsyncSession, user: User
    ) -> list[tuple[Favorite, Job, Organization]]:
        result = await db.execute(
            select(Favorite, Job, Organization)
            .join(Job, Job.id == Favorite.job_id)
            .join(Organization, Organization.id == Job.organization_id)
            .where(Favorite.applicant_user_id == user.id)
            .order_by(Favorite.created_at.desc())
        )
        return [tuple(row) for row in result.all()]
