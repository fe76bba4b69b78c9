"""
services/review_service.py
--------------------------
Organization reviews: readable by anyone, written by signed-in users.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from jobboard.core.errors import ResourceNotFoundError
from jobboard.core.logging import get_logger
from jobboard.models.organization import Organization
from jobboard.models.review import OrganizationReview
from jobboard.models.user import User
from jobboard.schemas.review import ReviewCreate

logger = get_logger(__name__)


class ReviewService:

    @staticmethod
    async def list_for_organization(
        db: AsyncSession, organization_id: str
    ) -> list[OrganizationReview]:
        result = await db.execute(
            select(OrganizationReview)
            .where(OrganizationReview.organization_id == organization_id)
            .order_by(OrganizationReview.created_at.desc())
        )
        return list(result.scalars().all())

    @staticmethod
    async def create(
        db: AsyncSession, user: User, organization_id: str, data: ReviewCreate
    ) -> OrganizationReview:
        organization = await db.get(Organization, organization_id)
        if organization is None:
            raise ResourceNotFoundError()

        review = OrganizationReview(
            organization_id=organization.id,
            applicant_user_id=user.id,
            rating=data.rating,
            title=data.title,
            body=data.body,
        )
        db.add(review)
        await db.flush()
        await db.refresh(review)
        logger.info(
            "Review posted",
            review_id=review.id,
            tenant_id=organization.id,
            rating=review.rating,
        )
        return review
