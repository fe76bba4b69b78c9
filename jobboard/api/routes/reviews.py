"""
api/routes/reviews.py
---------------------
Organization reviews.

GET  /reviews?organization_id=  — Public. Reviews of one organization, newest first.
POST /reviews                   — Post a review (signed-in users).
"""

from fastapi import APIRouter, Query, status

from jobboard.access.policy import Action
from jobboard.core.validators import require_uuid
from jobboard.dependencies import Context
from jobboard.schemas.review import (
    ReviewCreate,
    ReviewCreatedResponse,
    ReviewListResponse,
    ReviewRead,
)
from jobboard.services.review_service import ReviewService

router = APIRouter(prefix="/reviews", tags=["Reviews"])


@router.get("", response_model=ReviewListResponse, summary="List reviews of an organization")
async def list_reviews(
    ctx: Context, organization_id: str = Query(default="")
) -> ReviewListResponse:
    organization_id = require_uuid(organization_id, "organization_id")
    reviews = await ReviewService.list_for_organization(ctx.db, organization_id)
    return ReviewListResponse(reviews=[ReviewRead.model_validate(r) for r in reviews])


@router.post(
    "",
    response_model=ReviewCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Review an organization",
)
async def create_review(body: ReviewCreate, ctx: Context) -> ReviewCreatedResponse:
    organization_id = require_uuid(body.organization_id, "organization_id")
    await ctx.require(Action.WRITE_OWN_APPLICANT_DATA)
    user = await ctx.require_user()
    review = await ReviewService.create(ctx.db, user, organization_id, body)
    return ReviewCreatedResponse(review=ReviewRead.model_validate(review))
