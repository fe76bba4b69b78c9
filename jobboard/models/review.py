"""
models/review.py
----------------
Public reviews of an organization, written by signed-in users.
"""

from typing import Optional

from sqlalchemy import CheckConstraint, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from jobboard.db.base import Base, TenantScoped, TimestampMixin, UUIDPrimaryKey


class OrganizationReview(Base, UUIDPrimaryKey, TenantScoped, TimestampMixin):
    __tablename__ = "organization_reviews"
    __table_args__ = (
        CheckConstraint("rating BETWEEN 1 AND 5", name="ck_organization_reviews_rating"),
    )

    organization_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("organizations.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    applicant_user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    title: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    body: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<OrganizationReview id={self.id} rating={self.rating}>"
