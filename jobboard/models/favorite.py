"""
models/favorite.py
------------------
Jobs an applicant has saved for later. Keyed by the owning user, never by
tenant: a favorite is the applicant's own data.
"""

from sqlalchemy import ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from jobboard.db.base import Base, TimestampMixin, UUIDPrimaryKey


class Favorite(Base, UUIDPrimaryKey, TimestampMixin):
    __tablename__ = "favorites"
    __table_args__ = (
        UniqueConstraint("applicant_user_id", "job_id", name="uq_favorites_user_job"),
    )

    applicant_user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    job_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False
    )

    def __repr__(self) -> str:
        return f"<Favorite user={self.applicant_user_id} job={self.job_id}>"
