"""
models/application.py
---------------------
A job application.

organization_id is copied from the job at creation time so that every
tenant check is a single-column comparison on the application row itself,
with no JOIN through jobs.
"""

from enum import Enum as PyEnum
from typing import Optional

from sqlalchemy import Boolean, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from jobboard.db.base import Base, TenantScoped, TimestampMixin, UUIDPrimaryKey


class ApplicationStatus(str, PyEnum):
    new = "new"
    in_progress = "in_progress"
    done = "done"
    rejected = "rejected"
    archived = "archived"


class Application(Base, UUIDPrimaryKey, TenantScoped, TimestampMixin):
    __tablename__ = "applications"

    job_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True
    )
    organization_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("organizations.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    applicant_user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    # Snapshot of the applicant profile at submission time
    applicant_name: Mapped[str] = mapped_column(String(255), nullable=False)
    applicant_email: Mapped[str] = mapped_column(String(320), nullable=False)
    applicant_phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    applicant_message: Mapped[str] = mapped_column(Text, nullable=False)

    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=ApplicationStatus.new.value
    )
    memo: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    include_documents: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    resume_path: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)
    cv_path: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)

    def __repr__(self) -> str:
        return f"<Application id={self.id} status={self.status}>"
