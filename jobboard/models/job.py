"""
models/job.py
-------------
Job posting. Only `published` postings are visible outside the owning
organization.
"""

from enum import Enum as PyEnum
from typing import Optional

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from jobboard.db.base import Base, TenantScoped, TimestampMixin, UUIDPrimaryKey


class JobStatus(str, PyEnum):
    draft = "draft"
    published = "published"
    closed = "closed"


class Job(Base, UUIDPrimaryKey, TenantScoped, TimestampMixin):
    __tablename__ = "jobs"

    organization_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("organizations.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    location: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    employment_type: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    salary: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=JobStatus.draft.value, index=True
    )

    organization: Mapped["Organization"] = relationship(  # noqa: F821
        "Organization", back_populates="jobs"
    )

    def __repr__(self) -> str:
        return f"<Job id={self.id} status={self.status}>"
