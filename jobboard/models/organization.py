"""
models/organization.py
----------------------
Organization (tenant) ORM model.

An organization is the unit of data isolation. Jobs, applications and
conversations carry organization_id and are only ever read or written
through a tenant-scoped query.
"""

from typing import Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from jobboard.db.base import Base, TimestampMixin, UUIDPrimaryKey


class Organization(Base, UUIDPrimaryKey, TimestampMixin):
    __tablename__ = "organizations"
    # An organization row is its own tenant.
    __tenant_key__ = "id"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    category: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    jobs: Mapped[list["Job"]] = relationship(  # noqa: F821
        "Job", back_populates="organization", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<Organization id={self.id} slug={self.slug}>"
