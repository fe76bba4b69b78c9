"""
models/user.py
--------------
Authentication identity and applicant profile.

User carries nothing but credentials: roles and tenant binding live in the
membership tables (models/membership.py) and are resolved per request.
The hashed_password column stores bcrypt hashes only; plain text is
never stored and never logged.
"""

from typing import Optional

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from jobboard.db.base import Base, TimestampMixin, UUIDPrimaryKey


class User(Base, UUIDPrimaryKey, TimestampMixin):
    __tablename__ = "users"

    email: Mapped[str] = mapped_column(
        String(320), unique=True, nullable=False, index=True
    )
    hashed_password: Mapped[str] = mapped_column(String(255), nullable=False)

    applicant: Mapped[Optional["Applicant"]] = relationship(
        "Applicant", back_populates="user", uselist=False, cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email}>"


class Applicant(Base, TimestampMixin):
    """Job-seeker profile. Shares its primary key with the owning User."""

    __tablename__ = "applicants"

    id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), primary_key=True
    )
    display_name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    resume_path: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)
    cv_path: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)

    user: Mapped["User"] = relationship("User", back_populates="applicant")

    def __repr__(self) -> str:
        return f"<Applicant id={self.id}>"
