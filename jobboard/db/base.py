"""
db/base.py
----------
Declarative base and shared mixins.

TimestampMixin: Adds created_at / updated_at columns to any model.
UUIDPrimaryKey: String(36) UUID primary key. UUIDs are preferable over
                integer sequences in multi-tenant systems because they
                prevent tenant enumeration attacks.
TenantScoped:   Marks a model whose rows belong to exactly one tenant and
                names the column the row-scope enforcer filters on.
"""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""
    pass


def generate_uuid() -> str:
    return str(uuid.uuid4())


class TimestampMixin:
    """Adds server-side created_at and updated_at timestamps."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


class UUIDPrimaryKey:
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)


class TenantScoped:
    """Rows filtered by `__tenant_key__` on every scoped read and write."""

    __tenant_key__: str = "organization_id"
