"""Tests for organization onboarding and its compensation path."""

from contextlib import asynccontextmanager

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from jobboard.models import AdminUser, Organization, User
from jobboard.schemas.organization import OrganizationCreate
from jobboard.services import user_service
from jobboard.services.organization_service import OrganizationService


class FakeSession:
    """Records adds/deletes; flush number `fail_on` raises `error`."""

    def __init__(self, fail_on: int | None = None, error: Exception | None = None) -> None:
        self.fail_on = fail_on
        self.error = error
        self.flushes = 0
        self.added: list = []
        self.deleted: list = []

    @asynccontextmanager
    async def begin_nested(self):
        yield self

    def add(self, obj) -> None:
        self.added.append(obj)

    async def delete(self, obj) -> None:
        self.deleted.append(obj)

    async def flush(self) -> None:
        self.flushes += 1
        if self.flushes == self.fail_on:
            raise self.error

    async def refresh(self, obj) -> None:
        return None


def _integrity_error() -> IntegrityError:
    return IntegrityError("INSERT ...", {}, Exception("UNIQUE constraint failed"))


@pytest.fixture(autouse=True)
def fast_hashing(monkeypatch) -> None:
    monkeypatch.setattr(user_service, "hash_password", lambda password: f"hashed:{password}")


@pytest.fixture
def payload() -> OrganizationCreate:
    return OrganizationCreate(
        name="Acme Corp",
        slug="Acme Corp",
        category="it",
        admin_email="Owner@Acme.com",
        admin_password="s3cret-pass",
    )


class TestCreateWithAdmin:
    """Tests for the three-step onboarding."""

    async def test_creates_all_three_rows(self, payload) -> None:
        session = FakeSession()

        org, user, admin = await OrganizationService.create_with_admin(session, payload)

        assert org.slug == "acme-corp"
        assert user.email == "owner@acme.com"
        assert admin.role == "tenant_admin"
        assert admin.user_id == user.id
        assert admin.organization_id == org.id
        assert session.deleted == []

    async def test_membership_failure_removes_user_then_org(self, payload) -> None:
        """Third step fails: earlier rows are deleted newest first."""
        session = FakeSession(fail_on=3, error=_integrity_error())

        with pytest.raises(ValueError, match="organization admin"):
            await OrganizationService.create_with_admin(session, payload)

        assert [type(obj) for obj in session.deleted] == [User, Organization]

    async def test_user_failure_removes_org(self, payload) -> None:
        """Duplicate admin email: the new organization is rolled back."""
        session = FakeSession(fail_on=2, error=_integrity_error())

        with pytest.raises(ValueError, match="already registered"):
            await OrganizationService.create_with_admin(session, payload)

        assert [type(obj) for obj in session.deleted] == [Organization]

    async def test_slug_conflict_deletes_nothing(self, payload) -> None:
        session = FakeSession(fail_on=1, error=_integrity_error())

        with pytest.raises(ValueError, match="acme-corp"):
            await OrganizationService.create_with_admin(session, payload)

        assert session.deleted == []

    async def test_store_failure_propagates_after_compensation(self, payload) -> None:
        """Non-conflict errors are re-raised unchanged once cleanup ran."""
        error = OperationalError("INSERT ...", {}, Exception("connection reset"))
        session = FakeSession(fail_on=3, error=error)

        with pytest.raises(OperationalError):
            await OrganizationService.create_with_admin(session, payload)

        assert [type(obj) for obj in session.deleted] == [User, Organization]
        assert not any(isinstance(obj, AdminUser) for obj in session.deleted)
