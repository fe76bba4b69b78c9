"""Tests for role lookup across the two membership tables."""

from jobboard.access.lookup import resolve_role, role_from_rows
from jobboard.access.roles import (
    Applicant,
    MemberLevel,
    PlatformSuperAdmin,
    TenantMember,
    Unauthenticated,
)
from jobboard.models import AdminUser, OrganizationMember
from tests.factories import grant_admin_row, grant_member_row, make_org, make_user


class TestResolveRole:
    """Tests for resolve_role against a real database."""

    async def test_missing_user_id_is_unauthenticated(self, db) -> None:
        """No user id resolves to Unauthenticated without touching the tables."""
        assert await resolve_role(db, None) == Unauthenticated()
        assert await resolve_role(db, "") == Unauthenticated()

    async def test_user_without_membership_is_applicant(self, db) -> None:
        """A user with no membership row in either table is an applicant."""
        user = await make_user(db)

        assert await resolve_role(db, user.id) == Applicant(user_id=user.id)

    async def test_primary_tenant_admin(self, db) -> None:
        """A tenant_admin row with an organization binds the user to it as admin."""
        org = await make_org(db, "org-a")
        user = await make_user(db)
        await grant_admin_row(db, user, "tenant_admin", org.id)

        role = await resolve_role(db, user.id)

        assert role == TenantMember(user_id=user.id, tenant_id=org.id, level=MemberLevel.admin)

    async def test_super_admin_ignores_organization_on_row(self, db) -> None:
        """A super-admin row never scopes the user to a tenant."""
        org = await make_org(db)
        user = await make_user(db)
        await grant_admin_row(db, user, "platform_super_admin", org.id)

        assert await resolve_role(db, user.id) == PlatformSuperAdmin(user_id=user.id)

    async def test_malformed_primary_row_falls_through_to_secondary(self, db) -> None:
        """tenant_admin without organization is no match; secondary table decides."""
        org = await make_org(db)
        user = await make_user(db)
        await grant_admin_row(db, user, "tenant_admin", None)
        await grant_member_row(db, user, org.id, "tenant_staff")

        role = await resolve_role(db, user.id)

        assert role == TenantMember(user_id=user.id, tenant_id=org.id, level=MemberLevel.staff)

    async def test_malformed_primary_row_alone_is_applicant(self, db) -> None:
        """A malformed primary row never grants elevated access."""
        user = await make_user(db)
        await grant_admin_row(db, user, "tenant_admin", None)

        assert await resolve_role(db, user.id) == Applicant(user_id=user.id)

    async def test_secondary_staff(self, db) -> None:
        """Secondary-table staff row maps to a staff-level tenant member."""
        org = await make_org(db, "org-b")
        user = await make_user(db)
        await grant_member_row(db, user, org.id, "tenant_staff")

        role = await resolve_role(db, user.id)

        assert isinstance(role, TenantMember)
        assert role.tenant_id == org.id
        assert role.level is MemberLevel.staff

    async def test_secondary_admin(self, db) -> None:
        """Secondary-table admin row maps to an admin-level tenant member."""
        org = await make_org(db)
        user = await make_user(db)
        await grant_member_row(db, user, org.id, "tenant_admin")

        role = await resolve_role(db, user.id)

        assert role == TenantMember(user_id=user.id, tenant_id=org.id, level=MemberLevel.admin)

    async def test_primary_wins_over_secondary(self, db) -> None:
        """A valid primary tenant_admin row is authoritative."""
        org_a = await make_org(db)
        org_b = await make_org(db)
        user = await make_user(db)
        await grant_admin_row(db, user, "tenant_admin", org_a.id)
        await grant_member_row(db, user, org_b.id, "tenant_staff")

        role = await resolve_role(db, user.id)

        assert role == TenantMember(user_id=user.id, tenant_id=org_a.id, level=MemberLevel.admin)

    async def test_resolution_is_idempotent(self, db) -> None:
        """Two lookups with no membership change in between are equal."""
        org = await make_org(db)
        user = await make_user(db)
        await grant_member_row(db, user, org.id, "tenant_staff")

        assert await resolve_role(db, user.id) == await resolve_role(db, user.id)

    async def test_revoked_membership_takes_effect_immediately(self, db) -> None:
        """Nothing is cached: deleting the row changes the next lookup."""
        org = await make_org(db)
        user = await make_user(db)
        row = await grant_admin_row(db, user, "tenant_admin", org.id)
        assert isinstance(await resolve_role(db, user.id), TenantMember)

        await db.delete(row)
        await db.commit()

        assert await resolve_role(db, user.id) == Applicant(user_id=user.id)


class TestRoleFromRows:
    """Tests for the pure reconciliation step."""

    def test_legacy_member_roles_are_case_insensitive(self) -> None:
        """Bare 'Admin' / 'STAFF' values from older rows still resolve."""
        admin = OrganizationMember(organization_id="org-1", user_id="u1", role="Admin")
        staff = OrganizationMember(organization_id="org-1", user_id="u1", role="STAFF")

        assert role_from_rows("u1", None, admin).level is MemberLevel.admin
        assert role_from_rows("u1", None, staff).level is MemberLevel.staff

    def test_unknown_member_role_is_applicant(self) -> None:
        """Roles outside the enumeration grant nothing."""
        row = OrganizationMember(organization_id="org-1", user_id="u1", role="owner")

        assert role_from_rows("u1", None, row) == Applicant(user_id="u1")

    def test_unknown_primary_role_falls_through(self) -> None:
        """An unrecognised primary role defers to the secondary row."""
        admin_row = AdminUser(user_id="u1", role="viewer", organization_id="org-1")
        member_row = OrganizationMember(organization_id="org-2", user_id="u1", role="tenant_staff")

        role = role_from_rows("u1", admin_row, member_row)

        assert role == TenantMember(user_id="u1", tenant_id="org-2", level=MemberLevel.staff)
