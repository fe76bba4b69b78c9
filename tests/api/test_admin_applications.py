"""Tests for tenant-side application review."""

from jobboard.models import Application
from tests.factories import (
    auth_headers,
    make_applicant,
    make_application,
    make_job,
    make_org,
    make_super_admin,
    make_tenant_admin,
    make_tenant_staff,
    new_id,
)


async def _two_tenants(db):
    """Org A with an admin, org B with one application."""
    org_a = await make_org(db, "org-a")
    org_b = await make_org(db, "org-b")
    admin_a = await make_tenant_admin(db, org_a)
    job_b = await make_job(db, org_b)
    applicant = await make_applicant(db)
    application_b = await make_application(db, job_b, applicant)
    return org_a, org_b, admin_a, application_b


class TestReadApplications:
    """Tests for listing and reading received applications."""

    async def test_list_excludes_other_tenants(self, client, db) -> None:
        org_a, _, admin_a, _ = await _two_tenants(db)
        job_a = await make_job(db, org_a)
        applicant = await make_applicant(db)
        own = await make_application(db, job_a, applicant)

        response = await client.get("/admin/applications", headers=auth_headers(admin_a))

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 1
        assert body["items"][0]["id"] == own.id

    async def test_cross_tenant_read_looks_missing(self, client, db) -> None:
        """Foreign and unknown ids produce identical responses."""
        _, _, admin_a, application_b = await _two_tenants(db)

        foreign = await client.get(
            f"/admin/applications/{application_b.id}", headers=auth_headers(admin_a)
        )
        unknown = await client.get(
            f"/admin/applications/{new_id()}", headers=auth_headers(admin_a)
        )

        assert foreign.status_code == unknown.status_code == 404
        assert foreign.json() == unknown.json() == {"detail": "Not found"}

    async def test_foreign_hint_ignored_for_members(self, client, db) -> None:
        _, org_b, admin_a, application_b = await _two_tenants(db)

        response = await client.get(
            f"/admin/applications/{application_b.id}",
            params={"organization_id": org_b.id},
            headers=auth_headers(admin_a),
        )

        assert response.status_code == 404

    async def test_super_admin_reads_with_target(self, client, db) -> None:
        _, org_b, _, application_b = await _two_tenants(db)
        operator = await make_super_admin(db)

        untargeted = await client.get(
            f"/admin/applications/{application_b.id}", headers=auth_headers(operator)
        )
        targeted = await client.get(
            f"/admin/applications/{application_b.id}",
            params={"organization_id": org_b.id},
            headers=auth_headers(operator),
        )

        assert untargeted.status_code == 403
        assert targeted.status_code == 200
        assert targeted.json()["organization_id"] == org_b.id


class TestUpdateStatus:
    """Tests for PATCH /admin/applications/{id}/status."""

    async def test_admin_updates_own(self, client, db) -> None:
        org = await make_org(db)
        admin = await make_tenant_admin(db, org)
        job = await make_job(db, org)
        application = await make_application(db, job, await make_applicant(db))

        response = await client.patch(
            f"/admin/applications/{application.id}/status",
            json={"status": "in_progress", "memo": "Call on Monday"},
            headers=auth_headers(admin),
        )

        assert response.status_code == 200
        assert response.json()["status"] == "in_progress"
        assert response.json()["memo"] == "Call on Monday"

    async def test_cross_tenant_update_leaves_row_unchanged(
        self, client, db, session_factory
    ) -> None:
        _, _, admin_a, application_b = await _two_tenants(db)

        response = await client.patch(
            f"/admin/applications/{application_b.id}/status",
            json={"status": "rejected"},
            headers=auth_headers(admin_a),
        )

        assert response.status_code == 404
        async with session_factory() as session:
            stored = await session.get(Application, application_b.id)
        assert stored.status == "new"

    async def test_staff_denied_by_default(self, client, db) -> None:
        org = await make_org(db)
        staff = await make_tenant_staff(db, org)
        job = await make_job(db, org)
        application = await make_application(db, job, await make_applicant(db))

        response = await client.patch(
            f"/admin/applications/{application.id}/status",
            json={"status": "done"},
            headers=auth_headers(staff),
        )

        assert response.status_code == 403

    async def test_invalid_status_rejected(self, client, db) -> None:
        org = await make_org(db)
        admin = await make_tenant_admin(db, org)
        job = await make_job(db, org)
        application = await make_application(db, job, await make_applicant(db))

        response = await client.patch(
            f"/admin/applications/{application.id}/status",
            json={"status": "hired"},
            headers=auth_headers(admin),
        )

        assert response.status_code == 422


class TestApplicationFileUrl:
    """Tests for GET /admin/applications/{id}/file-url."""

    async def test_attached_document(self, client, db) -> None:
        org = await make_org(db)
        staff = await make_tenant_staff(db, org)
        job = await make_job(db, org)
        applicant = await make_applicant(db, resume_path="a/resume.pdf")
        application = await make_application(
            db, job, applicant, include_documents=True, resume_path="a/resume.pdf"
        )

        response = await client.get(
            f"/admin/applications/{application.id}/file-url",
            params={"kind": "resume"},
            headers=auth_headers(staff),
        )

        assert response.status_code == 200
        assert "/applicant-files/a/resume.pdf?token=" in response.json()["url"]

    async def test_documents_not_attached(self, client, db) -> None:
        org = await make_org(db)
        admin = await make_tenant_admin(db, org)
        job = await make_job(db, org)
        application = await make_application(
            db, job, await make_applicant(db), include_documents=False, resume_path="a/r.pdf"
        )

        response = await client.get(
            f"/admin/applications/{application.id}/file-url",
            params={"kind": "resume"},
            headers=auth_headers(admin),
        )

        assert response.status_code == 404

    async def test_other_tenant(self, client, db) -> None:
        _, _, admin_a, application_b = await _two_tenants(db)

        response = await client.get(
            f"/admin/applications/{application_b.id}/file-url",
            params={"kind": "resume"},
            headers=auth_headers(admin_a),
        )

        assert response.status_code == 404

    async def test_bad_kind(self, client, db) -> None:
        org = await make_org(db)
        admin = await make_tenant_admin(db, org)

        response = await client.get(
            f"/admin/applications/{new_id()}/file-url",
            params={"kind": "avatar"},
            headers=auth_headers(admin),
        )

        assert response.status_code == 400
