"""Tests for application message threads."""

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


async def _thread_setup(db):
    org = await make_org(db)
    staff = await make_tenant_staff(db, org)
    job = await make_job(db, org)
    applicant = await make_applicant(db)
    application = await make_application(db, job, applicant)
    return org, staff, applicant, application


class TestThreadAccess:
    """Tests for who may open a thread."""

    async def test_applicant_opens_empty_thread(self, client, db) -> None:
        org, _, applicant, application = await _thread_setup(db)

        response = await client.get(
            "/messages",
            params={"application_id": application.id},
            headers=auth_headers(applicant),
        )

        assert response.status_code == 200
        body = response.json()
        assert body["conversation"]["application_id"] == application.id
        assert body["conversation"]["organization_id"] == org.id
        assert body["messages"] == []

    async def test_other_applicant_gets_404(self, client, db) -> None:
        _, _, _, application = await _thread_setup(db)
        stranger = await make_applicant(db)

        response = await client.get(
            "/messages",
            params={"application_id": application.id},
            headers=auth_headers(stranger),
        )

        assert response.status_code == 404

    async def test_member_of_other_tenant_gets_404(self, client, db) -> None:
        _, _, _, application = await _thread_setup(db)
        other_admin = await make_tenant_admin(db, await make_org(db))

        response = await client.get(
            "/messages",
            params={"application_id": application.id},
            headers=auth_headers(other_admin),
        )

        assert response.status_code == 404

    async def test_super_admin_gets_404(self, client, db) -> None:
        _, _, _, application = await _thread_setup(db)
        operator = await make_super_admin(db)

        response = await client.get(
            "/messages",
            params={"application_id": application.id},
            headers=auth_headers(operator),
        )

        assert response.status_code == 404

    async def test_unknown_application_fails_closed(self, client, db) -> None:
        _, staff, _, _ = await _thread_setup(db)

        response = await client.get(
            "/messages", params={"application_id": new_id()}, headers=auth_headers(staff)
        )

        assert response.status_code == 404

    async def test_anonymous_gets_401(self, client, db) -> None:
        _, _, _, application = await _thread_setup(db)

        response = await client.get("/messages", params={"application_id": application.id})

        assert response.status_code == 401

    async def test_malformed_id_is_400_even_anonymous(self, client) -> None:
        response = await client.get("/messages", params={"application_id": "abc"})

        assert response.status_code == 400
        assert response.json() == {"detail": "Invalid application_id"}


class TestPostMessage:
    """Tests for POST /messages."""

    async def test_both_sides_post_in_order(self, client, db) -> None:
        _, staff, applicant, application = await _thread_setup(db)

        first = await client.post(
            "/messages",
            json={"application_id": application.id, "body": "Thanks for applying"},
            headers=auth_headers(staff),
        )
        second = await client.post(
            "/messages",
            json={"application_id": application.id, "body": "Happy to talk"},
            headers=auth_headers(applicant),
        )
        thread = await client.get(
            "/messages",
            params={"application_id": application.id},
            headers=auth_headers(applicant),
        )

        assert first.status_code == 201
        assert first.json()["sender_type"] == "company"
        assert first.json()["sender_user_id"] == staff.id
        assert second.status_code == 201
        assert second.json()["sender_type"] == "applicant"
        assert [m["body"] for m in thread.json()["messages"]] == [
            "Thanks for applying",
            "Happy to talk",
        ]

    async def test_stranger_cannot_post(self, client, db) -> None:
        _, _, _, application = await _thread_setup(db)
        stranger = await make_applicant(db)

        response = await client.post(
            "/messages",
            json={"application_id": application.id, "body": "Hi"},
            headers=auth_headers(stranger),
        )

        assert response.status_code == 404

    async def test_blank_body_rejected(self, client, db) -> None:
        _, _, applicant, application = await _thread_setup(db)

        response = await client.post(
            "/messages",
            json={"application_id": application.id, "body": "   "},
            headers=auth_headers(applicant),
        )

        assert response.status_code == 422
