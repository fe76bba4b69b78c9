"""Tests for saved jobs."""

from sqlalchemy import func, select

from jobboard.models import Favorite
from tests.factories import auth_headers, make_applicant, make_job, make_org, new_id


async def _count(session_factory, user_id: str) -> int:
    async with session_factory() as fresh:
        return await fresh.scalar(
            select(func.count()).select_from(Favorite).where(Favorite.applicant_user_id == user_id)
        )


class TestFavorites:
    """Tests for /favorites."""

    async def test_save_twice_keeps_one_row(self, client, db, session_factory) -> None:
        org = await make_org(db)
        job = await make_job(db, org, title="Backend Engineer")
        applicant = await make_applicant(db)

        first = await client.post(
            "/favorites", json={"job_id": job.id}, headers=auth_headers(applicant)
        )
        second = await client.post(
            "/favorites", json={"job_id": job.id}, headers=auth_headers(applicant)
        )
        listed = await client.get("/favorites", headers=auth_headers(applicant))

        assert first.status_code == 200
        assert first.json() == {"ok": True}
        assert second.status_code == 200
        assert await _count(session_factory, applicant.id) == 1
        [item] = listed.json()["items"]
        assert item["job_id"] == job.id
        assert item["job_title"] == "Backend Engineer"
        assert item["organization_name"] == org.name

    async def test_list_is_own_only(self, client, db) -> None:
        org = await make_org(db)
        job = await make_job(db, org)
        owner = await make_applicant(db)
        other = await make_applicant(db)
        await client.post("/favorites", json={"job_id": job.id}, headers=auth_headers(owner))

        response = await client.get("/favorites", headers=auth_headers(other))

        assert response.json() == {"items": []}

    async def test_unpublished_job_not_found(self, client, db) -> None:
        org = await make_org(db)
        draft = await make_job(db, org, status="draft")
        applicant = await make_applicant(db)

        response = await client.post(
            "/favorites", json={"job_id": draft.id}, headers=auth_headers(applicant)
        )

        assert response.status_code == 404

    async def test_delete_removes_only_callers_row(self, client, db, session_factory) -> None:
        org = await make_org(db)
        job = await make_job(db, org)
        owner = await make_applicant(db)
        other = await make_applicant(db)
        await client.post("/favorites", json={"job_id": job.id}, headers=auth_headers(owner))
        await client.post("/favorites", json={"job_id": job.id}, headers=auth_headers(other))

        response = await client.delete(f"/favorites/{job.id}", headers=auth_headers(owner))

        assert response.status_code == 200
        assert await _count(session_factory, owner.id) == 0
        assert await _count(session_factory, other.id) == 1

    async def test_malformed_id_is_400_even_anonymous(self, client) -> None:
        response = await client.delete("/favorites/not-a-uuid")

        assert response.status_code == 400

    async def test_anonymous_gets_401(self, client) -> None:
        saved = await client.post("/favorites", json={"job_id": new_id()})
        removed = await client.delete(f"/favorites/{new_id()}")

        assert saved.status_code == 401
        assert removed.status_code == 401
