import asyncio
from datetime import timedelta
import uuid

from civicdesk.models.complaints.enums import ComplaintStatus
from civicdesk.utils.time_utils import utc_now
from tests.conftest import NOW, api_client, make_complaint, make_feedback, seed

API = "/api/v1"


def test_create_and_list_feedback(app, session_factory):
    (complaint,) = seed(session_factory, make_complaint(status=ComplaintStatus.RESOLVED, resolved_at=NOW))
    seed(session_factory, make_feedback(complaint, 2, comment="Slow", created_at=utc_now() - timedelta(days=1)))

    async def _run():
        async with api_client(app) as client:
            created = await client.post(
                f"{API}/complaints/{complaint.id}/feedback",
                json={"rating": 5, "response_time_rating": 4, "resolution_quality_rating": 5, "comment": "Fixed fast"},
            )
            listed = await client.get(f"{API}/complaints/{complaint.id}/feedback")
            return created, listed

    created, listed = asyncio.run(_run())

    assert created.status_code == 201
    assert created.json()["rating"] == 5
    assert created.json()["complaint_id"] == str(complaint.id)

    assert listed.status_code == 200
    assert [f["comment"] for f in listed.json()] == ["Fixed fast", "Slow"]


def test_feedback_only_requires_overall_rating(app, session_factory):
    (complaint,) = seed(session_factory, make_complaint())

    async def _run():
        async with api_client(app) as client:
            return await client.post(f"{API}/complaints/{complaint.id}/feedback", json={"rating": 3})

    resp = asyncio.run(_run())
    assert resp.status_code == 201
    assert resp.json()["response_time_rating"] is None
    assert resp.json()["comment"] is None


def test_feedback_rating_validation(app, session_factory):
    (complaint,) = seed(session_factory, make_complaint())

    async def _run():
        async with api_client(app) as client:
            url = f"{API}/complaints/{complaint.id}/feedback"
            return (
                await client.post(url, json={}),
                await client.post(url, json={"rating": 6}),
                await client.post(url, json={"rating": 0}),
                await client.post(url, json={"rating": 4, "resolution_quality_rating": 9}),
            )

    for resp in asyncio.run(_run()):
        assert resp.status_code == 400
        assert resp.json()["error"]["code"] == "bad_request"


def test_feedback_for_unknown_complaint(app):
    async def _run():
        async with api_client(app) as client:
            url = f"{API}/complaints/{uuid.uuid4()}/feedback"
            return await client.post(url, json={"rating": 4}), await client.get(url)

    for resp in asyncio.run(_run()):
        assert resp.status_code == 404
