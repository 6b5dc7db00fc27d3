import asyncio
from datetime import timedelta

from sqlalchemy import text

from civicdesk.models.complaints.enums import ComplaintCategory, ComplaintPriority, ComplaintStatus
from civicdesk.utils.time_utils import utc_now
from tests.conftest import api_client, make_complaint, make_department, make_feedback, seed

API = "/api/v1"


def test_dashboard_endpoint(app, session_factory):
    now = utc_now()
    seed(
        session_factory,
        make_complaint(priority=ComplaintPriority.CRITICAL, created_at=now),
        make_complaint(
            status=ComplaintStatus.RESOLVED,
            created_at=now - timedelta(hours=2),
            resolved_at=now,
        ),
    )

    async def _run():
        async with api_client(app) as client:
            return await client.get(f"{API}/stats/dashboard"), await client.get(f"{API}/stats/dashboard")

    first, second = asyncio.run(_run())
    assert first.status_code == 200
    body = first.json()
    assert body["total_complaints"] == 2
    assert body["critical_complaints"] == 1
    assert body["pending_complaints"] == 1
    assert body["resolved_today"] == 1
    assert body["avg_resolution_time"] == 2.0
    assert second.json() == body


def test_performance_endpoints(app, session_factory):
    roads, water = seed(
        session_factory,
        make_department("Roads", ComplaintCategory.INFRASTRUCTURE),
        make_department("Water", ComplaintCategory.UTILITIES),
    )
    now = utc_now()
    (resolved, *_) = seed(
        session_factory,
        make_complaint(
            department_id=water.id,
            status=ComplaintStatus.RESOLVED,
            created_at=now - timedelta(hours=6),
            resolved_at=now,
        ),
        make_complaint(department_id=roads.id, status=ComplaintStatus.ASSIGNED),
    )
    seed(session_factory, make_feedback(resolved, 4))

    async def _run():
        async with api_client(app) as client:
            return await client.get(f"{API}/stats/departments"), await client.get(f"{API}/stats/performance")

    departments, overview = asyncio.run(_run())

    assert departments.status_code == 200
    water_perf = next(d for d in departments.json() if d["department_name"] == "Water")
    assert water_perf["avg_resolution_time_hours"] == 6.0
    assert water_perf["avg_rating"] == 4.0
    assert water_perf["resolution_rate"] == 100
    assert water_perf["performance_band"] == "excellent"

    assert overview.status_code == 200
    insights = overview.json()["insights"]
    assert insights["best_performing"]["department_name"] == "Water"
    assert insights["needs_attention"] == ["Roads"]
    assert insights["high_volume"] == []

    summary = overview.json()["summary"]
    assert summary["total_complaints"] == 2
    assert summary["resolved_complaints"] == 1
    assert summary["pending_complaints"] == 1
    assert summary["resolution_rate"] == 50
    # Roads has no ratings or resolved complaints, so only Water counts
    assert summary["avg_rating"] == 4.0
    assert summary["avg_resolution_time_hours"] == 6.0


def test_performance_store_failure_returns_503(app, session_factory):
    seed(session_factory, make_department("Roads", ComplaintCategory.INFRASTRUCTURE))

    async def _drop_feedback():
        async with session_factory() as session:
            await session.execute(text("DROP TABLE feedback"))
            await session.commit()

    async def _run():
        async with api_client(app) as client:
            return await client.get(f"{API}/stats/performance")

    asyncio.run(_drop_feedback())
    resp = asyncio.run(_run())
    assert resp.status_code == 503
    assert resp.json()["error"]["code"] == "store_unavailable"
