import asyncio
import uuid

from civicdesk.core.db import run_with_new_session
from civicdesk.models.complaints.enums import ComplaintCategory
from civicdesk.services.departments.department_services import (
    DEFAULT_DEPARTMENTS,
    list_departments,
    seed_default_departments,
)
from tests.conftest import api_client, make_department, seed

API = "/api/v1"


def test_list_departments_sorted_by_name(app, session_factory):
    seed(
        session_factory,
        make_department("Water", ComplaintCategory.UTILITIES),
        make_department("Health", ComplaintCategory.HEALTH, contact_email="health@city.gov"),
        make_department("Roads", ComplaintCategory.INFRASTRUCTURE),
    )

    async def _run():
        async with api_client(app) as client:
            return await client.get(f"{API}/departments")

    resp = asyncio.run(_run())
    assert resp.status_code == 200
    assert [d["name"] for d in resp.json()] == ["Health", "Roads", "Water"]
    assert resp.json()[0]["contact_email"] == "health@city.gov"
    assert resp.json()[0]["category"] == "health"


def test_get_department(app, session_factory):
    (roads,) = seed(session_factory, make_department("Roads", ComplaintCategory.INFRASTRUCTURE))

    async def _run():
        async with api_client(app) as client:
            return (
                await client.get(f"{API}/departments/{roads.id}"),
                await client.get(f"{API}/departments/{uuid.uuid4()}"),
            )

    found, missing = asyncio.run(_run())
    assert found.status_code == 200
    assert found.json()["name"] == "Roads"
    assert missing.status_code == 404
    assert missing.json()["error"]["code"] == "not_found"
    assert missing.json()["error"]["message"] == "Department not found"


def test_seed_default_departments_only_once(session_factory):
    async def _run():
        async with session_factory() as session:
            first = await seed_default_departments(session)
            second = await seed_default_departments(session)
            departments = await list_departments(session)
            return first, second, departments

    first, second, departments = asyncio.run(_run())
    assert first == len(DEFAULT_DEPARTMENTS)
    assert second == 0
    assert {d.category for d in departments} == set(ComplaintCategory)


def test_health_check(app):
    async def _run():
        async with api_client(app) as client:
            return await client.get("/health")

    resp = asyncio.run(_run())
    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"


def test_seeding_through_a_fresh_session(session_factory):
    async def _run():
        created = await run_with_new_session(seed_default_departments, session_factory=session_factory)
        departments = await run_with_new_session(list_departments, session_factory=session_factory)
        return created, departments

    created, departments = asyncio.run(_run())
    assert created == len(DEFAULT_DEPARTMENTS)
    assert [d.name for d in departments] == sorted(DEFAULT_DEPARTMENTS.values())
