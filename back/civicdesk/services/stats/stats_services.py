"""
Dashboard and department performance statistics.

Each figure is an independent read-only query run in its own session, so the
queries for one view are issued concurrently and assembled once all of them
complete; the first failing query cancels the rest. Nothing is cached: every
call recomputes from the current store.
"""

# Standard library imports
import asyncio
from collections.abc import Awaitable
from datetime import datetime
from typing import Any
from uuid import UUID

# Third-party imports
from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

# Local application imports
from civicdesk.core.monitoring.logging import get_logger
from civicdesk.models.complaints.complaint import Complaint
from civicdesk.models.complaints.department import Department
from civicdesk.models.complaints.enums import ComplaintPriority
from civicdesk.models.complaints.feedback import Feedback
from civicdesk.schemas.complaints.stats_schemas import DashboardStats, DepartmentPerformance, PerformanceOverview
from civicdesk.services.complaints.complaint_services import count_complaints
from civicdesk.services.complaints.lifecycle import CLOSED_STATUSES, OPEN_STATUSES
from civicdesk.services.stats.aggregation import (
    average_rating,
    average_resolution_hours,
    build_insights,
    build_summary,
    performance_band,
    resolution_rate_percent,
)
from civicdesk.settings import settings
from civicdesk.utils.time_utils import start_of_local_day

logger = get_logger(__name__)

SessionFactory = async_sessionmaker[AsyncSession]


async def _count(session_factory: SessionFactory, *criteria) -> int:
    async with session_factory() as db:
        return await count_complaints(db, *criteria)


async def _resolution_samples(session_factory: SessionFactory, limit: int, *criteria) -> list[tuple[datetime, datetime]]:
    """Most recently resolved complaints as (created_at, resolved_at) pairs."""
    async with session_factory() as db:
        result = await db.execute(
            select(Complaint.created_at, Complaint.resolved_at)
            .where(and_(Complaint.resolved_at.isnot(None), *criteria))
            .order_by(Complaint.resolved_at.desc())
            .limit(limit)
        )
        return [(row.created_at, row.resolved_at) for row in result.all()]


async def _feedback_ratings(session_factory: SessionFactory, department_id: UUID) -> list[int]:
    async with session_factory() as db:
        result = await db.execute(
            select(Feedback.rating)
            .join(Complaint, Feedback.complaint_id == Complaint.id)
            .where(Complaint.department_id == department_id)
        )
        return list(result.scalars().all())


async def run_concurrently(*reads: Awaitable[Any]) -> list[Any]:
    """
    Await independent reads concurrently and return their results in order.

    The first failing read cancels the others and is raised as is, so store
    errors keep their own type instead of arriving wrapped in an ExceptionGroup.
    """
    try:
        async with asyncio.TaskGroup() as group:
            tasks = [group.create_task(read) for read in reads]
    except ExceptionGroup as failures:
        raise failures.exceptions[0] from None
    return [task.result() for task in tasks]


async def get_dashboard_stats(session_factory: SessionFactory, now: datetime | None = None) -> DashboardStats:
    open_status = Complaint.status.in_(OPEN_STATUSES)
    today = start_of_local_day(now)

    total, critical, high, resolved_today, pending, samples = await run_concurrently(
        _count(session_factory),
        _count(session_factory, Complaint.priority == ComplaintPriority.CRITICAL, open_status),
        _count(session_factory, Complaint.priority == ComplaintPriority.HIGH, open_status),
        _count(session_factory, Complaint.resolved_at >= today, Complaint.status.in_(CLOSED_STATUSES)),
        _count(session_factory, open_status),
        _resolution_samples(session_factory, settings.STATS_RESOLUTION_SAMPLE_SIZE),
    )

    return DashboardStats(
        total_complaints=total,
        critical_complaints=critical,
        high_priority_complaints=high,
        resolved_today=resolved_today,
        avg_resolution_time=average_resolution_hours(samples),
        pending_complaints=pending,
    )


async def _department_performance(session_factory: SessionFactory, department: Department) -> DepartmentPerformance:
    in_department = Complaint.department_id == department.id

    total, resolved, pending, samples, ratings = await run_concurrently(
        _count(session_factory, in_department),
        _count(session_factory, in_department, Complaint.status.in_(CLOSED_STATUSES)),
        _count(session_factory, in_department, Complaint.status.in_(OPEN_STATUSES)),
        _resolution_samples(session_factory, settings.DEPARTMENT_RESOLUTION_SAMPLE_SIZE, in_department),
        _feedback_ratings(session_factory, department.id),
    )

    rate = resolution_rate_percent(resolved, total)
    return DepartmentPerformance(
        department_id=department.id,
        department_name=department.name,
        total_complaints=total,
        resolved_complaints=resolved,
        pending_complaints=pending,
        avg_resolution_time_hours=average_resolution_hours(samples),
        avg_rating=average_rating(ratings),
        resolution_rate=rate,
        performance_band=performance_band(rate),
    )


async def get_department_performance(session_factory: SessionFactory) -> list[DepartmentPerformance]:
    """Performance metrics for every department, in catalog (name) order."""
    async with session_factory() as db:
        result = await db.execute(select(Department).order_by(Department.name))
        departments = list(result.scalars().all())

    performance = []
    for department in departments:
        performance.append(await _department_performance(session_factory, department))

    logger.debug(f"Computed performance for {len(performance)} departments")
    return performance


async def get_performance_overview(session_factory: SessionFactory) -> PerformanceOverview:
    performance = await get_department_performance(session_factory)
    return PerformanceOverview(
        departments=performance,
        summary=build_summary(performance),
        insights=build_insights(performance),
    )
