# Third-party imports
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

# Local application imports
from civicdesk.core.db import get_session_factory
from civicdesk.schemas.complaints.stats_schemas import DashboardStats, DepartmentPerformance, PerformanceOverview
from civicdesk.services.stats import stats_services

router = APIRouter(prefix="/stats", tags=["Statistics"])


@router.get("/dashboard", response_model=DashboardStats)
async def get_dashboard_stats(session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory)):
    """Summary figures for the dashboard"""
    return await stats_services.get_dashboard_stats(session_factory)


@router.get("/departments", response_model=list[DepartmentPerformance])
async def get_department_performance(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
):
    """Per-department performance metrics"""
    return await stats_services.get_department_performance(session_factory)


@router.get("/performance", response_model=PerformanceOverview)
async def get_performance_overview(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
):
    """Per-department performance metrics with derived insights"""
    return await stats_services.get_performance_overview(session_factory)
