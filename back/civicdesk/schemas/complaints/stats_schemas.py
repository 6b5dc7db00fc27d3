# Standard library imports
from typing import Literal
from uuid import UUID

# Third-party imports
from pydantic import BaseModel

PerformanceBand = Literal["excellent", "good", "needs_improvement"]


class DashboardStats(BaseModel):
    total_complaints: int
    critical_complaints: int
    high_priority_complaints: int
    resolved_today: int
    avg_resolution_time: float
    pending_complaints: int


class DepartmentPerformance(BaseModel):
    department_id: UUID
    department_name: str
    total_complaints: int
    resolved_complaints: int
    pending_complaints: int
    avg_resolution_time_hours: float
    avg_rating: float
    resolution_rate: int
    performance_band: PerformanceBand


class BestPerformingDepartment(BaseModel):
    department_id: UUID
    department_name: str
    resolution_rate: int
    resolved_complaints: int


class HighVolumeDepartment(BaseModel):
    department_id: UUID
    department_name: str
    pending_complaints: int


class PerformanceInsights(BaseModel):
    best_performing: BestPerformingDepartment | None
    needs_attention: list[str]
    high_volume: list[HighVolumeDepartment]


class PerformanceSummary(BaseModel):
    """Totals across all departments for the performance page header."""

    total_complaints: int
    resolved_complaints: int
    pending_complaints: int
    resolution_rate: int
    avg_rating: float
    avg_resolution_time_hours: float


class PerformanceOverview(BaseModel):
    departments: list[DepartmentPerformance]
    summary: PerformanceSummary
    insights: PerformanceInsights
