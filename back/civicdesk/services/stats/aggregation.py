"""
Pure aggregation helpers behind the dashboard and performance views.

Rounding follows the dashboard convention of rounding halves up
(``floor(x * 10 + 0.5) / 10``), not Python's round-half-to-even.
"""

# Standard library imports
from collections.abc import Iterable, Sequence
from datetime import datetime
import math

# Local application imports
from civicdesk.schemas.complaints.stats_schemas import (
    BestPerformingDepartment,
    DepartmentPerformance,
    HighVolumeDepartment,
    PerformanceBand,
    PerformanceInsights,
    PerformanceSummary,
)
from civicdesk.utils.time_utils import hours_between

NEEDS_ATTENTION_RATE = 60  # percent
EXCELLENT_RATE = 80  # percent
HIGH_VOLUME_PENDING = 5


def round_half_up(value: float, digits: int = 0) -> float:
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def round_one_decimal(value: float) -> float:
    return round_half_up(value, 1)


def average_resolution_hours(samples: Iterable[tuple[datetime, datetime]]) -> float:
    """Mean of (resolved_at - created_at) in hours, one decimal; 0 for no samples."""
    durations = [hours_between(created_at, resolved_at) for created_at, resolved_at in samples]
    if not durations:
        return 0
    return round_one_decimal(sum(durations) / len(durations))


def average_rating(ratings: Sequence[int]) -> float:
    if not ratings:
        return 0
    return round_one_decimal(sum(ratings) / len(ratings))


def resolution_ratio(resolved: int, total: int) -> float:
    return resolved / total if total > 0 else 0


def resolution_rate_percent(resolved: int, total: int) -> int:
    return int(round_half_up(resolution_ratio(resolved, total) * 100))


def performance_band(rate_percent: int) -> PerformanceBand:
    if rate_percent >= EXCELLENT_RATE:
        return "excellent"
    if rate_percent >= NEEDS_ATTENTION_RATE:
        return "good"
    return "needs_improvement"


def best_performing(performance: Sequence[DepartmentPerformance]) -> DepartmentPerformance | None:
    """Department with the highest resolved/total ratio; the first one wins a tie."""
    best: DepartmentPerformance | None = None
    for current in performance:
        if best is None or resolution_ratio(current.resolved_complaints, current.total_complaints) > resolution_ratio(
            best.resolved_complaints, best.total_complaints
        ):
            best = current
    return best


def needs_attention(performance: Sequence[DepartmentPerformance]) -> list[DepartmentPerformance]:
    return [
        department
        for department in performance
        if resolution_ratio(department.resolved_complaints, department.total_complaints) * 100 < NEEDS_ATTENTION_RATE
        and department.pending_complaints > 0
    ]


def high_volume(performance: Sequence[DepartmentPerformance]) -> list[DepartmentPerformance]:
    return [department for department in performance if department.pending_complaints > HIGH_VOLUME_PENDING]


def build_insights(performance: Sequence[DepartmentPerformance]) -> PerformanceInsights:
    best = best_performing(performance)
    return PerformanceInsights(
        best_performing=(
            BestPerformingDepartment(
                department_id=best.department_id,
                department_name=best.department_name,
                resolution_rate=resolution_rate_percent(best.resolved_complaints, best.total_complaints),
                resolved_complaints=best.resolved_complaints,
            )
            if best is not None
            else None
        ),
        needs_attention=[department.department_name for department in needs_attention(performance)],
        high_volume=[
            HighVolumeDepartment(
                department_id=department.department_id,
                department_name=department.department_name,
                pending_complaints=department.pending_complaints,
            )
            for department in high_volume(performance)
        ],
    )


def mean_of_reported(values: Iterable[float]) -> float:
    """Mean over the values above zero, one decimal; a zero means nothing was reported."""
    reported = [value for value in values if value > 0]
    if not reported:
        return 0
    return round_one_decimal(sum(reported) / len(reported))


def build_summary(performance: Sequence[DepartmentPerformance]) -> PerformanceSummary:
    total = sum(department.total_complaints for department in performance)
    resolved = sum(department.resolved_complaints for department in performance)
    return PerformanceSummary(
        total_complaints=total,
        resolved_complaints=resolved,
        pending_complaints=sum(department.pending_complaints for department in performance),
        resolution_rate=resolution_rate_percent(resolved, total),
        avg_rating=mean_of_reported(department.avg_rating for department in performance),
        avg_resolution_time_hours=mean_of_reported(department.avg_resolution_time_hours for department in performance),
    )
