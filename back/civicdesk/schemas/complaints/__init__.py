from .complaint_schemas import (
    ComplaintCreate,
    ComplaintFilters,
    ComplaintMarker,
    ComplaintResponse,
    StatusChangeRequest,
)
from .department_schemas import DepartmentResponse
from .feedback_schemas import FeedbackCreate, FeedbackResponse
from .stats_schemas import DashboardStats, DepartmentPerformance, PerformanceInsights, PerformanceOverview
from .status_schemas import AssignUpdate, ReopenUpdate, ResolveUpdate, StartWorkUpdate, StatusUpdate
from .upload_schemas import ImageUploadResponse, UploadedImage

__all__ = [
    "AssignUpdate",
    "ComplaintCreate",
    "ComplaintFilters",
    "ComplaintMarker",
    "ComplaintResponse",
    "DashboardStats",
    "DepartmentPerformance",
    "DepartmentResponse",
    "FeedbackCreate",
    "FeedbackResponse",
    "ImageUploadResponse",
    "PerformanceInsights",
    "PerformanceOverview",
    "ReopenUpdate",
    "ResolveUpdate",
    "StartWorkUpdate",
    "StatusChangeRequest",
    "StatusUpdate",
    "UploadedImage",
]
