# Standard library imports
from datetime import datetime
from uuid import UUID

# Third-party imports
from pydantic import BaseModel, ConfigDict, EmailStr, Field

# Local application imports
from civicdesk.models.complaints.enums import ComplaintCategory, ComplaintPriority, ComplaintStatus
from civicdesk.schemas.complaints.department_schemas import DepartmentResponse


class ComplaintCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    category: ComplaintCategory
    location_address: str = Field(..., min_length=1)
    location_lat: float | None = Field(None, ge=-90, le=90)
    location_lng: float | None = Field(None, ge=-180, le=180)
    citizen_name: str | None = Field(None, max_length=200)
    citizen_email: EmailStr | None = None
    citizen_phone: str | None = Field(None, max_length=50)
    image_urls: list[str] = Field(default_factory=list)


class ComplaintFilters(BaseModel):
    """Immutable filter set for complaint listings."""

    model_config = ConfigDict(frozen=True)

    status: tuple[ComplaintStatus, ...] = ()
    priority: tuple[ComplaintPriority, ...] = ()
    category: tuple[ComplaintCategory, ...] = ()
    department_id: UUID | None = None
    search: str | None = None
    date_from: datetime | None = None
    date_to: datetime | None = None


class StatusChangeRequest(BaseModel):
    status: ComplaintStatus


class ComplaintResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    description: str
    category: ComplaintCategory
    priority: ComplaintPriority
    status: ComplaintStatus
    location_address: str
    location_lat: float | None
    location_lng: float | None
    department_id: UUID | None
    citizen_name: str | None
    citizen_email: str | None
    citizen_phone: str | None
    image_urls: list[str] | None
    priority_score: int
    urgency_factor: float
    severity_factor: float
    impact_factor: float
    similar_complaints_count: int
    created_at: datetime
    updated_at: datetime
    assigned_at: datetime | None
    resolved_at: datetime | None
    department: DepartmentResponse | None = None


class ComplaintMarker(BaseModel):
    id: UUID
    title: str
    priority: ComplaintPriority
    status: ComplaintStatus
    lat: float
    lng: float
    category: ComplaintCategory
