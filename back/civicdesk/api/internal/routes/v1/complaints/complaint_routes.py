# Standard library imports
from datetime import datetime
from uuid import UUID

# Third-party imports
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from civicdesk.core.db import get_async_session
from civicdesk.dependancies.common import get_complaint_or_404
from civicdesk.models.complaints.complaint import Complaint
from civicdesk.models.complaints.enums import ComplaintCategory, ComplaintPriority, ComplaintStatus
from civicdesk.schemas.complaints.complaint_schemas import (
    ComplaintCreate,
    ComplaintFilters,
    ComplaintMarker,
    ComplaintResponse,
    StatusChangeRequest,
)
from civicdesk.services.complaints import complaint_services
from civicdesk.settings import settings

router = APIRouter(prefix="/complaints", tags=["Complaints"])


@router.post("", response_model=ComplaintResponse, status_code=201)
async def create_complaint(
    complaint_data: ComplaintCreate,
    db: AsyncSession = Depends(get_async_session),
):
    """Submit a new complaint; it is scored and routed to a department automatically"""
    complaint = await complaint_services.create_complaint(db, complaint_data)
    return ComplaintResponse.model_validate(complaint)


@router.get("", response_model=list[ComplaintResponse])
async def list_complaints(
    status: list[ComplaintStatus] | None = Query(None),
    priority: list[ComplaintPriority] | None = Query(None),
    category: list[ComplaintCategory] | None = Query(None),
    department_id: UUID | None = None,
    search: str | None = Query(None, max_length=200),
    date_from: datetime | None = None,
    date_to: datetime | None = None,
    limit: int = Query(settings.COMPLAINTS_DEFAULT_LIMIT, ge=1, le=settings.COMPLAINTS_MAX_LIMIT),
    db: AsyncSession = Depends(get_async_session),
):
    """List complaints with filters, highest priority first"""
    filters = ComplaintFilters(
        status=tuple(status or ()),
        priority=tuple(priority or ()),
        category=tuple(category or ()),
        department_id=department_id,
        search=search or None,
        date_from=date_from,
        date_to=date_to,
    )
    complaints = await complaint_services.list_complaints(db, filters, limit)
    return [ComplaintResponse.model_validate(complaint) for complaint in complaints]


@router.get("/markers", response_model=list[ComplaintMarker])
async def list_complaint_markers(db: AsyncSession = Depends(get_async_session)):
    """Map markers for complaints that have coordinates"""
    return await complaint_services.list_complaint_markers(db)


@router.get("/{complaint_id}", response_model=ComplaintResponse)
async def get_complaint(complaint: Complaint = Depends(get_complaint_or_404)):
    """Get complaint details"""
    return ComplaintResponse.model_validate(complaint)


@router.patch("/{complaint_id}/status", response_model=ComplaintResponse)
async def update_complaint_status(
    status_data: StatusChangeRequest,
    complaint: Complaint = Depends(get_complaint_or_404),
    db: AsyncSession = Depends(get_async_session),
):
    """Move a complaint through its lifecycle"""
    updated = await complaint_services.update_complaint_status(db, complaint, status_data.status)
    return ComplaintResponse.model_validate(updated)
