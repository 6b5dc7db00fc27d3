# Standard library imports
from uuid import UUID

# Third-party imports
from sqlalchemy import and_, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

# Local application imports
from civicdesk.core.monitoring.logging import get_contextual_logger
from civicdesk.models.complaints.complaint import Complaint
from civicdesk.models.complaints.enums import ComplaintStatus
from civicdesk.schemas.complaints.complaint_schemas import ComplaintCreate, ComplaintFilters, ComplaintMarker
from civicdesk.services.complaints.lifecycle import LifecyclePolicy, apply_status_update, build_status_update
from civicdesk.services.complaints.routing import resolve_department
from civicdesk.services.complaints.scoring import score_complaint
from civicdesk.settings import settings
from civicdesk.utils.time_utils import as_utc


def build_filter_criteria(filters: ComplaintFilters | None) -> list:
    if filters is None:
        return []

    criteria = []
    if filters.status:
        criteria.append(Complaint.status.in_(filters.status))
    if filters.priority:
        criteria.append(Complaint.priority.in_(filters.priority))
    if filters.category:
        criteria.append(Complaint.category.in_(filters.category))
    if filters.department_id:
        criteria.append(Complaint.department_id == filters.department_id)
    if filters.search:
        pattern = f"%{filters.search}%"
        criteria.append(or_(Complaint.title.ilike(pattern), Complaint.description.ilike(pattern)))
    if filters.date_from:
        criteria.append(Complaint.created_at >= as_utc(filters.date_from))
    if filters.date_to:
        criteria.append(Complaint.created_at <= as_utc(filters.date_to))
    return criteria


async def get_complaint(db: AsyncSession, complaint_id: UUID) -> Complaint | None:
    result = await db.execute(
        select(Complaint)
        .options(selectinload(Complaint.department))
        .where(Complaint.id == complaint_id)
        .execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()


async def list_complaints(
    db: AsyncSession,
    filters: ComplaintFilters | None = None,
    limit: int | None = None,
) -> list[Complaint]:
    """Complaints matching ``filters``, highest priority score first, newest first within a score."""
    query = (
        select(Complaint)
        .options(selectinload(Complaint.department))
        .order_by(Complaint.priority_score.desc(), Complaint.created_at.desc())
        .limit(limit or settings.COMPLAINTS_DEFAULT_LIMIT)
    )
    criteria = build_filter_criteria(filters)
    if criteria:
        query = query.where(and_(*criteria))

    result = await db.execute(query)
    return list(result.scalars().all())


async def count_complaints(db: AsyncSession, *criteria) -> int:
    query = select(func.count(Complaint.id))
    if criteria:
        query = query.where(and_(*criteria))
    result = await db.execute(query)
    return result.scalar() or 0


async def create_complaint(db: AsyncSession, complaint_data: ComplaintCreate) -> Complaint:
    """
    Score, route and store a new complaint.

    The priority score and tier come from the category and text, the
    department from the first catalog entry registered for the category.
    The complaint always starts as "submitted".
    """
    score, priority = score_complaint(complaint_data.category, complaint_data.title, complaint_data.description)
    department = await resolve_department(db, complaint_data.category)

    new_complaint = Complaint(
        **complaint_data.model_dump(),
        priority=priority,
        priority_score=score,
        status=ComplaintStatus.SUBMITTED,
        department_id=department.id if department else None,
    )

    db.add(new_complaint)
    try:
        await db.commit()
    except Exception:
        await db.rollback()
        raise

    log = get_contextual_logger(__name__, complaint_id=new_complaint.id)
    if department is None:
        log.warning(f"No department registered for category '{complaint_data.category.value}'")
    log.info(f"Complaint created with priority {priority.value} (score {score})")

    # Reload with the department relationship for the response
    return await get_complaint(db, new_complaint.id)  # type: ignore[return-value]


async def update_complaint_status(
    db: AsyncSession,
    complaint: Complaint,
    new_status: ComplaintStatus,
    policy: LifecyclePolicy | None = None,
) -> Complaint:
    """
    Move a complaint to ``new_status``, stamping the lifecycle timestamps.

    Raises:
        InvalidStatusTransitionError: if the configured policy rejects the change.
    """
    previous = ComplaintStatus(complaint.status)
    update = build_status_update(complaint, new_status, policy=policy)
    apply_status_update(complaint, update)

    try:
        await db.commit()
    except Exception:
        await db.rollback()
        raise

    get_contextual_logger(__name__, complaint_id=complaint.id).info(
        f"Status changed from {previous.value} to {update.status.value}"
    )
    return await get_complaint(db, complaint.id)  # type: ignore[return-value]


async def list_complaint_markers(db: AsyncSession, limit: int | None = None) -> list[ComplaintMarker]:
    result = await db.execute(
        select(
            Complaint.id,
            Complaint.title,
            Complaint.priority,
            Complaint.status,
            Complaint.location_lat,
            Complaint.location_lng,
            Complaint.category,
        )
        .where(Complaint.location_lat.isnot(None), Complaint.location_lng.isnot(None))
        .limit(limit or settings.MARKERS_LIMIT)
    )
    return [
        ComplaintMarker(
            id=row.id,
            title=row.title,
            priority=row.priority,
            status=row.status,
            lat=row.location_lat,
            lng=row.location_lng,
            category=row.category,
        )
        for row in result.all()
    ]
