"""
Complaint lifecycle: submitted -> assigned -> in_progress -> resolved -> closed.

Status changes stamp ``assigned_at`` when entering "assigned" and
``resolved_at`` when entering "resolved" or "closed". Which transitions are
accepted depends on the configured policy:

- ``permissive``: any status may follow any other.
- ``forward_only``: the status may stay or move forward, never backward.
- ``strict``: only the next step in the lifecycle (plus resolved -> closed).
"""

# Standard library imports
from datetime import datetime
from typing import Literal

# Local application imports
from civicdesk.core.exceptions import InvalidStatusTransitionError
from civicdesk.models.complaints.complaint import Complaint
from civicdesk.models.complaints.enums import ComplaintStatus
from civicdesk.schemas.complaints.status_schemas import (
    AssignUpdate,
    ReopenUpdate,
    ResolveUpdate,
    StartWorkUpdate,
    StatusUpdate,
)
from civicdesk.settings import settings
from civicdesk.utils.time_utils import utc_now

LifecyclePolicy = Literal["permissive", "forward_only", "strict"]

LIFECYCLE_ORDER: tuple[ComplaintStatus, ...] = (
    ComplaintStatus.SUBMITTED,
    ComplaintStatus.ASSIGNED,
    ComplaintStatus.IN_PROGRESS,
    ComplaintStatus.RESOLVED,
    ComplaintStatus.CLOSED,
)

OPEN_STATUSES: tuple[ComplaintStatus, ...] = (
    ComplaintStatus.SUBMITTED,
    ComplaintStatus.ASSIGNED,
    ComplaintStatus.IN_PROGRESS,
)
CLOSED_STATUSES: tuple[ComplaintStatus, ...] = (
    ComplaintStatus.RESOLVED,
    ComplaintStatus.CLOSED,
)

STRICT_TRANSITIONS: dict[ComplaintStatus, frozenset[ComplaintStatus]] = {
    ComplaintStatus.SUBMITTED: frozenset({ComplaintStatus.ASSIGNED}),
    ComplaintStatus.ASSIGNED: frozenset({ComplaintStatus.IN_PROGRESS}),
    ComplaintStatus.IN_PROGRESS: frozenset({ComplaintStatus.RESOLVED}),
    ComplaintStatus.RESOLVED: frozenset({ComplaintStatus.CLOSED}),
    ComplaintStatus.CLOSED: frozenset(),
}


def is_transition_allowed(
    current: ComplaintStatus,
    new: ComplaintStatus,
    policy: LifecyclePolicy = "permissive",
) -> bool:
    if policy == "permissive":
        return True
    if policy == "forward_only":
        return LIFECYCLE_ORDER.index(new) >= LIFECYCLE_ORDER.index(current)
    if policy == "strict":
        return new in STRICT_TRANSITIONS[current]
    raise ValueError(f"Unknown lifecycle policy: {policy}")


def build_status_update(
    complaint: Complaint,
    new_status: ComplaintStatus,
    *,
    now: datetime | None = None,
    policy: LifecyclePolicy | None = None,
) -> StatusUpdate:
    """
    Validate a status change against the policy and build the update to persist.

    ``assigned_at`` keeps its first value when a complaint is assigned again.

    Raises:
        InvalidStatusTransitionError: if the policy rejects the transition.
    """
    policy = policy or settings.LIFECYCLE_POLICY
    current = ComplaintStatus(complaint.status)
    new_status = ComplaintStatus(new_status)

    if not is_transition_allowed(current, new_status, policy):
        raise InvalidStatusTransitionError(
            f"Cannot move complaint from '{current.value}' to '{new_status.value}'",
            details={"current": current.value, "requested": new_status.value, "policy": policy},
        )

    now = now or utc_now()
    if new_status == ComplaintStatus.ASSIGNED:
        return AssignUpdate(status=new_status, assigned_at=complaint.assigned_at or now)
    if new_status in CLOSED_STATUSES:
        return ResolveUpdate(status=new_status, resolved_at=now)
    if new_status == ComplaintStatus.IN_PROGRESS:
        return StartWorkUpdate(status=new_status)
    return ReopenUpdate(status=new_status)


def apply_status_update(complaint: Complaint, update: StatusUpdate) -> Complaint:
    for field, value in update.as_values().items():
        setattr(complaint, field, value)
    return complaint
