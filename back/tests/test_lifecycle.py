from datetime import timedelta

import pytest

from civicdesk.core.exceptions import InvalidStatusTransitionError
from civicdesk.models.complaints.enums import ComplaintStatus
from civicdesk.schemas.complaints.status_schemas import AssignUpdate, ReopenUpdate, ResolveUpdate, StartWorkUpdate
from civicdesk.services.complaints.lifecycle import apply_status_update, build_status_update, is_transition_allowed
from tests.conftest import NOW, make_complaint


def test_assigning_stamps_assigned_at():
    complaint = make_complaint()
    update = build_status_update(complaint, ComplaintStatus.ASSIGNED, now=NOW)

    assert isinstance(update, AssignUpdate)
    apply_status_update(complaint, update)
    assert complaint.status == ComplaintStatus.ASSIGNED
    assert complaint.assigned_at == NOW
    assert complaint.resolved_at is None


def test_reassigning_keeps_first_assignment_time():
    complaint = make_complaint(status=ComplaintStatus.ASSIGNED, assigned_at=NOW - timedelta(hours=5))
    update = build_status_update(complaint, ComplaintStatus.ASSIGNED, now=NOW)
    assert update.assigned_at == NOW - timedelta(hours=5)


@pytest.mark.parametrize("status", [ComplaintStatus.RESOLVED, ComplaintStatus.CLOSED])
def test_resolving_or_closing_stamps_resolved_at(status):
    complaint = make_complaint(status=ComplaintStatus.IN_PROGRESS)
    update = build_status_update(complaint, status, now=NOW)

    assert isinstance(update, ResolveUpdate)
    apply_status_update(complaint, update)
    assert complaint.status == status
    assert complaint.resolved_at == NOW


@pytest.mark.parametrize(
    ("status", "variant"),
    [(ComplaintStatus.SUBMITTED, ReopenUpdate), (ComplaintStatus.IN_PROGRESS, StartWorkUpdate)],
)
def test_other_statuses_leave_timestamps_untouched(status, variant):
    assigned_at = NOW - timedelta(days=1)
    complaint = make_complaint(status=ComplaintStatus.ASSIGNED, assigned_at=assigned_at)
    update = build_status_update(complaint, status, now=NOW)

    assert isinstance(update, variant)
    assert set(update.as_values()) == {"status"}
    apply_status_update(complaint, update)
    assert complaint.assigned_at == assigned_at
    assert complaint.resolved_at is None


def test_permissive_policy_allows_backward_transition():
    # Documented gap: lifecycle order is not enforced by default
    complaint = make_complaint(status=ComplaintStatus.RESOLVED, resolved_at=NOW)
    update = build_status_update(complaint, ComplaintStatus.SUBMITTED, now=NOW, policy="permissive")

    apply_status_update(complaint, update)
    assert complaint.status == ComplaintStatus.SUBMITTED
    # resolved_at is not cleared on reopening
    assert complaint.resolved_at == NOW


def test_forward_only_policy_rejects_backward_transition():
    complaint = make_complaint(status=ComplaintStatus.RESOLVED)
    with pytest.raises(InvalidStatusTransitionError) as exc_info:
        build_status_update(complaint, ComplaintStatus.IN_PROGRESS, now=NOW, policy="forward_only")
    assert exc_info.value.details["policy"] == "forward_only"


def test_forward_only_policy_allows_skipping_ahead():
    assert is_transition_allowed(ComplaintStatus.SUBMITTED, ComplaintStatus.RESOLVED, "forward_only")
    assert is_transition_allowed(ComplaintStatus.ASSIGNED, ComplaintStatus.ASSIGNED, "forward_only")


def test_strict_policy_only_allows_next_step():
    assert is_transition_allowed(ComplaintStatus.SUBMITTED, ComplaintStatus.ASSIGNED, "strict")
    assert is_transition_allowed(ComplaintStatus.RESOLVED, ComplaintStatus.CLOSED, "strict")
    assert not is_transition_allowed(ComplaintStatus.SUBMITTED, ComplaintStatus.RESOLVED, "strict")
    assert not is_transition_allowed(ComplaintStatus.CLOSED, ComplaintStatus.SUBMITTED, "strict")


def test_unknown_policy_is_rejected():
    with pytest.raises(ValueError):
        is_transition_allowed(ComplaintStatus.SUBMITTED, ComplaintStatus.ASSIGNED, "lenient")  # type: ignore[arg-type]
