# Standard library imports
import enum


class ComplaintCategory(str, enum.Enum):
    INFRASTRUCTURE = "infrastructure"
    UTILITIES = "utilities"
    SANITATION = "sanitation"
    TRAFFIC = "traffic"
    PUBLIC_SAFETY = "public_safety"
    ENVIRONMENT = "environment"
    HEALTH = "health"
    OTHER = "other"


class ComplaintPriority(str, enum.Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ComplaintStatus(str, enum.Enum):
    SUBMITTED = "submitted"
    ASSIGNED = "assigned"
    IN_PROGRESS = "in_progress"
    RESOLVED = "resolved"
    CLOSED = "closed"


def enum_values(enum_cls: type[enum.Enum]) -> list[str]:
    """Persist enum values ("in_progress") rather than member names ("IN_PROGRESS")."""
    return [member.value for member in enum_cls]
