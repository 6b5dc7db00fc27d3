"""
Status update payloads.

One variant per kind of transition: each carries exactly the columns that
transition is allowed to write.
"""

# Standard library imports
from datetime import datetime
from typing import Annotated, Literal

# Third-party imports
from pydantic import BaseModel, ConfigDict, Field

# Local application imports
from civicdesk.models.complaints.enums import ComplaintStatus


class _StatusUpdate(BaseModel):
    model_config = ConfigDict(frozen=True)

    def as_values(self) -> dict:
        return self.model_dump()


class ReopenUpdate(_StatusUpdate):
    status: Literal[ComplaintStatus.SUBMITTED]


class AssignUpdate(_StatusUpdate):
    status: Literal[ComplaintStatus.ASSIGNED]
    assigned_at: datetime


class StartWorkUpdate(_StatusUpdate):
    status: Literal[ComplaintStatus.IN_PROGRESS]


class ResolveUpdate(_StatusUpdate):
    status: Literal[ComplaintStatus.RESOLVED, ComplaintStatus.CLOSED]
    resolved_at: datetime


StatusUpdate = Annotated[
    ReopenUpdate | AssignUpdate | StartWorkUpdate | ResolveUpdate,
    Field(discriminator="status"),
]
