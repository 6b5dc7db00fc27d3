# Standard library imports
from datetime import datetime
from uuid import UUID

# Third-party imports
from pydantic import BaseModel, ConfigDict

# Local application imports
from civicdesk.models.complaints.enums import ComplaintCategory


class DepartmentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    category: ComplaintCategory
    contact_email: str | None
    contact_phone: str | None
    description: str | None
    created_at: datetime
