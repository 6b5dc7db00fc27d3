# Standard library imports
from datetime import datetime
from uuid import UUID

# Third-party imports
from pydantic import BaseModel, ConfigDict, Field


class FeedbackCreate(BaseModel):
    rating: int = Field(..., ge=1, le=5)
    response_time_rating: int | None = Field(None, ge=1, le=5)
    resolution_quality_rating: int | None = Field(None, ge=1, le=5)
    comment: str | None = Field(None, max_length=2000)


class FeedbackResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    complaint_id: UUID
    rating: int
    response_time_rating: int | None
    resolution_quality_rating: int | None
    comment: str | None
    created_at: datetime
