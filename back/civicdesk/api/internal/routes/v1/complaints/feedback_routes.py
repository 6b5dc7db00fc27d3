# Third-party imports
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from civicdesk.core.db import get_async_session
from civicdesk.dependancies.common import get_complaint_or_404
from civicdesk.models.complaints.complaint import Complaint
from civicdesk.schemas.complaints.feedback_schemas import FeedbackCreate, FeedbackResponse
from civicdesk.services.feedback import feedback_services

router = APIRouter(prefix="/complaints/{complaint_id}/feedback", tags=["Feedback"])


@router.get("", response_model=list[FeedbackResponse])
async def list_feedback(
    complaint: Complaint = Depends(get_complaint_or_404),
    db: AsyncSession = Depends(get_async_session),
):
    """Feedback left for a complaint, newest first"""
    feedback = await feedback_services.list_feedback_for_complaint(db, complaint)
    return [FeedbackResponse.model_validate(item) for item in feedback]


@router.post("", response_model=FeedbackResponse, status_code=201)
async def create_feedback(
    feedback_data: FeedbackCreate,
    complaint: Complaint = Depends(get_complaint_or_404),
    db: AsyncSession = Depends(get_async_session),
):
    """Rate how a complaint was handled"""
    feedback = await feedback_services.create_feedback(db, complaint, feedback_data)
    return FeedbackResponse.model_validate(feedback)
