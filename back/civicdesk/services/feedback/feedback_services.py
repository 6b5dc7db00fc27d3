# Third-party imports
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from civicdesk.core.monitoring.logging import get_contextual_logger
from civicdesk.models.complaints.complaint import Complaint
from civicdesk.models.complaints.feedback import Feedback
from civicdesk.schemas.complaints.feedback_schemas import FeedbackCreate


async def list_feedback_for_complaint(db: AsyncSession, complaint: Complaint) -> list[Feedback]:
    result = await db.execute(
        select(Feedback).where(Feedback.complaint_id == complaint.id).order_by(Feedback.created_at.desc())
    )
    return list(result.scalars().all())


async def create_feedback(db: AsyncSession, complaint: Complaint, feedback_data: FeedbackCreate) -> Feedback:
    """Store citizen feedback for a complaint. Feedback is never edited afterwards."""
    feedback = Feedback(**feedback_data.model_dump(), complaint_id=complaint.id)

    db.add(feedback)
    try:
        await db.commit()
    except Exception:
        await db.rollback()
        raise
    await db.refresh(feedback)

    get_contextual_logger(__name__, complaint_id=complaint.id).info(f"Feedback stored with rating {feedback.rating}")
    return feedback
