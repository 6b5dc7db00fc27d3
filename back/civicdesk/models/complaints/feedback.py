# Third-party imports
from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, Text, Uuid
from sqlalchemy.orm import relationship

# Local application imports
from civicdesk.models.base import Base
from civicdesk.models.mixins.uuid_timestamp import UUIDTimeStampMixin


class Feedback(Base, UUIDTimeStampMixin):
    __tablename__ = "feedback"
    __table_args__ = (
        CheckConstraint("rating BETWEEN 1 AND 5", name="feedback_rating_range"),
        CheckConstraint(
            "response_time_rating IS NULL OR response_time_rating BETWEEN 1 AND 5",
            name="feedback_response_time_rating_range",
        ),
        CheckConstraint(
            "resolution_quality_rating IS NULL OR resolution_quality_rating BETWEEN 1 AND 5",
            name="feedback_resolution_quality_rating_range",
        ),
    )

    complaint_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("complaints.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    rating = Column(Integer, nullable=False)
    response_time_rating = Column(Integer, nullable=True)
    resolution_quality_rating = Column(Integer, nullable=True)
    comment = Column(Text, nullable=True)

    complaint = relationship("Complaint", back_populates="feedback")
