# Third-party imports
from sqlalchemy import (
    JSON,
    TIMESTAMP,
    Column,
    Enum as SQLEnum,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    Uuid,
)
from sqlalchemy.orm import relationship

# Local application imports
from civicdesk.models.base import Base
from civicdesk.models.complaints.enums import ComplaintCategory, ComplaintPriority, ComplaintStatus, enum_values
from civicdesk.models.mixins.uuid_timestamp import UUIDTimeStampMixin


class Complaint(Base, UUIDTimeStampMixin):
    __tablename__ = "complaints"

    # Complaint details
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)
    category = Column(
        SQLEnum(ComplaintCategory, name="complaint_category", values_callable=enum_values),
        nullable=False,
        index=True,
    )

    # Triage
    priority = Column(
        SQLEnum(ComplaintPriority, name="complaint_priority", values_callable=enum_values),
        nullable=False,
        default=ComplaintPriority.MEDIUM,
        index=True,
    )
    priority_score = Column(Integer, nullable=False, default=50, index=True)
    urgency_factor = Column(Float, nullable=False, default=1.0)
    severity_factor = Column(Float, nullable=False, default=1.0)
    impact_factor = Column(Float, nullable=False, default=1.0)
    similar_complaints_count = Column(Integer, nullable=False, default=0)

    # Lifecycle
    status = Column(
        SQLEnum(ComplaintStatus, name="complaint_status", values_callable=enum_values),
        nullable=False,
        default=ComplaintStatus.SUBMITTED,
        index=True,
    )
    assigned_at = Column(TIMESTAMP(timezone=True), nullable=True)
    resolved_at = Column(TIMESTAMP(timezone=True), nullable=True, index=True)

    # Location information
    location_address = Column(Text, nullable=False)
    location_lat = Column(Float, nullable=True)
    location_lng = Column(Float, nullable=True)

    # Citizen contact
    citizen_name = Column(String(200), nullable=True)
    citizen_email = Column(String(255), nullable=True)
    citizen_phone = Column(String(50), nullable=True)

    # Media
    image_urls = Column(JSON, nullable=True, default=list)

    # Routing
    department_id = Column(Uuid(as_uuid=True), ForeignKey("departments.id"), nullable=True, index=True)

    department = relationship("Department", back_populates="complaints")
    feedback = relationship("Feedback", back_populates="complaint", cascade="all, delete-orphan")
