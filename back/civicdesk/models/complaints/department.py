# Third-party imports
from sqlalchemy import Column, Enum as SQLEnum, String, Text
from sqlalchemy.orm import relationship

# Local application imports
from civicdesk.models.base import Base
from civicdesk.models.complaints.enums import ComplaintCategory, enum_values
from civicdesk.models.mixins.uuid_timestamp import UUIDTimeStampMixin


class Department(Base, UUIDTimeStampMixin):
    __tablename__ = "departments"

    name = Column(String(200), nullable=False, index=True)
    # Complaints of this category are routed here
    category = Column(
        SQLEnum(ComplaintCategory, name="complaint_category", values_callable=enum_values),
        nullable=False,
        index=True,
    )
    contact_email = Column(String(255), nullable=True)
    contact_phone = Column(String(50), nullable=True)
    description = Column(Text, nullable=True)

    complaints = relationship("Complaint", back_populates="department")
