"""
Database models package.

This package contains all SQLAlchemy models for the application.
"""

# Local application imports
from civicdesk.models.base import Base
from civicdesk.models.complaints import Complaint, Department, Feedback

__all__ = [
    "Base",
    "Complaint",
    "Department",
    "Feedback",
]
