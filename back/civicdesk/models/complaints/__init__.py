from .complaint import Complaint
from .department import Department
from .enums import ComplaintCategory, ComplaintPriority, ComplaintStatus
from .feedback import Feedback

__all__ = [
    "Complaint",
    "ComplaintCategory",
    "ComplaintPriority",
    "ComplaintStatus",
    "Department",
    "Feedback",
]
