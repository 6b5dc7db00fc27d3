from .complaint_routes import router as complaint_router
from .department_routes import router as department_router
from .feedback_routes import router as feedback_router
from .stats_routes import router as stats_router
from .upload_routes import router as upload_router

__all__ = ["complaint_router", "department_router", "feedback_router", "stats_router", "upload_router"]
