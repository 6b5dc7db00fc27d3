# Third-party imports
from fastapi import APIRouter

# Local application imports
from civicdesk.api.internal.routes.v1.complaints import (
    complaint_router,
    department_router,
    feedback_router,
    stats_router,
    upload_router,
)

router = APIRouter()

# Include all internal v1 routers
router.include_router(department_router)
router.include_router(complaint_router)
router.include_router(feedback_router)
router.include_router(stats_router)
router.include_router(upload_router)
