# Standard library imports
from functools import lru_cache
from uuid import UUID

# Third-party imports
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from civicdesk.core.db import get_async_session
from civicdesk.core.exceptions import NotFoundError
from civicdesk.models.complaints.complaint import Complaint
from civicdesk.services.complaints.complaint_services import get_complaint
from civicdesk.services.storage.s3_service import S3Service


async def get_complaint_or_404(complaint_id: UUID, db: AsyncSession = Depends(get_async_session)) -> Complaint:
    complaint = await get_complaint(db, complaint_id)
    if complaint is None:
        raise NotFoundError("Complaint not found")
    return complaint


@lru_cache
def get_storage_service() -> S3Service:
    return S3Service()
