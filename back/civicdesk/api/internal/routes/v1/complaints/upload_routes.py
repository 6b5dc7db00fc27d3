# Third-party imports
from fastapi import APIRouter, Depends, File, UploadFile

# Local application imports
from civicdesk.dependancies.common import get_storage_service
from civicdesk.schemas.complaints.upload_schemas import ImageUploadResponse
from civicdesk.services.storage.s3_service import S3Service
from civicdesk.services.storage.upload_services import upload_images

router = APIRouter(prefix="/uploads", tags=["Uploads"])


@router.post("/images", response_model=ImageUploadResponse)
async def upload_complaint_images(
    files: list[UploadFile] = File(...),
    storage: S3Service = Depends(get_storage_service),
):
    """Compress and upload complaint photos, returning their public URLs"""
    return await upload_images(storage, files)
