# Standard library imports
from datetime import UTC, datetime
from typing import Protocol
import uuid

# Third-party imports
from fastapi import UploadFile

# Local application imports
from civicdesk.core.monitoring.logging import get_logger
from civicdesk.schemas.complaints.upload_schemas import ImageUploadResponse, UploadedImage
from civicdesk.settings import settings
from civicdesk.utils.image_utils import compress_image
from civicdesk.utils.validators.file_validator import format_file_size, sanitize_file_name, validate_image_file

logger = get_logger(__name__)


class BlobStorage(Protocol):
    async def upload_file(self, file_data: bytes, file_key: str, content_type: str | None = None) -> str: ...

    def get_public_url(self, file_key: str) -> str: ...


def build_file_key(file_name: str) -> str:
    """``<prefix>/<yyyy>/<mm>/<random>_<sanitized name>``"""
    now = datetime.now(UTC)
    stem, _, extension = file_name.rpartition(".")
    safe_name = sanitize_file_name(file_name, extension=extension.lower() if stem else "bin")
    return f"{settings.S3_UPLOAD_PREFIX}/{now:%Y/%m}/{uuid.uuid4().hex[:12]}_{safe_name}"


async def upload_images(storage: BlobStorage, files: list[UploadFile]) -> ImageUploadResponse:
    """
    Validate every file, then normalize and upload them one after another.

    Nothing is uploaded when any file of the batch fails validation. A
    decoding or storage failure mid-batch aborts the remaining uploads;
    files already uploaded are kept.

    Raises:
        ImageValidationError: unsupported type, too large, or undecodable.
        StorageError: the storage backend rejected an upload.
    """
    batch: list[tuple[UploadFile, bytes]] = []
    for file in files:
        data = await file.read()
        validate_image_file(file.content_type, len(data))
        batch.append((file, data))

    uploaded: list[UploadedImage] = []
    for index, (file, data) in enumerate(batch, start=1):
        result = compress_image(data, file.filename or "image", file.content_type)
        url = await storage.upload_file(result.data, build_file_key(result.file_name), result.content_type)

        uploaded.append(
            UploadedImage(
                file_name=result.file_name,
                url=url,
                original_size=result.original_size,
                compressed_size=result.compressed_size,
                was_compressed=result.was_compressed,
            )
        )
        logger.info(
            f"Uploaded image {index}/{len(files)}: {result.file_name} "
            f"({format_file_size(result.original_size)} -> {format_file_size(result.compressed_size)})"
        )

    return ImageUploadResponse(urls=[image.url for image in uploaded], files=uploaded)
