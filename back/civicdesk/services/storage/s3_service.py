# Standard library imports
from io import BytesIO

# Third-party imports
from minio import Minio
from minio.error import S3Error
from starlette.concurrency import run_in_threadpool

# Local application imports
from civicdesk.core.exceptions import StorageError
from civicdesk.core.monitoring.logging import get_logger
from civicdesk.settings import settings

logger = get_logger(__name__)


class S3Service:
    def __init__(self, client: Minio | None = None, bucket_name: str | None = None):
        self.client = client or Minio(
            settings.S3_URL.replace("http://", "").replace("https://", ""),
            access_key=settings.S3_ACCESS_KEY_ID,
            secret_key=settings.S3_SECRET_ACCESS_KEY,
            secure=settings.S3_SECURE,
        )
        self.bucket_name = bucket_name or settings.S3_PUBLIC_BUCKET_NAME
        self._bucket_checked = False

    def ensure_bucket(self) -> None:
        """Create the bucket on first use if it does not exist yet"""
        if self._bucket_checked:
            return
        if not self.client.bucket_exists(self.bucket_name):
            self.client.make_bucket(self.bucket_name)
        self._bucket_checked = True

    def _put_object(self, file_data: bytes, file_key: str, content_type: str | None) -> None:
        self.ensure_bucket()
        self.client.put_object(
            self.bucket_name,
            file_key,
            BytesIO(file_data),
            len(file_data),
            content_type=content_type or "application/octet-stream",
        )

    async def upload_file(self, file_data: bytes, file_key: str, content_type: str | None = None) -> str:
        """Upload a blob under ``file_key`` and return its public URL"""
        try:
            await run_in_threadpool(self._put_object, file_data, file_key, content_type)
        except S3Error as e:
            logger.error(f"Upload of {file_key} failed: {e}")
            raise StorageError("Failed to upload file to storage") from e

        return self.get_public_url(file_key)

    def get_public_url(self, file_key: str) -> str:
        return f"{settings.S3_URL.rstrip('/')}/{self.bucket_name}/{file_key}"
