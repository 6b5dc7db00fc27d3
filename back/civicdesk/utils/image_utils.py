"""
Image normalization for complaint attachments.

Images that are already small and in a widely supported format pass through
untouched. Everything else is decoded, scaled down to fit the configured
bounds and re-encoded as WEBP at decreasing quality until it fits the target
size or the quality floor is reached.
"""

# Standard library imports
from dataclasses import dataclass
import io

# Third-party imports
from PIL import Image, ImageOps, UnidentifiedImageError

# Local application imports
from civicdesk.core.exceptions import ImageValidationError
from civicdesk.settings import settings
from civicdesk.utils.validators.file_validator import sanitize_file_name

WEBP_CONTENT_TYPE = "image/webp"


@dataclass
class CompressionResult:
    data: bytes
    file_name: str
    content_type: str
    original_size: int
    compressed_size: int
    was_compressed: bool


def calculate_dimensions(
    width: int,
    height: int,
    max_width: int | None = None,
    max_height: int | None = None,
) -> tuple[int, int]:
    """Scale (width, height) down to fit the bounds, keeping the aspect ratio."""
    max_width = max_width or settings.IMAGE_MAX_WIDTH
    max_height = max_height or settings.IMAGE_MAX_HEIGHT

    if width <= max_width and height <= max_height:
        return width, height

    scale = min(max_width / width, max_height / height)
    return max(1, round(width * scale)), max(1, round(height * scale))


def _encode_webp(image: Image.Image, quality: int) -> bytes:
    buffer = io.BytesIO()
    image.save(buffer, format="WEBP", quality=quality, method=4)
    return buffer.getvalue()


def _prepare_for_webp(image: Image.Image) -> Image.Image:
    # Honour camera orientation before resizing, WEBP output drops EXIF
    image = ImageOps.exif_transpose(image)
    if image.mode in ("RGB", "RGBA"):
        return image
    if image.mode in ("P", "LA", "PA") or "transparency" in image.info:
        return image.convert("RGBA")
    return image.convert("RGB")


def compress_image(data: bytes, file_name: str, content_type: str | None) -> CompressionResult:
    original_size = len(data)

    if original_size <= settings.IMAGE_TARGET_SIZE and content_type in settings.IMAGE_PASSTHROUGH_TYPES:
        return CompressionResult(
            data=data,
            file_name=file_name,
            content_type=content_type,
            original_size=original_size,
            compressed_size=original_size,
            was_compressed=False,
        )

    try:
        with Image.open(io.BytesIO(data)) as source:
            source.seek(0)  # first frame of animated images
            image = _prepare_for_webp(source)
            image.load()
    except (UnidentifiedImageError, OSError) as e:
        raise ImageValidationError(f"Could not read image '{file_name}'") from e

    width, height = calculate_dimensions(image.width, image.height)
    if (width, height) != image.size:
        image = image.resize((width, height), Image.Resampling.LANCZOS)

    quality = settings.IMAGE_INITIAL_QUALITY
    encoded = b""
    for _ in range(settings.IMAGE_MAX_ATTEMPTS):
        encoded = _encode_webp(image, quality)
        if len(encoded) <= settings.IMAGE_TARGET_SIZE or quality <= settings.IMAGE_MIN_QUALITY:
            break
        quality -= settings.IMAGE_QUALITY_STEP

    return CompressionResult(
        data=encoded,
        file_name=sanitize_file_name(file_name),
        content_type=WEBP_CONTENT_TYPE,
        original_size=original_size,
        compressed_size=len(encoded),
        was_compressed=True,
    )
