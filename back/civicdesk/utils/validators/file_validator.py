# Standard library imports
import math
import re
import time

# Local application imports
from civicdesk.core.exceptions import ImageValidationError
from civicdesk.settings import settings

_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")
_REPEATED_UNDERSCORES = re.compile(r"_+")


def sanitize_file_name(file_name: str, extension: str = "webp") -> str:
    """
    Keep only ASCII letters and digits in the file stem; everything else
    becomes a single underscore. Falls back to ``image_<millis>`` when nothing
    is left. The extension is always replaced by ``extension``.
    """
    stem = re.sub(r"\.[^/.]+$", "", file_name or "")
    stem = _REPEATED_UNDERSCORES.sub("_", _NON_ALNUM.sub("_", stem)).strip("_")
    if not stem:
        stem = f"image_{int(time.time() * 1000)}"
    return f"{stem}.{extension}"


def validate_image_file(content_type: str | None, size: int) -> None:
    """
    Reject unsupported image types and files over the pre-compression limit.

    Raises:
        ImageValidationError: with a message suitable for showing to the citizen.
    """
    if content_type not in settings.IMAGE_ACCEPTED_TYPES:
        raise ImageValidationError("Invalid file type. Please upload JPEG, PNG, GIF, WEBP, or AVIF images.")

    if size > settings.IMAGE_MAX_UPLOAD_SIZE:
        max_mb = settings.IMAGE_MAX_UPLOAD_SIZE // (1024 * 1024)
        raise ImageValidationError(f"File is too large. Maximum size is {max_mb}MB.")


def format_file_size(size_bytes: int) -> str:
    if size_bytes == 0:
        return "0 Bytes"

    k = 1024
    sizes = ["Bytes", "KB", "MB"]
    i = min(int(math.floor(math.log(size_bytes) / math.log(k))), len(sizes) - 1)
    return f"{round(size_bytes / k**i, 2):g} {sizes[i]}"
