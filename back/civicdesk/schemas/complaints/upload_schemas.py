# Third-party imports
from pydantic import BaseModel


class UploadedImage(BaseModel):
    file_name: str
    url: str
    original_size: int
    compressed_size: int
    was_compressed: bool


class ImageUploadResponse(BaseModel):
    urls: list[str]
    files: list[UploadedImage]
