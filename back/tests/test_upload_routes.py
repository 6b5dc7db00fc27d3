import asyncio
import io

from PIL import Image

from civicdesk.settings import settings
from tests.conftest import api_client

API = "/api/v1"


def _png_bytes() -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (40, 30), "blue").save(buffer, format="PNG")
    return buffer.getvalue()


def test_upload_images_returns_public_urls(app, storage):
    data = _png_bytes()

    async def _run():
        async with api_client(app) as client:
            return await client.post(
                f"{API}/uploads/images",
                files=[
                    ("files", ("Broken Pipe.png", data, "image/png")),
                    ("files", ("road.png", data, "image/png")),
                ],
            )

    resp = asyncio.run(_run())
    assert resp.status_code == 200
    body = resp.json()
    assert len(body["urls"]) == 2
    assert all(url.startswith("http://storage.test/complaint-images/complaints/") for url in body["urls"])
    assert body["urls"][0].endswith("_Broken_Pipe.png")
    assert body["files"][0]["was_compressed"] is False
    assert len(storage.objects) == 2
    assert {content_type for _, content_type in storage.objects.values()} == {"image/png"}


def test_invalid_file_rejects_the_whole_batch(app, storage):
    data = _png_bytes()

    async def _run():
        async with api_client(app) as client:
            return await client.post(
                f"{API}/uploads/images",
                files=[
                    ("files", ("first.png", data, "image/png")),
                    ("files", ("notes.txt", b"hello", "text/plain")),
                    ("files", ("third.png", data, "image/png")),
                ],
            )

    resp = asyncio.run(_run())
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "invalid_file"
    assert "Invalid file type" in resp.json()["error"]["message"]
    assert storage.objects == {}


def test_oversized_last_file_rejects_the_whole_batch(app, storage, monkeypatch):
    monkeypatch.setattr(settings, "IMAGE_MAX_UPLOAD_SIZE", 1024 * 1024)
    data = _png_bytes()

    async def _run():
        async with api_client(app) as client:
            return await client.post(
                f"{API}/uploads/images",
                files=[
                    ("files", ("first.png", data, "image/png")),
                    ("files", ("huge.png", b"\x00" * (1024 * 1024 + 1), "image/png")),
                ],
            )

    resp = asyncio.run(_run())
    assert resp.status_code == 400
    assert "Maximum size is 1MB" in resp.json()["error"]["message"]
    assert storage.objects == {}


def test_undecodable_file_stops_the_remaining_uploads(app, storage):
    data = _png_bytes()

    async def _run():
        async with api_client(app) as client:
            return await client.post(
                f"{API}/uploads/images",
                files=[
                    ("files", ("first.png", data, "image/png")),
                    ("files", ("broken.avif", b"not an image", "image/avif")),
                    ("files", ("third.png", data, "image/png")),
                ],
            )

    resp = asyncio.run(_run())
    assert resp.status_code == 400
    assert "Could not read image" in resp.json()["error"]["message"]
    # Valid files ahead of the failure stay uploaded, later ones are skipped
    assert len(storage.objects) == 1
    assert next(iter(storage.objects)).endswith("_first.png")
