"""
Shared fixtures.

Settings are read from the environment at import time, so the variables are
set before any ``civicdesk`` module is imported. Each test gets its own SQLite
file as record store; the FastAPI app is wired to it through dependency
overrides, and file storage is replaced by an in-memory fake.
"""

# Standard library imports
import asyncio
from datetime import UTC, datetime
import os
from pathlib import Path
import sys

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

os.environ.setdefault("ENVIRONMENT", "dev")
os.environ.setdefault("POSTGRES_SERVER", "localhost")
os.environ.setdefault("POSTGRES_PORT", "5432")
os.environ.setdefault("POSTGRES_USER", "civicdesk")
os.environ.setdefault("POSTGRES_PASSWORD", "civicdesk")
os.environ.setdefault("POSTGRES_DB", "civicdesk")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("DB_ECHO", "false")
os.environ.setdefault("S3_URL", "http://localhost:9000")
os.environ.setdefault("S3_ACCESS_KEY_ID", "minio")
os.environ.setdefault("S3_SECRET_ACCESS_KEY", "minio-secret")

# Third-party imports
from httpx import ASGITransport, AsyncClient  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import NullPool  # noqa: E402

# Local application imports
from civicdesk.core.db import get_async_session, get_session_factory  # noqa: E402
from civicdesk.dependancies.common import get_storage_service  # noqa: E402
from civicdesk.main import create_app  # noqa: E402
from civicdesk.models import Base, Complaint, Department, Feedback  # noqa: E402
from civicdesk.models.complaints.enums import (  # noqa: E402
    ComplaintCategory,
    ComplaintPriority,
    ComplaintStatus,
)

NOW = datetime(2026, 10, 19, 15, 0, tzinfo=UTC)


class FakeStorage:
    def __init__(self):
        self.objects: dict[str, tuple[bytes, str | None]] = {}

    async def upload_file(self, file_data: bytes, file_key: str, content_type: str | None = None) -> str:
        self.objects[file_key] = (file_data, content_type)
        return self.get_public_url(file_key)

    def get_public_url(self, file_key: str) -> str:
        return f"http://storage.test/complaint-images/{file_key}"


async def _create_schema(engine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


@pytest.fixture
def session_factory(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'civicdesk.db'}", poolclass=NullPool)
    asyncio.run(_create_schema(engine))
    yield async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
    asyncio.run(engine.dispose())


@pytest.fixture
def storage():
    return FakeStorage()


@pytest.fixture
def app(session_factory, storage):
    application = create_app()

    async def _get_session():
        async with session_factory() as session:
            yield session

    application.dependency_overrides[get_async_session] = _get_session
    application.dependency_overrides[get_session_factory] = lambda: session_factory
    application.dependency_overrides[get_storage_service] = lambda: storage
    return application


def api_client(app) -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


def seed(session_factory, *objects):
    """Persist ``objects`` and return them with ids populated."""

    async def _seed():
        async with session_factory() as session:
            session.add_all(objects)
            await session.commit()

    asyncio.run(_seed())
    return objects


def make_department(name: str, category: ComplaintCategory, **overrides) -> Department:
    return Department(name=name, category=category, **overrides)


def make_complaint(**overrides) -> Complaint:
    values = {
        "title": "Pothole on Main Street",
        "description": "Large pothole near the bus stop",
        "category": ComplaintCategory.INFRASTRUCTURE,
        "priority": ComplaintPriority.MEDIUM,
        "priority_score": 60,
        "status": ComplaintStatus.SUBMITTED,
        "location_address": "12 Main Street",
        "created_at": NOW,
    }
    values.update(overrides)
    return Complaint(**values)


def make_feedback(complaint: Complaint, rating: int, **overrides) -> Feedback:
    return Feedback(complaint_id=complaint.id, rating=rating, **overrides)
