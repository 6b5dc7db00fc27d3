# Standard library imports
from pathlib import Path
from typing import Annotated, Any, Literal

# Third-party imports
from pydantic import AnyUrl, BeforeValidator, computed_field
from pydantic_core import MultiHostUrl
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR: Path = Path(__file__).resolve().parent.parent


def parse_cors(v: Any) -> list[str] | str:
    if isinstance(v, str) and not v.startswith("["):
        return [i.strip() for i in v.split(",")]
    elif isinstance(v, list | str):
        return v
    raise ValueError(v)


class CommonSettings(BaseSettings):
    model_config = SettingsConfigDict(
        # Use top level .env file (one level above ./back/)
        env_file="../.env",
        env_ignore_empty=True,
        extra="ignore",
    )

    # General settings
    API_V1_STR: str = "/api/v1"
    ENVIRONMENT: Literal["dev", "staging", "production"] = "dev"
    DEBUG_MODE: bool = False
    PROJECT_NAME: str = "CivicDesk"
    LOG_LEVEL: str | None = None  # e.g. "WARNING"; defaults to DEBUG in debug mode, INFO otherwise

    # Database settings
    POSTGRES_SERVER: str
    POSTGRES_PORT: int
    POSTGRES_USER: str
    POSTGRES_PASSWORD: str
    POSTGRES_DB: str
    DATABASE_URL: str | None = None  # Overrides the computed Postgres URI (e.g. sqlite+aiosqlite)
    DB_ECHO: bool = False

    @property
    def SQLALCHEMY_ASYNC_DATABASE_URI(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return str(
            MultiHostUrl.build(
                scheme="postgresql+asyncpg",  # async driver for async queries
                username=self.POSTGRES_USER,
                password=self.POSTGRES_PASSWORD,
                host=self.POSTGRES_SERVER,
                port=self.POSTGRES_PORT,
                path=self.POSTGRES_DB,
            )
        )

    # CORS settings
    BACKEND_CORS_ORIGINS: Annotated[list[AnyUrl] | str, BeforeValidator(parse_cors)] = [
        AnyUrl("http://localhost/"),
        AnyUrl("http://localhost:3000/"),
        AnyUrl("http://localhost:5173/"),
        AnyUrl("http://localhost:8000/"),
    ]

    @computed_field  # type: ignore[prop-decorator, misc]
    @property
    def all_cors_origins(self) -> list[str]:
        return [str(origin).rstrip("/") for origin in self.BACKEND_CORS_ORIGINS]

    # Optional settings
    SENTRY_DSN: str | None = None

    # S3 settings
    S3_URL: str
    S3_ACCESS_KEY_ID: str
    S3_SECRET_ACCESS_KEY: str
    S3_PUBLIC_BUCKET_NAME: str = "complaint-images"
    S3_SECURE: bool = False
    S3_UPLOAD_PREFIX: str = "complaints"

    # Image upload settings
    IMAGE_ACCEPTED_TYPES: list[str] = [
        "image/jpeg",
        "image/png",
        "image/gif",
        "image/webp",
        "image/avif",
    ]
    IMAGE_PASSTHROUGH_TYPES: list[str] = [
        "image/webp",
        "image/jpeg",
        "image/png",
        "image/gif",
    ]
    IMAGE_MAX_UPLOAD_SIZE: int = 10 * 1024 * 1024  # 10 MB, checked before compression
    IMAGE_TARGET_SIZE: int = 1024 * 1024  # 1 MB
    IMAGE_MAX_WIDTH: int = 1920
    IMAGE_MAX_HEIGHT: int = 1080
    IMAGE_INITIAL_QUALITY: int = 80
    IMAGE_MIN_QUALITY: int = 30
    IMAGE_QUALITY_STEP: int = 10
    IMAGE_MAX_ATTEMPTS: int = 5

    # Statistics settings
    STATS_RESOLUTION_SAMPLE_SIZE: int = 100
    DEPARTMENT_RESOLUTION_SAMPLE_SIZE: int = 50
    LOCAL_TIMEZONE: str = "UTC"
    MARKERS_LIMIT: int = 100

    # Complaint listing
    COMPLAINTS_DEFAULT_LIMIT: int = 50
    COMPLAINTS_MAX_LIMIT: int = 500

    # Lifecycle
    LIFECYCLE_POLICY: Literal["permissive", "forward_only", "strict"] = "permissive"

    # Seed one department per category on startup when the catalog is empty
    SEED_DEFAULT_DEPARTMENTS: bool = True
