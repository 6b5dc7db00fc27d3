# Standard library imports
from contextlib import asynccontextmanager

# Third-party imports
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute

# Local application imports
from civicdesk import __version__
from civicdesk.api.internal.main import router as internal_router
from civicdesk.api.internal.utils.exceptions import register_exception_handlers
from civicdesk.core.db import run_with_new_session
from civicdesk.core.monitoring.logging import get_logger
from civicdesk.core.monitoring.sentry import setup_sentry
from civicdesk.services.departments.department_services import seed_default_departments
from civicdesk.settings import settings

# Set up the main application logger
logger = get_logger("civicdesk")


def custom_generate_unique_id(route: APIRoute) -> str:
    # Handle routes without tags
    if route.tags and len(route.tags) > 0:
        return f"{route.tags[0]}-{route.name}"
    else:
        return route.name or "unnamed_route"


@asynccontextmanager
async def lifespan(_: FastAPI):
    logger.info("Starting up CivicDesk API")

    if settings.SEED_DEFAULT_DEPARTMENTS:
        try:
            created = await run_with_new_session(seed_default_departments)
            logger.info(f"Department catalog ready ({created} created)")
        except Exception as e:
            logger.error(f"Failed to seed default departments: {e}")

    yield

    logger.info("Shutting down CivicDesk API")


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    if setup_sentry():
        logger.info(f"Sentry initialised in {settings.ENVIRONMENT} environment")

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=__version__,
        description="Municipal complaint intake, triage and performance dashboard API",
        openapi_url=f"{settings.API_V1_STR}/openapi.json" if settings.ENVIRONMENT != "production" else None,
        docs_url=f"{settings.API_V1_STR}/docs" if settings.ENVIRONMENT != "production" else None,
        redoc_url=f"{settings.API_V1_STR}/redoc" if settings.ENVIRONMENT != "production" else None,
        generate_unique_id_function=custom_generate_unique_id,
        lifespan=lifespan,
    )

    if settings.all_cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.all_cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_exception_handlers(app)

    @app.get("/health")
    async def health_check():
        return {"status": "healthy", "version": __version__}

    app.include_router(internal_router, prefix=settings.API_V1_STR)

    return app
