"""
Institute API - FastAPI Application

CRUD over institutes, audio clips, form submissions, marketing campaigns and
data, groups and student groups, plus nested institute data and file upload.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings
from app.core.errors import register_exception_handlers
from app.core.logging import configure_logging
from app.database.connections import close_connections, connect_mongo
from app.database.registry import build_registry
from app.routers import health, institutes, resources, upload

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Connect to MongoDB (a failure aborts startup)
    - Build the collection registry

    Shutdown:
    - Close the database connection
    """
    settings = get_settings()
    logger.info("Starting up Institute API...")

    client = await connect_mongo()
    app.state.registry = build_registry(client, settings)
    logger.info(f"Connected to the {settings.mongo_db_name} database")

    yield

    logger.info("Shutting down Institute API...")
    await close_connections()
    logger.info("Database connection closed")


def create_app() -> FastAPI:
    """Build the FastAPI application with middleware, handlers and routers."""
    settings = get_settings()
    configure_logging(settings.log_level)

    application = FastAPI(
        title="Institute API",
        description="""
## Institute management API

CRUD endpoints for institutes and their surrounding data.

### Resources
`/institutes`, `/audioclips`, `/formSubmissions`, `/marketingCampaigns`,
`/marketingData`, `/groups`, `/studentGroups` each support
`GET/POST /{resource}` and `GET/PUT/DELETE /{resource}/{id}`.
`PUT` merges the given fields into the stored document.

### Nested institute data
`GET/POST /institutes/{id}/{arrayName}` and
`PUT/DELETE /institutes/{id}/{arrayName}/{dataId}`.

### Responses
Success bodies carry `success` and `result`; failures carry `failure`.
        """,
        version="0.1.0",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(application)

    application.include_router(health.router)
    for router in resources.routers:
        application.include_router(router)
    application.include_router(institutes.router)
    application.include_router(upload.router)

    @application.get("/", tags=["Root"])
    async def root():
        """Root endpoint."""
        return {"success": "Hello World"}

    return application


app = create_app()
