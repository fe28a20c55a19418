# crewhub/main.py
from contextlib import asynccontextmanager
import logging

from fastapi.middleware.cors import CORSMiddleware
from fastapi import FastAPI
from sqlmodel import Session

from crewhub.core.config import get_settings
from crewhub.core.errors import register_exception_handlers
from crewhub.core.logging_middleware import add_audit_middleware
from crewhub.database import create_db_and_tables, engine

# Import models so SQLModel metadata is populated before create_all()
from crewhub.models import user as _user_models  # noqa: F401
from crewhub.models import session as _session_models  # noqa: F401
from crewhub.models import appointment as _appointment_models  # noqa: F401
from crewhub.models import review as _review_models  # noqa: F401
from crewhub.models import report as _report_models  # noqa: F401

from crewhub.repositories.appointment_repo import AppointmentRepository
from crewhub.repositories.user_repo import UserRepository
from crewhub.schemas.common import ErrorResponse
from crewhub.services.seed_service import SeedService

# Routers
from crewhub.routers.auth import router as auth_router
from crewhub.routers.workers import router as workers_router
from crewhub.routers.appointments import router as appointments_router
from crewhub.routers.reviews import router as reviews_router
from crewhub.routers.reports import router as reports_router
from crewhub.routers.admin import router as admin_router

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
logger = logging.getLogger("crewhub")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup:
      - Create tables.
      - Seed the admin (and demo data) on an empty database.

    Shutdown:
      - Dispose the engine's connection pool.
    """
    logger.info("Startup: connecting to database...")
    try:
        create_db_and_tables()
        with Session(engine) as session:
            SeedService(UserRepository(), AppointmentRepository()).seed(session, settings)
        logger.info("Startup: DB connection OK, tables verified.")
    except Exception as e:
        logger.error(f"Startup: DB initialisation FAILED: {e}")
        raise
    yield
    engine.dispose()


app = FastAPI(
    title=settings.PROJECT_NAME,
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
add_audit_middleware(app)
register_exception_handlers(app)

# Error body documented for every router
error_responses = {
    code: {"model": ErrorResponse} for code in (400, 401, 403, 404, 409)
}

for router in (
    auth_router,
    workers_router,
    appointments_router,
    reviews_router,
    reports_router,
    admin_router,
):
    app.include_router(router, prefix=settings.API_PREFIX, responses=error_responses)


@app.get("/")
def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "crewhub"}
