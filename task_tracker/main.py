import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import OperationalError

from task_tracker.common.database import create_database_engine
from task_tracker.common.exceptions import (
    ResourceNotFoundException,
    database_connection_exception_handler,
    resource_not_found_handler,
    unexpected_exception_handler,
    validation_exception_handler,
    service_unavailable_response,
    internal_error_response,
)
from task_tracker.common.opentelemetry import setup_opentelemetry
from task_tracker.config import get_settings
from task_tracker.healthcheck.router import router as health_router
from task_tracker.tasks.router import router as tasks_router
from task_tracker.tasks.store.sql.model import create_tables

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.database_engine = create_database_engine(settings.DATABASE_URL)
    create_tables(app.state.database_engine)
    yield
    app.state.database_engine.dispose()


app = FastAPI(
    title=settings.API_NAME,
    summary=settings.API_SUMMARY,
    lifespan=lifespan,
    responses={
        **service_unavailable_response,
        **internal_error_response,
    },
    version=settings.APP_VERSION,
)

if settings.OTEL_ENABLED:
    setup_opentelemetry(settings.OTEL_SERVICE_NAME, app)

if settings.CORS_ENABLED:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_origin_regex=settings.CORS_ORIGIN_REGEX,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
    )

app.exception_handler(RequestValidationError)(validation_exception_handler)
app.exception_handler(ResourceNotFoundException)(resource_not_found_handler)
app.exception_handler(OperationalError)(database_connection_exception_handler)
app.exception_handler(Exception)(unexpected_exception_handler)


app.include_router(health_router)
app.include_router(tasks_router, prefix=settings.API_BASE_PATH)
