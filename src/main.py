import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from src.common.exceptions import (
    KnownException,
    ResourceNotFoundException,
    known_exception_handler,
    resource_not_found_handler,
    storage_exception_handler,
    unexpected_exception_handler,
    validation_exception_handler,
    internal_error_response,
)
from src.common.opentelemetry import instrument_engine, setup_opentelemetry
from src.config import get_settings
from src.tasks.router import router as tasks_router
from src.tasks.store.postgres.store import PostgresTaskStore
from src.healthcheck.router import router as health_router

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.task_store = PostgresTaskStore(database_url=settings.database_url)
    if settings.OTEL_ENABLED:
        instrument_engine(app.state.task_store.engine)
    yield
    app.state.task_store.close()


app = FastAPI(
    title=settings.API_NAME,
    summary=settings.API_SUMMARY,
    lifespan=lifespan,
    responses={
        **internal_error_response,
    },
    version=settings.TASK_SERVICE_VERSION,
)

if settings.OTEL_ENABLED:
    setup_opentelemetry(settings.OTEL_SERVICE_NAME, app)

if settings.CORS_ENABLED:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.exception_handler(RequestValidationError)(validation_exception_handler)
app.exception_handler(ResourceNotFoundException)(resource_not_found_handler)
app.exception_handler(KnownException)(known_exception_handler)
app.exception_handler(SQLAlchemyError)(storage_exception_handler)
app.exception_handler(Exception)(unexpected_exception_handler)


app.include_router(health_router)
app.include_router(tasks_router)
