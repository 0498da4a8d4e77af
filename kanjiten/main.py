"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from kanjiten.config import configure_logging, get_settings
from kanjiten.database import dispose_engine, initialize_database
from kanjiten.domain.common.exceptions import DomainError
from kanjiten.exceptions import KanjitenError, StorageError
from kanjiten.infrastructure.common.rate_limit import limiter
from kanjiten.infrastructure.common.routers import health
from kanjiten.infrastructure.common.schemas import ErrorResponse
from kanjiten.infrastructure.identity.routers import auth
from kanjiten.infrastructure.learning.routers import custom_words, progress, streak
from kanjiten.infrastructure.settings.routers import language
from kanjiten.infrastructure.settings.routers import settings as user_settings

settings = get_settings()
configure_logging(settings.ENVIRONMENT)

logger = structlog.get_logger(__name__)
stdlib_logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Internal server error"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create the engine on startup and release its connections on shutdown."""
    initialize_database(settings)
    logger.info("application_started", environment=settings.ENVIRONMENT)
    yield
    dispose_engine()
    logger.info("application_stopped")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Learning progress and streak tracking API for kanji study",
    lifespan=lifespan,
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)  # type: ignore[arg-type]

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content=ErrorResponse(error=message).model_dump()
    )


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    """Storage details are logged, never returned."""
    stdlib_logger.error(
        f"Storage error on {request.method} {request.url.path}: {exc.message}",
        exc_info=exc.__cause__ or exc,
    )
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR_MESSAGE)


@app.exception_handler(KanjitenError)
async def kanjiten_error_handler(request: Request, exc: KanjitenError) -> JSONResponse:
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        stdlib_logger.error(f"Error on {request.method} {request.url.path}: {exc.message}")
        return _error_response(exc.status_code, GENERIC_ERROR_MESSAGE)
    return _error_response(exc.status_code, exc.message)


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    return _error_response(status.HTTP_400_BAD_REQUEST, exc.message)


@app.exception_handler(SQLAlchemyError)
async def sqlalchemy_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    stdlib_logger.error(
        f"Database error on {request.method} {request.url.path}: {exc!s}", exc_info=exc
    )
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR_MESSAGE)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed request bodies are client errors like any other validation failure."""
    details = []
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error["loc"][1:])  # Skip 'body'
        details.append(f"{field}: {error['msg']}" if field else error["msg"])
    return _error_response(
        status.HTTP_400_BAD_REQUEST, "Invalid request: " + "; ".join(details)
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=str(exc.detail)).model_dump(),
        headers=exc.headers,
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    stdlib_logger.error(
        f"Unhandled error on {request.method} {request.url.path}: {exc!s}", exc_info=exc
    )
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR_MESSAGE)


# Register routers
app.include_router(auth.router, prefix=settings.API_PREFIX)
app.include_router(progress.router, prefix=settings.API_PREFIX)
app.include_router(streak.router, prefix=settings.API_PREFIX)
app.include_router(custom_words.router, prefix=settings.API_PREFIX)
app.include_router(user_settings.router, prefix=settings.API_PREFIX)
app.include_router(language.router, prefix=settings.API_PREFIX)
app.include_router(health.router, prefix=settings.API_PREFIX)


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"message": f"Welcome to {settings.PROJECT_NAME}"}
