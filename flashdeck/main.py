"""FastAPI application entry point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from flashdeck.config import configure_logging, get_settings
from flashdeck.database import dispose_engine, initialize_database
from flashdeck.domain.common.exceptions import (
    BusinessRuleViolationError,
    DomainError,
    EntityNotFoundError,
    ValidationError,
)
from flashdeck.exceptions import FlashdeckError
from flashdeck.infrastructure.learning.routers import ai_generation, batch, decks, flashcards

settings = get_settings()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Configure logging and the database for the lifetime of the app."""
    configure_logging(settings.ENVIRONMENT)
    initialize_database(settings)
    logger.info(
        "application_started",
        environment=settings.ENVIRONMENT,
        ai_enabled=settings.ai_enabled,
    )
    yield
    dispose_engine()
    logger.info("application_stopped")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Flashcard decks with AI-assisted card generation",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(FlashdeckError)
async def flashdeck_error_handler(request: Request, exc: FlashdeckError) -> JSONResponse:
    """Render application errors as ``{error, message, ...}``."""
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.warning(
            "request_failed",
            path=request.url.path,
            status_code=exc.status_code,
            error=exc.error,
            detail=exc.message,
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.error, "message": exc.public_message, **exc.extra},
        headers=exc.headers or None,
    )


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Translate domain rule violations to HTTP responses."""
    if isinstance(exc, EntityNotFoundError):
        status_code, error = status.HTTP_404_NOT_FOUND, "Not found"
    elif isinstance(exc, ValidationError):
        status_code, error = status.HTTP_400_BAD_REQUEST, "Invalid request"
    elif isinstance(exc, BusinessRuleViolationError):
        status_code, error = status.HTTP_409_CONFLICT, "Conflict"
    else:
        status_code, error = status.HTTP_400_BAD_REQUEST, "Invalid request"
    return JSONResponse(status_code=status_code, content={"error": error, "message": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report body and parameter validation problems per field."""
    details: dict[str, list[str]] = {}
    for error in exc.errors():
        # Drop the "body"/"query"/"path" prefix from the location
        location = [str(part) for part in error.get("loc", ())[1:]]
        field = ".".join(location) or "_root"
        details.setdefault(field, []).append(error.get("msg", "Invalid value"))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid request body", "details": details},
    )


app.include_router(ai_generation.router, prefix=settings.API_PREFIX)
app.include_router(decks.router, prefix=settings.API_PREFIX)
app.include_router(batch.router, prefix=settings.API_PREFIX)
app.include_router(flashcards.router, prefix=settings.API_PREFIX)


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"message": "Welcome to flashdeck API"}


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    uvicorn.run("flashdeck.main:app", host="0.0.0.0", port=8000)
