# This project was developed with assistance from AI tools.
"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .admin import setup_admin
from .core.config import settings
from .core.errors import problem_response, request_id_for
from .core.logging import setup_logging
from .routes import admin, health, owners

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Application startup/shutdown lifecycle."""
    setup_logging(settings.LOG_LEVEL)
    logger.info("%s %s starting", settings.APP_NAME, __version__)
    yield
    from db.database import engine

    await engine.dispose()


app = FastAPI(
    title="Pet Clinic API",
    description="Owner management for a veterinary clinic",
    version=__version__,
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_HOSTS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Convert HTTPException to RFC 7807 Problem Details."""
    return problem_response(
        request,
        exc.status_code,
        str(exc.detail),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Convert Pydantic validation errors to RFC 7807 Problem Details."""
    return problem_response(request, 422, str(exc.errors()))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Catch-all for unhandled exceptions (storage failures included) -- log and return 500."""
    request_id = request_id_for(request)
    logger.exception("Unhandled exception (request_id=%s)", request_id)
    return problem_response(request, 500, "An unexpected error occurred.", request_id=request_id)


# Include routers
app.include_router(health.router, prefix="/health", tags=["health"])
app.include_router(owners.router, prefix="/api/owners", tags=["owners"])
app.include_router(admin.router, prefix="/api/admin", tags=["admin"])

# Setup SQLAdmin dashboard at /admin
setup_admin(app)


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint"""
    return {"message": "Welcome to the Pet Clinic API"}
