"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from propconnect.api import (
    agents,
    auth,
    buy_properties,
    listings,
    properties,
    rental_properties,
    tour_bookings,
    upload,
)
from propconnect.api.dependencies import get_image_store
from propconnect.config import get_settings
from propconnect.database import init_db
from propconnect.errors import AppError
from propconnect.logging_config import configure_logging

settings = get_settings()
configure_logging(settings.log_level)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    init_db()
    logger.info(f"PropConnect API started ({settings.environment})")
    yield


app = FastAPI(
    title="PropConnect API",
    description="Real-estate marketplace: properties, rentals, listings, tours and agents",
    version="0.1.0",
    lifespan=lifespan,
)

if settings.is_development:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )


@app.exception_handler(AppError)
async def handle_app_error(request: Request, exc: AppError):
    """Convert application errors to JSON responses."""
    body = {"detail": exc.message}
    if exc.errors:
        body["errors"] = exc.errors
    return JSONResponse(status_code=exc.status_code, content=body, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    """Report malformed request bodies as 400 with per-field detail."""
    errors = {
        ".".join(str(part) for part in error["loc"][1:]) or str(error["loc"][0]): error["msg"]
        for error in exc.errors()
    }
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Validation Error", "errors": errors},
    )


@app.exception_handler(Exception)
async def handle_unexpected_error(request: Request, exc: Exception):
    """Log the stack and hide the details from the client."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Something went wrong!"},
    )


# Register routers; the buy routes must precede /api/properties/{id}
app.include_router(auth.router)
app.include_router(buy_properties.router)
app.include_router(properties.router)
app.include_router(rental_properties.router)
app.include_router(listings.router)
app.include_router(tour_bookings.router)
app.include_router(upload.router)
app.include_router(agents.router)

image_store = get_image_store()
image_store.ensure_directory()
app.mount("/uploads", StaticFiles(directory=image_store.directory), name="uploads")


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
