"""
RecordKeeper Backend - FastAPI Application

Administrative API over a MongoDB database of imported spreadsheet records:
list collections, page and search through records, edit contact fields.
"""
import logging
import sys
import time
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from app.config import get_settings
from app.database.connections import open_database
from app.exceptions import RecordStoreError
from app.routers import collections, health, server_info
from app.services.record_service import RecordService
from app.services.server_info import get_access_urls

logger = logging.getLogger(__name__)


def setup_logging(level: str) -> None:
    """Configure root logging once for the whole process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger("pymongo").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Connect to MongoDB (a failure here aborts startup)
    - Bind the RecordService to app.state

    Shutdown:
    - Close the MongoDB connection
    """
    settings = get_settings()
    setup_logging(settings.log_level)
    app.state.started_at = time.monotonic()

    logger.info("Starting up RecordKeeper Backend...")

    try:
        async with open_database(settings) as db:
            app.state.record_service = RecordService(db)
            logger.info(f"✓ Server running on {settings.host}:{settings.port}")
            if not settings.is_production:
                logger.info("Server is accessible at:")
                for url in get_access_urls(settings.port):
                    logger.info(f"  {url}")

            yield

            logger.info("Shutting down RecordKeeper Backend...")
            app.state.record_service = None
    except RecordStoreError as e:
        logger.error(f"Failed to connect to MongoDB: {e.message}")
        raise


def register_exception_handlers(app: FastAPI) -> None:
    """Render every handled error as ``{"success": false, "error": message}``."""

    @app.exception_handler(RecordStoreError)
    async def handle_record_store_error(request: Request, exc: RecordStoreError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message} {exc.context}")
        else:
            logger.warning(f"{request.method} {request.url.path}: {exc.message} {exc.context}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "error": exc.message},
        )

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        messages = []
        for err in exc.errors():
            location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
            messages.append(f"{location}: {err.get('msg')}" if location else err.get("msg"))
        message = "; ".join(messages) or "Invalid request"
        logger.warning(f"{request.method} {request.url.path}: {message}")
        return JSONResponse(
            status_code=400,
            content={"success": False, "error": message},
        )

    @app.exception_handler(PyMongoError)
    async def handle_database_error(request: Request, exc: PyMongoError):
        logger.exception(f"{request.method} {request.url.path} database error")
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": str(exc)},
        )


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="RecordKeeper API",
        description="""
## Spreadsheet Records Admin API

Browse and edit records imported from spreadsheets into MongoDB.

### Features
- **Collections**: every imported sheet is a collection, discovered at runtime
- **Records**: paginated listing with case-insensitive search across
  name, fatherName, address, phoneNumber and email
- **Editing**: partial updates that keep the `additionalInfo` columns in sync

### Errors
Every failure is returned as `{"success": false, "error": "..."}`.
        """,
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(server_info.router)
    app.include_router(collections.router)

    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint with API information."""
        return {
            "name": "RecordKeeper API",
            "version": "0.1.0",
            "docs": "/docs",
            "health": "/health",
        }

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
