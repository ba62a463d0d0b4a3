"""
After-school lessons API
Lessons catalogue, search and booking backed by MongoDB

Run with:
    uvicorn app.main:app --reload
or:
    python -m app.main
"""
import time
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load environment variables before settings are built
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(env_path)

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.database import Database
from pymongo.errors import PyMongoError

from app.api import images, lessons, orders
from app.core.config import settings
from app.core.database import connect, ping
from app.core.errors import AppError
from app.core.logging_config import setup_logging
from app.core.request_logging import RequestLoggingMiddleware

logger = logging.getLogger(__name__)


ENDPOINTS = {
    "GET /": {"description": "This API documentation"},
    "GET /health": {"description": "Service and database health"},
    "GET /lessons": {
        "description": "Fetch all lessons",
        "response": "Array of lesson objects with id, subject, location, price, spaces, description, image, addedAt"
    },
    "GET /search": {
        "description": "Search lessons by query",
        "parameters": {"q": "string (searches subject, location, description; also matches numeric price/spaces)"},
        "example": "/search?q=music or /search?q=40"
    },
    "POST /orders": {
        "description": "Create a new order/reservation",
        "body": {"name": "string", "phone": "string", "email": "string", "items": "Array of {lessonId, spaces}"},
        "response": "Created order object with id"
    },
    "PUT /lessons/:id": {
        "description": "Update a lesson (commonly used to decrement spaces after order)",
        "parameters": {"id": "MongoDB ObjectId string"},
        "body": {"spaces": "number"},
        "response": "Updated lesson object"
    },
    "GET /images/:fileName": {
        "description": "Serve static lesson images",
        "parameters": {"fileName": "string (image filename)"},
        "response": "Image file or 404 if not found"
    },
}

NOTES = [
    "All lesson responses include an `id` field (stringified ObjectId).",
    "Use the lesson `id` when creating orders or updating lesson spaces.",
    "Search is case-insensitive and matches partial strings in text fields.",
    "Errors are returned as {error, category}; category is one of validation, invalid_id, not_found, store, error.",
]


def create_app(database: Optional[Database] = None) -> FastAPI:
    """
    Create and configure the FastAPI application

    Args:
        database: Database handle to use instead of connecting to
            settings.MONGODB_URI at startup (tests pass a mongomock one)
    """
    setup_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        client = None
        if app.state.db is None:
            try:
                client, app.state.db = connect()
            except AppError as e:
                logger.error(f"Failed to start server: {e.message}")
                raise
        logger.info(f"API ready on http://{settings.API_HOST}:{settings.API_PORT}")
        yield
        if client is not None:
            client.close()
            app.state.db = None

    app = FastAPI(
        title=settings.API_TITLE,
        version=settings.API_VERSION,
        description=settings.API_DESCRIPTION,
        lifespan=lifespan
    )
    app.state.db = database
    app.state.started_at = time.time()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_allowed_origins(),
        allow_methods=["GET", "POST", "PUT", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        if exc.status_code < 500:
            logger.warning(f"{request.method} {request.url.path} rejected: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        problems = [
            f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg')}"
            for error in exc.errors()
        ]
        message = "Invalid request: " + "; ".join(problems) if problems else "Invalid request"
        logger.warning(f"{request.method} {request.url.path} rejected: {message}")
        return JSONResponse(status_code=400, content={"error": message, "category": "validation"})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc!r}", exc_info=exc)
        return JSONResponse(status_code=500, content={"error": "Internal server error", "category": "error"})

    app.include_router(lessons.router, tags=["Lessons"])
    app.include_router(orders.router, tags=["Orders"])
    app.include_router(images.router, tags=["Images"])

    @app.get("/")
    async def root(request: Request):
        """API documentation and status"""
        return {
            "title": settings.API_TITLE,
            "status": "ok",
            "version": settings.API_VERSION,
            "baseUrl": str(request.base_url).rstrip("/"),
            "uptime": round(time.time() - app.state.started_at, 3),
            "endpoints": ENDPOINTS,
            "notes": NOTES,
        }

    @app.get("/health")
    def health():
        """Health check endpoint - tests database connectivity"""
        db_status = "unknown"
        db_latency_ms = None
        db_error = None

        if app.state.db is None:
            db_status = "disconnected"
            db_error = "Database connection is not initialised"
        else:
            try:
                db_latency_ms = ping(app.state.db)
                db_status = "connected"
            except PyMongoError as e:
                db_status = "disconnected"
                db_error = str(e)

        return {
            "status": "healthy" if db_status == "connected" else "degraded",
            "service": "lessons-api",
            "version": settings.API_VERSION,
            "database": {
                "status": db_status,
                "name": settings.DB_NAME,
                "latency_ms": db_latency_ms,
                "error": db_error,
            },
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host=settings.API_HOST, port=settings.API_PORT)
