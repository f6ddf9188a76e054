import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.exceptions import HTTPException as StarletteHTTPException

from cmdlog.api.logs import router as logs_router
from cmdlog.core.config import APP_VERSION, settings
from cmdlog.core.errors import http_exception_handler, log_service_error_handler
from cmdlog.core.exceptions import LogServiceError
from cmdlog.core.logging import setup_logging
from cmdlog.core.middleware import (
    ErrorResponseMiddleware,
    RequestIDMiddleware,
    RequestValidationMiddleware,
)
from cmdlog.db.session import engine, get_db, init_db

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application startup and shutdown."""
    setup_logging()

    logger.info("Ensuring database schema")
    await init_db()

    yield

    logger.info("Disposing database engine")
    await engine.dispose()


app = FastAPI(
    title=settings.APP_NAME,
    version=APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    redirect_slashes=False,
)

app.add_exception_handler(LogServiceError, log_service_error_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)

# Middleware added last runs first: request IDs wrap everything, then errors
app.add_middleware(
    RequestValidationMiddleware,
    max_request_size=settings.MAX_REQUEST_SIZE,
    enforce_content_type=settings.ENFORCE_JSON_CONTENT_TYPE,
)

if settings.CORS_ALLOW_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_methods=["GET", "POST", "PUT", "PATCH"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

app.add_middleware(ErrorResponseMiddleware)
app.add_middleware(RequestIDMiddleware)


@app.get("/health")
async def health_check(db: AsyncSession = Depends(get_db)):
    """Health check endpoint for container orchestration.

    Returns 200 if the database answers, 503 otherwise.
    """
    checks = {
        "status": "healthy",
        "database": False,
    }

    try:
        await db.execute(text("SELECT 1"))
        checks["database"] = True
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {e}")
        checks["status"] = "unhealthy"

    status_code = 200 if checks["database"] else 503
    return JSONResponse(content=checks, status_code=status_code)


app.include_router(logs_router)
