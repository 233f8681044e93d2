# This project was developed with assistance from AI tools.
"""FastAPI application entry point."""

import logging
import uuid
from contextlib import asynccontextmanager

from db.config import db_settings
from db.database import SessionLocal, db_service
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .admin import setup_admin
from .core.config import settings
from .middleware.request_log import RequestLoggingMiddleware
from .observability import flush_langfuse, log_observability_status
from .routes import (
    assistant,
    carriers,
    chat,
    client_records,
    clients,
    cover_types,
    health,
    policies,
    record_types,
)
from .schemas.error import ErrorResponse
from .services.assistant import AssistantService
from .services.storage import build_storage

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Give app loggers a handler when the server (e.g. uvicorn) has not configured one."""
    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=settings.LOG_LEVEL.upper(),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


_configure_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup/shutdown lifecycle.

    The primary store connection is established in the background so a slow
    or missing database never delays startup; requests are served from the
    in-memory store until (and unless) Postgres answers.
    """
    log_observability_status()
    storage = build_storage(db_settings, db_service, SessionLocal)
    app.state.storage = storage
    app.state.assistant = AssistantService(storage, settings)
    storage.bootstrapper.start()
    yield
    await storage.bootstrapper.stop()
    flush_langfuse()
    await db_service.dispose()


app = FastAPI(
    title="BrokerGPT API",
    description="Client, carrier and policy management with an AI brokerage assistant",
    version=__version__,
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_HOSTS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type"],
)

app.add_middleware(RequestLoggingMiddleware)

_HTTP_STATUS_TITLES: dict[int, str] = {
    400: "Bad Request",
    404: "Not Found",
    405: "Method Not Allowed",
    409: "Conflict",
    422: "Unprocessable Entity",
    500: "Internal Server Error",
    502: "Bad Gateway",
}


def _build_error(status_code: int, detail: str, request_id: str) -> ErrorResponse:
    return ErrorResponse(
        type="about:blank",
        title=_HTTP_STATUS_TITLES.get(status_code, "Error"),
        status=status_code,
        detail=detail,
        request_id=request_id,
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Convert HTTPException to RFC 7807 Problem Details."""
    request_id = request.headers.get("x-request-id", str(uuid.uuid4()))
    body = _build_error(exc.status_code, str(exc.detail), request_id)
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Convert Pydantic validation errors to RFC 7807 Problem Details."""
    request_id = request.headers.get("x-request-id", str(uuid.uuid4()))
    body = _build_error(422, str(exc.errors()), request_id)
    return JSONResponse(status_code=422, content=body.model_dump())


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Catch-all for unhandled exceptions -- log and return 500."""
    request_id = request.headers.get("x-request-id", str(uuid.uuid4()))
    logger.exception("Unhandled exception (request_id=%s)", request_id)
    body = _build_error(500, "An unexpected error occurred.", request_id)
    return JSONResponse(status_code=500, content=body.model_dump())


# Include routers
app.include_router(health.router, prefix="/health", tags=["health"])
app.include_router(carriers.router, prefix="/api/carriers", tags=["carriers"])
app.include_router(clients.router, prefix="/api/clients", tags=["clients"])
app.include_router(policies.router, prefix="/api/policies", tags=["policies"])
app.include_router(chat.router, prefix="/api/chat", tags=["chat"])
app.include_router(assistant.router, prefix="/api/assistant", tags=["assistant"])
app.include_router(cover_types.router, prefix="/api/cover-types", tags=["cover-types"])
app.include_router(record_types.router, prefix="/api/record-types", tags=["record-types"])
app.include_router(client_records.router, prefix="/api/client-records", tags=["client-records"])

# Setup SQLAdmin dashboard at /admin
setup_admin(app)


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint"""
    return {"message": "Welcome to BrokerGPT API"}
