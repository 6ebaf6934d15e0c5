"""
FastAPI entrypoint for the HealthTrack backend application.

Run with ``uvicorn healthtrack.main:create_app --factory``.
"""
import logging
import time
from typing import Optional
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from healthtrack.core.config import Settings, get_settings
from healthtrack.core.errors import Unauthenticated, ResourceUnavailable, StorageError
from healthtrack.core.security import TokenCodec
from healthtrack.core.utils import format_error
from healthtrack.db.session import Database
from healthtrack.api.dependencies import AuthGate
from healthtrack.api.router import api_router

logger = logging.getLogger(__name__)


def _install_exception_handlers(app: FastAPI) -> None:

    @app.exception_handler(Unauthenticated)
    async def unauthenticated_handler(request: Request, exc: Unauthenticated):
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content=format_error(exc.reason),
            headers={"WWW-Authenticate": "Bearer"}
        )

    @app.exception_handler(ResourceUnavailable)
    async def unavailable_handler(request: Request, exc: ResourceUnavailable):
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=format_error(str(exc), details={"retryable": True}),
            headers={"Retry-After": "1"}
        )

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError):
        # Cause is logged where it was raised
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=format_error("Storage failure")
        )

    @app.exception_handler(SQLAlchemyError)
    async def sqlalchemy_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error(f"Unhandled storage error on {request.method} {request.url.path}: {exc}", exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=format_error("Storage failure")
        )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application around an explicit settings object."""
    settings = settings or get_settings()

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s"
    )

    app = FastAPI(
        title="HealthTrack API",
        description="Backend API for personal workout, calorie and water tracking",
        version="1.0.0",
        debug=settings.DEBUG
    )

    token_codec = TokenCodec.from_settings(settings)
    app.state.settings = settings
    app.state.database = Database(settings)
    app.state.token_codec = token_codec
    app.state.auth_gate = AuthGate(token_codec)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)")
        return response

    _install_exception_handlers(app)

    # Include API routes
    app.include_router(api_router, prefix="/api")

    @app.get("/")
    async def root():
        """Health check endpoint."""
        return {"message": "HealthTrack API is running"}

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app
