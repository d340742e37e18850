"""
FastAPI entrypoint for the Stichting uitjes backend.
"""
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from stichting.api.router import api_router
from stichting.core.config import Settings, settings as default_settings
from stichting.core.exceptions import AppError
from stichting.core.middleware import RateLimitMiddleware, SecurityHeadersMiddleware
from stichting.core.utils import configure_logging, format_error
from stichting.db.session import Database

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Render every error as JSON ``{"message": ...}``."""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        logger.warning(f"{request.method} {request.url.path} -> {exc.status_code} {exc.__class__.__name__}: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content=format_error(exc.message))

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content=format_error(str(exc.detail)),
            headers=getattr(exc, "headers", None)
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=format_error("Invalid request", jsonable_encoder(exc.errors())),
        )


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """Build the application around an explicit settings object and store handle."""
    settings = settings or default_settings
    owns_database = database is None
    database = database or Database(settings.DATABASE_URL, echo=settings.DB_ECHO)
    configure_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        Path(settings.UPLOAD_DIR).mkdir(parents=True, exist_ok=True)
        database.create_all()
        logger.info(f"{settings.APP_NAME} API started (uploads in {settings.UPLOAD_DIR})")
        yield
        if owns_database:
            database.dispose()
        logger.info(f"{settings.APP_NAME} API stopped")

    app = FastAPI(
        title=f"{settings.APP_NAME} API",
        description="Backend API for organising uitjes",
        version="1.0.0",
        debug=settings.DEBUG,
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.db = database

    # Middleware: the last one added runs first
    app.add_middleware(RateLimitMiddleware, limit=settings.RATE_LIMIT_PER_MINUTE)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include API routes
    app.include_router(api_router, prefix="/api")

    return app


app = create_app()


def run() -> None:
    """Serve the app with uvicorn on the configured port."""
    import uvicorn
    uvicorn.run("stichting.main:app", host="0.0.0.0", port=default_settings.PORT)


if __name__ == "__main__":
    run()
