from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from contextlib import asynccontextmanager
from typing import Optional
from urllib.parse import urlparse
import logging

from config.settings import get_settings
from database import init_db
from app.context import AppContext
from app.errors import ApiError
from app.middleware.logging import RequestLoggingMiddleware
from app.routers import auth, thumbnails, videos
from app.spec.models import ErrorDetail, ErrorResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for FastAPI
    Handles startup and shutdown events
    """
    context: AppContext = app.state.context
    logger.info(f"Starting {context.settings.APP_NAME}...")
    init_db(context.db)

    context.blobs.ensure_root()
    logger.info(f"Assets directory ready: {context.blobs.root}")

    yield

    logger.info(f"Shutting down {context.settings.APP_NAME}...")
    context.db.close()


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    """Render an ApiError; the cause goes to the log, never to the caller"""
    if exc.status_code >= 500:
        logger.error(
            f"Responding with {exc.status_code} error: {exc.message} "
            f"({request.method} {request.url.path})",
            exc_info=exc.cause,
        )
    elif exc.cause is not None:
        logger.warning(f"{exc.message} ({request.method} {request.url.path}): {exc.cause}")

    body = ErrorResponse(error=ErrorDetail(code=exc.code, message=exc.message))
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


def create_app(context: Optional[AppContext] = None) -> FastAPI:
    """
    Build the FastAPI application around a context

    Args:
        context: Collaborators to serve with; built from settings when omitted

    Returns:
        FastAPI: Configured application
    """
    if context is None:
        context = AppContext.from_settings(get_settings())
    settings = context.settings

    app = FastAPI(
        title=settings.APP_NAME,
        description="Video metadata and thumbnail asset API",
        version=settings.APP_VERSION,
        lifespan=lifespan,
    )
    app.state.context = context

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(
        RequestLoggingMiddleware,
        verbose=settings.DEBUG or settings.LOG_LEVEL.upper() == "DEBUG",
    )

    app.add_exception_handler(ApiError, api_error_handler)

    app.include_router(auth.router)
    app.include_router(videos.router)
    app.include_router(thumbnails.router)

    # Serve stored assets at the path their URLs are built from
    assets_path = urlparse(settings.ASSETS_BASE_URL).path.rstrip("/") or "/assets"
    app.mount(
        assets_path,
        StaticFiles(directory=str(context.blobs.root), check_dir=False),
        name="assets",
    )

    @app.get("/")
    async def root():
        return {
            "service": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "status": "running",
        }

    @app.get("/health")
    async def health():
        return {"status": "healthy"}

    return app


app = create_app()


def run():
    """Run the API with uvicorn using configured host, port and logging"""
    import uvicorn
    from config.logging import setup_logging

    settings = get_settings()
    setup_logging(log_dir=settings.LOG_DIR, log_level=settings.LOG_LEVEL)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
