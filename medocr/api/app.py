from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from medocr.api.errors import register_error_handlers
from medocr.api.routes import router
from medocr.config.settings import Settings
from medocr.logging.logger import Log
from medocr.processor.processor import OcrProcessor, build_processor


def create_app(
    settings: Settings | None = None,
    processor: OcrProcessor | None = None,
) -> FastAPI:
    """Build the FastAPI application around a processor built from settings."""
    settings = settings if settings is not None else Settings()
    app = FastAPI(title="Medical OCR API", lifespan=_lifespan)
    app.state.settings = settings
    app.state.processor = processor if processor is not None else build_processor(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        Log.info(f"{request.method} {request.url.path}")
        return await call_next(request)

    app.include_router(router)
    register_error_handlers(app)

    static_dir = Path(settings.static_dir)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    else:
        Log.debug(f"Static directory {static_dir} not found, UI not served")
    return app


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    yield
    Log.info("Shutting down, closing provider client")
    app.state.processor.close()
