"""
HTTP service: POST /api/convert and GET /api/healthchecker
"""
from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse

from lconvert import __version__
from lconvert.config import DEFAULT_CONFIG, validate_config
from lconvert.keymaps import KeymapStore
from lconvert.service import ConversionRequest, ConversionService
from lconvert.transcoder import TextTranscoder

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api")

HEALTH_MESSAGE = "Keyboard layout conversion service"


@router.get("/healthchecker")
def health_checker():
    """
    Liveness probe

    Returns:
        dict: status envelope
    """
    return {"status": "success", "message": HEALTH_MESSAGE}


@router.post("/convert")
def convert_text(body: ConversionRequest, request: Request) -> JSONResponse:
    """
    Convert text typed on one layout into another

    Returns:
        JSONResponse: success envelope with the converted text, or an error
        envelope (400 for an unknown layout name)
    """
    service: ConversionService = request.app.state.service
    status_code, payload = service.handle(body)
    return JSONResponse(status_code=status_code, content=payload)


def create_app(config: dict | None = None, transcoder: TextTranscoder | None = None) -> FastAPI:
    """Build the FastAPI app.

    The keymap table is built at startup unless a ready *transcoder* is
    given; an incomplete table aborts startup.
    """
    settings = validate_config(config) if config is not None else dict(DEFAULT_CONFIG)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Build the keymap table once for the lifetime of the app"""
        active = transcoder
        if active is None:
            active = TextTranscoder.from_config(settings, store=KeymapStore())
        app.state.service = ConversionService(active)
        logger.info("lconvert service ready (%d layout pairs)", len(active.store))
        yield
        logger.info("lconvert service shutting down")

    app = FastAPI(
        title="lconvert",
        description="Keyboard layout text conversion",
        version=__version__,
        lifespan=lifespan,
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info("%s %s -> %d (%.1f ms)",
                    request.method, request.url.path, response.status_code, elapsed_ms)
        return response

    app.include_router(router)
    return app
