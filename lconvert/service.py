"""Request/response boundary shared by the HTTP service and the CLI.

The service parses both layout names before touching any keymap, converts,
and renders the result as a JSON envelope with an HTTP status code.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field

from lconvert.errors import NoConversionTableError, UnknownLayoutError
from lconvert.layouts import parse_layout
from lconvert.transcoder import TextTranscoder

logger = logging.getLogger(__name__)


class ConversionRequest(BaseModel):
    """Body of ``POST /api/convert``."""

    model_config = {"frozen": True, "populate_by_name": True}

    text: str
    from_: str = Field(alias="from")
    to: str


def success_envelope(data: str) -> dict:
    return {"status": "success", "data": data}


def error_envelope(message: str, **extra: object) -> dict:
    body: dict = {"status": "error", "message": message}
    body.update(extra)
    return body


class ConversionService:
    """Turns a :class:`ConversionRequest` into ``(status_code, body)``."""

    def __init__(self, transcoder: TextTranscoder):
        self.transcoder = transcoder

    def handle(self, request: ConversionRequest) -> tuple[int, dict]:
        try:
            source = parse_layout(request.from_)
            target = parse_layout(request.to)
        except UnknownLayoutError as exc:
            logger.info("Rejected conversion request: %s", exc)
            return 400, error_envelope(
                f"Invalid layout code provided: {exc.name!r}", layout=exc.name
            )

        logger.debug("Converting %d chars %s->%s", len(request.text), source, target)
        try:
            converted = self.transcoder.convert_concurrently(request.text, source, target)
        except NoConversionTableError as exc:
            logger.error("Conversion failed: %s", exc)
            return 500, error_envelope(str(exc))

        return 200, success_envelope(converted)
