import json
import logging
from pathlib import Path

import pytest

from lconvert.keymaps import KeymapStore
from lconvert.transcoder import TextTranscoder

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture(scope="session")
def golden_seeds():
    """Reference seed tables from tests/data/seed_maps.json."""
    with open(DATA_DIR / "seed_maps.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture(scope="session")
def store():
    return KeymapStore()


@pytest.fixture
def transcoder(store):
    return TextTranscoder(store)


@pytest.fixture
def small_transcoder(store):
    """Chunks anything longer than 10 characters across 4 threads."""
    return TextTranscoder(store, chunk_threshold=10, max_workers=4)


@pytest.fixture(autouse=True)
def reset_lconvert_logger():
    """Drop handlers added by cli.setup_logging so they don't outlive capsys streams."""
    yield
    logger = logging.getLogger("lconvert")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    if hasattr(logger, "_lconvert_configured"):
        del logger._lconvert_configured
    logger.setLevel(logging.NOTSET)
