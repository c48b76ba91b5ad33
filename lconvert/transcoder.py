"""TextTranscoder — applies a keymap to text, sequentially or in chunks."""

from __future__ import annotations

import concurrent.futures as cf
import logging

import lconvert.log  # noqa: F401  registers logger.trace()
from lconvert.errors import NoConversionTableError
from lconvert.keymaps import KeymapStore, get_default_store
from lconvert.layouts import Layout

logger = logging.getLogger(__name__)

# Inputs longer than this many characters are split across workers
CHUNK_THRESHOLD: int = 1000
MAX_WORKERS: int = 4


def split_chunks(text: str, parts: int) -> list[str]:
    """Split *text* into exactly *parts* contiguous chunks.

    Every chunk but the last is ``len(text) // parts`` characters long; the
    last one takes the remainder. Joining the chunks gives back *text*.

    Examples:
        >>> split_chunks('abcdefghij', 4)
        ['ab', 'cd', 'ef', 'ghij']
    """
    if parts < 1:
        raise ValueError(f"parts must be >= 1, got {parts}")
    size = len(text) // parts
    bounds = [i * size for i in range(parts)] + [len(text)]
    return [text[bounds[i]:bounds[i + 1]] for i in range(parts)]


class TextTranscoder:
    """Converts text between layouts using a shared, read-only keymap store.

    Args:
        store:           keymap table; defaults to the process-wide store.
        chunk_threshold: longest input (in characters) converted on the
                         calling thread by :meth:`convert_concurrently`.
        max_workers:     number of chunks/threads above the threshold.
        strict:          raise :class:`NoConversionTableError` on a missing
                         table instead of returning the input unchanged.
    """

    def __init__(
        self,
        store: KeymapStore | None = None,
        chunk_threshold: int = CHUNK_THRESHOLD,
        max_workers: int = MAX_WORKERS,
        strict: bool = False,
    ):
        if chunk_threshold < 0:
            raise ValueError(f"chunk_threshold must be >= 0, got {chunk_threshold}")
        if max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")
        self.store = store if store is not None else get_default_store()
        self.chunk_threshold = chunk_threshold
        self.max_workers = max_workers
        self.strict = strict

    @classmethod
    def from_config(cls, config: dict, store: KeymapStore | None = None) -> "TextTranscoder":
        return cls(
            store=store,
            chunk_threshold=config.get('chunk_threshold', CHUNK_THRESHOLD),
            max_workers=config.get('max_workers', MAX_WORKERS),
            strict=config.get('strict', False),
        )

    def convert(self, text: str, source: Layout, target: Layout) -> str:
        """Substitute every character of *text* from *source* to *target*.

        Characters without an entry are kept as is, so the output always has
        the same length as the input.
        """
        if source == target:
            return text

        keymap = self.store.lookup(source, target)
        if keymap is None:
            if self.strict:
                raise NoConversionTableError(source, target)
            logger.warning("No conversion map found for %s to %s; returning input unchanged",
                           source, target)
            return text

        return "".join([keymap.get(ch, ch) for ch in text])

    def convert_concurrently(self, text: str, source: Layout, target: Layout) -> str:
        """Same result as :meth:`convert`, split across threads for long input."""
        if len(text) <= self.chunk_threshold or self.store.lookup(source, target) is None:
            return self.convert(text, source, target)

        chunks = split_chunks(text, self.max_workers)
        logger.debug("Converting %d chars %s->%s in %d chunks",
                     len(text), source, target, len(chunks))

        results = [""] * len(chunks)
        with cf.ThreadPoolExecutor(max_workers=self.max_workers) as ex:
            futures = {
                ex.submit(self.convert, chunk, source, target): i
                for i, chunk in enumerate(chunks)
            }
            for fut in cf.as_completed(futures):
                i = futures[fut]
                results[i] = fut.result()
                logger.trace("chunk %d done (%d chars)", i, len(results[i]))  # type: ignore[attr-defined]

        return "".join(results)
