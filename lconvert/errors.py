"""Error taxonomy for layout conversion."""

from __future__ import annotations


class LConvertError(Exception):
    """Base class for all lconvert errors."""


class UnknownLayoutError(LConvertError, ValueError):
    """Raised when a layout name matches no supported layout."""

    def __init__(self, name: object):
        self.name = name
        super().__init__(f"Unknown layout: {name!r}")


class NoConversionTableError(LConvertError, LookupError):
    """Raised when no keymap exists for a (source, target) pair."""

    def __init__(self, source: object, target: object):
        self.source = source
        self.target = target
        super().__init__(f"No conversion map found for {source} to {target}")


class KeymapIntegrityError(LConvertError, RuntimeError):
    """Raised when a freshly built keymap table is incomplete."""
