"""Supported keyboard layouts and layout name parsing.

QWERTY is the hub: every other layout has a hand-authored seed map from
QWERTY, and all remaining pairs are derived through it.
"""

from __future__ import annotations

from enum import Enum

from lconvert.errors import UnknownLayoutError


class Layout(Enum):
    QWERTY = "qwerty"
    DVORAK = "dvorak"
    COLEMAK = "colemak"
    RUSSIAN = "russian"

    def __str__(self) -> str:
        return self.value


HUB: Layout = Layout.QWERTY

PERIPHERALS: tuple[Layout, ...] = tuple(l for l in Layout if l is not HUB)

# Short names accepted in addition to the canonical ones
LAYOUT_ALIASES = {
    'us': Layout.QWERTY,
    'en': Layout.QWERTY,
    'ru': Layout.RUSSIAN,
}


def supported_names() -> list[str]:
    """Canonical layout names in declaration order."""
    return [layout.value for layout in Layout]


def parse_layout(name: str) -> Layout:
    """Parse an external layout name into a :class:`Layout`.

    Matching is case-insensitive and ignores surrounding whitespace.

    Raises:
        UnknownLayoutError: if *name* is not a supported layout name or alias.

    Examples:
        >>> parse_layout('Dvorak')
        <Layout.DVORAK: 'dvorak'>
        >>> parse_layout('ru')
        <Layout.RUSSIAN: 'russian'>
    """
    if isinstance(name, Layout):
        return name
    if not isinstance(name, str):
        raise UnknownLayoutError(name)

    normalized = name.strip().lower()
    try:
        return Layout(normalized)
    except ValueError:
        pass
    try:
        return LAYOUT_ALIASES[normalized]
    except KeyError:
        raise UnknownLayoutError(name) from None
