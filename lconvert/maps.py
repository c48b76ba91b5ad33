"""Seed keyboard maps: QWERTY to every other supported layout.

Each map says "the key that produces K on QWERTY produces V on the target
layout". Only keys whose character differs are listed; anything absent is
typed the same on both layouts. The tables are authored data, mirrored in
``tests/data/seed_maps.json``.
"""

from __future__ import annotations

from collections import defaultdict
from types import MappingProxyType
from typing import Iterator, Mapping

from lconvert.errors import NoConversionTableError
from lconvert.layouts import HUB, Layout

QWERTY_TO_DVORAK: dict[str, str] = {
    "q": "'", "w": ",", "e": ".", "r": "p", "t": "y", "y": "f", "u": "g",
    "i": "c", "o": "r", "p": "l",
    "s": "o", "d": "e", "f": "u", "g": "i", "h": "d", "j": "h", "k": "t",
    "l": "n",
    "z": ";", "x": "q", "c": "j", "v": "k", "b": "x", "n": "b",
    ",": "w", ".": "v", ";": "s", "/": "z", "'": "-",
    "[": "/", "]": "=", "-": "[", "=": "]",
    # Uppercase
    "Q": '"', "W": "<", "E": ">", "R": "P", "T": "Y", "Y": "F", "U": "G",
    "I": "C", "O": "R", "P": "L",
    "S": "O", "D": "E", "F": "U", "G": "I", "H": "D", "J": "H", "K": "T",
    "L": "N",
    "Z": ":", "X": "Q", "C": "J", "V": "K", "B": "X", "N": "B",
    "<": "W", ">": "V", ":": "S", "?": "Z", '"': "_",
    "{": "?", "}": "+", "_": "{", "+": "}",
}

# NOTE: "r" and ";" both produce "p" (and "R"/":" both produce "P"), so
# this map is not injective; see invert_map() for the tie-break.
QWERTY_TO_COLEMAK: dict[str, str] = {
    "e": "f", "r": "p", "t": "g", "y": "j", "u": "l", "i": "u", "o": "y",
    "p": ";",
    "s": "r", "d": "s", "f": "t", "g": "d", "h": "h", "j": "n", "k": "e",
    "l": "i", ";": "p", "'": "-", "-": "'",
    # Uppercase
    "E": "F", "R": "P", "T": "G", "Y": "J", "U": "L", "I": "U", "O": "Y",
    "P": ":",
    "S": "R", "D": "S", "F": "T", "G": "D", "H": "H", "J": "N", "K": "E",
    "L": "I", ":": "P", '"': "_", "_": '"',
}

QWERTY_TO_RUSSIAN: dict[str, str] = {
    "q": "й", "w": "ц", "e": "у", "r": "к", "t": "е", "y": "н", "u": "г",
    "i": "ш", "o": "щ", "p": "з", "[": "х", "]": "ъ",
    "a": "ф", "s": "ы", "d": "в", "f": "а", "g": "п", "h": "р",
    "j": "о", "k": "л", "l": "д", ";": "ж", "'": "э",
    "z": "я", "x": "ч", "c": "с", "v": "м", "b": "и", "n": "т",
    "m": "ь", ",": "б", ".": "ю", "/": ".",
    # Uppercase
    "Q": "Й", "W": "Ц", "E": "У", "R": "К", "T": "Е", "Y": "Н", "U": "Г",
    "I": "Ш", "O": "Щ", "P": "З", "{": "Х", "}": "Ъ",
    "A": "Ф", "S": "Ы", "D": "В", "F": "А", "G": "П", "H": "Р",
    "J": "О", "K": "Л", "L": "Д", ":": "Ж", '"': "Э",
    "Z": "Я", "X": "Ч", "C": "С", "V": "М", "B": "И", "N": "Т",
    "M": "Ь", "<": "Б", ">": "Ю", "?": ",",
}

SEED_MAPS: dict[Layout, dict[str, str]] = {
    Layout.DVORAK: QWERTY_TO_DVORAK,
    Layout.COLEMAK: QWERTY_TO_COLEMAK,
    Layout.RUSSIAN: QWERTY_TO_RUSSIAN,
}


def find_collisions(mapping: Mapping[str, str]) -> dict[str, list[str]]:
    """Return values reached from more than one key, with their sorted keys."""
    sources: dict[str, list[str]] = defaultdict(list)
    for key, value in mapping.items():
        sources[value].append(key)
    return {v: sorted(keys) for v, keys in sources.items() if len(keys) > 1}


def is_injective(mapping: Mapping[str, str]) -> bool:
    return len(set(mapping.values())) == len(mapping)


class SeedMapRepository:
    """Read-only access to the hub → peripheral seed maps."""

    def __init__(self, seeds: Mapping[Layout, Mapping[str, str]] | None = None):
        if seeds is None:
            seeds = SEED_MAPS
        unknown = [key for key in seeds if not isinstance(key, Layout)]
        if unknown:
            raise ValueError(f"Seed map keys must be Layout members, got {unknown!r}")
        if HUB in seeds:
            raise ValueError(f"Hub layout {HUB} cannot have a seed map")
        self._seeds: dict[Layout, Mapping[str, str]] = {
            layout: MappingProxyType(dict(seeds[layout]))
            for layout in Layout
            if layout in seeds
        }

    @property
    def hub(self) -> Layout:
        return HUB

    @property
    def peripherals(self) -> tuple[Layout, ...]:
        """Layouts that have a seed map, in declaration order."""
        return tuple(self._seeds)

    def seed(self, layout: Layout) -> Mapping[str, str]:
        """Return the QWERTY → *layout* seed map."""
        try:
            return self._seeds[layout]
        except KeyError:
            raise NoConversionTableError(HUB, layout) from None

    def items(self) -> Iterator[tuple[Layout, Mapping[str, str]]]:
        return iter(self._seeds.items())

    def __contains__(self, layout: object) -> bool:
        return layout in self._seeds
