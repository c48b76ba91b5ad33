"""KeymapStore — derives every pairwise keymap from the seed maps.

Build steps:
  1. seed maps go in as (QWERTY, L)
  2. each seed is inverted into (L, QWERTY)
  3. every ordered pair of peripherals (A, B) is composed through the hub:
     (A, QWERTY) then (QWERTY, B), keeping the hub character when B has no
     entry for it
  4. the table is frozen and verified

Same-layout conversion never needs a table: it is the identity.
"""

from __future__ import annotations

import functools
import logging
from itertools import permutations
from types import MappingProxyType
from typing import Iterator, Mapping

from lconvert.errors import KeymapIntegrityError
from lconvert.layouts import Layout
from lconvert.maps import SeedMapRepository, find_collisions

logger = logging.getLogger(__name__)

Pair = tuple[Layout, Layout]


def invert_map(mapping: Mapping[str, str]) -> dict[str, str]:
    """Swap keys and values.

    Entries are processed sorted by source character, so when two keys share
    a value the greater source character wins.
    """
    inverse: dict[str, str] = {}
    for key, value in sorted(mapping.items()):
        inverse[value] = key
    return inverse


def compose_maps(first: Mapping[str, str], second: Mapping[str, str]) -> dict[str, str]:
    """Apply *first* then *second*; a miss in *second* keeps the intermediate char."""
    return {key: second.get(value, value) for key, value in first.items()}


class KeymapStore:
    """Immutable table of character maps for every ordered layout pair."""

    def __init__(self, repository: SeedMapRepository | None = None):
        self._repository = repository if repository is not None else SeedMapRepository()
        table = self._build(self._repository)
        self._table: Mapping[Pair, Mapping[str, str]] = MappingProxyType(
            {pair: MappingProxyType(m) for pair, m in table.items()}
        )
        self.verify()
        logger.info("Keymap table built: %d layout pairs", len(self._table))

    @staticmethod
    def _build(repository: SeedMapRepository) -> dict[Pair, dict[str, str]]:
        hub = repository.hub
        keymaps: dict[Pair, dict[str, str]] = {}

        for layout, seed in repository.items():
            keymaps[(hub, layout)] = dict(seed)

        for layout, seed in repository.items():
            keymaps[(layout, hub)] = invert_map(seed)

        for source, target in permutations(repository.peripherals, 2):
            keymaps[(source, target)] = compose_maps(
                keymaps[(source, hub)], keymaps[(hub, target)]
            )

        return keymaps

    def verify(self) -> None:
        """Check the built table.

        Every ordered pair of distinct layouts must be present, otherwise
        :class:`KeymapIntegrityError` is raised. A seed map that is not
        injective is reported, since its inverse is smaller than the seed.
        """
        missing = [pair for pair in permutations(Layout, 2) if pair not in self._table]
        if missing:
            names = ", ".join(f"{a}->{b}" for a, b in missing)
            raise KeymapIntegrityError(f"Keymap table is missing pairs: {names}")

        hub = self._repository.hub
        for layout, seed in self._repository.items():
            inverse = self._table[(layout, hub)]
            if len(inverse) == len(seed):
                continue
            for value, keys in sorted(find_collisions(seed).items()):
                logger.warning(
                    "Seed map %s->%s is not injective: %s all map to %r; %s->%s uses %r",
                    hub, layout, keys, value, layout, hub, inverse[value],
                )

    def lookup(self, source: Layout, target: Layout) -> Mapping[str, str] | None:
        """Return the map for *source* → *target*, or None.

        None is returned for ``source == target`` (identity, no table) and for
        a pair that was not built.
        """
        if source == target:
            return None
        return self._table.get((source, target))

    def pairs(self) -> list[Pair]:
        return list(self._table)

    @property
    def table(self) -> Mapping[Pair, Mapping[str, str]]:
        return self._table

    @property
    def repository(self) -> SeedMapRepository:
        return self._repository

    def __contains__(self, pair: object) -> bool:
        return pair in self._table

    def __len__(self) -> int:
        return len(self._table)

    def __iter__(self) -> Iterator[Pair]:
        return iter(self._table)


@functools.lru_cache(maxsize=None)
def get_default_store() -> KeymapStore:
    """Keymap store built from the shipped seed maps, built once per process."""
    return KeymapStore()
