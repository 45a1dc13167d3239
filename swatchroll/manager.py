"""Palette state: named catalogs, the active catalog and a round-robin cursor."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from .constants import BUILTIN_CATALOGS, DEFAULT_CATALOG
from .exceptions import SwatchRollError, UserError
from .selection import most_distinct_colors

logger = logging.getLogger("swatchroll")


@dataclass(frozen=True)
class Catalog:
    """A named, ordered, non-empty sequence of colors."""

    name: str
    colors: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.colors:
            raise SwatchRollError(f"Catalog '{self.name}' has no colors")

    def __len__(self) -> int:
        return len(self.colors)

    @classmethod
    def from_colors(cls, name: str, colors: Iterable[str]) -> Catalog:
        return cls(name=name, colors=tuple(colors))


def builtin_catalogs() -> dict[str, Catalog]:
    """Return fresh Catalog objects for the built-in color sets."""
    return {name: Catalog.from_colors(name, colors) for name, colors in BUILTIN_CATALOGS.items()}


class PaletteManager:
    """Holds color catalogs and a cursor into the active one.

    Instances are created and passed explicitly; there is no shared default
    instance. Reads and writes of the active catalog and cursor are guarded
    by a lock so one manager can be handed to several threads.
    """

    def __init__(
        self,
        catalogs: Mapping[str, Catalog] | None = None,
        *,
        active: str = DEFAULT_CATALOG,
    ):
        self._catalogs = dict(catalogs) if catalogs is not None else builtin_catalogs()
        if active not in self._catalogs:
            choices = ", ".join(sorted(self._catalogs))
            raise UserError(f"Unknown catalog '{active}' (available: {choices})")
        self._active = active
        self._cursor = 0
        self._lock = threading.Lock()

    @property
    def active(self) -> str:
        return self._active

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def catalog_names(self) -> list[str]:
        return list(self._catalogs)

    @property
    def active_catalog(self) -> Catalog:
        return self._catalogs[self._active]

    def catalog(self, name: str) -> Catalog:
        """Return a catalog by name.

        Raises:
            UserError: if no catalog has that name
        """
        try:
            return self._catalogs[name]
        except KeyError:
            raise UserError(f"Unknown catalog '{name}'") from None

    def switch_catalog(self, name: str) -> None:
        """Make ``name`` the active catalog and rewind the cursor.

        Unknown names are logged and otherwise ignored.
        """
        with self._lock:
            if name not in self._catalogs:
                logger.warning('Color set "%s" does not exist.', name)
                return
            self._active = name
            self._cursor = 0
        logger.debug("Switched to catalog %s", name)

    def next_color(self) -> str:
        """Return the color under the cursor and advance the cursor by one."""
        with self._lock:
            colors = self._catalogs[self._active].colors
            color = colors[self._cursor % len(colors)]
            self._cursor += 1
        return color

    def reset_cursor(self, index: int = 0) -> None:
        # No bounds check; the index is wrapped on the next read.
        with self._lock:
            self._cursor = index

    def most_distinct_colors(self, count: int) -> list[str]:
        """Return ``count`` maximally distinct colors from the active catalog."""
        with self._lock:
            colors = self._catalogs[self._active].colors
        return most_distinct_colors(colors, count)
