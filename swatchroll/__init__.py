"""
SwatchRoll - palette management for HSL color catalogs.

Design goals:
- Deterministic: round-robin draws and distinct-color picks depend only on
  catalog order.
- No hidden state: a PaletteManager is constructed and passed explicitly.
- Interpolates in HSL when asked for more colors than a catalog holds.
"""

from __future__ import annotations

from .cli import main
from .constants import BUILTIN_CATALOGS, DEFAULT_CATALOG
from .exceptions import SwatchRollError, UserError
from .manager import Catalog, PaletteManager
from .selection import interpolate_colors, most_distinct_colors

__all__ = [
    "BUILTIN_CATALOGS",
    "DEFAULT_CATALOG",
    "Catalog",
    "PaletteManager",
    "SwatchRollError",
    "UserError",
    "interpolate_colors",
    "main",
    "most_distinct_colors",
]
