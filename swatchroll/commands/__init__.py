"""SwatchRoll command implementations."""

from __future__ import annotations

from .adjust import cmd_adjust, cmd_font_color
from .catalogs import cmd_catalogs, cmd_named
from .draw import cmd_distinct, cmd_interpolate, cmd_next

__all__ = [
    "cmd_adjust",
    "cmd_catalogs",
    "cmd_distinct",
    "cmd_font_color",
    "cmd_interpolate",
    "cmd_named",
    "cmd_next",
]
