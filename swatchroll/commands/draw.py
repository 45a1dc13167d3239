"""SwatchRoll color drawing commands: next, distinct, interpolate."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..manager import PaletteManager
from ..selection import interpolate_colors
from ..utils import echo_colors, parse_color_args

if TYPE_CHECKING:
    from ..cli_types import DistinctArgs, InterpolateArgs, NextArgs

logger = logging.getLogger("swatchroll")


def manager_for(catalog: str) -> PaletteManager:
    """Create a manager with ``catalog`` active (unknown names keep the default)."""
    manager = PaletteManager()
    manager.switch_catalog(catalog)
    return manager


def cmd_next(args: NextArgs) -> None:
    """Draw colors round-robin from the active catalog."""
    manager = manager_for(args.catalog)
    manager.reset_cursor(args.start)
    colors = [manager.next_color() for _ in range(args.count)]
    logger.debug("Cursor after draw: %d", manager.cursor)
    echo_colors(colors, json_output=args.json)


def cmd_distinct(args: DistinctArgs) -> None:
    """Print the most distinct colors of the active catalog."""
    manager = manager_for(args.catalog)
    echo_colors(manager.most_distinct_colors(args.count), json_output=args.json)


def cmd_interpolate(args: InterpolateArgs) -> None:
    """Stretch explicit colors, or the active catalog, to the requested count."""
    if args.colors:
        source = parse_color_args(args.colors)
    else:
        source = list(manager_for(args.catalog).active_catalog.colors)
    echo_colors(interpolate_colors(source, args.count), json_output=args.json)
