"""SwatchRoll catalog listing commands."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from ..constants import NAMED_COLORS
from ..manager import PaletteManager

if TYPE_CHECKING:
    from ..cli_types import CatalogsArgs


def cmd_catalogs(args: CatalogsArgs) -> None:
    """List available catalogs, marking the active one."""
    manager = PaletteManager()
    manager.switch_catalog(args.catalog)

    if args.json:
        payload = {
            "active": manager.active,
            "catalogs": {
                name: list(manager.catalog(name).colors) for name in manager.catalog_names
            },
        }
        click.echo(json.dumps(payload, indent=2))
        return

    for name in manager.catalog_names:
        marker = "*" if name == manager.active else " "
        click.echo(f"{marker} {name:<12} {len(manager.catalog(name)):>3} colors")


def cmd_named(*, json_output: bool) -> None:
    """List the named reference colors."""
    if json_output:
        click.echo(json.dumps(NAMED_COLORS, indent=2))
        return
    width = max(len(name) for name in NAMED_COLORS)
    for name, color in NAMED_COLORS.items():
        click.echo(f"{name:<{width}}  {color}")
