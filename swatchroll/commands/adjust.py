"""SwatchRoll single-color commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ..adjust import darken_hsl_color, font_color_for_hsl, lighten_hsl_color
from ..exceptions import SwatchRollError, UserError

if TYPE_CHECKING:
    from ..cli_types import AdjustArgs


def cmd_adjust(args: AdjustArgs) -> None:
    """Print a lightened or darkened version of one color."""
    if args.darken:
        click.echo(darken_hsl_color(args.color, args.amount))
    else:
        click.echo(lighten_hsl_color(args.color, args.amount))


def cmd_font_color(color: str) -> None:
    """Print the text color to use on top of ``color``."""
    try:
        click.echo(font_color_for_hsl(color))
    except SwatchRollError as e:
        raise UserError(f"{e}: {color!r}") from e
