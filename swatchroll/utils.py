"""SwatchRoll utility functions."""

from __future__ import annotations

import json
from collections.abc import Sequence

import click

from .exceptions import UserError
from .hsl import HSL_RE


def ensure_hsl(text: str) -> str:
    """Return ``text`` stripped if it is an ``hsl(h, s%, l%)`` string.

    Raises:
        UserError: if the text is not in that form
    """
    value = text.strip()
    if not HSL_RE.fullmatch(value):
        raise UserError(f"Not an hsl() color: {text!r} (expected e.g. 'hsl(140, 37%, 75%)')")
    return value


def parse_color_args(values: Sequence[str]) -> list[str]:
    """Validate a list of color arguments from the command line."""
    return [ensure_hsl(v) for v in values]


def echo_colors(colors: Sequence[str], *, json_output: bool = False) -> None:
    """Print colors one per line, or as a JSON list."""
    if json_output:
        click.echo(json.dumps(list(colors)))
        return
    for color in colors:
        click.echo(color)
