"""SwatchRoll CLI using Click."""

from __future__ import annotations

import logging
import sys
from importlib.metadata import version

import click

from .cli_types import AdjustArgs, CatalogsArgs, DistinctArgs, InterpolateArgs, NextArgs
from .commands import (
    cmd_adjust,
    cmd_catalogs,
    cmd_distinct,
    cmd_font_color,
    cmd_interpolate,
    cmd_named,
    cmd_next,
)
from .constants import CATALOG_ENV_VAR, DEFAULT_CATALOG
from .exceptions import SwatchRollError, UserError

# Module logger
logger = logging.getLogger("swatchroll")


def setup_logging(debug: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if debug else logging.WARNING
    logger.setLevel(level)
    if any(
        isinstance(h, logging.StreamHandler) and getattr(h, "stream", None) is sys.stderr
        for h in logger.handlers
    ):
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(handler)


def catalog_options(func):
    """Decorator to add catalog selection and output options."""
    func = click.option(
        "--catalog",
        "-c",
        default=DEFAULT_CATALOG,
        show_default=True,
        envvar=CATALOG_ENV_VAR,
        help=f"Catalog to draw from (env: {CATALOG_ENV_VAR}).",
    )(func)
    func = json_option(func)
    return func


def json_option(func):
    return click.option(
        "--json",
        "json_output",
        is_flag=True,
        help="Emit machine-readable JSON to stdout.",
    )(func)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=version("swatchroll"), prog_name="swatchroll")
@click.option(
    "--debug",
    "-d",
    is_flag=True,
    help="Enable debug logging to stderr.",
)
@click.pass_context
def cli(ctx: click.Context, debug: bool):
    """SwatchRoll: cycle, pick and stretch HSL color palettes."""
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    setup_logging(debug=debug)


@cli.command("catalogs")
@catalog_options
def catalogs(catalog: str, json_output: bool):
    """List catalogs and their sizes (* marks the active one)."""
    cmd_catalogs(CatalogsArgs(catalog=catalog, json=json_output))


@cli.command("named")
@json_option
def named(json_output: bool):
    """List the named reference colors."""
    cmd_named(json_output=json_output)


@cli.command("next")
@catalog_options
@click.option(
    "--count",
    "-n",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Number of colors to draw.",
)
@click.option(
    "--start",
    type=int,
    default=0,
    show_default=True,
    help="Cursor position to start from (wraps around the catalog).",
)
def next_color(catalog: str, json_output: bool, count: int, start: int):
    """Draw colors round-robin from a catalog."""
    args = NextArgs(catalog=catalog, count=count, start=start, json=json_output)
    cmd_next(args)


@cli.command("distinct")
@click.argument("count", type=click.IntRange(min=1))
@catalog_options
def distinct(count: int, catalog: str, json_output: bool):
    """Pick COUNT maximally distinct colors from a catalog.

    Asking for more colors than the catalog holds fills the gap with
    interpolated colors.
    """
    args = DistinctArgs(catalog=catalog, count=count, json=json_output)
    cmd_distinct(args)


@cli.command("interpolate")
@click.argument("count", type=click.IntRange(min=1))
@click.argument("colors", nargs=-1)
@catalog_options
def interpolate(count: int, colors: tuple[str, ...], catalog: str, json_output: bool):
    """Stretch COLORS (or the catalog) to COUNT colors by HSL interpolation."""
    args = InterpolateArgs(catalog=catalog, count=count, colors=list(colors), json=json_output)
    cmd_interpolate(args)


@cli.command("lighten")
@click.argument("color")
@click.option(
    "--amount",
    type=float,
    default=1.0,
    show_default=True,
    help="Lightness steps to add.",
)
def lighten(color: str, amount: float):
    """Print a lighter version of COLOR."""
    cmd_adjust(AdjustArgs(color=color, amount=amount, darken=False))


@cli.command("darken")
@click.argument("color")
@click.option(
    "--amount",
    type=float,
    default=1.0,
    show_default=True,
    help="Lightness steps to remove.",
)
def darken(color: str, amount: float):
    """Print a darker version of COLOR."""
    cmd_adjust(AdjustArgs(color=color, amount=amount, darken=True))


@cli.command("font-color")
@click.argument("color")
def font_color(color: str):
    """Print the text color that reads well on COLOR."""
    cmd_font_color(color)


def main():
    """Main entry point for the CLI."""
    try:
        cli()
    except UserError as e:
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(e.rc)
    except SwatchRollError as e:
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(2)
    except KeyboardInterrupt:
        click.echo("ERROR: Interrupted", err=True)
        sys.exit(130)
