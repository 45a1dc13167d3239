"""Single-color helpers: text contrast and lighten/darken."""

from __future__ import annotations

import logging
import math

from coloraide import Color

from .constants import FONT_COLORS, FONT_LIGHTNESS_THRESHOLD, LAB_LIGHTNESS_STEP
from .exceptions import SwatchRollError
from .hsl import HSL_RE, color_numbers, format_hsl

logger = logging.getLogger("swatchroll")


def font_color_for_hsl(hsl: str) -> str:
    """Return the text color class that reads well on an HSL background.

    Raises:
        SwatchRollError: if the string does not hold exactly three numbers
    """
    values = color_numbers(hsl)
    if len(values) != 3:
        raise SwatchRollError("Invalid HSL format")
    lightness = values[2]
    return FONT_COLORS["white"] if lightness < FONT_LIGHTNESS_THRESHOLD else FONT_COLORS["black"]


def _shift_lightness(hsl: str, amount: float) -> str:
    if not HSL_RE.search(hsl):
        raise SwatchRollError("Invalid HSL format")
    color = Color(hsl).convert("lab-d65")
    color.set("l", lambda v: v + LAB_LIGHTNESS_STEP * amount)
    shifted = color.convert("srgb").clip().convert("hsl")
    hue, saturation, lightness = shifted.coords()
    if math.isnan(hue):
        hue = 0.0
    return format_hsl(hue, saturation * 100, lightness * 100)


def lighten_hsl_color(hsl: str, amount: float) -> str:
    """Lighten an ``hsl()`` color; malformed input is returned unchanged."""
    try:
        return _shift_lightness(hsl, amount)
    except (SwatchRollError, ValueError):
        logger.exception("Error in lighten_hsl_color")
        return hsl


def darken_hsl_color(hsl: str, amount: float) -> str:
    """Darken an ``hsl()`` color; malformed input is returned unchanged."""
    try:
        return _shift_lightness(hsl, -amount)
    except (SwatchRollError, ValueError):
        logger.exception("Error in darken_hsl_color")
        return hsl
