"""HSL color string helpers and the distance metric used for selection.

Colors are stored as ``hsl(h, s%, l%)`` strings. The distance metric does not
read those strings as HSL: it takes the three numbers as an RGB triple on a
0-255 scale and converts that triple to hue/saturation/lightness before
measuring a plain Euclidean distance. Hue is not treated as circular and the
axes are not weighted. Selection output depends on this exact behavior.
"""

from __future__ import annotations

import math
import re
from typing import NamedTuple

_NUMBER_RE = re.compile(r"\d+")
HSL_RE = re.compile(r"hsl\((\d+),\s*(\d+)%,\s*(\d+)%\)")


class HslTriple(NamedTuple):
    """Numeric hue (degrees), saturation (%) and lightness (%)."""

    hue: int
    saturation: int
    lightness: int


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)


def color_numbers(text: str) -> list[int]:
    """Return every unsigned integer run found in a color string."""
    return [int(m) for m in _NUMBER_RE.findall(text)]


def format_hsl(hue: float, saturation: float, lightness: float) -> str:
    """Format components (degrees, percent, percent) as an ``hsl()`` string.

    Values are rounded half-up to whole numbers.
    """
    return (
        f"hsl({round_half_up(hue)}, {round_half_up(saturation)}%, "
        f"{round_half_up(lightness)}%)"
    )


def simplified_hsl(text: str) -> HslTriple:
    """Convert a color string to the triple used by the distance metric.

    The first three numbers in ``text`` are read as red, green and blue on a
    0-255 scale (missing ones count as 0) and run through the usual
    max/min RGB to HSL branches. The branch arithmetic is kept as written
    because hues landing on .5 depend on it.

    Args:
        text: Color string, normally ``hsl(h, s%, l%)``

    Returns:
        HslTriple with hue in degrees and saturation/lightness in percent
    """
    numbers = color_numbers(text)[:3]
    numbers += [0] * (3 - len(numbers))
    r, g, b = (n / 255 for n in numbers)
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    l = (max_c + min_c) / 2
    if max_c == min_c:
        h = s = 0.0
    else:
        d = max_c - min_c
        s = d / (2 - max_c - min_c) if l > 0.5 else d / (max_c + min_c)
        if max_c == r:
            h = (g - b) / d + (6 if g < b else 0)
        elif max_c == g:
            h = (b - r) / d + 2
        else:
            h = (r - g) / d + 4
        h /= 6
    return HslTriple(
        round_half_up(h * 360),
        round_half_up(s * 100),
        round_half_up(l * 100),
    )


def hsl_distance(color1: str, color2: str) -> float:
    """Euclidean distance between two colors over (hue, saturation, lightness)."""
    h1, s1, l1 = simplified_hsl(color1)
    h2, s2, l2 = simplified_hsl(color2)
    return math.sqrt((h1 - h2) ** 2 + (s1 - s2) ** 2 + (l1 - l2) ** 2)
