"""Distinct-color selection and interpolation over color catalogs.

Everything here is a pure function of its arguments. Stateful round-robin
access lives in :mod:`swatchroll.manager`.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from coloraide import Color

from .exceptions import SwatchRollError
from .hsl import format_hsl, hsl_distance

logger = logging.getLogger("swatchroll")


def mix_hsl(color1: str, color2: str, ratio: float) -> str:
    """Mix two colors in HSL space and return the result as an ``hsl()`` string.

    Hue travels along the shorter arc. An undefined hue (achromatic result)
    is reported as 0.
    """
    start = Color(color1).normalize()
    end = Color(color2).normalize()
    mixed = start.mix(end, ratio, space="hsl").convert("hsl")
    hue, saturation, lightness = mixed.coords()
    hue = 0.0 if math.isnan(hue) else hue % 360
    return format_hsl(hue, saturation * 100, lightness * 100)


def interpolate_colors(colors: Sequence[str], target_count: int) -> list[str]:
    """Stretch a color sequence to ``target_count`` entries by interpolation.

    Consecutive pairs are walked in order; each pair contributes its first
    endpoint followed by evenly spaced HSL mixes towards the second one.

    Args:
        colors: Source colors in order
        target_count: Number of colors wanted

    Returns:
        ``colors`` unchanged when it already has enough entries, otherwise a
        list of exactly ``target_count`` colors
    """
    if len(colors) >= target_count:
        return list(colors)
    if not colors:
        return []
    if len(colors) == 1:
        return [colors[0]] * target_count

    result: list[str] = []
    segments = math.ceil(target_count / (len(colors) - 1))
    logger.debug(
        "Interpolating %d colors to %d (%d segments per pair)",
        len(colors),
        target_count,
        segments,
    )

    for color1, color2 in zip(colors, colors[1:]):
        result.append(color1)
        for j in range(1, segments):
            if len(result) >= target_count:
                break
            result.append(mix_hsl(color1, color2, j / segments))

    if len(result) < target_count:
        result.append(colors[-1])

    return result[:target_count]


def most_distinct_colors(colors: Sequence[str], count: int) -> list[str]:
    """Pick ``count`` colors that are as far apart from each other as possible.

    Greedy farthest-point selection: start from the first catalog color, then
    repeatedly add the candidate whose distance to its nearest already
    selected color is largest. Ties go to the candidate that comes first in
    catalog order.

    When ``count`` exceeds the number of colors, the catalog is handed to
    :func:`interpolate_colors` in its original order instead.

    Raises:
        SwatchRollError: if ``count`` is not positive or ``colors`` is empty
    """
    if count <= 0:
        raise SwatchRollError(f"Color count must be positive, got {count}")
    if not colors:
        raise SwatchRollError("Cannot select colors from an empty catalog")
    if count > len(colors):
        return interpolate_colors(colors, count)

    selected = [0]
    remaining = list(range(1, len(colors)))
    for _ in range(count - 1):
        best_pos = 0
        max_distance = -1.0
        for pos, idx in enumerate(remaining):
            min_dist = min(hsl_distance(colors[s], colors[idx]) for s in selected)
            if min_dist > max_distance:
                max_distance = min_dist
                best_pos = pos
        selected.append(remaining.pop(best_pos))

    return [colors[idx] for idx in selected]
