"""SwatchRoll constants."""

from __future__ import annotations

# Built-in catalogs. Order matters: it defines round-robin order and the
# tie-break priority of distinct-color selection.
BASE_COLORS = (
    "hsl(14, 23%, 53%)",
    "hsl(22, 33%, 64%)",
    "hsl(25, 24%, 63%)",
    "hsl(37, 26%, 75%)",
    "hsl(50, 35%, 83%)",
    "hsl(42, 21%, 73%)",
    "hsl(84, 11%, 69%)",
    "hsl(70, 4%, 63%)",
    "hsl(204, 3%, 56%)",
    "hsl(209, 23%, 32%)",
    "hsl(211, 21%, 47%)",
    "hsl(232, 12%, 63%)",
    "hsl(340, 14%, 38%)",
    "hsl(330, 17%, 46%)",
)

PASTEL_COLORS = (
    "hsl(140, 37%, 75%)",
    "hsl(165, 31%, 80%)",
    "hsl(44, 84%, 83%)",
    "hsl(26, 56%, 77%)",
    "hsl(0, 35%, 74%)",
    "hsl(221, 24%, 76%)",
    "hsl(156, 21%, 79%)",
    "hsl(30, 36%, 83%)",
    "hsl(27, 60%, 89%)",
    "hsl(187, 25%, 89%)",
)

BUILTIN_CATALOGS = {
    "base": BASE_COLORS,
    "pastels": PASTEL_COLORS,
}
DEFAULT_CATALOG = "pastels"

# Named reference colors used by the hosting application
NAMED_COLORS = {
    "primaryGreen": "hsl(140, 37%, 75%)",
    "primaryYellow": "hsl(44, 84%, 83%)",
    "primaryRed": "hsl(0, 35%, 74%)",
    "primaryGrey": "hsl(0, 0%, 87%)",
    "modelRed": "hsl(0, 40%, 60%)",
    "modelGreen": "hsl(100, 40%, 60%)",
    "modelYellow": "hsl(60, 40%, 60%)",
}

# Text classes for light/dark backgrounds
FONT_COLORS = {
    "white": "text-gray-200",
    "black": "text-gray-700",
}
FONT_LIGHTNESS_THRESHOLD = 50

# Lab lightness step per unit of lighten/darken amount
LAB_LIGHTNESS_STEP = 18

# Environment
CATALOG_ENV_VAR = "SWATCHROLL_CATALOG"
