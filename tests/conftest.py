"""Shared pytest fixtures for SwatchRoll tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest
from swatchroll.manager import Catalog, PaletteManager


@pytest.fixture(autouse=True)
def reset_swatchroll_logger() -> Generator[None, None, None]:
    """Drop handlers the CLI attaches so they do not outlive a test's streams."""
    logger = logging.getLogger("swatchroll")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
    logger.setLevel(level)


@pytest.fixture
def palette() -> PaletteManager:
    """Create a manager with the built-in catalogs."""
    return PaletteManager()


@pytest.fixture
def grayscale_catalog() -> Catalog:
    """Catalog whose simplified HSL triples are easy to reason about.

    black (0, 0, 0), red (0, 100, 50), white (0, 0, 100), gray (0, 0, 50)
    """
    return Catalog.from_colors(
        "grayscale",
        ["hsl(0, 0%, 0%)", "hsl(128, 128%, 128%)", "hsl(255, 255%, 255%)", "hsl(255, 0%, 0%)"],
    )


@pytest.fixture
def custom_palette(grayscale_catalog: Catalog) -> PaletteManager:
    """Create a manager holding only the grayscale catalog."""
    return PaletteManager({"grayscale": grayscale_catalog}, active="grayscale")
