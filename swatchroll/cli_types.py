"""Type definitions for CLI command arguments."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class CatalogsArgs:
    """Arguments for catalogs command."""

    catalog: str
    json: bool


@dataclass
class NextArgs:
    """Arguments for next command."""

    catalog: str
    count: int
    start: int
    json: bool


@dataclass
class DistinctArgs:
    """Arguments for distinct command."""

    catalog: str
    count: int
    json: bool


@dataclass
class InterpolateArgs:
    """Arguments for interpolate command."""

    catalog: str
    count: int
    colors: list[str]
    json: bool


@dataclass
class AdjustArgs:
    """Arguments for lighten and darken commands."""

    color: str
    amount: float
    darken: bool
