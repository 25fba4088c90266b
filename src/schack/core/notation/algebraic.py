"""Coordinate <-> algebraic square name conversion."""

from __future__ import annotations

from schack.core.types import Coordinate, coordinate_name, parse_coordinate


def to_algebraic(coord: tuple[int, int]) -> str:
    """File letter plus 1-based rank digit, e.g. (4, 3) -> 'e4'."""
    return coordinate_name(coord)


def parse_algebraic(text: str) -> Coordinate:
    """Inverse of :func:`to_algebraic`; surrounding whitespace and case are ignored."""
    return parse_coordinate(text.strip().lower())
