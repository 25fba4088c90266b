"""Coordinate type and board coordinate helpers.

Files and ranks are both 0-based:
    a1 = (0, 0), h1 = (7, 0), a8 = (0, 7), h8 = (7, 7)
"""

from __future__ import annotations

from typing import NamedTuple, TypeAlias, Union

_FILES = "abcdefgh"
_RANKS = "12345678"


class Coordinate(NamedTuple):
    """A square on the board as ``(file, rank)``."""

    file: int
    rank: int

    def offset(self, df: int, dr: int) -> Coordinate | None:
        """Coordinate shifted by ``(df, dr)``, or None when off the board."""
        f = self.file + df
        r = self.rank + dr
        if is_valid(f, r):
            return Coordinate(f, r)
        return None

    def __str__(self) -> str:
        return coordinate_name(self)


# Anything callers may hand in where a coordinate is expected.
CoordinateLike: TypeAlias = Union[Coordinate, tuple[int, int], str]


def is_valid(file: int, rank: int) -> bool:
    """Whether ``(file, rank)`` lies on the board."""
    return 0 <= file < 8 and 0 <= rank < 8


def coordinate_name(coord: tuple[int, int]) -> str:
    """Algebraic name, e.g. (4, 3) -> 'e4'."""
    file, rank = coord
    return _FILES[file] + _RANKS[rank]


def parse_coordinate(name: str) -> Coordinate:
    """Parse a square name, e.g. 'e4' -> Coordinate(4, 3)."""
    if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
        raise ValueError(f"Invalid square name: {name!r}")
    return Coordinate(_FILES.index(name[0]), _RANKS.index(name[1]))


def to_coordinate(value: CoordinateLike) -> Coordinate:
    """Normalise a coordinate, ``(file, rank)`` pair or square name."""
    if isinstance(value, str):
        return parse_coordinate(value)
    if isinstance(value, Coordinate):
        return value
    file, rank = value
    return Coordinate(file, rank)


ALL_COORDINATES: tuple[Coordinate, ...] = tuple(
    Coordinate(f, r) for r in range(8) for f in range(8)
)

# ── Named coordinate constants ──────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = ALL_COORDINATES[0:8]
A2, B2, C2, D2, E2, F2, G2, H2 = ALL_COORDINATES[8:16]
A3, B3, C3, D3, E3, F3, G3, H3 = ALL_COORDINATES[16:24]
A4, B4, C4, D4, E4, F4, G4, H4 = ALL_COORDINATES[24:32]
A5, B5, C5, D5, E5, F5, G5, H5 = ALL_COORDINATES[32:40]
A6, B6, C6, D6, E6, F6, G6, H6 = ALL_COORDINATES[40:48]
A7, B7, C7, D7, E7, F7, G7, H7 = ALL_COORDINATES[48:56]
A8, B8, C8, D8, E8, F8, G8, H8 = ALL_COORDINATES[56:64]
