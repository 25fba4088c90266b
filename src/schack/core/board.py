"""Board - piece placement on an 8x8 grid of squares."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from schack.core.enums import Rank, Team
from schack.core.piece import Piece
from schack.core.types import Coordinate

_BACK_RANK: tuple[Rank, ...] = (
    Rank.ROOK,
    Rank.KNIGHT,
    Rank.BISHOP,
    Rank.QUEEN,
    Rank.KING,
    Rank.BISHOP,
    Rank.KNIGHT,
    Rank.ROOK,
)


@dataclass(slots=True)
class Square:
    """A board coordinate and its (optional) occupant."""

    coordinate: Coordinate
    piece: Piece | None = None

    @property
    def is_empty(self) -> bool:
        return self.piece is None


class Board:
    """Mutable 64-square board. Pure placement data, no chess rules.

    Coordinates must be on the board; callers never construct others.
    """

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        # Indexed [rank][file].
        self._squares: list[list[Square]] = [
            [Square(Coordinate(f, r)) for f in range(8)] for r in range(8)
        ]

    # -- Element access -----------------------------------------------------

    def square(self, coord: tuple[int, int]) -> Square:
        file, rank = coord
        return self._squares[rank][file]

    def piece_at(self, coord: tuple[int, int]) -> Piece | None:
        return self.square(coord).piece

    def place(self, coord: tuple[int, int], piece: Piece | None) -> None:
        self.square(coord).piece = piece

    def __getitem__(self, coord: tuple[int, int]) -> Piece | None:
        return self.piece_at(coord)

    def __setitem__(self, coord: tuple[int, int], piece: Piece | None) -> None:
        self.place(coord, piece)

    def is_empty(self, coord: tuple[int, int]) -> bool:
        return self.square(coord).piece is None

    # -- Query helpers ------------------------------------------------------

    def squares(self) -> Iterator[Square]:
        """All 64 squares, a1..h1 then a2..h2 and so on."""
        for row in self._squares:
            yield from row

    def occupied(self) -> Iterator[Square]:
        return (sq for sq in self.squares() if sq.piece is not None)

    def pieces(self, team: Team, rank: Rank | None = None) -> list[Coordinate]:
        """Coordinates holding *team*'s pieces, optionally of a single *rank*."""
        return [
            sq.coordinate
            for sq in self.occupied()
            if sq.piece.team == team and (rank is None or sq.piece.rank == rank)  # type: ignore[union-attr]
        ]

    def king_coordinate(self, team: Team) -> Coordinate:
        """Return the single king coordinate for *team*."""
        kings = self.pieces(team, Rank.KING)
        if not kings:
            raise ValueError(f"No {team.name} king on board")
        return kings[0]

    def snapshot(self) -> dict[Coordinate, Piece]:
        """Coordinate -> piece mapping of every occupied square."""
        return {sq.coordinate: sq.piece for sq in self.occupied()}  # type: ignore[misc]

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        for sq in self.occupied():
            b.place(sq.coordinate, sq.piece)
        return b

    def clear(self) -> None:
        for sq in self.squares():
            sq.piece = None

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f in range(8):
            b.place((f, 1), Piece(Team.WHITE, Rank.PAWN))
            b.place((f, 6), Piece(Team.BLACK, Rank.PAWN))

        for f, rank in enumerate(_BACK_RANK):
            b.place((f, 0), Piece(Team.WHITE, rank))
            b.place((f, 7), Piece(Team.BLACK, rank))
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.snapshot() == other.snapshot()

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self.piece_at((file, rank))
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
