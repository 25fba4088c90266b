"""Core enumerations and flags for the chess domain."""

from __future__ import annotations

from enum import IntEnum, IntFlag, auto


class Team(IntEnum):
    """Side of the board."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Team:
        return Team(1 - self.value)

    @property
    def forward(self) -> int:
        """Rank direction pawns of this team advance in."""
        return 1 if self is Team.WHITE else -1

    def __str__(self) -> str:
        return self.name.lower()


class Rank(IntEnum):
    """Movement class of a piece (not a board row)."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


PROMOTION_RANKS: tuple[Rank, ...] = (Rank.QUEEN, Rank.ROOK, Rank.BISHOP, Rank.KNIGHT)


class ActionType(IntEnum):
    """Special-move classification of an action."""

    NORMAL = 0
    CAPTURE = 1
    CASTLE = 2
    EN_PASSANT = 3
    PROMOTION = 4


class GameState(IntEnum):
    """Derived status of the side to move."""

    ACTIVE = 0
    CHECK = 1
    CHECKMATE = 2
    STALEMATE = 3

    @property
    def is_terminal(self) -> bool:
        return self in (GameState.CHECKMATE, GameState.STALEMATE)


class CastlingRights(IntFlag):
    """Bitmask of castles still available (king and rook unmoved)."""

    NONE = 0
    WHITE_KINGSIDE = auto()
    WHITE_QUEENSIDE = auto()
    BLACK_KINGSIDE = auto()
    BLACK_QUEENSIDE = auto()

    WHITE_BOTH = WHITE_KINGSIDE | WHITE_QUEENSIDE
    BLACK_BOTH = BLACK_KINGSIDE | BLACK_QUEENSIDE
    ALL = WHITE_BOTH | BLACK_BOTH
