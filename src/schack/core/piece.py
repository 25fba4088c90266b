"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from schack.core.enums import Rank, Team

# FEN character <-> (Team, Rank)
_CHAR_MAP: dict[str, tuple[Team, Rank]] = {
    "P": (Team.WHITE, Rank.PAWN),
    "N": (Team.WHITE, Rank.KNIGHT),
    "B": (Team.WHITE, Rank.BISHOP),
    "R": (Team.WHITE, Rank.ROOK),
    "Q": (Team.WHITE, Rank.QUEEN),
    "K": (Team.WHITE, Rank.KING),
    "p": (Team.BLACK, Rank.PAWN),
    "n": (Team.BLACK, Rank.KNIGHT),
    "b": (Team.BLACK, Rank.BISHOP),
    "r": (Team.BLACK, Rank.ROOK),
    "q": (Team.BLACK, Rank.QUEEN),
    "k": (Team.BLACK, Rank.KING),
}

_UNICODE: dict[tuple[Team, Rank], str] = {
    (Team.WHITE, Rank.PAWN): "♙",
    (Team.WHITE, Rank.KNIGHT): "♘",
    (Team.WHITE, Rank.BISHOP): "♗",
    (Team.WHITE, Rank.ROOK): "♖",
    (Team.WHITE, Rank.QUEEN): "♕",
    (Team.WHITE, Rank.KING): "♔",
    (Team.BLACK, Rank.PAWN): "♟",
    (Team.BLACK, Rank.KNIGHT): "♞",
    (Team.BLACK, Rank.BISHOP): "♝",
    (Team.BLACK, Rank.ROOK): "♜",
    (Team.BLACK, Rank.QUEEN): "♛",
    (Team.BLACK, Rank.KING): "♚",
}

_FEN_CHARS: dict[tuple[Team, Rank], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable chess piece. Moving or promoting creates a new value."""

    team: Team
    rank: Rank

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.team, self.rank)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' -> white knight."""
        try:
            team, rank = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(team, rank)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.team, self.rank)]

    def promoted(self, rank: Rank) -> Piece:
        return Piece(self.team, rank)
