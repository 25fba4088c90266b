"""Schack: a UI-agnostic chess rules engine."""

from schack.core import (
    Action,
    ActionType,
    Board,
    Coordinate,
    GameState,
    Piece,
    Rank,
    Team,
    describe,
    parse_algebraic,
    to_algebraic,
)
from schack.game import (
    ChessError,
    Game,
    GameConfig,
    IllegalAction,
    NoSelectablePiece,
    PromotionPieceUnset,
)

__version__ = "0.1.0"

__all__ = [
    "Action",
    "ActionType",
    "Board",
    "ChessError",
    "Coordinate",
    "Game",
    "GameConfig",
    "GameState",
    "IllegalAction",
    "NoSelectablePiece",
    "Piece",
    "PromotionPieceUnset",
    "Rank",
    "Team",
    "describe",
    "parse_algebraic",
    "to_algebraic",
]
