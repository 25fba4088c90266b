"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from schack.core import MoveGenerator, position_from_fen, STARTING_FEN

    pos = position_from_fen(STARTING_FEN)
    gen = MoveGenerator(pos)
    for action in gen.all_legal_actions():
        print(action)
"""

from schack.core.action import Action
from schack.core.board import Board, Square
from schack.core.enums import (
    PROMOTION_RANKS,
    ActionType,
    CastlingRights,
    GameState,
    Rank,
    Team,
)
from schack.core.move_generator import MoveGenerator
from schack.core.notation import (
    STARTING_FEN,
    describe,
    parse_algebraic,
    position_from_fen,
    position_to_fen,
    to_algebraic,
)
from schack.core.piece import Piece
from schack.core.position import Position
from schack.core.rules import Rules
from schack.core.types import (
    Coordinate,
    CoordinateLike,
    coordinate_name,
    parse_coordinate,
    to_coordinate,
)

__all__ = [
    # Enums / flags
    "ActionType",
    "CastlingRights",
    "GameState",
    "PROMOTION_RANKS",
    "Rank",
    "Team",
    # Types / helpers
    "Coordinate",
    "CoordinateLike",
    "coordinate_name",
    "parse_coordinate",
    "to_coordinate",
    # Domain objects
    "Action",
    "Board",
    "MoveGenerator",
    "Piece",
    "Position",
    "Rules",
    "Square",
    # Notation
    "STARTING_FEN",
    "describe",
    "parse_algebraic",
    "position_from_fen",
    "position_to_fen",
    "to_algebraic",
]
