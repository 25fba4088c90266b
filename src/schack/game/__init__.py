"""Game management layer: turn protocol, history, errors, configuration.

Quick start::

    from schack.game import Game

    game = Game()
    actions = game.select("e2")
    game.apply(actions[-1])  # e2-e4
    print(game.state(), game.move_log())
"""

from schack.game.config import GameConfig
from schack.game.errors import (
    ChessError,
    IllegalAction,
    NoSelectablePiece,
    PromotionPieceUnset,
)
from schack.game.game import Game, GameEvents, MoveRecord

__all__ = [
    # Errors
    "ChessError",
    "IllegalAction",
    "NoSelectablePiece",
    "PromotionPieceUnset",
    # Concrete
    "Game",
    "GameConfig",
    "GameEvents",
    "MoveRecord",
]
