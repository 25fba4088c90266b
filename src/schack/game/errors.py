"""Recoverable errors reported by the game layer."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from schack.core.action import Action
    from schack.core.types import Coordinate


class ChessError(Exception):
    """Base class for rule violations a caller can recover from."""


class NoSelectablePiece(ChessError):
    """The selected square is empty or holds the opponent's piece."""

    def __init__(self, coordinate: Coordinate) -> None:
        super().__init__(f"No piece of the side to move on {coordinate}")
        self.coordinate = coordinate


class IllegalAction(ChessError):
    """The action is not among the most recently offered legal actions."""

    def __init__(self, action: Action | None, reason: str = "") -> None:
        message = reason or f"Action {action} is not in the current legal set"
        super().__init__(message)
        self.action = action


class PromotionPieceUnset(ChessError):
    """A promotion was attempted before the promotion piece was chosen."""

    def __init__(self, action: Action) -> None:
        super().__init__(f"Choose a promotion piece before playing {action}")
        self.action = action
