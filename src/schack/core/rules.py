"""High-level rules: check, checkmate and stalemate evaluation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from schack.core.enums import GameState
from schack.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from schack.core.position import Position


class Rules:
    """Static rule-checker that operates on a :class:`Position`.

    Everything is derived from the position on each call; nothing is cached.
    """

    @staticmethod
    def is_in_check(position: Position) -> bool:
        gen = MoveGenerator(position)
        return gen.is_in_check(position.player)

    @staticmethod
    def is_checkmate(position: Position) -> bool:
        return Rules.game_state(position) == GameState.CHECKMATE

    @staticmethod
    def is_stalemate(position: Position) -> bool:
        return Rules.game_state(position) == GameState.STALEMATE

    @staticmethod
    def game_state(position: Position) -> GameState:
        """Status of the side to move."""
        gen = MoveGenerator(position)
        in_check = gen.is_in_check(position.player)

        if not gen.has_legal_action():
            return GameState.CHECKMATE if in_check else GameState.STALEMATE
        return GameState.CHECK if in_check else GameState.ACTIVE
