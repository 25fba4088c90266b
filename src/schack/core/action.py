"""Action value object (a generated move)."""

from __future__ import annotations

from dataclasses import dataclass

from schack.core.enums import ActionType
from schack.core.types import Coordinate, coordinate_name


@dataclass(frozen=True, slots=True)
class Action:
    """Immutable move from one coordinate to another.

    The promotion piece is not part of the action; the game supplies it
    when a ``PROMOTION`` action is applied.
    """

    from_sq: Coordinate
    to_sq: Coordinate
    action_type: ActionType = ActionType.NORMAL

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{coordinate_name(self.from_sq)}{coordinate_name(self.to_sq)}"

    @property
    def is_kingside_castle(self) -> bool:
        return self.action_type == ActionType.CASTLE and self.to_sq.file == 6

    @property
    def is_queenside_castle(self) -> bool:
        return self.action_type == ActionType.CASTLE and self.to_sq.file == 2
