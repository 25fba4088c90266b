"""Game: the orchestrator a front-end talks to.

Flow per turn: ``select`` a square to get its legal actions, optionally
``set_promotion_piece``, then ``apply`` one of the offered actions. The
derived :class:`GameState` is recomputed from scratch after every action.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date

from schack.core.action import Action
from schack.core.board import Board
from schack.core.enums import PROMOTION_RANKS, ActionType, GameState, Rank, Team
from schack.core.move_generator import MoveGenerator
from schack.core.notation import (
    STARTING_FEN,
    build_pgn,
    describe,
    pgn_result_token,
    position_from_fen,
    position_to_fen,
)
from schack.core.piece import Piece
from schack.core.position import Position
from schack.core.rules import Rules
from schack.core.types import CoordinateLike, to_coordinate
from schack.game.config import GameConfig
from schack.game.errors import IllegalAction, NoSelectablePiece, PromotionPieceUnset

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A single entry in the move history."""

    action: Action
    san: str
    player: Team
    promotion: Rank | None = None
    captured: Piece | None = None
    state_after: GameState = GameState.ACTIVE


# ── Event definitions ────────────────────────────────────────────────────────

ActionCallback = Callable[[MoveRecord], None]
StateCallback = Callable[[GameState], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_action: list[ActionCallback] = field(default_factory=list)
    on_state_changed: list[StateCallback] = field(default_factory=list)


# ── Game ─────────────────────────────────────────────────────────────────────


class Game:
    """A single playthrough: owns the position, history and promotion choice.

    Methods are meant to be called from a single thread, one at a time.
    """

    __slots__ = (
        "_config",
        "_position",
        "_start_player",
        "_start_move_number",
        "_history",
        "_promotion",
        "_available",
        "_pending",
        "_state",
        "events",
    )

    def __init__(self, config: GameConfig | None = None) -> None:
        self._config = config if config is not None else GameConfig()
        self.events = GameEvents()
        self.reset()

    @classmethod
    def from_fen(cls, fen: str) -> Game:
        """Start a game from an arbitrary position."""
        return cls(GameConfig(start_fen=fen))

    def reset(self) -> None:
        """Return to the configured start position, discarding history."""
        self._position: Position = position_from_fen(self._config.start_fen)
        self._start_player = self._position.player
        self._start_move_number = self._position.fullmove_number
        self._history: list[MoveRecord] = []
        self._promotion: Rank | None = None
        self._available: list[Action] = []
        self._pending: Action | None = None
        self._state = Rules.game_state(self._position)
        _LOGGER.debug("New game from %s (%s)", self._config.start_fen, self._state.name)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def board(self) -> Board:
        return self._position.board

    @property
    def position(self) -> Position:
        return self._position

    @property
    def player(self) -> Team:
        """Side to move."""
        return self._position.player

    @property
    def history(self) -> tuple[MoveRecord, ...]:
        return tuple(self._history)

    @property
    def promotion_piece(self) -> Rank | None:
        return self._promotion

    @property
    def available_actions(self) -> tuple[Action, ...]:
        """Actions returned by the last successful :meth:`select`."""
        return tuple(self._available)

    def state(self) -> GameState:
        return self._state

    @property
    def is_over(self) -> bool:
        return self._state.is_terminal

    # ── Turn protocol ────────────────────────────────────────────────────

    def select(self, coord: CoordinateLike) -> list[Action]:
        """Legal actions of the side to move's piece on *coord*.

        The list may be empty (pinned or blocked piece, or a finished game).
        Raises :class:`NoSelectablePiece` for an empty square or an
        opponent's piece. A new selection discards any promotion left
        waiting by :class:`PromotionPieceUnset`, so :meth:`resolve_promotion`
        then raises :class:`IllegalAction`.
        """
        sq = to_coordinate(coord)
        piece = self.board.piece_at(sq)
        if piece is None or piece.team != self.player:
            _LOGGER.info("Rejected selection of %s", sq)
            raise NoSelectablePiece(sq)

        actions = [] if self.is_over else MoveGenerator(self._position).legal_actions(sq)
        self._available = actions
        self._pending = None
        return list(actions)

    def set_promotion_piece(self, rank: Rank) -> None:
        """Choose the rank a pawn becomes on the next promotion."""
        if rank not in PROMOTION_RANKS:
            raise ValueError(f"Cannot promote to {rank.name.lower()}")
        self._promotion = rank

    def apply(self, action: Action) -> MoveRecord:
        """Play *action*, which must come from the last :meth:`select`.

        Raises :class:`IllegalAction` for anything else, and
        :class:`PromotionPieceUnset` (board untouched) for a promotion
        played before :meth:`set_promotion_piece`.
        """
        if action not in self._available:
            _LOGGER.info("Rejected action %s", action)
            raise IllegalAction(action)
        # Plain-tuple actions compare equal; keep the generated one.
        action = self._available[self._available.index(action)]

        promotion: Rank | None = None
        if action.action_type == ActionType.PROMOTION:
            if self._promotion is None:
                self._pending = action
                _LOGGER.info("Promotion %s awaits a piece choice", action)
                raise PromotionPieceUnset(action)
            promotion = self._promotion

        mover = self.player
        san = describe(action, self.board, promotion)
        captured = self._position.apply(action, promotion)

        self._promotion = None
        self._available = []
        self._pending = None

        previous = self._state
        self._state = Rules.game_state(self._position)

        record = MoveRecord(
            action=action,
            san=san,
            player=mover,
            promotion=promotion,
            captured=captured,
            state_after=self._state,
        )
        self._history.append(record)
        _LOGGER.debug("%s played %s (%s)", mover, san, self._state.name)

        for cb in self.events.on_action:
            cb(record)
        if self._state != previous:
            for cb_state in self.events.on_state_changed:
                cb_state(self._state)
        return record

    def resolve_promotion(self, rank: Rank) -> MoveRecord:
        """Choose *rank* and complete the promotion that was left waiting."""
        if self._pending is None:
            raise IllegalAction(None, "No promotion is waiting for a piece choice")
        self.set_promotion_piece(rank)
        return self.apply(self._pending)

    # ── Query helpers ────────────────────────────────────────────────────

    def legal_actions(self) -> list[Action]:
        """Every legal action for the side to move."""
        if self.is_over:
            return []
        return MoveGenerator(self._position).all_legal_actions()

    def move_log(self) -> list[str]:
        """SAN of every performed action, in order."""
        return [record.san for record in self._history]

    def fen(self) -> str:
        return position_to_fen(self._position)

    def pgn(self, headers: dict[str, str] | None = None) -> str:
        """Export the game so far as a PGN document."""
        tags = {"Date": date.today().strftime("%Y.%m.%d")}
        tags.update(self._config.pgn_headers)
        if headers:
            tags.update(headers)
        if self._config.start_fen != STARTING_FEN:
            tags.setdefault("SetUp", "1")
            tags.setdefault("FEN", self._config.start_fen)
        result = pgn_result_token(self._state, self.player)
        return build_pgn(
            tags, self.move_log(), result, self._start_player, self._start_move_number
        )
