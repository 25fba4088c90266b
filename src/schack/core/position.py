"""Position: board plus the side-to-move metadata move generation needs."""

from __future__ import annotations

from schack.core.action import Action
from schack.core.board import Board
from schack.core.enums import ActionType, CastlingRights, Rank, Team
from schack.core.piece import Piece
from schack.core.types import Coordinate

_ROOK_CORNERS: dict[Coordinate, CastlingRights] = {
    Coordinate(0, 0): CastlingRights.WHITE_QUEENSIDE,
    Coordinate(7, 0): CastlingRights.WHITE_KINGSIDE,
    Coordinate(0, 7): CastlingRights.BLACK_QUEENSIDE,
    Coordinate(7, 7): CastlingRights.BLACK_KINGSIDE,
}


class Position:
    """Board + side to move + castling rights + en passant target + clocks.

    ``en_passant`` is the square a pawn skipped over on the immediately
    preceding double step; it is cleared by every other action.
    """

    __slots__ = (
        "board",
        "player",
        "castling",
        "en_passant",
        "halfmove_clock",
        "fullmove_number",
    )

    def __init__(
        self,
        board: Board | None = None,
        player: Team = Team.WHITE,
        castling: CastlingRights = CastlingRights.ALL,
        en_passant: Coordinate | None = None,
        halfmove_clock: int = 0,
        fullmove_number: int = 1,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.player = player
        self.castling = castling
        self.en_passant = en_passant
        self.halfmove_clock = halfmove_clock
        self.fullmove_number = fullmove_number

    # ── Action application ───────────────────────────────────────────────

    def apply(self, action: Action, promotion: Rank | None = None) -> Piece | None:
        """Perform *action* on the board and advance the turn.

        No legality checks happen here. A ``PROMOTION`` action without a
        *promotion* rank promotes to a queen. Returns the captured piece.
        """
        board = self.board
        piece = board.piece_at(action.from_sq)
        if piece is None:
            raise ValueError(f"No piece on {action.from_sq}")

        captured = board.piece_at(action.to_sq)
        board.place(action.from_sq, None)

        # En passant: the captured pawn sits beside the origin, not on the target
        if action.action_type == ActionType.EN_PASSANT:
            victim_sq = Coordinate(action.to_sq.file, action.from_sq.rank)
            captured = board.piece_at(victim_sq)
            board.place(victim_sq, None)

        placed = piece
        if action.action_type == ActionType.PROMOTION:
            placed = piece.promoted(promotion if promotion is not None else Rank.QUEEN)
        board.place(action.to_sq, placed)

        if action.action_type == ActionType.CASTLE:
            r = action.from_sq.rank
            if action.to_sq.file == 6:
                rook_from, rook_to = Coordinate(7, r), Coordinate(5, r)
            else:
                rook_from, rook_to = Coordinate(0, r), Coordinate(3, r)
            rook = board.piece_at(rook_from)
            assert rook is not None
            board.place(rook_from, None)
            board.place(rook_to, rook)

        self.en_passant = None
        if piece.rank == Rank.PAWN and abs(action.to_sq.rank - action.from_sq.rank) == 2:
            self.en_passant = Coordinate(
                action.from_sq.file, (action.from_sq.rank + action.to_sq.rank) // 2
            )

        self._update_castling(action, piece)

        if piece.rank == Rank.PAWN or captured is not None:
            self.halfmove_clock = 0
        else:
            self.halfmove_clock += 1
        if self.player == Team.BLACK:
            self.fullmove_number += 1

        self.player = self.player.opposite
        return captured

    def _update_castling(self, action: Action, piece: Piece) -> None:
        if piece.rank == Rank.KING:
            if piece.team == Team.WHITE:
                self.castling &= ~CastlingRights.WHITE_BOTH
            else:
                self.castling &= ~CastlingRights.BLACK_BOTH

        for sq in (action.from_sq, action.to_sq):
            if sq in _ROOK_CORNERS:
                self.castling &= ~_ROOK_CORNERS[sq]

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        """Independent copy with its own board."""
        return Position(
            board=self.board.copy(),
            player=self.player,
            castling=self.castling,
            en_passant=self.en_passant,
            halfmove_clock=self.halfmove_clock,
            fullmove_number=self.fullmove_number,
        )

    def __repr__(self) -> str:
        return (
            f"Position(player={self.player}, castling={self.castling!r}, "
            f"en_passant={self.en_passant})"
        )
