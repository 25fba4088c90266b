"""SAN (Standard Algebraic Notation) rendering of performed actions."""

from __future__ import annotations

from schack.core.action import Action
from schack.core.board import Board
from schack.core.enums import ActionType, CastlingRights, Rank
from schack.core.move_generator import MoveGenerator
from schack.core.position import Position
from schack.core.types import coordinate_name

_SAN_PIECE: dict[Rank, str] = {
    Rank.KNIGHT: "N",
    Rank.BISHOP: "B",
    Rank.ROOK: "R",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
}
_FILE_LETTERS = "abcdefgh"


def describe(action: Action, board_before: Board, promotion: Rank | None = None) -> str:
    """Short algebraic form of *action* played on *board_before*.

    *board_before* is not modified. The ``=X`` promotion suffix is only
    written when *promotion* is given; without it the check suffix assumes a queen.
    """
    piece = board_before.piece_at(action.from_sq)
    if piece is None:
        raise ValueError(f"No piece on {coordinate_name(action.from_sq)}")

    # Castling rights cannot change whether a king is in check or mated,
    # so the scratch position does not need them.
    position = Position(board_before.copy(), piece.team, CastlingRights.NONE)

    if action.is_kingside_castle:
        san = "O-O"
    elif action.is_queenside_castle:
        san = "O-O-O"
    else:
        san = ""
        is_capture = (
            board_before.piece_at(action.to_sq) is not None
            or action.action_type == ActionType.EN_PASSANT
        )

        if piece.rank == Rank.PAWN:
            if is_capture:
                san += _FILE_LETTERS[action.from_sq.file]
        else:
            san += _SAN_PIECE[piece.rank]
            san += _disambiguation(position, action, piece.rank)

        if is_capture:
            san += "x"

        san += coordinate_name(action.to_sq)

        if action.action_type == ActionType.PROMOTION and promotion is not None:
            san += "=" + _SAN_PIECE[promotion]

    # Check / checkmate suffix
    position.apply(action, promotion)
    gen_after = MoveGenerator(position)
    if gen_after.is_in_check(position.player):
        san += "+" if gen_after.has_legal_action() else "#"

    return san


def _disambiguation(position: Position, action: Action, rank: Rank) -> str:
    """Origin file, rank or square needed when a like piece reaches the target too."""
    gen = MoveGenerator(position)
    rivals = [
        sq
        for sq in position.board.pieces(position.player, rank)
        if sq != action.from_sq
        and any(a.to_sq == action.to_sq for a in gen.legal_actions(sq))
    ]
    if not rivals:
        return ""
    if all(sq.file != action.from_sq.file for sq in rivals):
        return _FILE_LETTERS[action.from_sq.file]
    if all(sq.rank != action.from_sq.rank for sq in rivals):
        return str(action.from_sq.rank + 1)
    return coordinate_name(action.from_sq)
