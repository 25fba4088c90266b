"""FEN parsing and serialization."""

from __future__ import annotations

from schack.core.board import Board
from schack.core.enums import CastlingRights, Team
from schack.core.piece import Piece
from schack.core.position import Position
from schack.core.types import Coordinate, coordinate_name, parse_coordinate

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_CASTLING_CHARS: dict[str, CastlingRights] = {
    "K": CastlingRights.WHITE_KINGSIDE,
    "Q": CastlingRights.WHITE_QUEENSIDE,
    "k": CastlingRights.BLACK_KINGSIDE,
    "q": CastlingRights.BLACK_QUEENSIDE,
}


def board_from_placement(placement: str) -> Board:
    """Parse the piece-placement field of a FEN string."""
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {placement!r}")
    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {placement!r}")
                file += step
            else:
                if file >= 8:
                    raise ValueError(f"Invalid FEN rank width: {placement!r}")
                board.place(Coordinate(file, rank), Piece.from_char(ch))
                file += 1
        if file != 8:
            raise ValueError(f"Invalid FEN rank width: {placement!r}")
    return board


def position_from_fen(fen: str) -> Position:
    """Parse a FEN string into a :class:`Position`."""
    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise ValueError(f"Invalid FEN (need 4-6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part = parts[:4]

    # 1. Piece placement
    board = board_from_placement(placement)

    # 2. Side to move
    if side_part == "w":
        side = Team.WHITE
    elif side_part == "b":
        side = Team.BLACK
    else:
        raise ValueError(f"Invalid FEN side-to-move field: {side_part!r}")

    # 3. Castling
    castling = CastlingRights.NONE
    if castling_part != "-":
        for ch in castling_part:
            right = _CASTLING_CHARS.get(ch)
            if right is None or castling & right:
                raise ValueError(f"Invalid FEN castling field: {castling_part!r}")
            castling |= right

    # 4. En passant
    ep: Coordinate | None = None
    if ep_part != "-":
        ep = parse_coordinate(ep_part)
        expected_ep_rank = 5 if side == Team.WHITE else 2
        if ep.rank != expected_ep_rank:
            raise ValueError(
                f"Invalid FEN en-passant square for side-to-move: {ep_part!r}"
            )

    # 5-6. Clocks (optional)
    try:
        halfmove = int(parts[4]) if len(parts) > 4 else 0
        fullmove = int(parts[5]) if len(parts) > 5 else 1
    except ValueError:
        raise ValueError(f"Invalid FEN clock field: {fen!r}") from None
    if halfmove < 0 or fullmove < 1:
        raise ValueError(f"Invalid FEN clock field: {fen!r}")

    return Position(board, side, castling, ep, halfmove, fullmove)


def board_to_placement(board: Board) -> str:
    rows: list[str] = []
    for rank in range(7, -1, -1):
        empty = 0
        row = ""
        for file in range(8):
            piece = board.piece_at((file, rank))
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to FEN."""
    side_str = "w" if pos.player == Team.WHITE else "b"

    castling_str = "".join(
        ch for ch, right in _CASTLING_CHARS.items() if pos.castling & right
    ) or "-"

    ep_str = coordinate_name(pos.en_passant) if pos.en_passant is not None else "-"

    return (
        f"{board_to_placement(pos.board)} {side_str} {castling_str} {ep_str} "
        f"{pos.halfmove_clock} {pos.fullmove_number}"
    )
