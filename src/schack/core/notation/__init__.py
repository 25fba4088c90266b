"""Notation package: algebraic squares, SAN, FEN and PGN export."""

from schack.core.notation.algebraic import parse_algebraic, to_algebraic
from schack.core.notation.fen import STARTING_FEN, position_from_fen, position_to_fen
from schack.core.notation.pgn import build_pgn, pgn_movetext_from_sans, pgn_result_token
from schack.core.notation.san import describe

__all__ = [
    "STARTING_FEN",
    "to_algebraic",
    "parse_algebraic",
    "describe",
    "position_from_fen",
    "position_to_fen",
    "pgn_result_token",
    "pgn_movetext_from_sans",
    "build_pgn",
]
