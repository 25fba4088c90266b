"""Tests for algebraic squares, SAN, FEN and PGN export."""

import pytest

from schack.core.action import Action
from schack.core.board import Board
from schack.core.enums import ActionType, CastlingRights, GameState, Rank, Team
from schack.core.notation import (
    STARTING_FEN,
    build_pgn,
    describe,
    parse_algebraic,
    pgn_movetext_from_sans,
    pgn_result_token,
    position_from_fen,
    position_to_fen,
    to_algebraic,
)
from schack.core.piece import Piece
from schack.core.types import (
    A1, A7, A8, B1, C1, C3, D6, E1, E2, E4, E5, E8, G1, F3, H8,
    ALL_COORDINATES,
    Coordinate,
)


class TestAlgebraic:
    def test_corners(self) -> None:
        assert to_algebraic(A1) == "a1"
        assert to_algebraic(H8) == "h8"
        assert to_algebraic((4, 3)) == "e4"

    def test_round_trip_all_squares(self) -> None:
        for coord in ALL_COORDINATES:
            assert parse_algebraic(to_algebraic(coord)) == coord

    def test_parse_is_lenient_about_case_and_space(self) -> None:
        assert parse_algebraic(" E4 ") == Coordinate(4, 3)

    @pytest.mark.parametrize("text", ["", "e", "i1", "a9", "a0", "e44"])
    def test_parse_rejects_bad_text(self, text: str) -> None:
        with pytest.raises(ValueError, match="Invalid square"):
            parse_algebraic(text)


class TestDescribe:
    def test_pawn_push(self) -> None:
        assert describe(Action(E2, E4), Board.initial()) == "e4"

    def test_knight_move(self) -> None:
        assert describe(Action(G1, F3), Board.initial()) == "Nf3"

    def test_does_not_mutate_board(self) -> None:
        board = Board.initial()
        describe(Action(E2, E4), board)
        assert board == Board.initial()

    def test_en_passant_capture(self) -> None:
        board = position_from_fen("4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 1").board
        action = Action(E5, D6, ActionType.EN_PASSANT)
        assert describe(action, board) == "exd6"

    def test_piece_capture(self) -> None:
        board = position_from_fen("4k3/8/8/8/8/2p5/8/1N2K3 w - - 0 1").board
        assert describe(Action(B1, C3, ActionType.CAPTURE), board) == "Nxc3"

    def test_castles(self) -> None:
        board = position_from_fen("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1").board
        assert describe(Action(E1, G1, ActionType.CASTLE), board) == "O-O"
        assert describe(Action(E1, C1, ActionType.CASTLE), board) == "O-O-O"

    def test_file_disambiguation(self) -> None:
        board = position_from_fen("4k3/8/8/8/8/8/8/1N1NK3 w - - 0 1").board
        assert describe(Action(B1, C3), board) == "Nbc3"

    def test_rank_disambiguation(self) -> None:
        board = position_from_fen("4k3/8/8/1N6/8/8/8/1N5K w - - 0 1").board
        assert describe(Action(B1, C3), board) == "N1c3"

    def test_square_disambiguation(self) -> None:
        board = position_from_fen("4k3/8/8/8/8/Q1Q5/8/Q3K3 w - - 0 1").board
        action = Action(Coordinate(0, 2), Coordinate(1, 1))
        assert describe(action, board) == "Qa3b2"

    def test_pinned_rival_needs_no_disambiguation(self) -> None:
        board = position_from_fen("7k/3b4/8/1N6/K7/8/8/1N6 w - - 0 1").board
        assert describe(Action(B1, C3), board) == "Nc3"

    def test_promotion_with_check(self) -> None:
        board = position_from_fen("8/P7/8/8/8/8/8/K6k w - - 0 1").board
        action = Action(A7, A8, ActionType.PROMOTION)
        assert describe(action, board, Rank.QUEEN) == "a8=Q+"
        assert describe(action, board, Rank.KNIGHT) == "a8=N"

    def test_promotion_without_choice(self) -> None:
        board = position_from_fen("8/P7/8/8/8/8/7k/K7 w - - 0 1").board
        assert describe(Action(A7, A8, ActionType.PROMOTION), board) == "a8"

    def test_checkmate_suffix(self) -> None:
        board = position_from_fen(
            "rnbqkbnr/pppp1ppp/8/4p3/6P1/5P2/PPPPP2P/RNBQKBNR b KQkq - 0 2"
        ).board
        action = Action(Coordinate(3, 7), Coordinate(7, 3))
        assert describe(action, board) == "Qh4#"

    def test_empty_origin_raises(self) -> None:
        with pytest.raises(ValueError, match="No piece"):
            describe(Action(E4, Coordinate(4, 4)), Board.initial())


class TestFen:
    def test_starting_position(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert pos.board == Board.initial()
        assert pos.player == Team.WHITE
        assert pos.castling == CastlingRights.ALL
        assert pos.en_passant is None

    def test_round_trip(self) -> None:
        fen = "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1"
        assert position_to_fen(position_from_fen(fen)) == fen

    def test_en_passant_field(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        pos = position_from_fen(fen)
        assert pos.en_passant == Coordinate(4, 2)
        assert pos.player == Team.BLACK

    def test_partial_castling(self) -> None:
        pos = position_from_fen("r3k2r/8/8/8/8/8/8/R3K2R w Kq - 0 1")
        assert pos.castling == (
            CastlingRights.WHITE_KINGSIDE | CastlingRights.BLACK_QUEENSIDE
        )

    def test_clocks_optional(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/4K3 w - -")
        assert pos.halfmove_clock == 0
        assert pos.fullmove_number == 1

    def test_pieces(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert pos.board.piece_at(E1) == Piece(Team.WHITE, Rank.KING)
        assert pos.board.piece_at(E8) == Piece(Team.BLACK, Rank.KING)

    @pytest.mark.parametrize(
        ("fen", "message"),
        [
            ("invalid", "need 4-6 fields"),
            ("8/8/8/8/8/8/8 w - - 0 1", "8 ranks"),
            ("9/8/8/8/8/8/8/8 w - - 0 1", "Invalid FEN"),
            ("8/8/8/8/8/8/8/8 x - - 0 1", "side-to-move"),
            ("8/8/8/8/8/8/8/8 w KK - 0 1", "castling"),
            ("8/8/8/8/8/8/8/8 w - e3 0 1", "en-passant"),
            ("8/8/8/8/8/8/8/8 w - - -1 1", "clock"),
            ("8/8/8/8/8/8/8/X7 w - - 0 1", "piece character"),
        ],
    )
    def test_invalid_fen_raises(self, fen: str, message: str) -> None:
        with pytest.raises(ValueError, match=message):
            position_from_fen(fen)


class TestPgn:
    def test_result_tokens(self) -> None:
        assert pgn_result_token(GameState.CHECKMATE, Team.WHITE) == "0-1"
        assert pgn_result_token(GameState.CHECKMATE, Team.BLACK) == "1-0"
        assert pgn_result_token(GameState.STALEMATE, Team.WHITE) == "1/2-1/2"
        assert pgn_result_token(GameState.CHECK, Team.WHITE) == "*"

    def test_movetext(self) -> None:
        text = pgn_movetext_from_sans(["e4", "e5", "Nf3"], "*")
        assert text == "1. e4 e5 2. Nf3 *"

    def test_movetext_black_first(self) -> None:
        text = pgn_movetext_from_sans(["e5", "Nf3"], "*", Team.BLACK)
        assert text == "1... e5 2. Nf3 *"

    def test_movetext_custom_first_move_number(self) -> None:
        text = pgn_movetext_from_sans(["e4", "e5", "Nf3"], "*", first_move_number=12)
        assert text == "12. e4 e5 13. Nf3 *"

    def test_movetext_black_first_custom_number(self) -> None:
        text = pgn_movetext_from_sans(["Kh8", "Ra8#"], "1-0", Team.BLACK, 30)
        assert text == "30... Kh8 31. Ra8# 1-0"

    def test_build_pgn(self) -> None:
        pgn = build_pgn({"White": 'A "quoted" name', "Event": "Test"}, ["f3"], "*")
        lines = pgn.splitlines()
        assert lines[0] == '[Event "Test"]'
        assert lines[1] == '[White "A \\"quoted\\" name"]'
        assert lines[2] == '[Result "*"]'
        assert lines[-1] == "1. f3 *"
