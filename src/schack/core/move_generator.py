"""Legal and pseudo-legal action generation + attack detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from schack.core.action import Action
from schack.core.enums import ActionType, CastlingRights, Rank, Team
from schack.core.types import ALL_COORDINATES, Coordinate, CoordinateLike, to_coordinate

if TYPE_CHECKING:
    from schack.core.position import Position


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

_CASTLE_RIGHT: dict[tuple[Team, int], CastlingRights] = {
    (Team.WHITE, 6): CastlingRights.WHITE_KINGSIDE,
    (Team.WHITE, 2): CastlingRights.WHITE_QUEENSIDE,
    (Team.BLACK, 6): CastlingRights.BLACK_KINGSIDE,
    (Team.BLACK, 2): CastlingRights.BLACK_QUEENSIDE,
}


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> dict[Coordinate, tuple[Coordinate, ...]]:
    targets: dict[Coordinate, tuple[Coordinate, ...]] = {}
    for sq in ALL_COORDINATES:
        moves = (sq.offset(df, dr) for df, dr in offsets)
        targets[sq] = tuple(m for m in moves if m is not None)
    return targets


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> dict[Coordinate, tuple[tuple[Coordinate, ...], ...]]:
    rays_per_square: dict[Coordinate, tuple[tuple[Coordinate, ...], ...]] = {}
    for sq in ALL_COORDINATES:
        square_rays: list[tuple[Coordinate, ...]] = []
        for df, dr in directions:
            ray: list[Coordinate] = []
            step = sq.offset(df, dr)
            while step is not None:
                ray.append(step)
                step = step.offset(df, dr)
            square_rays.append(tuple(ray))
        rays_per_square[sq] = tuple(square_rays)
    return rays_per_square


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)
_QUEEN_RAYS = _build_rays(QUEEN_DIRS)

_SLIDER_RAYS = {
    Rank.BISHOP: _BISHOP_RAYS,
    Rank.ROOK: _ROOK_RAYS,
    Rank.QUEEN: _QUEEN_RAYS,
}


class MoveGenerator:
    """Generates actions for the side to move in a :class:`Position`.

    Legality is decided by playing each candidate on a scratch copy of the
    position and asking whether the mover's king ends up attacked. Pins
    and check evasions fall out of that without special handling.
    """

    __slots__ = ("_pos", "_board")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._board = position.board

    # -- Public API ---------------------------------------------------------

    def legal_actions(self, coord: CoordinateLike) -> list[Action]:
        """Legal actions of the piece on *coord* (empty if none or not movable)."""
        return [a for a in self.pseudo_legal_actions(coord) if self.is_legal(a)]

    def all_legal_actions(self) -> list[Action]:
        """All strictly legal actions for the side to move."""
        legal: list[Action] = []
        for coord in self._board.pieces(self._pos.player):
            legal.extend(self.legal_actions(coord))
        return legal

    def has_legal_action(self) -> bool:
        return any(
            self.is_legal(action)
            for coord in self._board.pieces(self._pos.player)
            for action in self.pseudo_legal_actions(coord)
        )

    def is_legal(self, action: Action) -> bool:
        """Whether *action* keeps the mover's own king out of attack."""
        mover = self._pos.player
        scratch = self._pos.copy()
        scratch.apply(action)
        return not MoveGenerator(scratch).is_in_check(mover)

    def pseudo_legal_actions(self, coord: CoordinateLike) -> list[Action]:
        """Actions obeying piece movement rules for the side to move.

        These may leave the mover's own king attacked. Returns an empty
        list for an empty square or a piece of the side not to move.
        """
        sq = to_coordinate(coord)
        piece = self._board.piece_at(sq)
        if piece is None or piece.team != self._pos.player:
            return []

        actions: list[Action] = []
        if piece.rank == Rank.PAWN:
            self._gen_pawn(sq, piece.team, actions)
        elif piece.rank == Rank.KNIGHT:
            self._gen_steps(sq, piece.team, _KNIGHT_TARGETS[sq], actions)
        elif piece.rank == Rank.KING:
            self._gen_steps(sq, piece.team, _KING_TARGETS[sq], actions)
            self._gen_castling(sq, piece.team, actions)
        else:
            self._gen_sliding(sq, piece.team, _SLIDER_RAYS[piece.rank][sq], actions)
        return actions

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, team: Team) -> bool:
        """Is *team*'s king attacked by the opponent?"""
        king_sq = self._board.king_coordinate(team)
        return self.is_square_attacked(king_sq, team.opposite)

    def is_square_attacked(self, coord: CoordinateLike, by_team: Team) -> bool:
        """Is *coord* reachable in one capture by any piece of *by_team*?"""
        sq = to_coordinate(coord)
        board = self._board

        # A pawn attacks diagonally forward, so look one rank behind *sq*.
        for df in (-1, 1):
            origin = sq.offset(df, -by_team.forward)
            if origin is not None and self._holds(origin, by_team, Rank.PAWN):
                return True

        for origin in _KNIGHT_TARGETS[sq]:
            if self._holds(origin, by_team, Rank.KNIGHT):
                return True

        for origin in _KING_TARGETS[sq]:
            if self._holds(origin, by_team, Rank.KING):
                return True

        for rays, attackers in (
            (_BISHOP_RAYS[sq], (Rank.BISHOP, Rank.QUEEN)),
            (_ROOK_RAYS[sq], (Rank.ROOK, Rank.QUEEN)),
        ):
            for ray in rays:
                for to_sq in ray:
                    piece = board.piece_at(to_sq)
                    if piece is None:
                        continue
                    if piece.team == by_team and piece.rank in attackers:
                        return True
                    break

        return False

    def _holds(self, coord: Coordinate, team: Team, rank: Rank) -> bool:
        piece = self._board.piece_at(coord)
        return piece is not None and piece.team == team and piece.rank == rank

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Coordinate, team: Team, actions: list[Action]) -> None:
        board = self._board
        forward = team.forward
        start_rank = 1 if team == Team.WHITE else 6
        last_rank = 7 if team == Team.WHITE else 0

        one_step = sq.offset(0, forward)
        if one_step is not None and board.is_empty(one_step):
            if one_step.rank == last_rank:
                actions.append(Action(sq, one_step, ActionType.PROMOTION))
            else:
                actions.append(Action(sq, one_step))
                if sq.rank == start_rank:
                    two_step = Coordinate(sq.file, sq.rank + 2 * forward)
                    if board.is_empty(two_step):
                        actions.append(Action(sq, two_step))

        for df in (-1, 1):
            cap_sq = sq.offset(df, forward)
            if cap_sq is None:
                continue
            target = board.piece_at(cap_sq)
            if target is not None and target.team != team:
                if cap_sq.rank == last_rank:
                    actions.append(Action(sq, cap_sq, ActionType.PROMOTION))
                else:
                    actions.append(Action(sq, cap_sq, ActionType.CAPTURE))
            elif target is None and cap_sq == self._pos.en_passant:
                actions.append(Action(sq, cap_sq, ActionType.EN_PASSANT))

    def _gen_steps(
        self,
        sq: Coordinate,
        team: Team,
        targets: tuple[Coordinate, ...],
        actions: list[Action],
    ) -> None:
        board = self._board
        for to_sq in targets:
            target = board.piece_at(to_sq)
            if target is None:
                actions.append(Action(sq, to_sq))
            elif target.team != team:
                actions.append(Action(sq, to_sq, ActionType.CAPTURE))

    def _gen_sliding(
        self,
        sq: Coordinate,
        team: Team,
        rays: tuple[tuple[Coordinate, ...], ...],
        actions: list[Action],
    ) -> None:
        board = self._board
        for ray in rays:
            for to_sq in ray:
                target = board.piece_at(to_sq)
                if target is None:
                    actions.append(Action(sq, to_sq))
                    continue
                if target.team != team:
                    actions.append(Action(sq, to_sq, ActionType.CAPTURE))
                break

    def _gen_castling(self, king_sq: Coordinate, team: Team, actions: list[Action]) -> None:
        home_rank = 0 if team == Team.WHITE else 7
        if king_sq != (4, home_rank):
            return
        castling = self._pos.castling
        if not castling & (
            CastlingRights.WHITE_BOTH if team == Team.WHITE else CastlingRights.BLACK_BOTH
        ):
            return

        board = self._board
        opponent = team.opposite
        if self.is_square_attacked(king_sq, opponent):
            return

        for dest_file, rook_file in ((6, 7), (2, 0)):
            if not castling & _CASTLE_RIGHT[(team, dest_file)]:
                continue
            if not self._holds(Coordinate(rook_file, home_rank), team, Rank.ROOK):
                continue
            lo, hi = sorted((4, rook_file))
            if any(not board.is_empty((f, home_rank)) for f in range(lo + 1, hi)):
                continue
            # King transit and destination; the start square was checked above.
            step = 1 if dest_file > 4 else -1
            path = (Coordinate(4 + step, home_rank), Coordinate(dest_file, home_rank))
            if any(self.is_square_attacked(p, opponent) for p in path):
                continue
            actions.append(Action(king_sq, Coordinate(dest_file, home_rank), ActionType.CASTLE))
