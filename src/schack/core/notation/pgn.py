"""PGN export of a performed move list."""

from __future__ import annotations

from schack.core.enums import GameState, Team

SEVEN_TAG_ROSTER: tuple[str, ...] = (
    "Event",
    "Site",
    "Date",
    "Round",
    "White",
    "Black",
    "Result",
)


def pgn_result_token(state: GameState, player: Team) -> str:
    """PGN result token for *state* with *player* to move."""
    if state == GameState.CHECKMATE:
        return "0-1" if player == Team.WHITE else "1-0"
    if state == GameState.STALEMATE:
        return "1/2-1/2"
    return "*"


def pgn_movetext_from_sans(
    sans: list[str],
    result_token: str,
    first_player: Team = Team.WHITE,
    first_move_number: int = 1,
) -> str:
    """Build PGN movetext from SAN moves and a result token.

    Numbering starts at *first_move_number*, the fullmove number of the
    position the first move was played from.
    """
    parts: list[str] = []
    offset = 1 if first_player == Team.BLACK else 0
    for idx, san in enumerate(sans):
        ply = idx + offset
        number = first_move_number + ply // 2
        if ply % 2 == 0:
            parts.append(f"{number}.")
        elif idx == 0:
            parts.append(f"{number}...")
        parts.append(san)
    parts.append(result_token)
    return " ".join(parts)


def build_pgn(
    headers: dict[str, str],
    sans: list[str],
    result_token: str,
    first_player: Team = Team.WHITE,
    first_move_number: int = 1,
) -> str:
    """Build a single-game PGN document.

    Seven-tag-roster headers are written first in their standard order,
    the rest follow in insertion order. ``Result`` always matches
    *result_token*.
    """
    tags = dict(headers)
    tags["Result"] = result_token
    ordered = [k for k in SEVEN_TAG_ROSTER if k in tags]
    ordered += [k for k in tags if k not in SEVEN_TAG_ROSTER]

    lines: list[str] = []
    for key in ordered:
        escaped = tags[key].replace("\\", "\\\\").replace('"', '\\"')
        lines.append(f'[{key} "{escaped}"]')
    lines.append("")
    lines.append(
        pgn_movetext_from_sans(sans, result_token, first_player, first_move_number)
    )
    lines.append("")
    return "\n".join(lines)
