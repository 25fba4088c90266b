"""Game configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

from schack.core.notation import STARTING_FEN


def _default_headers() -> dict[str, str]:
    return {
        "Event": "Casual game",
        "Site": "?",
        "Round": "-",
        "White": "White",
        "Black": "Black",
    }


@dataclass
class GameConfig:
    """User-configurable settings for a :class:`~schack.game.Game`."""

    # Position the game starts from (and returns to on reset)
    start_fen: str = STARTING_FEN

    # PGN tags written on export; ``Result`` is always filled in by the game
    pgn_headers: dict[str, str] = field(default_factory=_default_headers)
