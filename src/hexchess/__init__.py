"""Rules engine for hexagonal chess."""

from hexchess.api import (
    all_valid_hexes,
    attempt_move,
    legal_moves,
    new_game,
    piece_at,
    status,
)

__all__ = [
    "all_valid_hexes",
    "attempt_move",
    "legal_moves",
    "new_game",
    "piece_at",
    "status",
]
