"""Functional facade for a presentation layer.

The caller converts clicks into hexes, then asks for moves and status and
submits moves through these functions. Rejected moves raise a
:class:`~hexchess.core.errors.MoveError` subclass and leave the state
untouched.
"""

from __future__ import annotations

from hexchess.core.enums import Color
from hexchess.core.layouts import Layout
from hexchess.core.piece import PieceView
from hexchess.core.types import BOARD_RADIUS, Hex, all_hexes
from hexchess.game.interfaces import GameStatus
from hexchess.game.state import GameState


def new_game(layout: Layout | None = None, side_to_move: Color = Color.WHITE) -> GameState:
    """Fresh game from *layout* (Glinski's opening by default)."""
    state = GameState()
    state.setup(layout, side_to_move)
    return state


def piece_at(state: GameState, loc: tuple[int, int]) -> PieceView | None:
    piece = state.board.at(loc)
    return piece.view() if piece is not None else None


def legal_moves(state: GameState, loc: tuple[int, int]) -> list[Hex]:
    return state.legal_moves(loc)


def attempt_move(
    state: GameState, from_hex: tuple[int, int], to_hex: tuple[int, int]
) -> PieceView | None:
    """Play a move; returns a view of the captured piece, if any."""
    captured = state.move_piece(from_hex, to_hex)
    return captured.view() if captured is not None else None


def status(state: GameState) -> GameStatus:
    return state.status()


def all_valid_hexes() -> list[Hex]:
    return list(all_hexes(BOARD_RADIUS))
