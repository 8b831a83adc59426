"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

import pytest

from hexchess.core.enums import Color, PieceType
from hexchess.core.layouts import Layout
from hexchess.game.state import GameState

K = PieceType.KING
R = PieceType.ROOK

# Black king in the top corner, three white rooks covering every escape,
# the rook on (3, 0) delivers mate from (0, 3).
MATE_IN_ONE: Layout = {
    Color.WHITE: [((3, 0), R), ((1, 3), R), ((-1, 3), R), ((-5, 5), K)],
    Color.BLACK: [((0, -5), K)],
}

# Same corner, every escape covered but the king itself is not attacked.
STALEMATE_IN_ONE: Layout = {
    Color.WHITE: [((5, -4), R), ((1, 3), R), ((-1, 3), R), ((-5, 5), K)],
    Color.BLACK: [((0, -5), K)],
}


@pytest.fixture
def make_state() -> Callable[..., GameState]:
    """Build a GameState from white/black placement lists."""

    def _make(
        white: Sequence[tuple[tuple[int, int], PieceType]],
        black: Sequence[tuple[tuple[int, int], PieceType]],
        side_to_move: Color = Color.WHITE,
    ) -> GameState:
        state = GameState()
        state.setup({Color.WHITE: white, Color.BLACK: black}, side_to_move)
        return state

    return _make


@pytest.fixture
def mate_in_one() -> GameState:
    state = GameState()
    state.setup(MATE_IN_ONE)
    return state


@pytest.fixture
def stalemate_in_one() -> GameState:
    state = GameState()
    state.setup(STALEMATE_IN_ONE)
    return state


@pytest.fixture
def snapshot() -> Callable[[GameState], tuple[Any, ...]]:
    """Value snapshot of everything a rejected move must leave untouched."""

    def _snapshot(state: GameState) -> tuple[Any, ...]:
        return (
            state.board.snapshot(),
            state.current_player,
            {color: {id(p) for p in ps} for color, ps in state.pieces.items()},
            {
                loc: list(piece.valid_moves)
                for loc, piece in state.board.occupied()
            },
            state.player_in_check,
            state.checkmate,
            state.stalemate,
            len(state.move_history),
        )

    return _snapshot


@pytest.fixture
def mate_layout() -> Layout:
    return MATE_IN_ONE
