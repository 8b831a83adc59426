"""GameController — the orchestrator a presentation layer talks to.

Coordinates the GameState and notifies listeners via simple callbacks so
the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from hexchess.core.enums import Color
from hexchess.core.errors import HexChessError
from hexchess.core.layouts import Layout
from hexchess.core.move import Move
from hexchess.core.piece import PieceView
from hexchess.core.types import Hex
from hexchess.game.interfaces import GamePhase, GameStatus, IGameController
from hexchess.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, PieceView | None, GameState], None]  # move, captured, state
GameOverCallback = Callable[[GameStatus], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Validates submitted moves, applies them and notifies listeners.

    Methods are meant to be called from a single thread (the UI thread).
    """

    __slots__ = ("_state", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self.events = GameEvents()

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def status(self) -> GameStatus:
        return self._state.status()

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(
        self,
        layout: Layout | None = None,
        side_to_move: Color = Color.WHITE,
    ) -> None:
        state = GameState()
        state.setup(layout, side_to_move)
        self._state = state
        self._emit_phase(state.phase)
        if state.is_game_over:
            self._emit_game_over()

    def submit_move(self, from_hex: Hex, to_hex: Hex) -> bool:
        phase_before = self._state.phase
        try:
            captured = self._state.move_piece(from_hex, to_hex)
        except HexChessError as exc:
            _LOGGER.debug("Rejected move %s -> %s: %s", from_hex, to_hex, exc)
            return False

        record = self._state.move_history[-1]
        self._emit_move(record.move, captured.view() if captured is not None else None)

        phase = self._state.phase
        if phase != phase_before:
            self._emit_phase(phase)
        if self._state.is_game_over:
            self._emit_game_over()
        return True

    def undo_move(self) -> bool:
        phase_before = self._state.phase
        if self._state.undo_last_move() is None:
            return False
        if self._state.phase != phase_before:
            self._emit_phase(self._state.phase)
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, move: Move, captured: PieceView | None) -> None:
        for cb in self.events.on_move:
            cb(move, captured, self._state)

    def _emit_game_over(self) -> None:
        status = self._state.status()
        _LOGGER.info("Game over: %s (%s)", status.phase.name, status.result.name)
        for cb in self.events.on_game_over:
            cb(status)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
