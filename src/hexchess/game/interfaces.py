"""Abstract interfaces and shared value types for the game layer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from hexchess.core.enums import Color, GameResult

if TYPE_CHECKING:
    from hexchess.core.layouts import Layout
    from hexchess.core.types import Hex


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a game."""

    ONGOING = auto()
    CHECK = auto()  # side to move is attacked but can still move
    CHECKMATE = auto()
    STALEMATE = auto()

    @property
    def is_terminal(self) -> bool:
        return self in (GamePhase.CHECKMATE, GamePhase.STALEMATE)


@dataclass(frozen=True, slots=True)
class GameStatus:
    """What the presentation layer needs to show whose turn it is."""

    current_player: Color
    player_in_check: Color | None
    checkmate: bool
    stalemate: bool
    phase: GamePhase
    result: GameResult


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(
        self,
        layout: Layout | None = None,
        side_to_move: Color = Color.WHITE,
    ) -> None:
        """Set up a new game."""

    @abstractmethod
    def submit_move(self, from_hex: Hex, to_hex: Hex) -> bool:
        """Submit a move. Returns True if legal and applied."""

    @abstractmethod
    def undo_move(self) -> bool:
        """Undo the last move. Returns True on success."""
