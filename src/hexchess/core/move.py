"""Move value object and its undo record."""

from __future__ import annotations

from dataclasses import dataclass

from hexchess.core.piece import Piece
from hexchess.core.types import Hex


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single move."""

    from_hex: Hex
    to_hex: Hex

    def __str__(self) -> str:
        return f"{self.from_hex}->{self.to_hex}"


@dataclass(frozen=True, slots=True)
class MoveUndo:
    """Everything needed to take a move back exactly."""

    move: Move
    captured: Piece | None
    had_moved: bool
