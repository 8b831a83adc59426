"""Piece entity and its read-only view."""

from __future__ import annotations

from dataclasses import dataclass, field

from hexchess.core.enums import Color, PieceType
from hexchess.core.types import Hex

_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}


@dataclass(eq=False, slots=True)
class Piece:
    """A piece on the board.

    Pieces are compared by identity: two white pawns are different pieces.
    ``location`` is kept in sync by :class:`~hexchess.core.board.Board`;
    ``valid_moves`` is the legal-move cache refreshed by the game state after
    every move.
    """

    piece_type: PieceType
    color: Color
    has_moved: bool = False
    location: Hex | None = None
    valid_moves: list[Hex] = field(default_factory=list)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Letter (uppercase = white, lowercase = black)."""
        letter = _LETTERS[self.piece_type]
        return letter.upper() if self.color == Color.WHITE else letter

    def __repr__(self) -> str:
        return (
            f"Piece({self.color.name} {self.piece_type.name} at {self.location}, "
            f"has_moved={self.has_moved})"
        )

    def view(self) -> PieceView:
        return PieceView(self.piece_type, self.color, self.has_moved)


@dataclass(frozen=True, slots=True)
class PieceView:
    """Immutable snapshot of a piece handed to callers outside the core."""

    piece_type: PieceType
    color: Color
    has_moved: bool
