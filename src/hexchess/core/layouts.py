"""Opening layouts.

A layout maps each side to a list of ``(hex, piece_type)`` placements. The
default is Glinski's opening; Black's half is White's mirrored across the
horizontal axis, ``(q, r) -> (q, -q - r)``, so the kings share a column.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TypeAlias

from hexchess.core.enums import Color, PieceType
from hexchess.core.types import Hex

Placement: TypeAlias = tuple[tuple[int, int], PieceType]
Layout: TypeAlias = Mapping[Color, Sequence[Placement]]

_P = PieceType.PAWN
_N = PieceType.KNIGHT
_B = PieceType.BISHOP
_R = PieceType.ROOK
_Q = PieceType.QUEEN
_K = PieceType.KING

_WHITE_GLINSKI: tuple[Placement, ...] = (
    # Back pieces
    (Hex(-3, 5), _R),
    (Hex(-2, 5), _N),
    (Hex(-1, 5), _Q),
    (Hex(0, 5), _B),
    (Hex(0, 4), _B),
    (Hex(0, 3), _B),
    (Hex(1, 4), _K),
    (Hex(2, 3), _N),
    (Hex(3, 2), _R),
    # Pawn chevron
    (Hex(-4, 5), _P),
    (Hex(-3, 4), _P),
    (Hex(-2, 3), _P),
    (Hex(-1, 2), _P),
    (Hex(0, 1), _P),
    (Hex(1, 1), _P),
    (Hex(2, 1), _P),
    (Hex(3, 1), _P),
    (Hex(4, 1), _P),
)


def mirror(loc: tuple[int, int]) -> Hex:
    """Reflect a hex across the horizontal axis through the centre."""
    q, r = loc
    return Hex(q, -q - r)


def mirrored(placements: Sequence[Placement]) -> tuple[Placement, ...]:
    return tuple((mirror(loc), piece_type) for loc, piece_type in placements)


GLINSKI_LAYOUT: Layout = {
    Color.WHITE: _WHITE_GLINSKI,
    Color.BLACK: mirrored(_WHITE_GLINSKI),
}
