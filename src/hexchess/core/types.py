"""Hex coordinate type and board geometry helpers.

Axial coordinates (q, r) on a flat-topped hexagonal board centred on
(0, 0). The third cube coordinate is ``s = -q - r``. The column q = 0 runs
vertically through the centre; White sits at the bottom (large r) and
moves towards negative r.

Board of radius 5 (the "size 6" board)::

    r = -5  :  q in [ 0, 5]
    ...
    r =  0  :  q in [-5, 5]
    ...
    r =  5  :  q in [-5, 0]
"""

from __future__ import annotations

from functools import lru_cache
from typing import NamedTuple

from hexchess.core.enums import Color, HexColor

BOARD_SIZE = 6  # hexes along one edge
BOARD_RADIUS = BOARD_SIZE - 1


class Hex(NamedTuple):
    """Axial hex coordinate. Compares equal to a plain ``(q, r)`` tuple."""

    q: int
    r: int

    @property
    def s(self) -> int:
        return -self.q - self.r

    def step(self, direction: tuple[int, int], times: int = 1) -> Hex:
        """Hex reached by moving *times* steps along *direction*."""
        return Hex(self.q + direction[0] * times, self.r + direction[1] * times)

    def __str__(self) -> str:
        return f"({self.q}, {self.r})"


Direction = tuple[int, int]

# Edge-adjacent neighbours, clockwise from "up".
NEIGHBOR_DIRECTIONS: tuple[Direction, ...] = (
    (0, -1),
    (1, -1),
    (1, 0),
    (0, 1),
    (-1, 1),
    (-1, 0),
)

# Vertex-adjacent cells: the sum of two consecutive neighbour steps.
DIAGONAL_DIRECTIONS: tuple[Direction, ...] = (
    (1, -2),
    (2, -1),
    (1, 1),
    (-1, 2),
    (-2, 1),
    (-1, -1),
)

KING_OFFSETS: tuple[Direction, ...] = NEIGHBOR_DIRECTIONS + DIAGONAL_DIRECTIONS

# Cube permutations of (1, 2, -3) and (-1, -2, 3), projected onto (q, r).
KNIGHT_OFFSETS: tuple[Direction, ...] = (
    (1, -3),
    (2, -3),
    (3, -2),
    (3, -1),
    (2, 1),
    (1, 2),
    (-1, 3),
    (-2, 3),
    (-3, 2),
    (-3, 1),
    (-2, -1),
    (-1, -2),
)

_PAWN_FORWARD: dict[Color, Direction] = {
    Color.WHITE: (0, -1),
    Color.BLACK: (0, 1),
}

_PAWN_CAPTURES: dict[Color, tuple[Direction, Direction]] = {
    Color.WHITE: ((-1, 0), (1, -1)),
    Color.BLACK: ((-1, 1), (1, 0)),
}


def is_valid_hex(q: int, r: int, radius: int = BOARD_RADIUS) -> bool:
    """Whether (q, r) lies on the hexagonal board of *radius*."""
    if 0 <= r <= radius:
        return -radius <= q <= radius - r
    if -radius <= r < 0:
        return -(radius + r) <= q <= radius
    return False


@lru_cache(maxsize=None)
def all_hexes(radius: int = BOARD_RADIUS) -> tuple[Hex, ...]:
    """Every cell of the board, q-major then r, always in the same order."""
    cells: list[Hex] = []
    for q in range(-radius, radius + 1):
        for r in range(max(-radius, -q - radius), min(radius, -q + radius) + 1):
            cells.append(Hex(q, r))
    return tuple(cells)


def hex_count(radius: int = BOARD_RADIUS) -> int:
    """Number of cells on a board of *radius*: 3N² + 3N + 1."""
    return 3 * radius * radius + 3 * radius + 1


def hex_distance(a: tuple[int, int], b: tuple[int, int]) -> int:
    """Number of single neighbour steps between *a* and *b*."""
    dq = a[0] - b[0]
    dr = a[1] - b[1]
    return (abs(dq) + abs(dr) + abs(dq + dr)) // 2


def hex_color(loc: tuple[int, int]) -> HexColor:
    """Tint of a cell; neighbouring cells never share a tint."""
    q, r = loc
    if (q - r - 1) % 3 == 0:
        return HexColor.WHITE
    if (q - r - 2) % 3 == 0:
        return HexColor.BLACK
    return HexColor.GREY


def pawn_forward(color: Color) -> Direction:
    """Direction a pawn of *color* advances in."""
    return _PAWN_FORWARD[color]


def pawn_capture_directions(color: Color) -> tuple[Direction, Direction]:
    """The two forward-diagonal neighbours a pawn of *color* captures on."""
    return _PAWN_CAPTURES[color]
