"""Board - piece placement on a hexagonal board."""

from __future__ import annotations

from collections.abc import Iterator

from hexchess.core.enums import Color, PieceType
from hexchess.core.errors import InvalidLocation, NoPieceAtSource
from hexchess.core.move import Move, MoveUndo
from hexchess.core.piece import Piece, PieceView
from hexchess.core.types import (
    BOARD_RADIUS,
    Direction,
    Hex,
    all_hexes,
    is_valid_hex,
)


class Board:
    """Mutable hexagonal board with a per-colour king index.

    Cells are fixed at construction; only their occupants change.
    """

    __slots__ = ("radius", "_cells", "_king_hexes")

    def __init__(self, radius: int = BOARD_RADIUS) -> None:
        if radius < 1:
            raise ValueError(f"Board radius must be positive, got {radius}")
        self.radius = radius
        self._cells: dict[Hex, Piece | None] = dict.fromkeys(all_hexes(radius))
        self._king_hexes: dict[Color, Hex | None] = {
            Color.WHITE: None,
            Color.BLACK: None,
        }

    # -- Geometry -----------------------------------------------------------

    def is_valid(self, loc: tuple[int, int]) -> bool:
        return is_valid_hex(loc[0], loc[1], self.radius)

    def _checked(self, loc: tuple[int, int]) -> Hex:
        if not self.is_valid(loc):
            raise InvalidLocation(loc[0], loc[1])
        return Hex(loc[0], loc[1])

    def hexes(self) -> tuple[Hex, ...]:
        """Every cell, in the fixed enumeration order."""
        return all_hexes(self.radius)

    def __iter__(self) -> Iterator[Hex]:
        return iter(self.hexes())

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, loc: object) -> bool:
        return isinstance(loc, tuple) and len(loc) == 2 and self.is_valid(loc)

    # -- Element access -----------------------------------------------------

    def at(self, loc: tuple[int, int]) -> Piece | None:
        """Occupant of *loc*, or ``None`` when the cell is empty."""
        return self._cells[self._checked(loc)]

    def __getitem__(self, loc: tuple[int, int]) -> Piece | None:
        return self.at(loc)

    def is_empty(self, loc: tuple[int, int]) -> bool:
        return self.at(loc) is None

    def _set(self, loc: Hex, piece: Piece | None) -> None:
        old_piece = self._cells[loc]
        if (
            old_piece is not None
            and old_piece.piece_type == PieceType.KING
            and self._king_hexes[old_piece.color] == loc
        ):
            self._king_hexes[old_piece.color] = None

        self._cells[loc] = piece

        if piece is None:
            return
        piece.location = loc
        if piece.piece_type == PieceType.KING:
            self._king_hexes[piece.color] = loc

    # -- Mutation -----------------------------------------------------------

    def place(self, loc: tuple[int, int], piece: Piece | None) -> None:
        """Put *piece* on *loc*, overwriting whatever was there.

        Used for initial setup and for restoring a captured piece. The
        overwritten occupant is not treated as a capture.
        """
        target = self._checked(loc)
        if piece is not None and piece.location not in (None, target):
            previous = piece.location
            if self.is_valid(previous) and self._cells[previous] is piece:
                self._set(previous, None)
        self._set(target, piece)

    def move_piece(self, from_hex: tuple[int, int], to_hex: tuple[int, int]) -> Piece | None:
        """Move the occupant of *from_hex* onto *to_hex*.

        Returns the piece that stood on *to_hex* (detached from the board),
        if any. The moved piece is marked as having moved; moving it back
        does not clear that flag.
        """
        source = self._checked(from_hex)
        target = self._checked(to_hex)
        piece = self._cells[source]
        if piece is None:
            raise NoPieceAtSource(source)
        if source == target:
            raise ValueError(f"Cannot move a piece onto its own hex {source}")

        captured = self._cells[target]
        self._set(source, None)
        self._set(target, piece)
        if captured is not None:
            captured.location = None
        piece.has_moved = True
        return captured

    def make_move(self, move: Move) -> MoveUndo:
        """Apply *move* and return the record that reverts it."""
        piece = self.at(move.from_hex)
        if piece is None:
            raise NoPieceAtSource(move.from_hex)
        had_moved = piece.has_moved
        captured = self.move_piece(move.from_hex, move.to_hex)
        return MoveUndo(move=move, captured=captured, had_moved=had_moved)

    def unmake_move(self, undo: MoveUndo) -> None:
        """Exact inverse of :meth:`make_move`."""
        move = undo.move
        piece = self.at(move.to_hex)
        assert piece is not None
        self.move_piece(move.to_hex, move.from_hex)
        if undo.captured is not None:
            self.place(move.to_hex, undo.captured)
        piece.has_moved = undo.had_moved

    # -- Ray casting --------------------------------------------------------

    def get_line(
        self,
        start: tuple[int, int],
        direction: Direction,
        limit: int | None = None,
        color: Color | None = None,
    ) -> list[Hex]:
        """Hexes visited walking from *start* along *direction*.

        The walk stops before leaving the board and before a piece of
        *color* (default: the colour of the piece on *start*). A hex holding
        any other piece is included and ends the walk. At most *limit* steps
        are taken.
        """
        if direction == (0, 0):
            raise ValueError("Direction must be non-zero")
        current = self._checked(start)
        if color is None:
            mover = self._cells[current]
            color = mover.color if mover is not None else None

        line: list[Hex] = []
        while limit is None or len(line) < limit:
            current = current.step(direction)
            if not self.is_valid(current):
                break
            occupant = self._cells[current]
            if occupant is not None and occupant.color == color:
                break
            line.append(current)
            if occupant is not None:
                break
        return line

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Hex, Piece]]:
        """``(hex, piece)`` pairs for every occupied cell."""
        for loc, piece in self._cells.items():
            if piece is not None:
                yield loc, piece

    def pieces(self, color: Color) -> list[Piece]:
        """All pieces of *color* currently on the board."""
        return [piece for _, piece in self.occupied() if piece.color == color]

    def king_hex(self, color: Color) -> Hex | None:
        """Where *color*'s king stands, or ``None`` if it has none."""
        return self._king_hexes[color]

    def snapshot(self) -> dict[Hex, PieceView]:
        """Value snapshot of every occupied cell, for comparisons."""
        return {loc: piece.view() for loc, piece in self.occupied()}

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        """Independent board with cloned pieces."""
        b = Board(self.radius)
        for loc, piece in self.occupied():
            b._set(
                loc,
                Piece(
                    piece.piece_type,
                    piece.color,
                    has_moved=piece.has_moved,
                    valid_moves=list(piece.valid_moves),
                ),
            )
        return b

    def clear(self) -> None:
        for loc, piece in self.occupied():
            piece.location = None
        self._cells = dict.fromkeys(self._cells)
        self._king_hexes = {Color.WHITE: None, Color.BLACK: None}

    # -- Dunder helpers -----------------------------------------------------

    def __repr__(self) -> str:
        rows: list[str] = []
        n = self.radius
        for r in range(-n, n + 1):
            cells = []
            for q in range(max(-n, -r - n), min(n, -r + n) + 1):
                p = self._cells[Hex(q, r)]
                cells.append(str(p) if p else ".")
            rows.append(f"{r:>3} {' ' * abs(r)}{' '.join(cells)}")
        return "\n".join(rows)
