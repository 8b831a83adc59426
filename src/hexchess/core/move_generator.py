"""Legal and pseudo-legal move generation + attack detection."""

from __future__ import annotations

from hexchess.core.board import Board
from hexchess.core.enums import Color, PieceType
from hexchess.core.errors import NoPieceAtSource
from hexchess.core.move import Move
from hexchess.core.piece import Piece
from hexchess.core.types import (
    DIAGONAL_DIRECTIONS,
    KING_OFFSETS,
    KNIGHT_OFFSETS,
    NEIGHBOR_DIRECTIONS,
    Direction,
    Hex,
    pawn_capture_directions,
    pawn_forward,
)

# Pieces that slide along rays until blocked.
_SLIDING_DIRECTIONS: dict[PieceType, tuple[Direction, ...]] = {
    PieceType.ROOK: NEIGHBOR_DIRECTIONS,
    PieceType.BISHOP: DIAGONAL_DIRECTIONS,
    PieceType.QUEEN: NEIGHBOR_DIRECTIONS + DIAGONAL_DIRECTIONS,
}

# Pieces that jump to fixed offsets, ignoring anything in between.
_STEP_OFFSETS: dict[PieceType, tuple[Direction, ...]] = {
    PieceType.KNIGHT: KNIGHT_OFFSETS,
    PieceType.KING: KING_OFFSETS,
}


class MoveGenerator:
    """Generates moves on a given :class:`Board`.

    ``legal_moves`` mutates the board via ``make_move`` / ``unmake_move``
    internally but always restores it before returning.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def pseudo_legal_moves(self, start: tuple[int, int]) -> list[Hex]:
        """Destinations of the piece on *start*, ignoring self-check."""
        piece = self._board.at(start)
        if piece is None:
            raise NoPieceAtSource(Hex(start[0], start[1]))
        origin = Hex(start[0], start[1])

        if piece.piece_type == PieceType.PAWN:
            return self._gen_pawn(origin, piece)

        directions = _SLIDING_DIRECTIONS.get(piece.piece_type)
        if directions is not None:
            return self._gen_sliding(origin, piece.color, directions)

        return self._gen_steps(origin, piece.color, _STEP_OFFSETS[piece.piece_type])

    def legal_moves(self, start: tuple[int, int]) -> list[Hex]:
        """Pseudo-legal destinations that do not leave the mover in check."""
        piece = self._board.at(start)
        if piece is None:
            raise NoPieceAtSource(Hex(start[0], start[1]))
        origin = Hex(start[0], start[1])
        color = piece.color
        board = self._board

        legal: list[Hex] = []
        for to_hex in self.pseudo_legal_moves(origin):
            undo = board.make_move(Move(origin, to_hex))
            try:
                if not self.is_in_check(color):
                    legal.append(to_hex)
            finally:
                board.unmake_move(undo)
        return legal

    # -- Attack detection ---------------------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent? No king, no check."""
        king_hex = self._board.king_hex(color)
        if king_hex is None:
            return False
        return self.is_square_attacked(king_hex, color.opposite)

    def is_square_attacked(self, target: tuple[int, int], by_color: Color) -> bool:
        """Does any piece of *by_color* have a pseudo-legal move onto *target*?"""
        for loc, piece in list(self._board.occupied()):
            if piece.color != by_color:
                continue
            if target in self.pseudo_legal_moves(loc):
                return True
        return False

    # -- Piece-specific generators (private) -------------------------------

    def _is_open(self, loc: Hex, color: Color) -> bool:
        """On the board and not occupied by a piece of *color*."""
        board = self._board
        if not board.is_valid(loc):
            return False
        occupant = board.at(loc)
        return occupant is None or occupant.color != color

    def _gen_pawn(self, start: Hex, piece: Piece) -> list[Hex]:
        board = self._board
        color = piece.color
        limit = 1 if piece.has_moved else 2

        moves = [
            loc
            for loc in board.get_line(start, pawn_forward(color), limit, color)
            if board.at(loc) is None
        ]

        for direction in pawn_capture_directions(color):
            loc = start.step(direction)
            if self._is_open(loc, color) and board.at(loc) is not None:
                moves.append(loc)
        return moves

    def _gen_sliding(
        self,
        start: Hex,
        color: Color,
        directions: tuple[Direction, ...],
    ) -> list[Hex]:
        board = self._board
        moves: list[Hex] = []
        for direction in directions:
            moves.extend(board.get_line(start, direction, color=color))
        return moves

    def _gen_steps(
        self,
        start: Hex,
        color: Color,
        offsets: tuple[Direction, ...],
    ) -> list[Hex]:
        moves: list[Hex] = []
        for offset in offsets:
            loc = start.step(offset)
            if self._is_open(loc, color):
                moves.append(loc)
        return moves
