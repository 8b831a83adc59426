"""Core domain layer — pure hexagonal-chess logic with zero external dependencies.

Quick start::

    from hexchess.core import Board, MoveGenerator, Piece, PieceType, Color

    board = Board()
    board.place((0, 0), Piece(PieceType.QUEEN, Color.WHITE))
    print(MoveGenerator(board).pseudo_legal_moves((0, 0)))
"""

from hexchess.core.board import Board
from hexchess.core.enums import Color, GameResult, HexColor, PieceType
from hexchess.core.errors import (
    GameOver,
    HexChessError,
    IllegalMove,
    InvalidLayout,
    InvalidLocation,
    MoveError,
    NoPieceAtSource,
    WrongTurn,
)
from hexchess.core.layouts import GLINSKI_LAYOUT, Layout, Placement
from hexchess.core.move import Move, MoveUndo
from hexchess.core.move_generator import MoveGenerator
from hexchess.core.piece import Piece, PieceView
from hexchess.core.rules import Rules
from hexchess.core.types import (
    BOARD_RADIUS,
    BOARD_SIZE,
    DIAGONAL_DIRECTIONS,
    KING_OFFSETS,
    KNIGHT_OFFSETS,
    NEIGHBOR_DIRECTIONS,
    Hex,
    all_hexes,
    hex_color,
    hex_distance,
    is_valid_hex,
)

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "HexColor",
    "PieceType",
    # Geometry
    "BOARD_RADIUS",
    "BOARD_SIZE",
    "DIAGONAL_DIRECTIONS",
    "KING_OFFSETS",
    "KNIGHT_OFFSETS",
    "NEIGHBOR_DIRECTIONS",
    "Hex",
    "all_hexes",
    "hex_color",
    "hex_distance",
    "is_valid_hex",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "MoveUndo",
    "Piece",
    "PieceView",
    "Rules",
    # Layouts
    "GLINSKI_LAYOUT",
    "Layout",
    "Placement",
    # Errors
    "GameOver",
    "HexChessError",
    "IllegalMove",
    "InvalidLayout",
    "InvalidLocation",
    "MoveError",
    "NoPieceAtSource",
    "WrongTurn",
]
