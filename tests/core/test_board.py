"""Tests for Board."""

import pytest

from hexchess.core.board import Board
from hexchess.core.enums import Color, PieceType
from hexchess.core.errors import InvalidLocation, NoPieceAtSource
from hexchess.core.move import Move
from hexchess.core.piece import Piece
from hexchess.core.types import Hex


def _piece(color: Color, piece_type: PieceType) -> Piece:
    return Piece(piece_type, color)


class TestBoardCells:
    def test_new_board_is_empty(self) -> None:
        board = Board()
        assert len(board) == 91
        assert all(board.is_empty(loc) for loc in board)

    def test_iteration_covers_every_cell_once(self) -> None:
        board = Board()
        cells = list(board)
        assert len(cells) == len(set(cells)) == 91
        assert cells == list(board.hexes())

    def test_invalid_location_raises(self) -> None:
        board = Board()
        with pytest.raises(InvalidLocation):
            board.at((6, 0))
        with pytest.raises(ValueError, match="not on the board"):
            board[(0, -6)]

    def test_contains(self) -> None:
        board = Board()
        assert (0, 0) in board
        assert (5, 5) not in board
        assert "e4" not in board

    def test_bad_radius(self) -> None:
        with pytest.raises(ValueError):
            Board(radius=0)


class TestBoardOperations:
    def test_place_and_get(self) -> None:
        board = Board()
        piece = _piece(Color.WHITE, PieceType.PAWN)
        board.place((1, 2), piece)
        assert board.at((1, 2)) is piece
        assert piece.location == (1, 2)

    def test_place_on_invalid_hex_raises(self) -> None:
        board = Board()
        with pytest.raises(InvalidLocation):
            board.place((3, 3), _piece(Color.WHITE, PieceType.PAWN))

    def test_place_same_piece_elsewhere_clears_old_cell(self) -> None:
        board = Board()
        piece = _piece(Color.BLACK, PieceType.ROOK)
        board.place((0, 0), piece)
        board.place((1, 1), piece)
        assert board.is_empty((0, 0))
        assert board.at((1, 1)) is piece

    def test_move_piece_returns_capture(self) -> None:
        board = Board()
        rook = _piece(Color.WHITE, PieceType.ROOK)
        pawn = _piece(Color.BLACK, PieceType.PAWN)
        board.place((0, 3), rook)
        board.place((0, -3), pawn)

        captured = board.move_piece((0, 3), (0, -3))

        assert captured is pawn
        assert pawn.location is None
        assert board.at((0, -3)) is rook
        assert rook.location == (0, -3)
        assert rook.has_moved
        assert board.is_empty((0, 3))

    def test_move_from_empty_raises(self) -> None:
        board = Board()
        with pytest.raises(NoPieceAtSource):
            board.move_piece((0, 0), (0, 1))

    def test_move_onto_itself_raises(self) -> None:
        board = Board()
        board.place((0, 0), _piece(Color.WHITE, PieceType.KING))
        with pytest.raises(ValueError):
            board.move_piece((0, 0), (0, 0))

    def test_round_trip_keeps_has_moved(self) -> None:
        board = Board()
        knight = _piece(Color.WHITE, PieceType.KNIGHT)
        board.place((0, 0), knight)

        board.move_piece((0, 0), (1, 2))
        board.move_piece((1, 2), (0, 0))

        assert board.at((0, 0)) is knight
        assert board.is_empty((1, 2))
        assert knight.has_moved  # raw moves never clear the flag

    def test_make_unmake_restores_exactly(self) -> None:
        board = Board()
        queen = _piece(Color.WHITE, PieceType.QUEEN)
        bishop = _piece(Color.BLACK, PieceType.BISHOP)
        board.place((0, 0), queen)
        board.place((2, -4), bishop)
        before = board.snapshot()

        undo = board.make_move(Move(Hex(0, 0), Hex(2, -4)))
        assert undo.captured is bishop
        assert not undo.had_moved
        board.unmake_move(undo)

        assert board.snapshot() == before
        assert board.at((2, -4)) is bishop
        assert bishop.location == (2, -4)
        assert not queen.has_moved

    def test_king_tracking(self) -> None:
        board = Board()
        king = _piece(Color.BLACK, PieceType.KING)
        board.place((0, -5), king)
        assert board.king_hex(Color.BLACK) == (0, -5)
        assert board.king_hex(Color.WHITE) is None

        board.move_piece((0, -5), (0, -4))
        assert board.king_hex(Color.BLACK) == (0, -4)

        rook = _piece(Color.WHITE, PieceType.ROOK)
        board.place((0, 0), rook)
        board.move_piece((0, 0), (0, -4))
        assert board.king_hex(Color.BLACK) is None

    def test_pieces_by_color(self) -> None:
        board = Board()
        board.place((0, 0), _piece(Color.WHITE, PieceType.KING))
        board.place((1, 0), _piece(Color.WHITE, PieceType.PAWN))
        board.place((0, -5), _piece(Color.BLACK, PieceType.KING))
        assert len(board.pieces(Color.WHITE)) == 2
        assert len(board.pieces(Color.BLACK)) == 1

    def test_copy_independence(self) -> None:
        board = Board()
        board.place((0, 0), _piece(Color.WHITE, PieceType.KING))
        copy = board.copy()
        assert copy.snapshot() == board.snapshot()
        assert copy.at((0, 0)) is not board.at((0, 0))

        copy.move_piece((0, 0), (0, 1))
        assert board.at((0, 0)) is not None
        assert board.king_hex(Color.WHITE) == (0, 0)
        assert copy.king_hex(Color.WHITE) == (0, 1)

    def test_clear(self) -> None:
        board = Board()
        king = _piece(Color.WHITE, PieceType.KING)
        board.place((0, 0), king)
        board.clear()
        assert all(board.is_empty(loc) for loc in board)
        assert board.king_hex(Color.WHITE) is None
        assert king.location is None

    def test_repr_not_empty(self) -> None:
        board = Board()
        board.place((0, 0), _piece(Color.WHITE, PieceType.KING))
        board.place((0, -5), _piece(Color.BLACK, PieceType.KING))
        text = repr(board)
        assert "K" in text
        assert "k" in text
        assert len(text.splitlines()) == 11


class TestGetLine:
    def test_open_ray_runs_to_edge(self) -> None:
        board = Board()
        line = board.get_line((0, 0), (0, -1), color=Color.WHITE)
        assert line == [(0, -1), (0, -2), (0, -3), (0, -4), (0, -5)]

    def test_limit(self) -> None:
        board = Board()
        assert board.get_line((0, 0), (1, 0), limit=2, color=Color.WHITE) == [
            (1, 0),
            (2, 0),
        ]

    def test_stops_before_own_piece(self) -> None:
        board = Board()
        board.place((0, 0), _piece(Color.WHITE, PieceType.ROOK))
        board.place((0, -3), _piece(Color.WHITE, PieceType.PAWN))
        assert board.get_line((0, 0), (0, -1)) == [(0, -1), (0, -2)]

    def test_includes_enemy_then_stops(self) -> None:
        board = Board()
        board.place((0, 0), _piece(Color.WHITE, PieceType.ROOK))
        board.place((0, -3), _piece(Color.BLACK, PieceType.PAWN))
        assert board.get_line((0, 0), (0, -1)) == [(0, -1), (0, -2), (0, -3)]

    def test_from_edge_outwards_is_empty(self) -> None:
        board = Board()
        assert board.get_line((0, -5), (0, -1), color=Color.BLACK) == []

    def test_zero_direction_rejected(self) -> None:
        board = Board()
        with pytest.raises(ValueError):
            board.get_line((0, 0), (0, 0))

    def test_invalid_start_raises(self) -> None:
        board = Board()
        with pytest.raises(InvalidLocation):
            board.get_line((9, 9), (0, 1))
