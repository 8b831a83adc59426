"""Game state machine — owns the board, the pieces and the turn."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from hexchess.core.board import Board
from hexchess.core.enums import Color, GameResult, PieceType
from hexchess.core.errors import (
    GameOver,
    IllegalMove,
    InvalidLayout,
    InvalidLocation,
    NoPieceAtSource,
    WrongTurn,
)
from hexchess.core.layouts import GLINSKI_LAYOUT, Layout
from hexchess.core.move import Move, MoveUndo
from hexchess.core.move_generator import MoveGenerator
from hexchess.core.piece import Piece
from hexchess.core.rules import Rules
from hexchess.core.types import BOARD_RADIUS, Hex
from hexchess.game.interfaces import GamePhase, GameStatus

_LOGGER = logging.getLogger(__name__)


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    undo: MoveUndo
    piece_type: PieceType
    gave_check: bool = False

    @property
    def was_capture(self) -> bool:
        return self.undo.captured is not None


@dataclass
class GameState:
    """Board, per-side piece collections, turn and check/mate flags.

    Every piece's ``valid_moves`` cache is recomputed as the last step of
    each transition (:meth:`setup`, :meth:`move_piece`,
    :meth:`undo_last_move`); move validation reads the cache, never the
    generator. This is a pure data/logic class — no threading, no UI.
    """

    board: Board = field(default_factory=Board, init=False)
    current_player: Color = field(default=Color.WHITE, init=False)
    pieces: dict[Color, list[Piece]] = field(init=False)
    player_in_check: Color | None = field(default=None, init=False)
    checkmate: bool = field(default=False, init=False)
    stalemate: bool = field(default=False, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)
    _has_moves: dict[Color, bool] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.pieces = {Color.WHITE: [], Color.BLACK: []}
        self._has_moves = {Color.WHITE: False, Color.BLACK: False}

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(
        self,
        layout: Layout | None = None,
        side_to_move: Color = Color.WHITE,
        radius: int = BOARD_RADIUS,
    ) -> None:
        """Initialise (or reset) the game from *layout*.

        Nothing changes if the layout is rejected.
        """
        if layout is None:
            layout = GLINSKI_LAYOUT

        board = Board(radius)
        pieces: dict[Color, list[Piece]] = {Color.WHITE: [], Color.BLACK: []}
        for color in Color:
            kings = 0
            for loc, piece_type in layout.get(color, ()):
                if not board.is_valid(loc):
                    raise InvalidLocation(loc[0], loc[1])
                if board.at(loc) is not None:
                    raise InvalidLayout(f"More than one piece placed on {tuple(loc)}")
                if piece_type == PieceType.KING:
                    kings += 1
                    if kings > 1:
                        raise InvalidLayout(f"{color} has more than one king")
                piece = Piece(PieceType(piece_type), color)
                board.place(loc, piece)
                pieces[color].append(piece)

        waiting = side_to_move.opposite
        if Rules.is_in_check(board, waiting):
            raise InvalidLayout(f"{waiting} is in check but it is {side_to_move}'s turn")

        self.board = board
        self.pieces = pieces
        self.current_player = side_to_move
        self.move_history.clear()
        self._refresh()
        _LOGGER.debug(
            "New game: %d white and %d black pieces, %s to move",
            len(pieces[Color.WHITE]),
            len(pieces[Color.BLACK]),
            side_to_move,
        )

    # ── Move application ─────────────────────────────────────────────────

    def move_piece(self, from_hex: tuple[int, int], to_hex: tuple[int, int]) -> Piece | None:
        """Play a move for the side to move and return the captured piece.

        Raises a :class:`~hexchess.core.errors.MoveError` (or
        ``InvalidLocation``) without touching the state if the move is
        rejected.
        """
        if self.is_game_over:
            raise GameOver("The game is over")

        piece = self.board.at(from_hex)
        if not self.board.is_valid(to_hex):
            raise InvalidLocation(to_hex[0], to_hex[1])
        source = Hex(from_hex[0], from_hex[1])
        target = Hex(to_hex[0], to_hex[1])

        if piece is None:
            raise NoPieceAtSource(source)
        if piece.color != self.current_player:
            raise WrongTurn(f"It is {self.current_player}'s turn, not {piece.color}'s")
        if target not in piece.valid_moves:
            raise IllegalMove(f"{piece.piece_type.name.lower()} on {source} cannot move to {target}")

        move = Move(source, target)
        undo = self.board.make_move(move)
        if undo.captured is not None:
            self._capture(undo.captured)

        self.current_player = self.current_player.opposite
        self._refresh()

        record = MoveRecord(
            move=move,
            undo=undo,
            piece_type=piece.piece_type,
            gave_check=self.player_in_check == self.current_player,
        )
        self.move_history.append(record)
        _LOGGER.debug("Applied %s, captured %r", move, undo.captured)
        if self.is_game_over:
            _LOGGER.info("Game over after %d moves: %s", self.ply_count, self.phase.name)
        return undo.captured

    def undo_last_move(self) -> Move | None:
        """Undo the last move. Returns the undone Move, or None if empty."""
        if not self.move_history:
            return None

        record = self.move_history.pop()
        self.board.unmake_move(record.undo)
        if record.undo.captured is not None:
            self._restore(record.undo.captured)

        self.current_player = self.current_player.opposite
        self._refresh()
        _LOGGER.debug("Undid %s", record.move)
        return record.move

    # ── Query helpers ────────────────────────────────────────────────────

    def legal_moves(self, loc: tuple[int, int]) -> list[Hex]:
        """Cached legal destinations of the piece on *loc*.

        Empty when the hex is empty or the game has ended.
        """
        piece = self.board.at(loc)
        if piece is None or self.is_game_over:
            return []
        return list(piece.valid_moves)

    def has_legal_moves(self, color: Color) -> bool:
        return self._has_moves[color]

    @property
    def side_to_move(self) -> Color:
        return self.current_player

    @property
    def is_game_over(self) -> bool:
        return self.phase.is_terminal

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    @property
    def phase(self) -> GamePhase:
        if self.checkmate:
            return GamePhase.CHECKMATE
        if self.stalemate:
            return GamePhase.STALEMATE
        if self.player_in_check is not None:
            return GamePhase.CHECK
        return GamePhase.ONGOING

    def status(self) -> GameStatus:
        return GameStatus(
            current_player=self.current_player,
            player_in_check=self.player_in_check,
            checkmate=self.checkmate,
            stalemate=self.stalemate,
            phase=self.phase,
            result=self.result,
        )

    # ── Internal ─────────────────────────────────────────────────────────

    def _capture(self, piece: Piece) -> None:
        self.pieces[piece.color].remove(piece)
        piece.valid_moves = []

    def _restore(self, piece: Piece) -> None:
        self.pieces[piece.color].append(piece)

    def _refresh(self) -> None:
        """Recompute every cache and the check/mate flags."""
        gen = MoveGenerator(self.board)
        for color in Color:
            has_moves = False
            for piece in self.pieces[color]:
                assert piece.location is not None
                piece.valid_moves = gen.legal_moves(piece.location)
                has_moves = has_moves or bool(piece.valid_moves)
            self._has_moves[color] = has_moves

        mover = self.current_player
        in_check = Rules.is_in_check(self.board, mover)
        self.player_in_check = mover if in_check else None
        self.result = Rules.outcome(mover, in_check, self._has_moves[mover])
        self.checkmate = self.result == Rules.winner_against(mover)
        self.stalemate = self.result == GameResult.DRAW
