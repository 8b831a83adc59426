"""High-level rules: check and the outcome of a position."""

from __future__ import annotations

from hexchess.core.board import Board
from hexchess.core.enums import Color, GameResult
from hexchess.core.move_generator import MoveGenerator


class Rules:
    """Static rule-checker used by the game state.

    Terminal conditions are only ever judged for the side to move: a side
    that cannot move while it is not its turn is not in any special state.
    """

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return MoveGenerator(board).is_in_check(color)

    @staticmethod
    def outcome(side_to_move: Color, in_check: bool, has_moves: bool) -> GameResult:
        """Result of a position from the mover's check and mobility."""
        if has_moves:
            return GameResult.IN_PROGRESS
        if in_check:
            return Rules.winner_against(side_to_move)
        return GameResult.DRAW  # stalemate

    @staticmethod
    def winner_against(loser: Color) -> GameResult:
        return GameResult.BLACK_WINS if loser == Color.WHITE else GameResult.WHITE_WINS
