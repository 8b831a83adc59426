"""Exceptions raised by the rules core.

Every error is raised before any state is touched, so callers may catch it
and carry on with the same game.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hexchess.core.types import Hex


class HexChessError(Exception):
    """Base class for all errors raised by :mod:`hexchess`."""


class InvalidLocation(HexChessError, ValueError):
    """A coordinate lies outside the board."""

    def __init__(self, q: int, r: int) -> None:
        super().__init__(f"Hex ({q}, {r}) is not on the board")
        self.q = q
        self.r = r


class InvalidLayout(HexChessError, ValueError):
    """An opening layout cannot be placed on the board."""


class MoveError(HexChessError, ValueError):
    """A move submission was rejected."""


class NoPieceAtSource(MoveError):
    """The source hex is empty."""

    def __init__(self, loc: Hex) -> None:
        super().__init__(f"No piece on {tuple(loc)}")
        self.loc = loc


class WrongTurn(MoveError):
    """The piece on the source hex belongs to the side not on move."""


class IllegalMove(MoveError):
    """The destination is not among the piece's legal moves."""


class GameOver(MoveError):
    """The game has already ended."""
