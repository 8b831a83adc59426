"""Game management layer — state machine and controller.

Quick start::

    from hexchess.game import GameController

    ctrl = GameController()
    ctrl.new_game()
    ctrl.submit_move((0, 1), (0, 0))
"""

from hexchess.game.controller import GameController, GameEvents
from hexchess.game.interfaces import GamePhase, GameStatus, IGameController
from hexchess.game.state import GameState, MoveRecord

__all__ = [
    # Interfaces
    "GamePhase",
    "GameStatus",
    "IGameController",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
    "MoveRecord",
]
