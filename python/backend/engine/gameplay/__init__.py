from backend.engine.gameplay.game import GamePlay
from backend.engine.gameplay.moves import IllegalMoveError, MoveEngine

__all__ = ["GamePlay", "IllegalMoveError", "MoveEngine"]
