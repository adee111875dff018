from backend.engine.gameplay.directions import DirectionMapper
from backend.engine.gameplay.moves import MoveEngine
from backend.engine.gameplay.session import GameSession

__all__ = ["DirectionMapper", "GameSession", "MoveEngine"]
