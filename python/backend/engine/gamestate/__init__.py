from backend.engine.gamestate.clock import GameClock
from backend.engine.gamestate.win import WinDetector

__all__ = ["GameClock", "WinDetector"]
