from slidepuzzle.models.direction import Direction
from slidepuzzle.models.state import State

__all__ = ["Direction", "State"]
