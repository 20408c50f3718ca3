from slidepuzzle.engine.heuristic.manhattan import heuristic, manhattan_distance

__all__ = ["heuristic", "manhattan_distance"]
