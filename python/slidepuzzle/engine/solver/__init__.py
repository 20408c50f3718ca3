from slidepuzzle.engine.solver.solver import SearchResult, Solver

__all__ = ["SearchResult", "Solver"]
