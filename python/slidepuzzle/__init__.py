"""Generalized R×C sliding puzzle: state model, solver, generator and validator."""

from slidepuzzle.models import Direction, State

__all__ = ["Direction", "State"]
