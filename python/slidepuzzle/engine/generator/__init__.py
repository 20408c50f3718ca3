from slidepuzzle.engine.generator.generator import Generator

__all__ = ["Generator"]
