from slidepuzzle.engine.validator.validator import Validator

__all__ = ["Validator"]
