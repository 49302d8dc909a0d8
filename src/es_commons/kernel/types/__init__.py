"""Kernel types – Result monad."""
from es_commons.kernel.types.result import Err, Ok, Result

__all__ = ["Err", "Ok", "Result"]
