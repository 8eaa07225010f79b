"""Statement builders layered over a dialect."""

from .insert import Dialect, InsertBuilder

__all__ = ["Dialect", "InsertBuilder"]
