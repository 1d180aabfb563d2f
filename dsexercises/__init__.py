"""Data-structure exercises: complex vectors and sorting, expression evaluation, histogram rectangles."""

__version__ = "0.1.0"
__all__ = ["complexvec", "expression", "histogram"]