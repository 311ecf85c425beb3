"""
Generator errors.
"""

from __future__ import annotations


class QueensError(Exception):
    """Base class for every error raised by queensgen."""


class OutOfBoundsError(QueensError, IndexError):
    """
    Raised when a grid is read or written outside [0, width)².
    """

    def __init__(self, cell, width: int) -> None:
        super().__init__(f"cell {cell} is outside a {width}x{width} grid")
        self.cell = cell
        self.width = width


class NoQueenForColorError(QueensError, LookupError):
    """
    Raised when a region label has no queen to anchor it.
    """

    def __init__(self, label: int) -> None:
        super().__init__(f"{label} does not have a queen")
        self.label = label


class IncompletePuzzleError(QueensError, ValueError):
    """Raised when a puzzle is finalized before every queen is placed."""


class SearchExhaustedError(QueensError, RuntimeError):
    """Raised when a search runs out of candidates without a result."""


class PuzzleFormatError(QueensError, ValueError):
    """Raised when an exported row/column table cannot be read back."""


class InvalidWidthError(QueensError, ValueError):
    """Raised when a board width is rejected before generation."""
