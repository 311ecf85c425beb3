"""Queens puzzle generator: unique-solution region boards."""

from .config import GeneratorConfig
from .errors import (
    IncompletePuzzleError,
    InvalidWidthError,
    NoQueenForColorError,
    OutOfBoundsError,
    PuzzleFormatError,
    QueensError,
    SearchExhaustedError,
)
from .generator import Puzzle, PuzzleGenerator, generate_puzzle
from .grid import UNASSIGNED, Grid
from .solver import count_solutions, has_exactly_one_solution

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "GeneratorConfig",
    "Grid",
    "UNASSIGNED",
    "Puzzle",
    "PuzzleGenerator",
    "generate_puzzle",
    "count_solutions",
    "has_exactly_one_solution",
    "QueensError",
    "OutOfBoundsError",
    "NoQueenForColorError",
    "IncompletePuzzleError",
    "SearchExhaustedError",
    "PuzzleFormatError",
    "InvalidWidthError",
]
