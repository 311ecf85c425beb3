"""
Row/column table export.

Layout: one comma-separated row of region labels per board row, then one
extra row with the column of each row's queen, rows ascending.
"""

from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import List, Tuple, Union

from queensgen.errors import PuzzleFormatError
from queensgen.generator import Puzzle
from queensgen.grid import UNASSIGNED, Cell, Grid

PathLike = Union[str, Path]


def format_csv(puzzle: Puzzle) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    for row in puzzle.regions:
        writer.writerow(row)
    writer.writerow(puzzle.queen_columns())
    return buf.getvalue()


def write_csv(puzzle: Puzzle, path: PathLike) -> Path:
    path = Path(path)
    path.write_text(format_csv(puzzle), encoding="utf-8")
    return path


def parse_csv(text: str) -> Tuple[Grid, Tuple[Cell, ...]]:
    rows: List[List[int]] = []
    for lineno, raw in enumerate(csv.reader(io.StringIO(text)), start=1):
        if not raw:
            continue
        try:
            rows.append([int(v) for v in raw])
        except ValueError:
            raise PuzzleFormatError(f"line {lineno}: expected integers, got {raw!r}") from None

    if len(rows) < 2:
        raise PuzzleFormatError("table needs at least one board row and the queen row")

    *board, queen_cols = rows
    width = len(board)
    for i, row in enumerate(board, start=1):
        if len(row) != width:
            raise PuzzleFormatError(f"line {i}: expected {width} labels, got {len(row)}")
    if len(queen_cols) != width:
        raise PuzzleFormatError(f"queen row: expected {width} columns, got {len(queen_cols)}")
    if any(not 0 <= c < width for c in queen_cols):
        raise PuzzleFormatError(f"queen row: column out of range in {queen_cols}")

    grid = Grid.from_rows(board)
    queens = tuple((r, c) for r, c in enumerate(queen_cols))
    return grid, queens


def read_csv(path: PathLike) -> Tuple[Grid, Tuple[Cell, ...]]:
    return parse_csv(Path(path).read_text(encoding="utf-8"))


def load_puzzle(path: PathLike) -> Puzzle:
    grid, queens = read_csv(path)
    return Puzzle.from_grid(grid, queens, base_label=UNASSIGNED)


__all__ = ["format_csv", "write_csv", "parse_csv", "read_csv", "load_puzzle"]
