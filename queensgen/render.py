from __future__ import annotations

import colorsys
import random
from typing import List, Optional, Tuple

from queensgen.generator import Puzzle

QUEEN_ANSI = "\033[33m"
RESET_ANSI = "\033[0m"


def render_text(puzzle: Puzzle, hide_queens: bool = False, color: bool = True) -> str:
    """One board row per line, labels separated by spaces; queens in yellow."""

    lines = []
    width = len(str(max(max(row) for row in puzzle.regions)))
    for r, row in enumerate(puzzle.regions):
        parts = []
        for c, label in enumerate(row):
            text = str(label).rjust(width)
            if not hide_queens and puzzle.is_queen((r, c)):
                text = f"{QUEEN_ANSI}{text}{RESET_ANSI}" if color else f"{text}*"
            elif not color and not hide_queens:
                text = f"{text} "
            parts.append(text)
        lines.append(" ".join(parts).rstrip())
    return "\n".join(lines)


def pastel_palette(k: int, rng: Optional[random.Random] = None) -> List[Tuple[int, int, int]]:
    rng = rng or random
    cols = []
    for i in range(k):
        h = (i / k) % 1.0
        r, g, b = colorsys.hsv_to_rgb(h, 0.40, 0.98)
        cols.append((int(r * 255), int(g * 255), int(b * 255)))
    rng.shuffle(cols)
    return cols


__all__ = ["QUEEN_ANSI", "RESET_ANSI", "render_text", "pastel_palette"]
