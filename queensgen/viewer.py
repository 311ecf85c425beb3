"""pygame window for playing a generated puzzle."""

from __future__ import annotations

from typing import Optional, Set, Tuple

import pygame

from queensgen.generator import Puzzle
from queensgen.grid import Cell
from queensgen.render import pastel_palette
from queensgen.solver import invalid_queens, is_solved

# ---------------- Visuals ----------------
FPS = 60
PAD = 24
TOP_BAR = 70
GRID_BORDER = 1
REGION_BORDER = 4
DEFAULT_CELL = 56

BG = (245, 245, 245)
TEXT = (20, 20, 20)
BLACK = (0, 0, 0)
QUEEN_COLOR = (40, 40, 40)
ILLEGAL_RED = (220, 40, 40)
WIN_GREEN = (30, 140, 60)

_FONT_NAMES = ["Times New Roman", "Times"]


def cell_at(pos: Tuple[int, int], width: int, cell_px: int = DEFAULT_CELL) -> Optional[Cell]:
    """Board cell under a pixel position, or None outside the board."""
    mx, my = pos
    x = mx - PAD
    y = my - (PAD + TOP_BAR)
    if x < 0 or y < 0:
        return None
    c = x // cell_px
    r = y // cell_px
    if r >= width or c >= width:
        return None
    return (r, c)


def cell_rect(r, c, CELL):
    x = PAD + c * CELL
    y = PAD + TOP_BAR + r * CELL
    return pygame.Rect(x, y, CELL, CELL)


def draw_text(screen, msg, x, y, f, color=TEXT):
    screen.blit(f.render(msg, True, color), (x, y))


def draw_grid_lines(screen, N, CELL):
    top = PAD + TOP_BAR
    left = PAD
    for i in range(N + 1):
        x = left + i * CELL
        pygame.draw.line(screen, (45, 45, 45), (x, top), (x, top + N * CELL), GRID_BORDER)
        y = top + i * CELL
        pygame.draw.line(screen, (45, 45, 45), (left, y), (left + N * CELL, y), GRID_BORDER)


def draw_region_borders(screen, regions, N, CELL):
    top = PAD + TOP_BAR
    left = PAD

    for r in range(N):
        for c in range(N - 1):
            if regions[r][c] != regions[r][c + 1]:
                x = left + (c + 1) * CELL
                y = top + r * CELL
                pygame.draw.line(screen, BLACK, (x, y), (x, y + CELL), REGION_BORDER)

    for r in range(N - 1):
        for c in range(N):
            if regions[r][c] != regions[r + 1][c]:
                x = left + c * CELL
                y = top + (r + 1) * CELL
                pygame.draw.line(screen, BLACK, (x, y), (x + CELL, y), REGION_BORDER)

    pygame.draw.rect(screen, BLACK, pygame.Rect(left, top, N * CELL, N * CELL), REGION_BORDER)


def draw_queen(screen, rect):
    # simple crown: three spikes over a band
    x, y, w, h = rect
    base_y = y + int(h * 0.70)
    top_y = y + int(h * 0.25)
    mid_y = y + int(h * 0.45)
    left = x + int(w * 0.22)
    right = x + int(w * 0.78)
    cx = x + w // 2
    points = [
        (left, base_y), (left, top_y), (left + (cx - left) // 2, mid_y),
        (cx, top_y), (cx + (right - cx) // 2, mid_y), (right, top_y), (right, base_y),
    ]
    pygame.draw.polygon(screen, QUEEN_COLOR, points)
    pygame.draw.rect(screen, QUEEN_COLOR, pygame.Rect(left, base_y, right - left, max(2, h // 10)))


def draw_board(screen, puzzle: Puzzle, queens: Set[Cell], region_colors, CELL, fonts):
    N = puzzle.width
    regions = puzzle.regions
    grid = puzzle.to_grid()

    screen.fill(BG)
    for r in range(N):
        for c in range(N):
            pygame.draw.rect(screen, region_colors[regions[r][c] % len(region_colors)], cell_rect(r, c, CELL))

    draw_grid_lines(screen, N, CELL)
    draw_region_borders(screen, regions, N, CELL)

    invalid = invalid_queens(queens, grid)
    for (r, c) in queens:
        rect = cell_rect(r, c, CELL)
        draw_queen(screen, rect)
        if (r, c) in invalid:
            pygame.draw.rect(screen, ILLEGAL_RED, rect, 4)

    font, font_small = fonts
    draw_text(screen, f"Board {N}x{N}   Queens {len(queens)}/{N}", PAD, 10, font_small)
    draw_text(screen, "Click=Q  S Solution  C Clear  ESC Quit", PAD, 34, font_small)
    if is_solved(queens, grid):
        draw_text(screen, "Solved!", PAD + N * CELL - 90, 10, font, WIN_GREEN)
    elif invalid:
        draw_text(screen, "Illegal placement", PAD + N * CELL - 170, 10, font_small, ILLEGAL_RED)


def run_viewer(puzzle: Puzzle, cell_px: int = DEFAULT_CELL) -> None:
    N = puzzle.width
    W = PAD * 2 + N * cell_px
    H = PAD * 2 + TOP_BAR + N * cell_px

    pygame.init()
    try:
        screen = pygame.display.set_mode((W, H))
        pygame.display.set_caption(f"Queens {N}x{N}")
        clock = pygame.time.Clock()
        fonts = (pygame.font.SysFont(_FONT_NAMES, 26), pygame.font.SysFont(_FONT_NAMES, 18))
        region_colors = pastel_palette(max(N, max(puzzle.queen_labels) + 1))
        queens: Set[Cell] = set()

        running = True
        while running:
            clock.tick(FPS)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_c:
                        queens.clear()
                    elif event.key == pygame.K_s:
                        queens = set(puzzle.queens)
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button in (1, 3):
                    cell = cell_at(event.pos, N, cell_px)
                    if cell is None:
                        continue
                    if cell in queens:
                        queens.remove(cell)
                    else:
                        queens.add(cell)

            draw_board(screen, puzzle, queens, region_colors, cell_px, fonts)
            pygame.display.flip()
    finally:
        pygame.quit()
