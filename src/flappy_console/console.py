"""
console.py: The presentation boundary the simulation draws into.

``Console`` is the contract; ``CellBuffer`` is a headless grid of cells that
implements it. The pygame client draws a CellBuffer to the window each frame,
and the tests inspect one directly.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Protocol, Tuple

from .constants import BLACK, WHITE

Color = Tuple[int, int, int]

DEFAULT_FG = WHITE
DEFAULT_BG = BLACK


class Console(Protocol):
    quitting: bool

    def set(self, x: int, y: int, fg: Color, bg: Color, glyph: str) -> None: ...

    def print(self, x: int, y: int, text: str) -> None: ...

    def print_centered(self, y: int, text: str) -> None: ...

    def cls(self) -> None: ...

    def cls_bg(self, color: Color) -> None: ...


@dataclass
class Cell:
    glyph: str = " "
    fg: Color = DEFAULT_FG
    bg: Color = DEFAULT_BG


class CellBuffer:
    """
    An in-memory width x height grid of cells.
    Writes outside the grid are dropped, so callers can draw partially
    off-screen objects without clipping them first.
    """

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.quitting = False
        self.cells: List[List[Cell]] = []
        self.cls()

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set(self, x: int, y: int, fg: Color, bg: Color, glyph: str):
        if self.in_bounds(x, y):
            self.cells[y][x] = Cell(glyph, fg, bg)

    def print(self, x: int, y: int, text: str):
        for offset, char in enumerate(text):
            self.set(x + offset, y, DEFAULT_FG, self.cell(x + offset, y).bg, char)

    def print_centered(self, y: int, text: str):
        self.print(self.width // 2 - len(text) // 2, y, text)

    def cls(self):
        self.cls_bg(DEFAULT_BG)

    def cls_bg(self, color: Color):
        self.cells = [[Cell(bg=color) for _ in range(self.width)]
                      for _ in range(self.height)]

    def cell(self, x: int, y: int) -> Cell:
        if not self.in_bounds(x, y):
            return Cell()
        return self.cells[y][x]

    def glyph_at(self, x: int, y: int) -> Optional[str]:
        """Returns the glyph at (x, y), or None for blank and off-grid cells."""
        glyph = self.cell(x, y).glyph
        return None if glyph == " " else glyph

    def row_text(self, y: int) -> str:
        return "".join(cell.glyph for cell in self.cells[y])

    def positions_of(self, glyph: str) -> Dict[Tuple[int, int], Cell]:
        return {
            (x, y): cell
            for y, row in enumerate(self.cells)
            for x, cell in enumerate(row)
            if cell.glyph == glyph
        }
