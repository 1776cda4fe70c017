# src/remixconnect/render/layout.py
# Pixel geometry of the board on the fixed portrait canvas.

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from ..grid import Position
from ..levelgen.walls import HORIZONTAL, WallSegment

CANVAS_W, CANVAS_H = 720, 1080
BASE_CELL_SIZE = 85
CELL_GAP = 8
GRID_PADDING = 40
UI_RESERVE = 280     # vertical room kept for timer, score and word bar
WORD_BAR_H = 180
TOP_OFFSET = 80
WALL_THICKNESS = 5


@dataclass(frozen=True)
class BoardLayout:
    cols: int
    rows: int
    cell: float
    origin_x: float
    origin_y: float
    gap: int = CELL_GAP

    @classmethod
    def fit(cls, cols: int, rows: int, width: int = CANVAS_W, height: int = CANVAS_H) -> "BoardLayout":
        max_w = (width - GRID_PADDING * 2 - (cols - 1) * CELL_GAP) / cols
        max_h = (height - UI_RESERVE - (rows - 1) * CELL_GAP) / rows
        cell = min(BASE_CELL_SIZE, max_w, max_h)
        grid_w = cols * cell + (cols - 1) * CELL_GAP
        grid_h = rows * cell + (rows - 1) * CELL_GAP
        return cls(
            cols=cols,
            rows=rows,
            cell=cell,
            origin_x=(width - grid_w) / 2,
            origin_y=(height - grid_h - WORD_BAR_H) / 2 + TOP_OFFSET,
        )

    @property
    def pitch(self) -> float:
        return self.cell + self.gap

    def cell_at(self, x: float, y: float) -> Optional[Position]:
        """Cell under a pointer, or None outside the grid or inside a gap."""
        rx, ry = x - self.origin_x, y - self.origin_y
        if rx < 0 or ry < 0:
            return None
        col, row = int(rx // self.pitch), int(ry // self.pitch)
        if row >= self.rows or col >= self.cols:
            return None
        if rx - col * self.pitch > self.cell or ry - row * self.pitch > self.cell:
            return None
        return (row, col)

    def cell_rect(self, pos: Position) -> Tuple[float, float, float, float]:
        x0 = self.origin_x + pos[1] * self.pitch
        y0 = self.origin_y + pos[0] * self.pitch
        return (x0, y0, x0 + self.cell, y0 + self.cell)

    def cell_center(self, pos: Position) -> Tuple[float, float]:
        x0, y0, x1, y1 = self.cell_rect(pos)
        return ((x0 + x1) / 2, (y0 + y1) / 2)

    def wall_rect(self, seg: WallSegment) -> Tuple[float, float, float, float]:
        """Bar centred in the gap between the segment's two cells."""
        x0, y0, x1, y1 = self.cell_rect(seg.cell1)
        half = WALL_THICKNESS / 2
        if seg.orientation == HORIZONTAL:
            my = y1 + self.gap / 2
            return (x0 - self.gap / 2, my - half, x1 + self.gap / 2, my + half)
        mx = x1 + self.gap / 2
        return (mx - half, y0 - self.gap / 2, mx + half, y1 + self.gap / 2)
