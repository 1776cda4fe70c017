# src/remixconnect/render/board_image.py
# Static board snapshot with Pillow (letters, walls, start marker, live path).

from __future__ import annotations

from typing import Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from ..levelgen.generator import LevelConfig
from ..engine.path_state import PathState
from .layout import CANVAS_H, CANVAS_W, BoardLayout

BG = (2, 3, 4, 255)
CELL_OFF = (26, 26, 36, 255)
CELL_ON = (0, 255, 204, 255)
LETTER_OFF = (42, 42, 58, 255)
LETTER_ON = (183, 255, 1, 255)
WALL = (0, 255, 204, 255)
LINE = (183, 255, 1, 255)
START = (212, 255, 102, 255)


def _centered_text(draw: ImageDraw.ImageDraw, center, text: str, fill, font) -> None:
    l, t, r, b = draw.textbbox((0, 0), text, font=font)
    cx, cy = center
    draw.text((cx - (r - l) / 2 - l, cy - (b - t) / 2 - t), text, fill=fill, font=font)


def render_board(
    config: LevelConfig,
    state: Optional[PathState] = None,
    size: Tuple[int, int] = (CANVAS_W, CANVAS_H),
) -> Image.Image:
    layout = BoardLayout.fit(config.grid_cols, config.grid_rows, *size)
    img = Image.new("RGBA", size, BG)
    draw = ImageDraw.Draw(img)
    font = ImageFont.load_default()

    for r in range(config.grid_rows):
        for c in range(config.grid_cols):
            pos = (r, c)
            on = state is not None and state.is_connected(pos)
            draw.rectangle(layout.cell_rect(pos), fill=CELL_ON if on else CELL_OFF)
            letter = config.letter_at(pos)
            center = layout.cell_center(pos)
            if letter:
                lit = state is not None and state.letter_order(pos) <= state.letters_lit
                _centered_text(draw, center, letter, LETTER_ON if lit else LETTER_OFF, font)
            elif pos == config.start_position:
                rad = layout.cell / 6
                cx, cy = center
                draw.ellipse((cx - rad, cy - rad, cx + rad, cy + rad), fill=START)

    if state is not None and state.connected_count > 1:
        pts = [layout.cell_center(p) for p in state.cells]
        draw.line(pts, fill=LINE, width=max(2, int(layout.cell / 10)))

    for wall in config.walls:
        for seg in wall.segments:
            draw.rectangle(layout.wall_rect(seg), fill=WALL)

    return img


def save_board(config: LevelConfig, out_png: str, state: Optional[PathState] = None) -> None:
    render_board(config, state).save(out_png)
