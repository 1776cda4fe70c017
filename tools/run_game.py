# tools/run_game.py
# Interactive player for generated levels: drag across the grid with the mouse.
# Keys: SPACE dismiss tutorial, R reset board, M toggle mute, ENTER play again after game over,
#       ESC quit. A won level advances after a short pause.

from __future__ import annotations

import argparse
import logging as log
from typing import Optional

import pygame

try:
    from remixconnect.engine.session import GameSession, SessionState
    from remixconnect.engine.path_state import MoveResult
    from remixconnect.render.layout import CANVAS_W, CANVAS_H, BoardLayout
    from remixconnect.ui.hud import format_time, score_digits, streak_label
except Exception as e:  # pragma: no cover
    print("[run_game] Failed to import project modules:", e)
    print("Ensure you installed the package in editable mode: pip install -e .")
    raise

BG = (2, 3, 4)
CELL_OFF = (26, 26, 36)
CELL_ON = (0, 255, 204)
LETTER_OFF = (42, 42, 58)
LETTER_ON = (183, 255, 1)
WALL = (0, 255, 204)
WRONG = (255, 60, 90)
TEXT = (220, 220, 220)

ADVANCE_DELAY = 2.0
FLASH_SECONDS = 0.3


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description="remix-connect player")
    parser.add_argument("--level", type=int, default=1)
    parser.add_argument("--score", type=int, default=0)
    parser.add_argument("--seed", type=int, default=None, help="fixed generator seed")
    parser.add_argument("--scale", type=float, default=0.75, help="window scale of the 720x1080 canvas")
    parser.add_argument("--fps", type=int, default=60)
    parser.add_argument("--skip-tutorial", action="store_true")
    parser.add_argument("--loglevel", default="info")
    args = parser.parse_args(argv)

    log.basicConfig(level=args.loglevel.upper(), format="%(levelname)s %(name)s: %(message)s")

    state = SessionState(level=args.level, score=args.score, tutorial_completed=args.skip_tutorial)
    session = GameSession(state, seed=args.seed)

    pygame.init()
    win_w, win_h = int(CANVAS_W * args.scale), int(CANVAS_H * args.scale)
    screen = pygame.display.set_mode((win_w, win_h))
    canvas = pygame.Surface((CANVAS_W, CANVAS_H))
    clock = pygame.time.Clock()
    big = pygame.font.SysFont(None, 64)
    small = pygame.font.SysFont(None, 36)

    layout = BoardLayout.fit(session.level.grid_cols, session.level.grid_rows)
    dragging = False
    won_for = 0.0
    flash_cell = None
    flash_for = 0.0

    def to_canvas(px: int, py: int):
        return px / args.scale, py / args.scale

    def handle(result: MoveResult, pos) -> None:
        nonlocal flash_cell, flash_for
        if result.rejected:
            flash_cell, flash_for = pos, FLASH_SECONDS

    running = True
    while running:
        dt = clock.tick(args.fps) / 1000.0

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE and session.paused:
                    session.complete_tutorial()
                elif event.key == pygame.K_r:
                    session.reset_board()
                elif event.key == pygame.K_m:
                    session.set_muted(not state.muted)
                elif event.key == pygame.K_RETURN and session.game_over:
                    session.play_again()
                    layout = BoardLayout.fit(session.level.grid_cols, session.level.grid_rows)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                dragging = True
                pos = layout.cell_at(*to_canvas(*event.pos))
                if pos is not None:
                    handle(session.press(pos), pos)
            elif event.type == pygame.MOUSEMOTION and dragging:
                pos = layout.cell_at(*to_canvas(*event.pos))
                if pos is not None:
                    handle(session.move_to(pos), pos)
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                dragging = False

        session.tick(dt)
        flash_for = max(0.0, flash_for - dt)
        if session.won:
            won_for += dt
            if won_for >= ADVANCE_DELAY:
                won_for = 0.0
                session.advance()
                layout = BoardLayout.fit(session.level.grid_cols, session.level.grid_rows)

        # --- Rendering ---
        level, path = session.level, session.path
        canvas.fill(BG)
        for r in range(level.grid_rows):
            for c in range(level.grid_cols):
                pos = (r, c)
                x0, y0, x1, y1 = layout.cell_rect(pos)
                rect = pygame.Rect(int(x0), int(y0), int(x1 - x0), int(y1 - y0))
                color = CELL_ON if path.is_connected(pos) else CELL_OFF
                if flash_for > 0 and pos == flash_cell:
                    color = WRONG
                pygame.draw.rect(canvas, color, rect, border_radius=10)
                letter = level.letter_at(pos)
                if letter:
                    lit = path.letter_order(pos) <= path.letters_lit
                    img = big.render(letter, True, LETTER_ON if lit else LETTER_OFF)
                    canvas.blit(img, img.get_rect(center=rect.center))
                elif pos == level.start_position:
                    pygame.draw.circle(canvas, LETTER_ON, rect.center, max(4, rect.width // 6))

        if path.connected_count > 1:
            pts = [layout.cell_center(p) for p in path.cells]
            pygame.draw.lines(canvas, LETTER_ON, False, pts, max(2, int(layout.cell / 10)))

        for wall in level.walls:
            for seg in wall.segments:
                x0, y0, x1, y1 = layout.wall_rect(seg)
                pygame.draw.rect(canvas, WALL, pygame.Rect(int(x0), int(y0), int(x1 - x0) or 1, int(y1 - y0) or 1))

        hud = f"LV {state.level}   {score_digits(state.score)} {streak_label(state.perfect_streak)}   {format_time(session.clock.remaining)}s"
        if state.muted:
            hud += "   MUTE"
        canvas.blit(small.render(hud, True, TEXT), (40, 40))
        word_x = (CANVAS_W - 48 * len(level.word)) // 2
        for i, ch in enumerate(level.word, start=1):
            color = LETTER_ON if i <= path.letters_lit else LETTER_OFF
            canvas.blit(big.render(ch, True, color), (word_x + (i - 1) * 48, CANVAS_H - 140))

        banner = None
        if session.paused:
            banner = "Connect every cell, spell the word - SPACE"
        elif session.game_over:
            banner = "TIME UP - ENTER to play again"
        elif session.won:
            banner = f"+{session.last_points}"
        if banner:
            img = small.render(banner, True, TEXT)
            canvas.blit(img, img.get_rect(center=(CANVAS_W // 2, 110)))

        screen.blit(pygame.transform.smoothscale(canvas, (win_w, win_h)), (0, 0))
        pygame.display.set_caption(f"remix-connect - level {state.level} - {level.word}")
        pygame.display.flip()

    pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
