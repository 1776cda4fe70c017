#!/usr/bin/env python3
# Render generated levels to PNGs using Pillow.

import argparse, os

from remixconnect.levelgen.generator import LevelGenerator
from remixconnect.render.board_image import save_board


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=int, required=True, help="Generator seed")
    ap.add_argument("--first", type=int, default=1, help="First level")
    ap.add_argument("--last", type=int, default=15, help="Last level (inclusive)")
    ap.add_argument("--outdir", type=str, default="out/png", help="Where to write PNGs")
    args = ap.parse_args()

    outdir = os.path.join(args.outdir, str(args.seed))
    os.makedirs(outdir, exist_ok=True)
    for lvl in range(args.first, args.last + 1):
        level = LevelGenerator(args.seed).generate(lvl)
        save_board(level, os.path.join(outdir, f"{lvl:02d}.png"))
    print(f"Wrote PNGs to {outdir}")

if __name__ == "__main__":
    main()
