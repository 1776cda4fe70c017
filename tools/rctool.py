#!/usr/bin/env python3
import argparse, csv, json, os
import logging as log

from remixconnect.grid import EMPTY
from remixconnect.levelgen.generator import LevelGenerator


def write_tsv(mat, path):
    with open(path, 'w', newline='') as f:
        w = csv.writer(f, delimiter='\t')
        for r in mat:
            w.writerow(r)


def write_json(level, path):
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(level.to_dict(), f, indent=2)


def make_level(args, difficulty):
    gen = LevelGenerator(args.seed)
    if getattr(args, 'word', None):
        return gen.generate_with_word(args.word, difficulty)
    return gen.generate(difficulty)


def ascii_board(level):
    """Cells as letters/dots; '|' and '-' mark wall-blocked edges, '*' the start."""
    blocked = set()
    for w in level.walls:
        for s in w.segments:
            blocked.add(s.key)
    lines = []
    for r in range(level.grid_rows):
        row, below = [], []
        for c in range(level.grid_cols):
            ch = level.grid[r][c]
            if (r, c) == level.start_position and ch == EMPTY:
                ch = '*'
            row.append(ch)
            if c < level.grid_cols - 1:
                row.append('|' if ((r, c), (r, c + 1)) in blocked else ' ')
            below.append('-' if ((r, c), (r + 1, c)) in blocked else ' ')
            if c < level.grid_cols - 1:
                below.append(' ')
        lines.append(''.join(row))
        if r < level.grid_rows - 1:
            lines.append(''.join(below))
    return '\n'.join(lines)


def cmd_emit(args):
    level = make_level(args, args.level)
    if args.format == 'tsv':
        write_tsv(level.grid, args.out)
    else:
        write_json(level, args.out)
    print(f"Wrote {args.out}")


def cmd_pack(args):
    base = os.path.join(args.outdir, str(args.seed))
    os.makedirs(base, exist_ok=True)
    for lvl in range(1, args.count + 1):
        write_json(make_level(args, lvl), os.path.join(base, f"{lvl:02d}.json"))
    print(f"Wrote level pack to {base}")


def cmd_show(args):
    level = make_level(args, args.level)
    print(f"Level {level.difficulty}  {level.word}  {level.grid_cols}x{level.grid_rows}  walls={len(level.walls)}")
    print(ascii_board(level))


def main():
    p = argparse.ArgumentParser()
    p.add_argument('--loglevel', default='warning', help='logging level, e.g. debug')
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    p1.add_argument('--level', type=int, required=True)
    p1.add_argument('--seed', type=int, default=None)
    p1.add_argument('--word', type=str, default=None)
    p1.add_argument('--format', choices=['tsv', 'json'], default='json')
    p1.add_argument('--out', type=str, required=True)
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('pack')
    p2.add_argument('--seed', type=int, required=True)
    p2.add_argument('--count', type=int, default=20)
    p2.add_argument('--outdir', type=str, required=True)
    p2.set_defaults(func=cmd_pack)
    p3 = sub.add_parser('show')
    p3.add_argument('--level', type=int, required=True)
    p3.add_argument('--seed', type=int, default=None)
    p3.add_argument('--word', type=str, default=None)
    p3.set_defaults(func=cmd_show)
    args = p.parse_args()
    log.basicConfig(level=args.loglevel.upper(), format='%(levelname)s %(name)s: %(message)s')
    args.func(args)

if __name__ == '__main__':
    main()
