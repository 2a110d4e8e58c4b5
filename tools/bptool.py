#!/usr/bin/env python3
import argparse, csv, logging
from blockpath.layout.levels import select_level
from blockpath.logging_config import setup_logging
from blockpath.pool import BlockPool
from blockpath.render.preview import save_preview
from blockpath.rng import source_for

def build_pool(level, seed):
    pool = BlockPool.empty()
    shape = select_level(pool, level, source_for(seed))
    return pool, shape

def write_tsv(pool, path, include_header=False):
    with open(path, 'w', newline='') as f:
        w = csv.writer(f, delimiter='\t')
        if include_header:
            w.writerow(["index", "name", "hidden", "x", "y"])
        for i, name, hidden, x, y in pool.as_rows():
            w.writerow([i, name, int(hidden), f"{x:.12f}", f"{y:.12f}"])

def cmd_emit(args):
    pool, shape = build_pool(args.level, args.seed)
    write_tsv(pool, args.out, include_header=args.header)
    print(f"Wrote {args.out} ({len(shape)} steps, {pool.visible_count()} visible)")

def cmd_render(args):
    pool, shape = build_pool(args.level, args.seed)
    save_preview(pool, args.out, scale=args.scale, labels=args.labels)
    print(f"Wrote {args.out}")

def main(argv=None):
    p = argparse.ArgumentParser(description="blockpath layout tool")
    p.add_argument('-v', '--verbose', action='store_true')
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    p1.add_argument('--level', type=int, required=True)
    p1.add_argument('--seed', type=int, default=None)
    p1.add_argument('--out', type=str, required=True)
    p1.add_argument('--header', action='store_true')
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('render')
    p2.add_argument('--level', type=int, required=True)
    p2.add_argument('--seed', type=int, default=None)
    p2.add_argument('--out', type=str, required=True)
    p2.add_argument('--scale', type=float, default=400.0, help="pixels per scene unit")
    p2.add_argument('--labels', action='store_true')
    p2.set_defaults(func=cmd_render)
    args = p.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)
    args.func(args)

if __name__ == '__main__':
    main()
