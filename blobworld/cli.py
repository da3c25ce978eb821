"""blobworld/cli — Command-line entry point for inspecting and viewing levels.

Usage::

    blobworld                                  # view bundled levels
    blobworld levels.json --index 2            # view one file, start at level 2
    blobworld levels.json --summary            # print resolved levels, no window
    blobworld levels.yaml --index 1 --json     # dump a built level as JSON
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from blobworld.debug import configure_logging
from blobworld.generators import make_rng
from blobworld.level import BUNDLED_LEVELS, Level, LevelFileError, load_levels


def format_summary(index: int, level: Level) -> str:
    """One line describing a built level."""
    return (
        f"[{index}] {level.name}: {len(level.platforms)} platforms, "
        f"{level.infer_width():g}x{level.infer_height():g}, "
        f"gravity={level.gravity:g} jumpV={level.jumpV:g} "
        f"start=({level.start.x:g}, {level.start.y:g}, r={level.start.r:g})"
    )


def main(argv: list[str] | None = None) -> None:
    """Load a level file and show it, summarize it, or dump it."""
    parser = argparse.ArgumentParser(description="Build and view platformer levels")
    parser.add_argument(
        "levels", nargs="?", default=str(BUNDLED_LEVELS),
        help="Level file (JSON or YAML); defaults to the bundled levels",
    )
    parser.add_argument(
        "--index", "-i", type=int, default=0, help="Level to start on / dump",
    )
    parser.add_argument(
        "--seed", type=int, help="Seed for random levels that carry no seed",
    )
    parser.add_argument(
        "--summary", action="store_true", help="Print level summaries and exit",
    )
    parser.add_argument(
        "--json", action="store_true", help="Print the selected level as JSON and exit",
    )
    args = parser.parse_args(argv)

    configure_logging()
    path = Path(args.levels)

    try:
        levels = load_levels(path, make_rng(args.seed))
    except (FileNotFoundError, LevelFileError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(2)

    if args.summary:
        for i, level in enumerate(levels):
            print(format_summary(i, level))
        sys.exit(0)

    if args.json:
        if not 0 <= args.index < len(levels):
            print(f"error: level index {args.index} out of range", file=sys.stderr)
            sys.exit(2)
        print(json.dumps(levels[args.index].to_dict(), indent=2))
        sys.exit(0)

    from blobworld.main import App

    App(path, index=args.index, seed=args.seed)


if __name__ == "__main__":
    main()
