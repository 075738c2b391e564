"""
scripts/02_observe_pairs.py
Fold a text file of "context event" pairs into a Predictor and report
count / size / uncertainty per context.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterator

sys.path.insert(0, str(Path(__file__).parent.parent))

from sooth.models.predictor import Predictor
from sooth.utils.logger import get_logger

log = get_logger("observe_pairs")


def read_pairs(path: Path) -> Iterator[tuple[int, int]]:
    """Yield (context, event) per line. Blank lines and # comments are skipped."""
    with open(path, "r", encoding="utf-8") as f:
        for lineno, raw in enumerate(f, start=1):
            line = raw.split("#", 1)[0].strip()
            if not line:
                continue
            parts = line.split()
            if len(parts) != 2 or not all(p.isascii() and p.isdigit() for p in parts):
                log.warning(f"{path}:{lineno}: skipping malformed line {raw.rstrip()!r}")
                continue
            yield int(parts[0]), int(parts[1])


def main():
    parser = argparse.ArgumentParser(description="Observe context/event pairs from a file")
    parser.add_argument("path", type=Path, help="File with one 'context event' pair per line")
    parser.add_argument("--error-event", type=int, default=None)
    args = parser.parse_args()

    if not args.path.exists():
        log.error(f"File not found: {args.path}")
        sys.exit(1)

    predictor = Predictor.new(args.error_event).observe_all(read_pairs(args.path))
    log.info(f"Loaded {len(predictor.contexts)} contexts from {args.path}")

    for context in predictor.contexts:
        uncertainty = predictor.uncertainty(context.id)
        log.info(
            f"context {context.id}: count={predictor.count(context.id)} "
            f"size={predictor.size(context.id)} uncertainty={uncertainty:.4f}"
        )


if __name__ == "__main__":
    main()
