"""
scripts/01_observe_benchmark.py
Time Predictor.observe over the configured scenarios, then sweep select()
over every trained context with caller-supplied random limits.
"""
from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

import numpy as np

sys.path.insert(0, str(Path(__file__).parent.parent))

from sooth.models.predictor import Predictor
from sooth.utils.config import get_benchmark_config, get_benchmark_names, get_select_rounds
from sooth.utils.logger import get_logger

log = get_logger("observe_benchmark")


def build_sequence(kind: str, size: int) -> list[int]:
    if kind == "unique":
        return list(range(1, size + 1))
    if kind == "same":
        return [1] * size
    if kind == "half":
        half = list(range(1, size // 2 + 1))
        return half + half
    raise ValueError(f"Unknown sequence kind: {kind}")


def preload(size: int) -> Predictor:
    return Predictor.new(0).observe_all((n, n) for n in range(1, size + 1))


def run_scenario(name: str) -> float:
    cfg = get_benchmark_config(name)
    size = cfg["size"]
    model = preload(size) if cfg["preloaded"] else Predictor.new(0)
    pairs = list(zip(build_sequence(cfg["ids"], size), build_sequence(cfg["events"], size)))

    start = time.perf_counter()
    model = model.observe_all(pairs)
    elapsed = time.perf_counter() - start

    log.info(
        f"{name}: {len(pairs)} observations in {elapsed:.3f}s "
        f"({len(pairs) / elapsed:,.0f} obs/s, {len(model.contexts)} contexts)"
    )
    return elapsed


def run_select(size: int, rounds: int, seed: int) -> float:
    """Weighted random selection the way a caller does it: draw limit in [1, count]."""
    model = preload(size)
    rng = np.random.default_rng(seed)
    ids = [context.id for context in model.contexts]

    start = time.perf_counter()
    misses = 0
    for _ in range(rounds):
        for id in ids:
            limit = int(rng.integers(1, model.count(id), endpoint=True))
            if model.select(id, limit) == model.error_event:
                misses += 1
    elapsed = time.perf_counter() - start

    log.info(f"select: {rounds * len(ids)} selections in {elapsed:.3f}s ({misses} misses)")
    return elapsed


def main():
    parser = argparse.ArgumentParser(description="Predictor observe/select benchmark")
    parser.add_argument("--scenario", choices=get_benchmark_names() + ["all"], default="all")
    parser.add_argument("--select-size", type=int, default=10_000)
    parser.add_argument("--seed", type=int, default=0)
    args = parser.parse_args()

    targets = get_benchmark_names() if args.scenario == "all" else [args.scenario]
    for name in targets:
        run_scenario(name)

    run_select(args.select_size, get_select_rounds(), args.seed)
    log.info("Benchmark complete.")


if __name__ == "__main__":
    main()
