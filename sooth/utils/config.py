"""
sooth/utils/config.py
Load env vars and benchmark config JSON files.
"""
import json
import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

load_dotenv()

ROOT = Path(__file__).parent.parent.parent
CONFIG_DIR = ROOT / "config"

# ── Predictor ─────────────────────────────────────────────────────
DEFAULT_ERROR_EVENT: int = int(os.getenv("SOOTH_ERROR_EVENT", "0"))

# ── Logging ───────────────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("SOOTH_LOG_LEVEL", "INFO").upper()
LOG_DIR: str = os.getenv("SOOTH_LOG_DIR", "logs")     # "" disables file logging

# ── Benchmarks ────────────────────────────────────────────────────
BENCHMARK_CONFIG_FILE: str = "benchmark.json"

_benchmark_config_cache: dict[str, Any] = {}


def _load_benchmark_file() -> dict[str, Any]:
    if _benchmark_config_cache:
        return _benchmark_config_cache
    path = CONFIG_DIR / BENCHMARK_CONFIG_FILE
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        _benchmark_config_cache.update(json.load(f))
    return _benchmark_config_cache


def get_benchmark_config(name: str) -> dict[str, Any]:
    """Return the config block for one named benchmark scenario."""
    scenarios = _load_benchmark_file()["scenarios"]
    if name not in scenarios:
        raise ValueError(f"Unknown benchmark scenario: {name}")
    return scenarios[name]


def get_benchmark_names() -> list[str]:
    return list(_load_benchmark_file()["scenarios"])


def get_select_rounds() -> int:
    """How many select() sweeps the benchmark runs over a trained model."""
    return int(_load_benchmark_file().get("select_rounds", 1))
