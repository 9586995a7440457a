"""Loads YAML/JSON configuration files and the global percolation settings."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


def load_config(path: str) -> Dict[str, Any]:
    """Load a YAML or JSON configuration file."""
    path_p = Path(path)
    with open(path_p, "r", encoding="utf-8") as f:
        if path_p.suffix in {".yaml", ".yml"}:
            return yaml.safe_load(f) or {}
        if path_p.suffix == ".json":
            return json.load(f)
        raise ValueError("Unsupported config format")


def load_percolation_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Return the project configuration, or an empty dict if none exists."""
    if path is None:
        path = Path(__file__).resolve().parents[3] / "configs" / "percolation_config.yaml"
    if path.exists():
        return load_config(str(path))
    return {}


PERCOLATION_CONFIG: Dict[str, Any] = load_percolation_config()
_STATS_CONF = PERCOLATION_CONFIG.get("stats") or {}
DEFAULT_GRID_SIZE: int = int(_STATS_CONF.get("grid_size", 200))
DEFAULT_TRIALS: int = int(_STATS_CONF.get("trials", 100))
CONFIDENCE_Z: float = float(_STATS_CONF.get("confidence_z", 1.96))
DEFAULT_SEED: Optional[int] = _STATS_CONF.get("seed")

_LOG_CONF = PERCOLATION_CONFIG.get("logging") or {}
LOG_FILE: Optional[str] = _LOG_CONF.get("file")
LOG_LEVEL: str = str(_LOG_CONF.get("level", "INFO")).upper()


def apply_config(config: Dict[str, Any]) -> None:
    """Override the module defaults with values from ``config``."""
    stats = config.get("stats") or {}
    if "grid_size" in stats:
        set_default_grid_size(int(stats["grid_size"]))
    if "trials" in stats:
        set_default_trials(int(stats["trials"]))
    if "confidence_z" in stats:
        set_confidence_z(float(stats["confidence_z"]))
    if "seed" in stats:
        set_default_seed(stats["seed"])
    log = config.get("logging") or {}
    if "file" in log:
        set_log_file(log["file"])
    if "level" in log:
        set_log_level_name(str(log["level"]))


def set_default_grid_size(value: int) -> None:
    """Override the default grid size used by the stats runner."""
    global DEFAULT_GRID_SIZE
    DEFAULT_GRID_SIZE = value
    PERCOLATION_CONFIG.setdefault("stats", {})["grid_size"] = value


def set_default_trials(value: int) -> None:
    """Override the default number of Monte Carlo trials."""
    global DEFAULT_TRIALS
    DEFAULT_TRIALS = value
    PERCOLATION_CONFIG.setdefault("stats", {})["trials"] = value


def set_confidence_z(value: float) -> None:
    """Override the z-score used for confidence intervals."""
    global CONFIDENCE_Z
    CONFIDENCE_Z = value
    PERCOLATION_CONFIG.setdefault("stats", {})["confidence_z"] = value


def set_default_seed(value: Optional[int]) -> None:
    global DEFAULT_SEED
    DEFAULT_SEED = value
    PERCOLATION_CONFIG.setdefault("stats", {})["seed"] = value


def set_log_file(value: Optional[str]) -> None:
    global LOG_FILE
    LOG_FILE = value
    PERCOLATION_CONFIG.setdefault("logging", {})["file"] = value


def set_log_level_name(value: str) -> None:
    global LOG_LEVEL
    LOG_LEVEL = value.upper()
    PERCOLATION_CONFIG.setdefault("logging", {})["level"] = LOG_LEVEL


def print_runtime_config() -> None:
    """Print a summary of the current runtime configuration."""
    info = {
        "grid_size": DEFAULT_GRID_SIZE,
        "trials": DEFAULT_TRIALS,
        "confidence_z": CONFIDENCE_Z,
        "seed": DEFAULT_SEED,
        "log_file": LOG_FILE,
        "log_level": LOG_LEVEL,
    }
    print("Runtime configuration:")
    for k, v in info.items():
        print(f"  {k}: {v}")
