"""Configuration loader with environment overrides."""
from __future__ import annotations

import json
import math
import os
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path
from typing import Any, Dict

from dotenv import load_dotenv

from .products import DEFAULT_EPISODE_COUNT, ONE_WEEK

DEFAULT_PATHS = [
    Path("config/studio.json"),
    Path("studio.json"),
]


def _find_config_path(explicit: str | None) -> Path | None:
    """Return the config file to read, or None when only defaults apply."""
    if explicit:
        path = Path(explicit)
        if not path.exists():
            raise FileNotFoundError(f"Config file {path} not found.")
        return path
    for candidate in DEFAULT_PATHS:
        if candidate.exists():
            return candidate
    return None


def load_config(config_path: str | None = None) -> Dict[str, Any]:
    """
    Load configuration from disk (if any) and apply environment overrides.
    """
    load_dotenv()
    cfg: Dict[str, Any] = {}
    cfg_path = _find_config_path(config_path)
    if cfg_path is not None:
        with cfg_path.open("r", encoding="utf-8") as f:
            cfg = json.load(f)

    series = cfg.setdefault("series", {})
    series["total_count"] = os.environ.get(
        "STUDIO_SERIES_TOTAL_COUNT", series.get("total_count", DEFAULT_EPISODE_COUNT)
    )
    series["release_interval_seconds"] = os.environ.get(
        "STUDIO_RELEASE_INTERVAL_SECONDS",
        series.get("release_interval_seconds", ONE_WEEK.total_seconds()),
    )

    output = cfg.setdefault("output", {})
    output["root"] = os.environ.get("STUDIO_OUTPUT_ROOT", output.get("root", "output"))

    return cfg


def _as_count(value: Any) -> int:
    """Whole, non-negative episode count from JSON or an env string."""
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise ValueError(f"series.total_count must be a whole number, got {value!r}")
    total = int(value)
    if total < 0:
        raise ValueError(f"series.total_count must be >= 0, got {total}")
    return total


def _as_interval(value: Any) -> timedelta:
    if isinstance(value, bool):
        raise ValueError(f"series.release_interval_seconds must be a number, got {value!r}")
    seconds = float(value)
    if not math.isfinite(seconds) or not 0 <= seconds < timedelta.max.total_seconds():
        raise ValueError(f"series.release_interval_seconds out of range, got {value!r}")
    return timedelta(seconds=seconds)


@dataclass
class StudioSettings:
    """Typed view over the loaded config."""

    series_total_count: int = DEFAULT_EPISODE_COUNT
    release_interval: timedelta = ONE_WEEK
    output_root: Path = Path("output")

    @classmethod
    def from_config(cls, cfg: dict) -> "StudioSettings":
        series = cfg.get("series", {})
        root = Path(cfg.get("output", {}).get("root", "output"))
        return cls(
            series_total_count=_as_count(series.get("total_count", DEFAULT_EPISODE_COUNT)),
            release_interval=_as_interval(
                series.get("release_interval_seconds", ONE_WEEK.total_seconds())
            ),
            output_root=root,
        )

    @property
    def logs_dir(self) -> Path:
        return self.output_root / "logs"
