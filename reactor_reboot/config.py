"""
Run configuration for the reactor reboot CLI.

Optional YAML file, validated fail-closed:

    window:               # or `null` to replay every step
      x: [-50, 50]
      y: [-50, 50]
      z: [-50, 50]
    check_invariants: false
    log_level: INFO

Missing keys take the defaults of `ReactorConfig()`. Unknown keys and wrong
types raise `ConfigError`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from .core.cuboid import Cuboid, INITIALIZATION_WINDOW
from .core.errors import ConfigError

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_KNOWN_KEYS = frozenset({"window", "check_invariants", "log_level"})


@dataclass(frozen=True)
class ReactorConfig:
    window: Optional[Cuboid] = INITIALIZATION_WINDOW
    check_invariants: bool = False
    log_level: str = "INFO"


def _require_mapping(obj: Any, *, name: str) -> dict[str, Any]:
    if not isinstance(obj, dict):
        raise ConfigError(f"{name} must be a mapping")
    return obj


def _require_bool(obj: Any, *, name: str) -> bool:
    if not isinstance(obj, bool):
        raise ConfigError(f"{name} must be a boolean")
    return obj


def _require_interval(obj: Any, *, name: str) -> tuple[int, int]:
    if not isinstance(obj, list) or len(obj) != 2:
        raise ConfigError(f"{name} must be a [lo, hi] list")
    lo, hi = obj
    for v in (lo, hi):
        if isinstance(v, bool) or not isinstance(v, int):
            raise ConfigError(f"{name} bounds must be integers")
    if lo > hi:
        raise ConfigError(f"{name} lower bound exceeds upper bound: {obj}")
    return lo, hi


def window_from_obj(obj: Any) -> Optional[Cuboid]:
    """Build a window cuboid from its YAML form (`None` disables the window)."""
    if obj is None:
        return None
    m = _require_mapping(obj, name="window")
    extra = set(m) - {"x", "y", "z"}
    if extra:
        raise ConfigError(f"window has unknown axes: {sorted(extra)}")
    x, y, z = (_require_interval(m.get(axis), name=f"window.{axis}") for axis in ("x", "y", "z"))
    return Cuboid(x, y, z)


def config_from_obj(obj: Any) -> ReactorConfig:
    if obj is None:
        return ReactorConfig()
    root = _require_mapping(obj, name="config")
    unknown = set(root) - _KNOWN_KEYS
    if unknown:
        raise ConfigError(f"unknown config keys: {sorted(unknown)}")

    cfg = ReactorConfig()
    if "window" in root:
        cfg = replace(cfg, window=window_from_obj(root["window"]))
    if "check_invariants" in root:
        cfg = replace(cfg, check_invariants=_require_bool(root["check_invariants"], name="check_invariants"))
    if "log_level" in root:
        level = root["log_level"]
        if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
            raise ConfigError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        cfg = replace(cfg, log_level=level.upper())
    return cfg


def load_config(path: Union[str, Path]) -> ReactorConfig:
    """Load and validate a YAML run configuration."""
    path = Path(path)
    try:
        obj = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in {path}: {exc}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"cannot read config {path}: {exc}") from exc
    cfg = config_from_obj(obj)
    logger.debug("loaded config from %s: %s", path, cfg)
    return cfg
