"""
Island generation tuning knobs.

``GeneratorConfig`` carries every tunable of a generation run; the defaults
reproduce the classic 32x32 island. Safe to tweak without touching the
generator code, either directly or through a JSON file read by
:func:`load_config`.
"""
from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass, fields
from typing import Any, Dict, Tuple

from .errors import ConfigurationError
from .safe_parse import to_float, to_int, to_vec3

logger = logging.getLogger(__name__)


@dataclass
class GeneratorConfig:
    # Grid
    rows: int = 32
    cols: int = 32
    row_spacing: float = 0.75

    # Noise output range; noise_max doubles as the top of the variant bands
    noise_min: float = 0.0
    noise_max: float = 1.25
    min_threshold: float = 0.4   # cells sampling below this stay empty
    frequency: float = 1.8       # world-space divisor before sampling

    # Per-axis gap added to the measured Base part
    padding: Tuple[float, float, float] = (0.0, 0.0, 0.0)

    # Decorative scale jitter, drawn from [scale_min, scale_max)
    scale_min: float = 0.8
    scale_max: float = 1.8

    # Mesh parts whose name contains this are Base parts
    base_marker: str = "tile"

    def validate(self) -> "GeneratorConfig":
        if self.rows <= 0 or self.cols <= 0:
            raise ConfigurationError(f"grid must be at least 1x1, got {self.rows}x{self.cols}")
        floats = ("row_spacing", "noise_min", "noise_max", "min_threshold",
                  "frequency", "scale_min", "scale_max")
        for name in floats:
            if not math.isfinite(getattr(self, name)):
                raise ConfigurationError(f"{name} must be finite")
        if self.row_spacing <= 0:
            raise ConfigurationError(f"row_spacing must be positive, got {self.row_spacing}")
        if self.noise_min >= self.noise_max:
            raise ConfigurationError(
                f"noise range requires min < max, got [{self.noise_min}, {self.noise_max}]")
        if not self.noise_min <= self.min_threshold < self.noise_max:
            raise ConfigurationError(
                f"min_threshold {self.min_threshold} outside [{self.noise_min}, {self.noise_max})")
        if self.frequency <= 0:
            raise ConfigurationError(f"frequency must be positive, got {self.frequency}")
        if not 0 < self.scale_min <= self.scale_max:
            raise ConfigurationError(
                f"scale range must satisfy 0 < min <= max, got [{self.scale_min}, {self.scale_max}]")
        if any(not math.isfinite(p) or p < 0 for p in self.padding):
            raise ConfigurationError(f"padding must be non-negative, got {self.padding}")
        if not self.base_marker:
            raise ConfigurationError("base_marker must be a non-empty string")
        return self

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GeneratorConfig":
        """Build a config from loosely typed values; unknown keys are ignored."""
        base = cls()
        known = {f.name for f in fields(cls)}
        for key in data:
            if key not in known:
                logger.warning("config: ignoring unknown key %r", key)
        kwargs: Dict[str, Any] = {}
        for f in fields(cls):
            if f.name not in data:
                continue
            default = getattr(base, f.name)
            value = data[f.name]
            if f.name == "padding":
                kwargs[f.name] = to_vec3(value, default, key=f.name)
            elif f.name == "base_marker":
                kwargs[f.name] = str(value) if value else default
            elif isinstance(default, int):
                kwargs[f.name] = to_int(value, default, key=f.name)
            else:
                kwargs[f.name] = to_float(value, default, key=f.name)
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        out = {f.name: getattr(self, f.name) for f in fields(self)}
        out["padding"] = list(self.padding)
        return out


DEFAULT_CONFIG = GeneratorConfig()


def load_config(path: str) -> GeneratorConfig:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as exc:
        raise ConfigurationError(f"{path}: cannot read config: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"{path}: invalid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path}: config must be a JSON object")
    return GeneratorConfig.from_dict(data).validate()
