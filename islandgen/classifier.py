# classifier.py - per-cell survival and tile variant selection
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from .errors import ConfigurationError, EmptyVariantListError

MIN_THRESHOLD = 0.4
MAX_THRESHOLD = 1.25
FREQUENCY = 1.8  # world units per noise unit, independent of cell size

CULL_BOUNDARY = "boundary"
CULL_THRESHOLD = "threshold"


@dataclass(frozen=True)
class CellDecision:
    cx: float
    cz: float
    noise: Optional[float] = None
    variant: Optional[int] = None
    culled_by: Optional[str] = None

    @property
    def kept(self) -> bool:
        return self.variant is not None


class TileClassifier:
    """Decide, from a cell center alone, whether a tile goes there and which.

    The checks run in a fixed order: circular boundary, noise sample, minimum
    threshold, then band selection. The noise band ``[min_threshold,
    max_threshold)`` is split evenly between the ``variant_count`` variants,
    lowest band first.
    """

    def __init__(self, noise, variant_count: int, boundary_radius: float,
                 min_threshold: float = MIN_THRESHOLD, max_threshold: float = MAX_THRESHOLD,
                 frequency: float = FREQUENCY):
        if variant_count < 1:
            raise EmptyVariantListError("at least one tile variant is required")
        if not (math.isfinite(min_threshold) and math.isfinite(max_threshold)) \
                or max_threshold <= min_threshold:
            raise ConfigurationError(
                f"thresholds need min < max, got [{min_threshold}, {max_threshold}]")
        if not math.isfinite(frequency) or frequency <= 0:
            raise ConfigurationError(f"noise frequency must be positive, got {frequency}")
        if not math.isfinite(boundary_radius):
            raise ConfigurationError(f"boundary radius must be finite, got {boundary_radius}")
        self.noise = noise
        self.variant_count = variant_count
        self.boundary_radius = boundary_radius
        self.min_threshold = min_threshold
        self.max_threshold = max_threshold
        self.frequency = frequency
        self.band = (max_threshold - min_threshold) / variant_count

    def select_variant(self, n: float) -> int:
        k = self.variant_count
        if k == 1:
            return 0
        for i in range(k):
            if n < self.min_threshold + (i + 1) * self.band:
                return i
        # float drift at the top edge
        return k - 1

    def classify(self, cx: float, cz: float) -> CellDecision:
        if not (math.isfinite(cx) and math.isfinite(cz)):
            raise ConfigurationError(f"non-finite cell center ({cx}, {cz})")
        if math.hypot(cx, cz) > self.boundary_radius:
            return CellDecision(cx, cz, culled_by=CULL_BOUNDARY)
        n = self.noise.sample(cx / self.frequency, cz / self.frequency)
        if not math.isfinite(n):
            raise ConfigurationError(f"noise returned {n} at ({cx}, {cz})")
        if n < self.min_threshold:
            return CellDecision(cx, cz, noise=n, culled_by=CULL_THRESHOLD)
        return CellDecision(cx, cz, noise=n, variant=self.select_variant(n))
