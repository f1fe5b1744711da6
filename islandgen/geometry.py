# geometry.py - cell footprint measured from a prefab's Base part
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Sequence, Union

import numpy as np

from .errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CellFootprint:
    width: float  # x extent
    depth: float  # z extent


def measure_footprint(prefab, padding: Union[float, Sequence[float]] = 0.0) -> CellFootprint:
    """Return the horizontal size of ``prefab``'s Base part plus ``padding``.

    Decorative parts never contribute. When several parts are tagged Base the
    last one wins. ``padding`` is a scalar or an (x, y, z) triple added to
    each axis of the box.
    """
    base = prefab.base_parts
    if not base:
        raise ConfigurationError(f"prefab {prefab.name!r} has no Base part to size cells from")
    lo, hi = base[-1].world_bounds()
    size = (hi - lo) + np.broadcast_to(np.asarray(padding, dtype=np.float64), (3,))
    width, depth = float(size[0]), float(size[2])
    if not (math.isfinite(width) and math.isfinite(depth)):
        raise ConfigurationError(f"prefab {prefab.name!r}: non-finite footprint {width}x{depth}")
    if width <= 0 or depth <= 0:
        raise ConfigurationError(f"prefab {prefab.name!r}: cell dimensions must be positive, got {width}x{depth}")
    logger.debug("footprint of %s: %.4f x %.4f", prefab.name, width, depth)
    return CellFootprint(width, depth)
