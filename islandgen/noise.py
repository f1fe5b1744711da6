# noise.py - seeded 2D Perlin gradient noise with output-range remapping
from __future__ import annotations

import math
from typing import Tuple

import numpy as np

from .errors import ConfigurationError

RAW_RANGE: Tuple[float, float] = (-1.0, 1.0)

# Eight gradient directions; the diagonals keep raw output inside [-1, 1].
_GRADIENTS = np.array(
    [(1, 1), (-1, 1), (1, -1), (-1, -1), (1, 0), (-1, 0), (0, 1), (0, -1)],
    dtype=np.float64,
)


def _fade(t: np.ndarray) -> np.ndarray:
    "6t^5 - 15t^4 + 10t^3"
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def _grad(h: np.ndarray, x: np.ndarray, y: np.ndarray) -> np.ndarray:
    g = _GRADIENTS[h & 7]
    return g[..., 0] * x + g[..., 1] * y


class PerlinNoise:
    """Coherent 2D noise over arbitrary real coordinates.

    The permutation table is drawn once from ``seed`` and never changes, so
    ``sample`` is a pure function of ``(x, y)`` and the current output range.
    Raw values lie in ``[-1, 1]``; :meth:`set_output_range` maps them linearly
    onto another interval.
    """

    def __init__(self, seed: int = 0):
        # RandomState only takes 32-bit seeds; fold negatives and wider ints
        rng = np.random.RandomState(int(seed) & 0xFFFFFFFF)
        perm = rng.permutation(256).astype(np.int64)
        self.seed = seed
        self._perm = np.concatenate([perm, perm])
        self._lo, self._hi = RAW_RANGE

    @property
    def output_range(self) -> Tuple[float, float]:
        return self._lo, self._hi

    def reset_output_range(self) -> None:
        self._lo, self._hi = RAW_RANGE

    def set_output_range(self, lo: float, hi: float) -> None:
        lo = float(lo)
        hi = float(hi)
        if not (math.isfinite(lo) and math.isfinite(hi)):
            raise ConfigurationError(f"noise range must be finite, got [{lo}, {hi}]")
        if lo >= hi:
            raise ConfigurationError(f"noise range requires min < max, got [{lo}, {hi}]")
        self._lo, self._hi = lo, hi

    def _raw(self, x: np.ndarray, y: np.ndarray) -> np.ndarray:
        x0 = np.floor(x)
        y0 = np.floor(y)
        xf = x - x0
        yf = y - y0
        xi = x0.astype(np.int64) & 255
        yi = y0.astype(np.int64) & 255
        p = self._perm

        aa = p[p[xi] + yi]
        ab = p[p[xi] + yi + 1]
        ba = p[p[xi + 1] + yi]
        bb = p[p[xi + 1] + yi + 1]

        u = _fade(xf)
        v = _fade(yf)
        x1 = _grad(aa, xf, yf) + u * (_grad(ba, xf - 1.0, yf) - _grad(aa, xf, yf))
        x2 = _grad(ab, xf, yf - 1.0) + u * (_grad(bb, xf - 1.0, yf - 1.0) - _grad(ab, xf, yf - 1.0))
        return x1 + v * (x2 - x1)

    def sample_array(self, xs, ys) -> np.ndarray:
        """Vectorized :meth:`sample`; non-finite coordinates give ``nan``."""
        x, y = np.broadcast_arrays(np.asarray(xs, dtype=np.float64),
                                   np.asarray(ys, dtype=np.float64))
        finite = np.isfinite(x) & np.isfinite(y)
        raw = self._raw(np.where(finite, x, 0.0), np.where(finite, y, 0.0))
        raw_lo, raw_hi = RAW_RANGE
        out = self._lo + (raw - raw_lo) * (self._hi - self._lo) / (raw_hi - raw_lo)
        out = np.clip(out, self._lo, self._hi)
        return np.where(finite, out, np.nan)

    def sample(self, x: float, y: float) -> float:
        return float(self.sample_array(x, y))
