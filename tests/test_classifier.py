import math

import numpy as np
import pytest

from islandgen import ConfigurationError, EmptyVariantListError, TileClassifier
from islandgen.classifier import CULL_BOUNDARY, CULL_THRESHOLD


class FixedNoise:
    """Returns a constant and records where it was sampled."""

    def __init__(self, value):
        self.value = value
        self.calls = []

    def sample(self, x, y):
        self.calls.append((x, y))
        return self.value


def make(value=0.9, k=3, radius=12.0):
    return TileClassifier(FixedNoise(value), k, radius, min_threshold=0.4, max_threshold=1.25)


def test_origin_cell_picks_middle_variant():
    c = make(0.9)
    assert c.band == pytest.approx(0.2833, abs=1e-4)
    d = c.classify(0.0, 0.0)
    assert d.kept
    assert d.variant == 1
    assert d.noise == 0.9


def test_noise_sampled_at_scaled_center():
    c = make(0.9)
    c.classify(3.6, -1.8)
    assert c.noise.calls == [pytest.approx((2.0, -1.0))]


def test_cell_on_boundary_is_kept():
    c = make(0.5)
    assert c.classify(12.0, 0.0).kept
    assert c.classify(0.0, -12.0).kept
    assert c.classify(12.0 - 1e-9, 0.0).kept


def test_cell_past_boundary_is_culled_without_sampling():
    c = make(0.5)
    d = c.classify(12.0 + 1e-9, 0.0)
    assert not d.kept
    assert d.culled_by == CULL_BOUNDARY
    assert d.noise is None
    assert c.noise.calls == []


def test_minimum_threshold_cull():
    d = make(0.3999).classify(1.0, 1.0)
    assert not d.kept
    assert d.culled_by == CULL_THRESHOLD
    d = make(0.4).classify(1.0, 1.0)
    assert d.kept and d.variant == 0


def test_variant_monotonic_in_noise():
    c = make(k=4)
    picks = [c.select_variant(n) for n in np.linspace(0.4, 1.25, 400, endpoint=False)]
    assert picks == sorted(picks)
    assert set(picks) == {0, 1, 2, 3}


def test_band_edges():
    c = make(k=3)
    assert c.select_variant(0.4 + c.band - 1e-9) == 0
    assert c.select_variant(0.4 + c.band) == 1
    assert c.select_variant(0.4 + 2 * c.band) == 2


def test_top_of_range_falls_back_to_last_variant():
    c = make(k=3)
    assert c.select_variant(1.25) == 2
    assert c.select_variant(1.25 + 1e-12) == 2
    assert c.classify(0.0, 0.0).variant == 1


def test_single_variant_always_used():
    c = make(1.25, k=1)
    assert c.classify(0.0, 0.0).variant == 0
    assert c.select_variant(0.41) == 0


def test_rejects_non_finite_noise():
    c = make(math.nan)
    with pytest.raises(ConfigurationError):
        c.classify(0.0, 0.0)


def test_rejects_non_finite_center():
    with pytest.raises(ConfigurationError):
        make().classify(math.inf, 0.0)


def test_constructor_validation():
    with pytest.raises(EmptyVariantListError):
        TileClassifier(FixedNoise(0.5), 0, 12.0)
    with pytest.raises(ConfigurationError):
        TileClassifier(FixedNoise(0.5), 3, 12.0, min_threshold=1.0, max_threshold=1.0)
    with pytest.raises(ConfigurationError):
        TileClassifier(FixedNoise(0.5), 3, 12.0, frequency=0.0)
