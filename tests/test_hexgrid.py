import pytest

from islandgen import CellFootprint, ConfigurationError, GridExtent, GridLayout


def test_extent_and_boundary_radius():
    layout = GridLayout(CellFootprint(1.0, 1.0))
    assert layout.extent == GridExtent(24.0, 32.0)
    assert layout.boundary_radius == pytest.approx(12.0)
    assert len(layout) == 32 * 32


def test_centers_follow_offset_rows():
    layout = GridLayout(CellFootprint(1.0, 1.0))
    assert layout.center(0, 0) == pytest.approx((-12.0, -16.0))
    # odd rows shift half a cell along z
    assert layout.center(1, 0) == pytest.approx((0.75 - 12.0, 0.5 - 16.0))
    assert layout.center(2, 3) == pytest.approx((1.5 - 12.0, 3.0 - 16.0))
    assert layout.center(16, 16) == pytest.approx((0.0, 0.0))


def test_non_square_footprint():
    layout = GridLayout(CellFootprint(2.0, 0.5), rows=4, cols=6)
    assert layout.extent == GridExtent(2.0 * 4 * 0.75, 0.5 * 6)
    assert layout.center(3, 5) == pytest.approx((2.0 * 3 * 0.75 - 3.0, 0.5 * 5 + 0.25 - 1.5))


def test_cells_cover_grid_once():
    layout = GridLayout(CellFootprint(1.0, 1.0))
    cells = list(layout.cells())
    assert len(cells) == 1024
    assert len(set(cells)) == 1024
    # all rows of column 0 first
    assert cells[:3] == [(0, 0), (1, 0), (2, 0)]


@pytest.mark.parametrize("w,d", [(0.0, 1.0), (1.0, -1.0), (float("nan"), 1.0), (float("inf"), 1.0)])
def test_degenerate_footprint_rejected(w, d):
    with pytest.raises(ConfigurationError):
        GridLayout(CellFootprint(w, d))


def test_empty_grid_rejected():
    with pytest.raises(ConfigurationError):
        GridLayout(CellFootprint(1.0, 1.0), rows=0)
