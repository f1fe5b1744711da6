# generator.py - one-shot pipeline: plan every cell, then populate a container
from __future__ import annotations

import logging
import random
from collections import Counter
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

from .classifier import CellDecision, TileClassifier
from .config import DEFAULT_CONFIG, GeneratorConfig
from .errors import EmptyVariantListError
from .geometry import measure_footprint
from .hexgrid import GridExtent, GridLayout
from .noise import PerlinNoise
from .prefabs import Prefab

logger = logging.getLogger(__name__)


@dataclass
class PlacedTile:
    row: int
    col: int
    variant: int
    noise: float
    scale: float
    prefab: Prefab
    position: Tuple[float, float, float]


class TileContainer:
    """Owns the placed tiles of the most recent generation run."""

    def __init__(self) -> None:
        self.children: List[PlacedTile] = []

    def clear(self) -> None:
        self.children.clear()

    def add(self, tile: PlacedTile) -> None:
        self.children.append(tile)

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator[PlacedTile]:
        return iter(self.children)

    def occupied_cells(self) -> Dict[Tuple[int, int], int]:
        """(row, col) -> variant index."""
        return {(t.row, t.col): t.variant for t in self.children}

    def to_dict(self, extent: Optional[GridExtent] = None,
                seed: Optional[int] = None) -> Dict[str, Any]:
        return {
            "seed": seed,
            "extent": None if extent is None else {"width": extent.width, "height": extent.height},
            "tiles": [
                {
                    "row": t.row,
                    "col": t.col,
                    "variant": t.variant,
                    "prefab": t.prefab.name,
                    "noise": t.noise,
                    "scale": t.scale,
                    "position": list(t.position),
                }
                for t in self.children
            ],
        }

    def summary(self, extent: Optional[GridExtent] = None,
                seed: Optional[int] = None) -> Dict[str, Any]:
        return summarize_layout(self.to_dict(extent, seed))


def summarize_layout(data: Dict[str, Any]) -> Dict[str, Any]:
    tiles = data.get("tiles", [])
    counts = Counter(t.get("prefab", str(t.get("variant"))) for t in tiles)
    return {
        "tiles": len(tiles),
        "variants": dict(sorted(counts.items())),
        "extent": data.get("extent"),
        "seed": data.get("seed"),
    }


class TerrainGenerator:
    """Populate a container with noise-selected hex tiles.

    ``variants`` is the ordered variant list: index 0 fills the lowest noise
    band, the last index the highest. Variant 0 also provides the cell
    footprint. Occupied cells and variant choices are a pure function of the
    seed, the variants' Base parts and the config; decorative scale comes
    from ``rng`` and only repeats when ``rng`` is seeded.
    """

    def __init__(self, variants: Sequence[Prefab], config: Optional[GeneratorConfig] = None,
                 rng: Optional[random.Random] = None):
        if not variants:
            raise EmptyVariantListError("at least one tile variant is required")
        self.variants: List[Prefab] = list(variants)
        self.config = config if config is not None else DEFAULT_CONFIG
        self.rng = rng if rng is not None else random.Random()
        self.last_seed: Optional[int] = None

    def plan(self, seed: int) -> Tuple[GridLayout, List[Tuple[int, int, CellDecision]]]:
        """Decide every cell without touching any container."""
        cfg = self.config.validate()
        footprint = measure_footprint(self.variants[0], cfg.padding)
        layout = GridLayout(footprint, cfg.rows, cfg.cols, cfg.row_spacing)

        noise = PerlinNoise(seed)
        noise.reset_output_range()
        noise.set_output_range(cfg.noise_min, cfg.noise_max)
        classifier = TileClassifier(noise, len(self.variants), layout.boundary_radius,
                                    min_threshold=cfg.min_threshold,
                                    max_threshold=cfg.noise_max,
                                    frequency=cfg.frequency)

        decisions = []
        for row, col in layout.cells():
            cx, cz = layout.center(row, col)
            decisions.append((row, col, classifier.classify(cx, cz)))
        logger.debug("planned %d cells: %d kept", len(decisions),
                     sum(1 for _, _, d in decisions if d.kept))
        return layout, decisions

    def generate(self, container, seed: Optional[int] = None) -> Tuple[Any, GridExtent]:
        """Clear ``container`` and fill it with this run's tiles.

        ``container`` only needs ``clear()`` and ``add(tile)``. Any
        configuration error is raised before the container is touched.
        Returns the container and the grid's total extent.
        """
        if seed is None:
            seed = random.randrange(2 ** 31)
        layout, decisions = self.plan(seed)
        self.last_seed = seed

        cfg = self.config
        container.clear()
        placed = 0
        for row, col, decision in decisions:
            if not decision.kept:
                continue
            tile = self.variants[decision.variant].clone()
            s = cfg.scale_min + self.rng.random() * (cfg.scale_max - cfg.scale_min)
            for part in tile.decorative_parts:
                part.scale = (s, s, s)
            container.add(PlacedTile(
                row=row, col=col, variant=decision.variant, noise=decision.noise,
                scale=s, prefab=tile, position=(decision.cx, 0.0, decision.cz),
            ))
            placed += 1

        logger.info("generated island seed=%d: %d/%d cells placed, extent %.3f x %.3f",
                    seed, placed, len(layout), layout.extent.width, layout.extent.height)
        return container, layout.extent
