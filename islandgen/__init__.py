# islandgen/__init__.py
# Package init for noise-driven hex island tile layout

from .errors import IslandGenError, ConfigurationError, EmptyVariantListError
from .noise import PerlinNoise
from .prefabs import (
    Role, Part, Prefab, classify_part, register_prefab, load_prefab, load_prefabs,
    default_prefabs, BUILTIN_PREFABS,
)
from .geometry import CellFootprint, measure_footprint
from .hexgrid import GridExtent, GridLayout, offset_to_world
from .classifier import TileClassifier, CellDecision
from .config import GeneratorConfig, DEFAULT_CONFIG, load_config
from .generator import TerrainGenerator, TileContainer, PlacedTile, summarize_layout

__all__ = [
    "IslandGenError", "ConfigurationError", "EmptyVariantListError",
    "PerlinNoise",
    "Role", "Part", "Prefab", "classify_part", "register_prefab", "load_prefab", "load_prefabs",
    "default_prefabs", "BUILTIN_PREFABS",
    "CellFootprint", "measure_footprint",
    "GridExtent", "GridLayout", "offset_to_world",
    "TileClassifier", "CellDecision",
    "GeneratorConfig", "DEFAULT_CONFIG", "load_config",
    "TerrainGenerator", "TileContainer", "PlacedTile", "summarize_layout",
]
