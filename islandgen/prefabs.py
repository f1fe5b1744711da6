# prefabs.py - tile prefab parts, one-time Base/Decorative tagging and loading
from __future__ import annotations

import copy
import json
import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

Vec3 = Tuple[float, float, float]

BASE_MARKER = "tile"


class Role(IntEnum):
    BASE = 0        # sizes the cell, never scaled
    DECORATIVE = 1  # trees, rocks... receive scale jitter


def classify_part(name: str, base_marker: str = BASE_MARKER) -> Role:
    return Role.BASE if base_marker in name else Role.DECORATIVE


@dataclass
class Part:
    name: str
    role: Role
    bounds_min: Vec3
    bounds_max: Vec3
    position: Vec3 = (0.0, 0.0, 0.0)
    scale: Vec3 = (1.0, 1.0, 1.0)

    def world_bounds(self) -> Tuple[np.ndarray, np.ndarray]:
        """Axis-aligned box of the part after its translation and scale."""
        pos = np.asarray(self.position, dtype=np.float64)
        scl = np.asarray(self.scale, dtype=np.float64)
        a = pos + scl * np.asarray(self.bounds_min, dtype=np.float64)
        b = pos + scl * np.asarray(self.bounds_max, dtype=np.float64)
        return np.minimum(a, b), np.maximum(a, b)


@dataclass
class Prefab:
    name: str
    parts: List[Part] = field(default_factory=list)

    @property
    def base_parts(self) -> List[Part]:
        return [p for p in self.parts if p.role == Role.BASE]

    @property
    def decorative_parts(self) -> List[Part]:
        return [p for p in self.parts if p.role == Role.DECORATIVE]

    def clone(self) -> "Prefab":
        return copy.deepcopy(self)


def _vec3(value: Any, default: Vec3, what: str) -> Vec3:
    if value is None:
        return default
    if isinstance(value, (str, bytes)):
        raise ConfigurationError(f"{what}: expected 3 numbers, got {value!r}")
    try:
        x, y, z = (float(v) for v in value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"{what}: expected 3 numbers, got {value!r}") from exc
    return x, y, z


def register_prefab(name: str, nodes: Sequence[Dict[str, Any]],
                    base_marker: str = BASE_MARKER) -> Prefab:
    """Flatten a node hierarchy into a :class:`Prefab` with tagged parts.

    Each node is a dict with ``name``, optional ``mesh`` (default ``True``),
    ``bounds`` (``{"min": [...], "max": [...]}``, required for meshes),
    ``position``, ``scale`` and ``children``. Parent transforms are composed
    into each mesh part. Mesh nodes whose name contains ``base_marker`` become
    :attr:`Role.BASE`, other meshes :attr:`Role.DECORATIVE`; group nodes only
    carry transforms.
    """
    parts: List[Part] = []

    def visit(node: Dict[str, Any], origin: np.ndarray, factor: np.ndarray) -> None:
        node_name = str(node.get("name", ""))
        pos = np.asarray(_vec3(node.get("position"), (0.0, 0.0, 0.0), node_name), dtype=np.float64)
        scl = np.asarray(_vec3(node.get("scale"), (1.0, 1.0, 1.0), node_name), dtype=np.float64)
        world_pos = origin + factor * pos
        world_scl = factor * scl
        if node.get("mesh", True):
            bounds = node.get("bounds")
            if not isinstance(bounds, dict):
                raise ConfigurationError(f"{name}/{node_name}: mesh node without bounds")
            parts.append(Part(
                name=node_name,
                role=classify_part(node_name, base_marker),
                bounds_min=_vec3(bounds.get("min"), (0.0, 0.0, 0.0), node_name),
                bounds_max=_vec3(bounds.get("max"), (0.0, 0.0, 0.0), node_name),
                position=tuple(float(v) for v in world_pos),
                scale=tuple(float(v) for v in world_scl),
            ))
        for child in node.get("children", ()):
            visit(child, world_pos, world_scl)

    for node in nodes:
        visit(node, np.zeros(3), np.ones(3))
    logger.debug("registered prefab %s: %d base, %d decorative parts", name,
                 sum(1 for p in parts if p.role == Role.BASE),
                 sum(1 for p in parts if p.role == Role.DECORATIVE))
    return Prefab(name=name, parts=parts)


def load_prefab(path: str, base_marker: str = BASE_MARKER) -> Prefab:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict) or "nodes" not in data:
        raise ConfigurationError(f"{path}: prefab file needs a 'nodes' list")
    return register_prefab(str(data.get("name", path)), data["nodes"], base_marker)


def load_prefabs(paths: Iterable[str], base_marker: str = BASE_MARKER) -> List[Prefab]:
    """Load prefab files in order, skipping any that fail to load."""
    out: List[Prefab] = []
    for path in paths:
        try:
            out.append(load_prefab(path, base_marker))
        except (OSError, ValueError, TypeError, AttributeError) as exc:
            logger.error("failed to load prefab %s: %s", path, exc)
    return out


# ---- Built-in variant set ---------------------------------------------------

# Flat-top hex of circumradius 0.5: 1.0 wide (x) by sqrt(3)/2 deep (z).
_HEX_BOUNDS = {"min": [-0.5, -0.1, -0.4330127], "max": [0.5, 0.1, 0.4330127]}

BUILTIN_PREFABS: Dict[str, List[Dict[str, Any]]] = {
    "tilehex_earth": [
        {"name": "Scene", "mesh": False, "children": [
            {"name": "tile_earth", "bounds": _HEX_BOUNDS},
            {"name": "rock", "position": [0.15, 0.1, -0.1],
             "bounds": {"min": [-0.06, 0.0, -0.05], "max": [0.06, 0.07, 0.05]}},
        ]},
    ],
    "tilehex_tree": [
        {"name": "Scene", "mesh": False, "children": [
            {"name": "tile_grass", "bounds": _HEX_BOUNDS},
            {"name": "trunk", "position": [0.0, 0.1, 0.0],
             "bounds": {"min": [-0.03, 0.0, -0.03], "max": [0.03, 0.15, 0.03]}},
            {"name": "crown", "position": [0.0, 0.25, 0.0],
             "bounds": {"min": [-0.12, 0.0, -0.12], "max": [0.12, 0.25, 0.12]}},
        ]},
    ],
    "tilehex": [
        {"name": "Scene", "mesh": False, "children": [
            {"name": "tile", "bounds": _HEX_BOUNDS},
        ]},
    ],
}


def default_prefabs(base_marker: str = BASE_MARKER,
                    names: Optional[Sequence[str]] = None) -> List[Prefab]:
    names = list(names) if names is not None else list(BUILTIN_PREFABS)
    return [register_prefab(n, BUILTIN_PREFABS[n], base_marker) for n in names]
