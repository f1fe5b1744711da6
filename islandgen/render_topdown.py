# render_topdown.py - flat top-down preview of a populated container
from __future__ import annotations
import math
import os
from typing import List, Optional, Tuple
from PIL import Image, ImageDraw

from .geometry import CellFootprint, measure_footprint
from .hexgrid import GridExtent

# Cycled by variant index: earth, vegetation, plain/water, then extras
VARIANT_COLORS = [
    (int(0.55*255), int(0.40*255), int(0.25*255)),
    (int(0.20*255), int(0.70*255), int(0.20*255)),
    (int(0.30*255), int(0.60*255), int(0.85*255)),
    (int(0.95*255), int(0.85*255), int(0.25*255)),
    (int(0.60*255), int(0.60*255), int(0.60*255)),
]
BACKGROUND = (0, 204, 255, 255)

def hex_points_flat(cx: float, cz: float, rx: float, rz: float) -> List[Tuple[float, float]]:
    pts = []
    for i in range(6):
        ang = math.radians(60*i)
        pts.append((cx + math.cos(ang) * rx, cz + math.sin(ang) * rz / (math.sqrt(3) / 2)))
    return pts

def render_topdown(container, extent: GridExtent, pixels_per_unit: int = 16,
                   footprint: Optional[CellFootprint] = None) -> Image.Image:
    """Draw each placed tile as a flat-top hexagon, x to the right, z down.

    Hexes are sized from ``footprint`` when given, otherwise from the placed
    tile with the lowest variant index, the variant that sizes the grid.
    """
    tiles = list(container)
    if footprint is None and tiles:
        footprint = measure_footprint(min(tiles, key=lambda t: t.variant).prefab)
    if footprint is not None:
        rx, rz = footprint.width / 2.0, footprint.depth / 2.0
    else:
        rx = rz = 0.5
    pad = max(rx, rz) * 2
    min_x, min_z = -extent.width / 2.0 - pad, -extent.height / 2.0 - pad
    img_w = max(1, int(math.ceil((extent.width + 2 * pad) * pixels_per_unit)))
    img_h = max(1, int(math.ceil((extent.height + 2 * pad) * pixels_per_unit)))

    img = Image.new("RGBA", (img_w, img_h), BACKGROUND)
    draw = ImageDraw.Draw(img)
    for t in tiles:
        x, _, z = t.position
        px = (x - min_x) * pixels_per_unit
        pz = (z - min_z) * pixels_per_unit
        pts = hex_points_flat(px, pz, rx * pixels_per_unit, rz * pixels_per_unit)
        draw.polygon(pts, fill=VARIANT_COLORS[t.variant % len(VARIANT_COLORS)])
    return img

def save_topdown(container, extent: GridExtent, path_png: str, pixels_per_unit: int = 16,
                 footprint: Optional[CellFootprint] = None) -> None:
    img = render_topdown(container, extent, pixels_per_unit, footprint)
    os.makedirs(os.path.dirname(path_png) or ".", exist_ok=True)
    img.save(path_png)
