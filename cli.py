import argparse
import json
import logging
import os
import random
import sys
from typing import Iterable, Optional

from islandgen import (
    ConfigurationError, EmptyVariantListError, GeneratorConfig, TerrainGenerator,
    TileContainer, default_prefabs, load_config, load_prefabs, measure_footprint,
    summarize_layout,
)
from islandgen.render_topdown import save_topdown


def cmd_generate(args) -> int:
    cfg = load_config(args.config) if args.config else GeneratorConfig()
    if args.prefab:
        variants = load_prefabs(args.prefab, base_marker=cfg.base_marker)
    else:
        variants = default_prefabs(base_marker=cfg.base_marker)
    rng = random.Random(args.jitter_seed) if args.jitter_seed is not None else None
    gen = TerrainGenerator(variants, cfg, rng=rng)
    container, extent = gen.generate(TileContainer(), seed=args.seed)
    if args.out:
        os.makedirs(os.path.dirname(args.out) or ".", exist_ok=True)
        with open(args.out, "w", encoding="utf-8") as f:
            json.dump(container.to_dict(extent, gen.last_seed), f, indent=2)
        print(f"Layout saved to {args.out}")
    if args.topdown:
        save_topdown(container, extent, args.topdown, pixels_per_unit=args.ppu,
                     footprint=measure_footprint(gen.variants[0]))
        print(f"Saved {args.topdown}")
    print(container.summary(extent, gen.last_seed))
    return 0


def cmd_summary(args) -> int:
    try:
        with open(args.layout, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as exc:
        raise ConfigurationError(f"{args.layout}: cannot read layout: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"{args.layout}: layout must be a JSON object")
    print(summarize_layout(data))
    return 0


def parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Generate hex tile islands from noise")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = ap.add_subparsers()

    ap_gen = sub.add_parser("generate", help="Generate an island layout")
    ap_gen.add_argument("--seed", type=int, default=None, help="Noise seed (random if omitted)")
    ap_gen.add_argument("--prefab", action="append",
                        help="Prefab JSON file, lowest band first (can repeat)")
    ap_gen.add_argument("--config", default=None, help="GeneratorConfig JSON file")
    ap_gen.add_argument("--jitter-seed", type=int, default=None,
                        help="Seed for decorative scale jitter")
    ap_gen.add_argument("--out", default=None, help="Layout JSON path")
    ap_gen.add_argument("--topdown", default=None, help="Top-down preview PNG path")
    ap_gen.add_argument("--ppu", type=int, default=16, help="Preview pixels per world unit")
    ap_gen.set_defaults(func=cmd_generate)

    ap_sum = sub.add_parser("summary", help="Print a saved layout's summary")
    ap_sum.add_argument("layout")
    ap_sum.set_defaults(func=cmd_summary)
    return ap.parse_args(argv)


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")
    if not hasattr(args, "func"):
        print("a command is required: generate | summary", file=sys.stderr)
        return 2
    try:
        return args.func(args)
    except (ConfigurationError, EmptyVariantListError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
