"""
Command-line driver: resolves a preset, samples the region and writes the
preview image (and optionally the point list as JSON).
"""
from __future__ import annotations
import argparse
import logging
from pathlib import Path
from typing import List, Optional

from .algorithms.sampling import PoissonDiscSampler
from .core.errors import SamplerError
from .core.export import write_points_json, write_points_preview
from .core.preset import load_preset
from .core.utils.metrics import compute_metrics
from .numerics.rng import time_seed
from .setup_logging import setup_logging

logger = logging.getLogger(__name__)


def register_arguments(parser: argparse.ArgumentParser):
    parser.add_argument("--preset", type=str, default=None, help="Preset id (e.g. 'demo/small') or JSON path")
    parser.add_argument("--width", type=float, default=None, help="Region width")
    parser.add_argument("--height", type=float, default=None, help="Region height")
    parser.add_argument("--radius", "-r", type=float, default=None, help="Minimum distance between points")
    parser.add_argument("-k", type=int, default=None, help="Candidate attempts per active point")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed (time-derived if omitted)")
    parser.add_argument("--out", type=str, default=None, help="Output PNG path")
    parser.add_argument("--points-json", type=str, default=None, help="Also write points to this JSON file")
    parser.add_argument("--no-image", action="store_true", help="Skip the PNG preview")
    parser.add_argument("--log-file", type=Path, default=None)
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Set logging level",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Poisson-disc (blue noise) point sampler")
    register_arguments(parser)
    return parser


def run(args: argparse.Namespace) -> int:
    overrides = {
        "width": args.width,
        "height": args.height,
        "radius": args.radius,
        "k": args.k,
        "seed": args.seed,
    }
    export = {k: v for k, v in (("image", args.out), ("points_json", args.points_json)) if v is not None}
    if export:
        overrides["export"] = export

    try:
        preset = load_preset(args.preset, overrides)
    except SamplerError as e:
        logger.error("Preset error: %s", e)
        return 2

    seed = preset.seed if preset.seed is not None else time_seed()
    if preset.seed is None:
        logger.info("Using time-derived seed %d", seed)

    try:
        sampler = PoissonDiscSampler(
            seed, preset.width, preset.height, preset.radius, preset.k,
            max_grid_cells=preset.max_grid_cells,
        )
    except SamplerError as e:
        logger.error("Cannot start sampling: %s", e)
        return 2
    result = sampler.run()

    metrics = compute_metrics(result.points, result.width, result.height, result.radius)
    logger.info(
        "count=%d min_distance=%.4f packing_ratio=%.3f",
        metrics["count"], metrics["min_distance"], metrics["packing_ratio"],
    )

    image_path = preset.export.get("image")
    if image_path and not args.no_image:
        write_points_preview(
            image_path, result.points, result.width, result.height, result.radius,
            style=preset.render,
        )

    json_path = preset.export.get("points_json")
    if json_path:
        write_points_json(json_path, result)

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level, str(args.log_file) if args.log_file else None)
    return run(args)
