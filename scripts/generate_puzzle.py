#!/usr/bin/env python3
"""
Generate a puzzle template from chosen shapes and write its production files.

Usage:
    python scripts/generate_puzzle.py --shapes dolphin,butterfly,cat,turtle,bird,fish,heart,star,balloon,gift
    python scripts/generate_puzzle.py --tier essential --shapes heart,star,moon,sun,cloud --seed 7
    python scripts/generate_puzzle.py --shapes ... --cache-dir .template-cache --trace-dxf

Exit codes: 0 on success, 2 for an invalid shape selection, 1 for any other
generation or export failure.
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from production_bundle import generate_production_bundle, write_production_bundle
from production_layout import ProductionConfig
from run_protocol import RunRecord, prepare_run_dir, update_latest_pointer, write_run_records
from template_cache import FileTemplateCache, InMemoryTemplateCache, TemplateManager
from template_contracts import (
    PUZZLE_TIERS,
    CacheWriteError,
    ExportError,
    InvalidSelectionError,
    TemplateConfig,
    TemplateError,
)

logger = logging.getLogger("generate_puzzle")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate an interlocking puzzle layout and its laser-cut files"
    )
    parser.add_argument(
        "--shapes", required=True, help="Comma-separated shape ids (order irrelevant)"
    )
    parser.add_argument(
        "--tier", choices=sorted(PUZZLE_TIERS), default=None,
        help="Product tier (sets piece and shape counts)",
    )
    parser.add_argument("--total-pieces", type=int, default=None, help="Override total piece count")
    parser.add_argument("--copies-per-shape", type=int, default=None, help="Override per-shape target")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible layouts")
    parser.add_argument(
        "--max-trials", type=int, default=None, help="Abort after this many placement trials"
    )
    parser.add_argument(
        "--time-budget", type=float, default=None, help="Abort after this many seconds"
    )
    parser.add_argument(
        "--cache-dir", default=None, help="Persist templates here (default: in-memory only)"
    )
    parser.add_argument(
        "--cache-quota-bytes", type=int, default=None, help="Byte quota for --cache-dir"
    )
    parser.add_argument("--name", default="puzzle", help="Run name")
    parser.add_argument("--runs-dir", default="runs", help="Runs output root")
    parser.add_argument("--piece-scale", type=float, default=0.5, help="mm per catalog unit")
    parser.add_argument(
        "--trace-dxf", action="store_true",
        help="Write traced outlines to the DXF instead of bounding boxes",
    )
    parser.add_argument("--labels", action="store_true", help="Engrave piece ids")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logs"
    )
    return parser


def build_template_config(args: argparse.Namespace) -> TemplateConfig:
    overrides = {}
    if args.total_pieces is not None:
        overrides["total_pieces"] = args.total_pieces
    if args.copies_per_shape is not None:
        overrides["copies_per_shape"] = args.copies_per_shape
    if args.max_trials is not None:
        overrides["max_trials"] = args.max_trials
    if args.time_budget is not None:
        overrides["time_budget_s"] = args.time_budget

    if args.tier:
        return TemplateConfig.for_tier(args.tier, **overrides)
    return TemplateConfig(**overrides)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    shape_ids = [s.strip() for s in args.shapes.split(",") if s.strip()]
    config = build_template_config(args)
    cache = (
        FileTemplateCache(args.cache_dir, quota_bytes=args.cache_quota_bytes)
        if args.cache_dir else InMemoryTemplateCache()
    )
    manager = TemplateManager(cache=cache, config=config, seed=args.seed)

    started = time.perf_counter()
    try:
        template = manager.get_or_create_template(shape_ids)
    except InvalidSelectionError as exc:
        logger.error("Invalid selection: %s", exc)
        return 2
    except (TemplateError, CacheWriteError) as exc:
        logger.error("Generation failed: %s", exc)
        return 1

    production = ProductionConfig(
        piece_scale=args.piece_scale,
        dxf_trace_outlines=args.trace_dxf,
        add_labels=args.labels,
    )
    try:
        bundle = generate_production_bundle(template, production)
    except ExportError as exc:
        logger.error("Export failed: %s", exc)
        return 1
    elapsed = time.perf_counter() - started

    run_paths = prepare_run_dir(args.runs_dir, args.name)
    bundle_paths = write_production_bundle(bundle, run_paths.artifacts_dir)
    write_run_records(run_paths, RunRecord(
        name=args.name,
        shape_ids=shape_ids,
        template=template,
        config=config,
        artifacts=bundle_paths,
        elapsed_s=elapsed,
        distinct_variants=len(bundle.manifest),
        cache_stats=manager.get_stats().to_dict(),
        tier=args.tier,
        seed=args.seed,
    ))
    update_latest_pointer(args.runs_dir, run_paths.run_dir)

    print(f"Run ID: {run_paths.run_id}")
    print(f"Run dir: {run_paths.run_dir}")
    print(f"Template: {template.id}")
    print(f"Grid: {template.grid_width}x{template.grid_height}")
    print(f"Pieces: {len(template.pieces)}")
    print(f"Relaxed placements: {template.relaxed_placement_count}")
    for role, path in bundle_paths.items():
        print(f"{role}: {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
