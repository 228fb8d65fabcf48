#!/usr/bin/env python3
"""Pre-generate the popular occasion-pack templates into a persisted cache."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from template_cache import POPULAR_COMBINATIONS, FileTemplateCache, TemplateManager
from template_contracts import CacheWriteError, TemplateConfig, TemplateError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Pre-generate popular shape combinations into a template cache"
    )
    parser.add_argument("--cache-dir", required=True, help="Template cache directory")
    parser.add_argument(
        "--cache-quota-bytes", type=int, default=None, help="Byte quota for the cache"
    )
    parser.add_argument(
        "--packs", default=None,
        help=f"Comma-separated packs (default: all of {', '.join(POPULAR_COMBINATIONS)})",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible layouts")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logs"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.packs:
        names = [p.strip() for p in args.packs.split(",") if p.strip()]
        unknown = [n for n in names if n not in POPULAR_COMBINATIONS]
        if unknown:
            parser.error(f"unknown pack(s): {', '.join(unknown)}")
    else:
        names = list(POPULAR_COMBINATIONS)

    cache = FileTemplateCache(args.cache_dir, quota_bytes=args.cache_quota_bytes)
    manager = TemplateManager(cache=cache, config=TemplateConfig(), seed=args.seed)

    try:
        generated = manager.pregenerate_templates(POPULAR_COMBINATIONS[n] for n in names)
    except (TemplateError, CacheWriteError) as exc:
        logging.getLogger("pregenerate_templates").error("Pre-generation failed: %s", exc)
        return 1

    stats = manager.get_stats()
    print(f"Generated: {generated}")
    print(f"Cached templates: {stats.total_templates}")
    print(f"Cached pieces: {stats.total_pieces}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
