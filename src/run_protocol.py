"""Run folders for puzzle generation: one timestamped folder per run.

Layout::

    <runs_root>/<stamp>_<name>/
        input/selection.json
        artifacts/           production bundle files
        manifest.json        what was asked for and where it landed
        metrics.json         counts, timing, cache stats
        summary.md
    <runs_root>/latest -> newest run
"""

from __future__ import annotations

import json
import os
import re
import shutil
import time
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from template_contracts import PuzzleTemplate, TemplateConfig


@dataclass
class RunPaths:
    run_id: str
    run_dir: Path
    input_dir: Path
    artifacts_dir: Path
    manifest_path: Path
    metrics_path: Path
    summary_path: Path

    @property
    def selection_path(self) -> Path:
        return self.input_dir / "selection.json"


@dataclass
class RunRecord:
    """Everything a finished run reports about itself."""
    name: str
    shape_ids: List[str]
    template: PuzzleTemplate
    config: TemplateConfig
    artifacts: Dict[str, Path]
    elapsed_s: float
    distinct_variants: int
    cache_stats: Dict[str, Any] = field(default_factory=dict)
    tier: Optional[str] = None
    seed: Optional[int] = None


def slugify(value: str) -> str:
    value = re.sub(r"[^a-z0-9]+", "-", value.strip().lower())
    return value.strip("-") or "run"


def create_run_id(name: str) -> str:
    stamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
    return f"{stamp}_{slugify(name)}"


def prepare_run_dir(runs_root: str, name: str) -> RunPaths:
    """Create a fresh run folder under ``runs_root``.

    Two runs in the same second with the same name get a numeric suffix.
    """
    runs_path = Path(runs_root)
    runs_path.mkdir(parents=True, exist_ok=True)

    base_id = create_run_id(name)
    run_dir = runs_path / base_id
    suffix = 1
    while run_dir.exists():
        suffix += 1
        run_dir = runs_path / f"{base_id}_{suffix}"

    paths = RunPaths(
        run_id=run_dir.name,
        run_dir=run_dir,
        input_dir=run_dir / "input",
        artifacts_dir=run_dir / "artifacts",
        manifest_path=run_dir / "manifest.json",
        metrics_path=run_dir / "metrics.json",
        summary_path=run_dir / "summary.md",
    )
    paths.input_dir.mkdir(parents=True)
    paths.artifacts_dir.mkdir()
    return paths


def write_json(path: Path, payload: Dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)
        f.write("\n")


def write_text(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        f.write(content)


# ─── Run records ─────────────────────────────────────────────────────────────

def build_summary(run_id: str, record: RunRecord) -> str:
    template = record.template
    lines = [
        f"# Run {run_id}",
        "",
        f"- Template: `{template.id}`",
        f"- Duration: {record.elapsed_s:.2f}s",
        f"- Grid: {template.grid_width} x {template.grid_height}",
        f"- Pieces: {len(template.pieces)}",
        f"- Distinct variants: {record.distinct_variants}",
        f"- Relaxed placements: {template.relaxed_placement_count}",
        "",
        "## Shape counts",
    ]
    lines.extend(f"- {shape_id}: {count}" for shape_id, count in template.shape_counts.items())
    if template.relaxed_placements:
        lines.extend(["", "## Relaxed placements"])
        lines.extend(
            f"- {r.piece_id} at ({r.grid_x}, {r.grid_y}): {', '.join(r.unmet_directions) or 'none'}"
            for r in template.relaxed_placements
        )
    lines.extend(["", "## Files"])
    lines.extend(f"- {role}: `{path.name}`" for role, path in record.artifacts.items())
    lines.append("")
    return "\n".join(lines)


def write_run_records(paths: RunPaths, record: RunRecord) -> None:
    """Write selection, metrics, summary and manifest for a finished run."""
    template = record.template
    write_json(paths.selection_path, {
        "shapes": record.shape_ids,
        "tier": record.tier,
        "seed": record.seed,
    })
    write_json(paths.metrics_path, {
        "run_id": paths.run_id,
        "template_id": template.id,
        "elapsed_s": round(record.elapsed_s, 3),
        "counts": {
            "pieces": len(template.pieces),
            "distinct_variants": record.distinct_variants,
            "relaxed_placements": template.relaxed_placement_count,
        },
        "cache": record.cache_stats,
    })
    write_text(paths.summary_path, build_summary(paths.run_id, record))
    write_json(paths.manifest_path, {
        "run_id": paths.run_id,
        "name": record.name,
        "created_utc": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()),
        "template_config": asdict(record.config),
        "artifacts": {role: str(path) for role, path in record.artifacts.items()},
    })


def update_latest_pointer(runs_root: str, run_dir: Path) -> None:
    runs_path = Path(runs_root)
    latest = runs_path / "latest"

    if latest.is_symlink() or latest.is_file():
        latest.unlink()
    elif latest.exists():
        shutil.rmtree(latest)

    try:
        latest.symlink_to(os.path.relpath(run_dir, runs_path))
    except OSError:
        # No symlinks on this filesystem
        latest.mkdir(parents=True, exist_ok=True)
        write_text(latest / "latest_run.txt", run_dir.name)
