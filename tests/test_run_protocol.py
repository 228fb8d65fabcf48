"""Tests for run_protocol.py."""
import json

from run_protocol import RunRecord, build_summary, prepare_run_dir, slugify, update_latest_pointer, write_run_records
from template_contracts import RelaxedPlacementUsed, TemplateConfig


def _record(template, artifacts=None):
    return RunRecord(
        name="Birthday Puzzle",
        shape_ids=list(template.shapes),
        template=template,
        config=TemplateConfig(total_pieces=20, copies_per_shape=2),
        artifacts=artifacts or {},
        elapsed_s=0.25,
        distinct_variants=7,
        seed=1,
    )


def test_slugify():
    assert slugify("  Birthday Puzzle! ") == "birthday-puzzle"
    assert slugify("***") == "run"


def test_same_second_runs_get_distinct_folders(tmp_path):
    first = prepare_run_dir(str(tmp_path), "demo")
    second = prepare_run_dir(str(tmp_path), "demo")
    assert first.run_dir != second.run_dir
    assert second.input_dir.is_dir()
    assert second.artifacts_dir.is_dir()


def test_write_run_records(small_template, tmp_path):
    paths = prepare_run_dir(str(tmp_path), "demo")
    write_run_records(paths, _record(small_template, {"cut_svg": paths.artifacts_dir / "cut.svg"}))

    selection = json.loads(paths.selection_path.read_text())
    assert selection["seed"] == 1
    metrics = json.loads(paths.metrics_path.read_text())
    assert metrics["counts"] == {
        "pieces": 20,
        "distinct_variants": 7,
        "relaxed_placements": small_template.relaxed_placement_count,
    }
    manifest = json.loads(paths.manifest_path.read_text())
    assert manifest["template_config"]["total_pieces"] == 20
    assert manifest["template_config"]["piece_margin"] == 2.0
    assert manifest["artifacts"]["cut_svg"].endswith("cut.svg")
    assert "- cut_svg: `cut.svg`" in paths.summary_path.read_text()


def test_summary_lists_relaxed_placements(small_template):
    small_template.relaxed_placements = [
        RelaxedPlacementUsed("piece-3", "heart", 3, 0, ("west",)),
    ]
    summary = build_summary("run-1", _record(small_template))
    assert "## Relaxed placements" in summary
    assert "- piece-3 at (3, 0): west" in summary


def test_latest_pointer_moves(tmp_path):
    first = prepare_run_dir(str(tmp_path), "a")
    second = prepare_run_dir(str(tmp_path), "b")
    update_latest_pointer(str(tmp_path), first.run_dir)
    update_latest_pointer(str(tmp_path), second.run_dir)
    latest = tmp_path / "latest"
    if latest.is_symlink():
        assert latest.resolve() == second.run_dir.resolve()
    else:
        assert (latest / "latest_run.txt").read_text() == second.run_dir.name
