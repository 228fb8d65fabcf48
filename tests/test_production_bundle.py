"""Tests for production_bundle.py."""
import json

import pytest

from production_bundle import generate_production_bundle, write_production_bundle
from production_layout import ProductionConfig
from template_contracts import ExportError, PuzzleTemplate


class TestGenerateBundle:
    def test_contents(self, small_template):
        bundle = generate_production_bundle(small_template)
        assert bundle.template_id == small_template.id
        assert bundle.svg.count('class="piece"') == 20
        assert "LWPOLYLINE" in bundle.dxf
        assert "Assembly Guide - 20 pieces" in bundle.assembly_guide
        assert sum(e.quantity for e in bundle.manifest) == 20
        assert bundle.manifest_text.startswith("PUZZLE PIECE MANIFEST")

    def test_manifest_payload(self, small_template):
        config = ProductionConfig(piece_scale=0.4)
        payload = generate_production_bundle(small_template, config).manifest_payload()
        assert payload["templateId"] == small_template.id
        assert payload["totalPieces"] == 20
        assert payload["relaxedPlacementCount"] == small_template.relaxed_placement_count
        assert payload["config"]["piece_scale"] == 0.4
        assert len(payload["entries"]) == len({p.variant_id for p in small_template.pieces})

    def test_unknown_shape_raises(self, template_factory):
        with pytest.raises(ExportError):
            generate_production_bundle(template_factory(["unicorn_ApAr"]))


class TestWriteBundle:
    def test_all_files_written(self, small_template, tmp_path):
        bundle = generate_production_bundle(small_template)
        paths = write_production_bundle(bundle, tmp_path / "artifacts")

        assert set(paths) == {
            "cut_svg", "cut_dxf", "guide_svg", "manifest_txt", "manifest_json", "template_json",
        }
        for role, path in paths.items():
            assert path.exists(), role
            assert path.name.startswith(f"puzzle-{small_template.id}-")

    def test_json_files(self, small_template, tmp_path):
        paths = write_production_bundle(generate_production_bundle(small_template), tmp_path)

        manifest = json.loads(paths["manifest_json"].read_text())
        assert manifest["totalPieces"] == 20

        restored = PuzzleTemplate.from_dict(json.loads(paths["template_json"].read_text()))
        assert restored.pieces == small_template.pieces

    def test_failed_export_writes_nothing(self, template_factory, tmp_path):
        out = tmp_path / "artifacts"
        with pytest.raises(ExportError):
            write_production_bundle(generate_production_bundle(template_factory(["unicorn_ApAr"])), out)
        assert not out.exists()
