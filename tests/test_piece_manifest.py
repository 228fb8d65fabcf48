"""Tests for piece_manifest.py."""
import pytest

from piece_manifest import ManifestEntry, generate_piece_manifest, manifest_to_text
from shape_definitions import SHAPE_DEFINITIONS
from template_contracts import ExportError
from variant_generator import generate_core_variants


def _variant_ids(shape_id, n):
    return [v.variant_id for v in generate_core_variants(SHAPE_DEFINITIONS[shape_id])[:n]]


class TestGenerateManifest:
    def test_quantities_sum_to_piece_count(self, full_template):
        manifest = generate_piece_manifest(full_template)
        assert sum(e.quantity for e in manifest) == len(full_template.pieces)

    def test_per_shape_totals_match_counts(self, full_template):
        manifest = generate_piece_manifest(full_template)
        per_shape = {}
        for entry in manifest:
            per_shape[entry.shape_id] = per_shape.get(entry.shape_id, 0) + entry.quantity
        assert per_shape == full_template.shape_counts

    def test_entries_are_unique_and_sorted(self, small_template):
        manifest = generate_piece_manifest(small_template)
        keys = [(e.shape_id, e.variant_id) for e in manifest]
        assert keys == sorted(keys)
        assert len({e.variant_id for e in manifest}) == len(manifest)

    def test_duplicate_variants_are_merged(self, template_factory):
        heart_a, heart_b = _variant_ids("heart", 2)
        star = _variant_ids("star", 1)[0]
        template = template_factory([star, heart_b, heart_a, heart_b])

        manifest = generate_piece_manifest(template)
        assert [(e.variant_id, e.quantity) for e in manifest] == sorted(
            [(heart_a, 1), (heart_b, 2), (star, 1)]
        )
        assert manifest[0].shape_name == SHAPE_DEFINITIONS["heart"].name

    def test_unknown_shape(self, template_factory):
        with pytest.raises(ExportError):
            generate_piece_manifest(template_factory(["unicorn_ApAr"]))

    def test_to_dict(self):
        entry = ManifestEntry("heart", "Heart", "heart_ApAr", 3)
        assert entry.to_dict() == {
            "shapeId": "heart",
            "shapeName": "Heart",
            "variantId": "heart_ApAr",
            "quantity": 3,
        }


class TestManifestText:
    def test_layout(self):
        manifest = [
            ManifestEntry("heart", "Heart", "heart_ApAr", 2),
            ManifestEntry("heart", "Heart", "heart_BpBr", 1),
            ManifestEntry("star", "Star", "star_CpCr", 4),
        ]
        assert manifest_to_text(manifest) == (
            "PUZZLE PIECE MANIFEST\n"
            + "=" * 50 + "\n"
            "\n"
            "HEART\n"
            "  heart_ApAr: 2x\n"
            "  heart_BpBr: 1x\n"
            "  Subtotal: 3 pieces\n"
            "\n"
            "STAR\n"
            "  star_CpCr: 4x\n"
            "  Subtotal: 4 pieces\n"
            "\n"
            + "=" * 50 + "\n"
            "TOTAL PIECES: 7\n"
        )

    def test_total_matches_template(self, full_template):
        text = manifest_to_text(generate_piece_manifest(full_template))
        assert text.rstrip().endswith("TOTAL PIECES: 150")
        assert text.count("Subtotal: 15 pieces") == 10

    def test_empty_manifest(self):
        text = manifest_to_text([])
        assert "TOTAL PIECES: 0" in text
        assert "Subtotal" not in text
