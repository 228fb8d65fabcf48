"""Tests for svg_exporter.py: cut sheet and assembly guide."""
import math
import xml.etree.ElementTree as ET

import pytest

from piece_geometry import shape_geometry
from production_layout import ProductionConfig, compute_sheet_layout
from shape_definitions import SHAPE_DEFINITIONS
from svg_exporter import (
    SHAPE_COLORS,
    template_to_assembly_guide,
    template_to_cut_svg,
    write_assembly_guide,
    write_cut_svg,
)
from template_contracts import ExportError
from variant_generator import generate_core_variants

SVG_NS = "{http://www.w3.org/2000/svg}"


def _parse(svg_text):
    return ET.fromstring(svg_text.split("?>", 1)[-1] if svg_text.startswith("<?xml") else svg_text)


def _piece_groups(root):
    return [g for g in root.iter(f"{SVG_NS}g") if g.get("class") == "piece"]


def _mm(value):
    return float(value.replace("mm", ""))


class TestSheetLayout:
    def test_defaults(self, small_template):
        layout = compute_sheet_layout(small_template, ProductionConfig())
        assert layout.piece_size == 50.0
        assert layout.cell_pitch == 53.0
        assert layout.pieces_per_row == 10
        assert layout.rows == 2
        assert layout.page_height == 400.0
        assert (layout.slots[0].x, layout.slots[0].y) == (10.0, 10.0)
        assert (layout.slots[11].x, layout.slots[11].y) == (63.0, 63.0)

    def test_page_grows_for_many_pieces(self, full_template):
        layout = compute_sheet_layout(full_template, ProductionConfig())
        assert layout.rows == 15
        assert layout.page_height == pytest.approx(2 * 10 + 15 * 53)

    def test_page_too_narrow(self, small_template):
        with pytest.raises(ExportError):
            compute_sheet_layout(small_template, ProductionConfig(page_width=40))


class TestCutSvg:
    def test_twenty_piece_template(self, small_template):
        """One group per piece; page tall enough for every row."""
        config = ProductionConfig()
        root = _parse(template_to_cut_svg(small_template, config))

        groups = _piece_groups(root)
        assert len(groups) == 20

        layout = compute_sheet_layout(small_template, config)
        min_height = config.margin * 2 + math.ceil(20 / layout.pieces_per_row) * layout.cell_pitch
        assert _mm(root.get("height")) >= min_height
        assert _mm(root.get("width")) == config.page_width

    def test_groups_carry_transform_and_cut_path(self, small_template):
        root = _parse(template_to_cut_svg(small_template))
        for group, piece in zip(_piece_groups(root), small_template.pieces):
            assert group.get("id") == piece.id
            transform = group.get("transform")
            assert transform.startswith("translate(")
            assert f"rotate({piece.rotation}" in transform
            assert "scale(0.5" in transform
            cut_paths = [p for p in group.iter(f"{SVG_NS}path") if p.get("class") == "cut"]
            assert len(cut_paths) == 1
            assert cut_paths[0].get("d").startswith("M ")

    def test_cut_and_engrave_styles(self, small_template):
        svg = template_to_cut_svg(small_template)
        assert ".cut" in svg and "#FF0000" in svg and "stroke-width: 0.1" in svg
        assert ".engrave" in svg and "#0000FF" in svg and "stroke-width: 0.3" in svg

    def test_title_mentions_template(self, small_template):
        svg = template_to_cut_svg(small_template)
        assert small_template.id in svg
        assert "Birch Plywood" in svg

    def test_interior_details_are_engraved(self, template_factory):
        shape = next(
            (s for s in SHAPE_DEFINITIONS.values() if shape_geometry(s).details), None
        )
        if shape is None:
            pytest.skip("no catalog shape has interior details")
        variant = generate_core_variants(shape)[0]
        root = _parse(template_to_cut_svg(template_factory([variant.variant_id])))
        engraved = [p for p in root.iter(f"{SVG_NS}path") if p.get("class") == "engrave"]
        assert len(engraved) == len(shape_geometry(shape).details)

    def test_labels(self, small_template):
        svg = template_to_cut_svg(small_template, ProductionConfig(add_labels=True))
        root = _parse(svg)
        labels = [t.text for t in root.iter(f"{SVG_NS}text")]
        assert labels == [p.id for p in small_template.pieces]

    def test_unknown_shape_fails_loudly(self, template_factory):
        with pytest.raises(ExportError):
            template_to_cut_svg(template_factory(["unicorn_ApAr"]))

    def test_write_cut_svg(self, small_template, tmp_path):
        path = write_cut_svg(small_template, str(tmp_path / "out" / "cut.svg"))
        assert (tmp_path / "out" / "cut.svg").read_text().count('class="piece"') == 20
        assert path.endswith("cut.svg")


class TestAssemblyGuide:
    def test_one_cell_per_piece_and_legend(self, small_template):
        root = _parse(template_to_assembly_guide(small_template))
        grid = next(g for g in root.iter(f"{SVG_NS}g") if g.get("id") == "grid")
        legend = next(g for g in root.iter(f"{SVG_NS}g") if g.get("id") == "legend")
        assert len(list(grid.iter(f"{SVG_NS}rect"))) == 20
        assert len(list(legend.iter(f"{SVG_NS}rect"))) == len(small_template.shapes)

    def test_colors_follow_shape_order(self, template_factory):
        heart = generate_core_variants(SHAPE_DEFINITIONS["heart"])[0].variant_id
        star = generate_core_variants(SHAPE_DEFINITIONS["star"])[0].variant_id
        template = template_factory([star, heart])
        root = _parse(template_to_assembly_guide(template))
        grid = next(g for g in root.iter(f"{SVG_NS}g") if g.get("id") == "grid")
        fills = [r.get("fill") for r in grid.iter(f"{SVG_NS}rect")]
        # shapes are sorted: heart is colour 0, star colour 1
        assert fills == [SHAPE_COLORS[1], SHAPE_COLORS[0]]
        labels = [t.text for t in grid.iter(f"{SVG_NS}text")]
        assert labels == ["sta", "hea"]

    def test_title(self, small_template):
        assert "Assembly Guide - 20 pieces" in template_to_assembly_guide(small_template)

    def test_write(self, small_template, tmp_path):
        path = write_assembly_guide(small_template, str(tmp_path / "guide.svg"))
        assert (tmp_path / "guide.svg").exists()
        assert path.endswith("guide.svg")
