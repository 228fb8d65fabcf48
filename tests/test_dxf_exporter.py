"""Tests for dxf_exporter module."""
import io
import os
import tempfile

import ezdxf
import pytest

from dxf_exporter import template_to_dxf, template_to_dxf_document, write_cut_dxf
from production_layout import ProductionConfig
from shape_definitions import SHAPE_DEFINITIONS
from template_contracts import ExportError


@pytest.fixture
def tmp_dir():
    with tempfile.TemporaryDirectory() as d:
        yield d


def _cut_polylines(doc):
    return list(doc.modelspace().query('LWPOLYLINE[layer=="CUT"]'))


class TestPlaceholderSheet:
    """Default output: one bounding-box rectangle per piece."""

    def test_one_outline_per_piece(self, small_template):
        doc = template_to_dxf_document(small_template)
        outlines = _cut_polylines(doc)
        assert len(outlines) == 20
        for polyline in outlines:
            assert polyline.closed
            assert len(polyline) == 4

    def test_first_piece_is_flipped_to_y_up(self, small_template):
        doc = template_to_dxf_document(small_template)
        first = _cut_polylines(doc)[0]
        points = list(first.get_points("xy"))
        assert points[0] == pytest.approx((10.0, 390.0))

        shape_id = small_template.pieces[0].variant_id.split("_", 1)[0]
        bbox = SHAPE_DEFINITIONS[shape_id].bounding_box
        assert points[2] == pytest.approx((10.0 + bbox.width * 0.5, 390.0 - bbox.height * 0.5))

    def test_units_and_layers(self, small_template):
        doc = template_to_dxf_document(small_template)
        assert doc.units == ezdxf.units.MM
        assert doc.layers.get("CUT").color == 1
        assert doc.layers.get("ENGRAVE").color == 5

    def test_text_round_trips_through_ezdxf(self, small_template):
        text = template_to_dxf(small_template)
        doc = ezdxf.read(io.StringIO(text))
        assert len(_cut_polylines(doc)) == 20

    def test_unknown_shape_fails_loudly(self, template_factory):
        with pytest.raises(ExportError):
            template_to_dxf(template_factory(["unicorn_ApAr"]))


class TestTracedSheet:
    def test_traced_outlines_follow_the_shape(self, small_template):
        config = ProductionConfig(dxf_trace_outlines=True)
        outlines = _cut_polylines(template_to_dxf_document(small_template, config))
        assert len(outlines) == 20
        for polyline in outlines:
            assert polyline.closed
            assert len(polyline) > 4

    def test_traced_outlines_stay_on_the_page(self, small_template):
        config = ProductionConfig(dxf_trace_outlines=True)
        for polyline in _cut_polylines(template_to_dxf_document(small_template, config)):
            for x, y in polyline.get_points("xy"):
                assert -5 <= x <= config.page_width + 5
                assert -5 <= y <= config.page_height + 5


class TestLabels:
    def test_labels_are_engraved_text(self, small_template):
        doc = template_to_dxf_document(small_template, ProductionConfig(add_labels=True))
        texts = list(doc.modelspace().query("TEXT"))
        assert [t.dxf.text for t in texts] == [p.id for p in small_template.pieces]
        assert all(t.dxf.layer == "ENGRAVE" for t in texts)

    def test_no_labels_by_default(self, small_template):
        doc = template_to_dxf_document(small_template)
        assert len(doc.modelspace().query("TEXT")) == 0


class TestWriteCutDXF:
    def test_writes_file(self, small_template, tmp_dir):
        filepath = os.path.join(tmp_dir, "sheets", "cut.dxf")
        result = write_cut_dxf(small_template, filepath)

        assert result == filepath
        assert os.path.isfile(filepath)
        doc = ezdxf.readfile(filepath)
        assert len(_cut_polylines(doc)) == 20
