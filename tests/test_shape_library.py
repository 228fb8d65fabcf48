"""Tests for the silhouette catalog and its lookup helpers."""
import pytest

from shape_definitions import SHAPE_DEFINITIONS, SHAPE_ID_ALIASES
from shape_library import (
    all_shape_ids,
    categories,
    get_shape,
    is_valid_shape_id,
    resolve_shape_id,
    shapes_by_category,
)


class TestCatalog:
    def test_catalog_size(self):
        assert len(SHAPE_DEFINITIONS) == 68

    def test_anchor_counts_in_range(self):
        for shape in SHAPE_DEFINITIONS.values():
            assert 4 <= len(shape.anchors) <= 8, shape.id

    def test_anchor_ids_unique_per_shape(self):
        for shape in SHAPE_DEFINITIONS.values():
            assert len(set(shape.anchor_ids)) == len(shape.anchors), shape.id

    def test_anchor_positions_and_angles_normalised(self):
        for shape in SHAPE_DEFINITIONS.values():
            for anchor in shape.anchors:
                assert 0 <= anchor.x <= 100
                assert 0 <= anchor.y <= 100
                assert 0 <= anchor.angle < 360

    def test_ids_have_no_underscores(self):
        """Variant ids use '_' as the separator after the shape id."""
        for shape_id in SHAPE_DEFINITIONS:
            assert "_" not in shape_id

    def test_get_anchor_unknown_raises(self):
        with pytest.raises(KeyError):
            SHAPE_DEFINITIONS["heart"].get_anchor("no-such-anchor")


class TestLookup:
    def test_get_shape(self):
        assert get_shape("dolphin").name == "Dolphin"
        assert get_shape("unicorn") is None

    def test_aliases_resolve_to_catalog_ids(self):
        for alias, target in SHAPE_ID_ALIASES.items():
            assert target in SHAPE_DEFINITIONS
            assert get_shape(alias) is SHAPE_DEFINITIONS[target]

    def test_resolve_unknown_passes_through(self):
        assert resolve_shape_id("unicorn") == "unicorn"

    def test_is_valid_shape_id(self):
        assert is_valid_shape_id("music-note")
        assert not is_valid_shape_id("ribbon")

    def test_categories_cover_all_shapes(self):
        total = sum(len(shapes_by_category(c)) for c in categories())
        assert total == len(all_shape_ids())
        assert "animals" in categories()
