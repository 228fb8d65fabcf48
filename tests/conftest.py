"""
Shared test fixtures for puzzle generation tests.
"""
import sys
from pathlib import Path

import pytest

# Add src/ to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from template_contracts import PlacedPiece, PuzzleTemplate, TemplateConfig, hash_shape_combination
from template_generator import generate_puzzle_template


TEN_SHAPES = [
    "dolphin", "butterfly", "cat", "turtle", "bird",
    "fish", "heart", "star", "balloon", "gift",
]


@pytest.fixture
def ten_shapes():
    """Ten distinct catalog ids."""
    return list(TEN_SHAPES)


@pytest.fixture
def small_config():
    """20 pieces from 10 shapes, 2 copies each."""
    return TemplateConfig(total_pieces=20, unique_shapes=10, copies_per_shape=2)


@pytest.fixture
def small_template(ten_shapes, small_config):
    """A seeded 20-piece template."""
    return generate_puzzle_template(ten_shapes, small_config, seed=1234)


@pytest.fixture
def full_template(ten_shapes):
    """A seeded template at the default 150 pieces / 15 copies."""
    return generate_puzzle_template(ten_shapes, TemplateConfig(), seed=42)


@pytest.fixture
def template_factory():
    """Hand-built template: the given variant ids laid out in one row."""

    def build(variant_ids, rotations=None):
        shapes = sorted({v.split("_", 1)[0] for v in variant_ids})
        rotations = rotations or [0] * len(variant_ids)
        pieces = [
            PlacedPiece(f"piece-{i}", variant_id, i, 0, rotation)
            for i, (variant_id, rotation) in enumerate(zip(variant_ids, rotations))
        ]
        counts = {s: sum(1 for v in variant_ids if v.split("_", 1)[0] == s) for s in shapes}
        return PuzzleTemplate(
            id=hash_shape_combination(shapes),
            shapes=shapes,
            pieces=pieces,
            grid_width=len(pieces),
            grid_height=1,
            cell_size=50.0,
            shape_counts=counts,
        )

    return build
