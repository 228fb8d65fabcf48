"""Contracts shared by the placement engine, the template cache and the exporters."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional


# ─── Errors ──────────────────────────────────────────────────────────────────

class TemplateError(Exception):
    """Base exception for template generation errors."""
    pass


class InvalidSelectionError(TemplateError):
    """Wrong shape count, duplicate ids or unknown ids."""
    pass


InvalidInputError = InvalidSelectionError


class PlacementExhaustedError(TemplateError):
    """The grid could not be filled, even with relaxed placement."""
    pass


class PlacementTimeoutError(TemplateError):
    """The trial or wall-clock budget ran out before the grid was filled."""
    pass


class CacheWriteError(Exception):
    """A persisted cache could not store a template."""
    pass


class ExportError(Exception):
    """A template could not be turned into production output."""
    pass


# ─── Configuration ───────────────────────────────────────────────────────────

@dataclass(frozen=True)
class PuzzleTier:
    id: str
    name: str
    pieces: int
    shapes: int


PUZZLE_TIERS: Dict[str, PuzzleTier] = {
    "essential": PuzzleTier("essential", "Essential", pieces=50, shapes=5),
    "classic": PuzzleTier("classic", "Classic", pieces=100, shapes=7),
    "grand": PuzzleTier("grand", "Grand", pieces=150, shapes=10),
    "heirloom": PuzzleTier("heirloom", "Heirloom", pieces=250, shapes=15),
}


@dataclass(frozen=True)
class TemplateConfig:
    """Configuration for puzzle template generation.

    ``piece_margin`` is the design gap between assembled pieces. Placement
    does not use it and the cut sheet spaces pieces by
    ``ProductionConfig.piece_spacing``; it is recorded with each run.
    """

    total_pieces: int = 150
    unique_shapes: int = 10
    copies_per_shape: int = 15
    cell_size: float = 50.0          # mm per grid cell
    piece_margin: float = 2.0        # mm gap between assembled pieces
    target_aspect_ratio: float = 1.0  # width / height
    core_variant_count: int = 20
    # Optional budgets; None = bounded only by the algorithm itself
    max_trials: Optional[int] = None
    time_budget_s: Optional[float] = None

    @classmethod
    def for_tier(cls, tier_id: str, **overrides) -> "TemplateConfig":
        """Config for a product tier; surplus copies are allowed."""
        tier = PUZZLE_TIERS.get(tier_id)
        if tier is None:
            raise KeyError(f"Unknown tier: {tier_id!r}")
        values = {
            "total_pieces": tier.pieces,
            "unique_shapes": tier.shapes,
            "copies_per_shape": math.ceil(tier.pieces / tier.shapes),
        }
        values.update(overrides)
        return cls(**values)


# ─── Records ─────────────────────────────────────────────────────────────────

ROTATIONS = (0, 90, 180, 270)


def hash_shape_combination(shape_ids: Iterable[str]) -> str:
    """Order-independent template id: sorted shape ids joined by '-'."""
    return "-".join(sorted(shape_ids))


@dataclass(frozen=True)
class PlacedPiece:
    """A variant instantiated at a grid cell with a rotation."""
    id: str
    variant_id: str
    grid_x: int
    grid_y: int
    rotation: int

    def to_dict(self) -> Dict[str, object]:
        return {
            "id": self.id,
            "variantId": self.variant_id,
            "gridX": self.grid_x,
            "gridY": self.grid_y,
            "rotation": self.rotation,
        }

    @classmethod
    def from_dict(cls, payload: Dict[str, object]) -> "PlacedPiece":
        return cls(
            id=str(payload["id"]),
            variant_id=str(payload["variantId"]),
            grid_x=int(payload["gridX"]),
            grid_y=int(payload["gridY"]),
            rotation=int(payload["rotation"]),
        )


@dataclass(frozen=True)
class RelaxedPlacementUsed:
    """A cell filled without satisfying its neighbor constraints."""
    piece_id: str
    shape_id: str
    grid_x: int
    grid_y: int
    unmet_directions: tuple = ()

    def to_dict(self) -> Dict[str, object]:
        return {
            "pieceId": self.piece_id,
            "shapeId": self.shape_id,
            "gridX": self.grid_x,
            "gridY": self.grid_y,
            "unmetDirections": list(self.unmet_directions),
        }

    @classmethod
    def from_dict(cls, payload: Dict[str, object]) -> "RelaxedPlacementUsed":
        return cls(
            piece_id=str(payload["pieceId"]),
            shape_id=str(payload["shapeId"]),
            grid_x=int(payload["gridX"]),
            grid_y=int(payload["gridY"]),
            unmet_directions=tuple(payload.get("unmetDirections", ())),
        )


@dataclass
class PuzzleTemplate:
    """The complete, validated layout for one set of chosen shapes."""

    id: str
    shapes: List[str]
    pieces: List[PlacedPiece]
    grid_width: int
    grid_height: int
    cell_size: float
    shape_counts: Dict[str, int]
    created_at: float = field(default_factory=time.time)
    relaxed_placements: List[RelaxedPlacementUsed] = field(default_factory=list)

    @property
    def relaxed_placement_count(self) -> int:
        return len(self.relaxed_placements)

    def to_dict(self) -> Dict[str, object]:
        return {
            "id": self.id,
            "shapes": list(self.shapes),
            "pieces": [p.to_dict() for p in self.pieces],
            "gridWidth": self.grid_width,
            "gridHeight": self.grid_height,
            "cellSize": self.cell_size,
            "shapeCounts": dict(self.shape_counts),
            "createdAt": self.created_at,
            "relaxedPlacementCount": self.relaxed_placement_count,
            "relaxedPlacements": [r.to_dict() for r in self.relaxed_placements],
        }

    @classmethod
    def from_dict(cls, payload: Dict[str, object]) -> "PuzzleTemplate":
        return cls(
            id=str(payload["id"]),
            shapes=list(payload["shapes"]),
            pieces=[PlacedPiece.from_dict(p) for p in payload["pieces"]],
            grid_width=int(payload["gridWidth"]),
            grid_height=int(payload["gridHeight"]),
            cell_size=float(payload["cellSize"]),
            shape_counts={str(k): int(v) for k, v in dict(payload["shapeCounts"]).items()},
            created_at=float(payload.get("createdAt", 0.0)),
            relaxed_placements=[
                RelaxedPlacementUsed.from_dict(r) for r in payload.get("relaxedPlacements", [])
            ],
        )
