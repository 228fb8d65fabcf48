"""
Puzzle template generation: the placement engine.

Lays out ``total_pieces`` cells on a near-square grid and assigns each cell
a shape, a curated variant and a rotation so that the connectors exposed
towards already-placed neighbors interlock (same kind, opposite polarity),
while keeping every shape at or under its target count.

The engine is a one-pass greedy heuristic in row-major order:
  1. grid = ceil(sqrt(N * aspect)) columns x ceil(N / columns) rows
  2. constraints for a cell come from occupied neighbors only, so in
     row-major order only North and West ever constrain a placement
  3. shapes are tried in randomised order, then rotations 0/90/180/270,
     then the shape's core variants in randomised order; the first
     combination satisfying every constraint wins
  4. when nothing fits, a relaxed placement (first under-target shape,
     first variant, rotation 0) fills the cell and is reported

There is no backtracking; a seeded RNG makes layouts reproducible.
"""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from connectors import Connector, can_connect
from shape_definitions import SHAPE_DEFINITIONS, BaseShape
from shape_library import resolve_shape_id
from template_contracts import (
    ROTATIONS,
    InvalidSelectionError,
    PlacedPiece,
    PlacementExhaustedError,
    PlacementTimeoutError,
    PuzzleTemplate,
    RelaxedPlacementUsed,
    TemplateConfig,
    hash_shape_combination,
)
from variant_generator import ShapeVariant, generate_core_variants

logger = logging.getLogger(__name__)


class Direction(Enum):
    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"

    @property
    def offset(self) -> Tuple[int, int]:
        return _OFFSETS[self]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]


_OFFSETS = {
    Direction.NORTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
}
_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}


# ─── Grid ────────────────────────────────────────────────────────────────────

@dataclass
class GridCell:
    x: int
    y: int
    occupant: Optional[PlacedPiece] = None
    exposed: Dict[Direction, Optional[Connector]] = field(
        default_factory=lambda: {d: None for d in Direction}
    )


class Grid:
    """Working grid for one generation attempt."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.cells: Dict[Tuple[int, int], GridCell] = {
            (x, y): GridCell(x, y) for y in range(height) for x in range(width)
        }

    def cell(self, x: int, y: int) -> GridCell:
        return self.cells[(x, y)]

    def neighbor(self, x: int, y: int, direction: Direction) -> Optional[GridCell]:
        dx, dy = direction.offset
        return self.cells.get((x + dx, y + dy))

    def is_border(self, x: int, y: int, direction: Direction) -> bool:
        return self.neighbor(x, y, direction) is None


def compute_grid_dimensions(total_pieces: int, aspect_ratio: float = 1.0) -> Tuple[int, int]:
    """Near-square grid: (ceil(sqrt(N * aspect)), ceil(N / width))."""
    width = max(1, math.ceil(math.sqrt(total_pieces * aspect_ratio)))
    height = math.ceil(total_pieces / width)
    return width, height


# ─── Constraints ─────────────────────────────────────────────────────────────

def cell_constraints(grid: Grid, x: int, y: int) -> Dict[Direction, Connector]:
    """Connectors exposed towards (x, y) by its occupied neighbors.

    Handles all four directions; a direction with no occupied neighbor
    (or a neighbor exposing nothing on that side) is absent.
    """
    constraints: Dict[Direction, Connector] = {}
    for direction in Direction:
        neighbor = grid.neighbor(x, y, direction)
        if neighbor is None or neighbor.occupant is None:
            continue
        exposed = neighbor.exposed[direction.opposite]
        if exposed is not None:
            constraints[direction] = exposed
    return constraints


def map_anchors_to_directions(shape: BaseShape, rotation: int) -> Dict[Direction, str]:
    """Bucket each anchor's rotated outward angle into a 90-degree quadrant.

    [-45, 45) faces East, [45, 135) South, [135, 225) West, [225, 315)
    North (y-down angles). When several anchors share a quadrant the last
    one in anchor order wins.
    """
    result: Dict[Direction, str] = {}
    for anchor in shape.anchors:
        angle = (anchor.angle + rotation) % 360
        if angle >= 315 or angle < 45:
            result[Direction.EAST] = anchor.id
        elif angle < 135:
            result[Direction.SOUTH] = anchor.id
        elif angle < 225:
            result[Direction.WEST] = anchor.id
        else:
            result[Direction.NORTH] = anchor.id
    return result


def exposed_connectors(
    variant: ShapeVariant,
    shape: BaseShape,
    rotation: int,
) -> Dict[Direction, Optional[Connector]]:
    exposed: Dict[Direction, Optional[Connector]] = {d: None for d in Direction}
    for direction, anchor_id in map_anchors_to_directions(shape, rotation).items():
        assignment = variant.connector_for(anchor_id)
        if assignment is not None:
            exposed[direction] = assignment.connector
    return exposed


def unmet_constraints(
    variant: ShapeVariant,
    shape: BaseShape,
    rotation: int,
    constraints: Dict[Direction, Connector],
) -> List[Direction]:
    """Directions whose required connector this variant/rotation cannot mate."""
    directions = map_anchors_to_directions(shape, rotation)
    unmet = []
    for direction, required in constraints.items():
        anchor_id = directions.get(direction)
        assignment = variant.connector_for(anchor_id) if anchor_id else None
        if assignment is None or not can_connect(assignment, required):
            unmet.append(direction)
    return unmet


def variant_satisfies_constraints(
    variant: ShapeVariant,
    shape: BaseShape,
    rotation: int,
    constraints: Dict[Direction, Connector],
) -> bool:
    return not unmet_constraints(variant, shape, rotation, constraints)


# ─── Selection validation ────────────────────────────────────────────────────

def validate_selection(shape_ids: Sequence[str], config: TemplateConfig) -> List[str]:
    """Canonical shape ids for a selection, or InvalidSelectionError."""
    if len(shape_ids) != config.unique_shapes:
        raise InvalidSelectionError(
            f"Expected {config.unique_shapes} shapes, got {len(shape_ids)}"
        )
    resolved = [resolve_shape_id(s) for s in shape_ids]
    unknown = [s for s, r in zip(shape_ids, resolved) if r not in SHAPE_DEFINITIONS]
    if unknown:
        raise InvalidSelectionError(f"Unknown shape(s): {', '.join(unknown)}")
    if len(set(resolved)) != len(resolved):
        duplicates = sorted({r for r in resolved if resolved.count(r) > 1})
        raise InvalidSelectionError(f"Duplicate shape(s): {', '.join(duplicates)}")
    return resolved


# ─── Placement engine ────────────────────────────────────────────────────────

@dataclass
class PlacementContext:
    grid: Grid
    shape_ids: List[str]
    variants: Dict[str, List[ShapeVariant]]
    target_counts: Dict[str, int]
    shape_counts: Dict[str, int]
    placed: List[PlacedPiece] = field(default_factory=list)
    relaxed: List[RelaxedPlacementUsed] = field(default_factory=list)
    trials: int = 0
    deadline: Optional[float] = None


class TemplateGenerator:
    """Greedy row-major placement engine.

    Args:
        config: Generation settings.
        seed: Seed for the trial-order RNG; None draws fresh entropy.
        rng: An explicit numpy Generator (takes precedence over ``seed``).
    """

    def __init__(
        self,
        config: Optional[TemplateConfig] = None,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        self.config = config or TemplateConfig()
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def generate(self, shape_ids: Sequence[str]) -> PuzzleTemplate:
        config = self.config
        selected = validate_selection(shape_ids, config)

        if config.copies_per_shape * config.unique_shapes < config.total_pieces:
            raise PlacementExhaustedError(
                f"Targets ({config.unique_shapes} x {config.copies_per_shape}) "
                f"cannot cover {config.total_pieces} pieces"
            )

        width, height = compute_grid_dimensions(config.total_pieces, config.target_aspect_ratio)

        variants = {
            shape_id: generate_core_variants(SHAPE_DEFINITIONS[shape_id], config.core_variant_count)
            for shape_id in selected
        }
        empty = [s for s, v in variants.items() if not v]
        if empty:
            raise PlacementExhaustedError(f"No variants for shape(s): {', '.join(empty)}")

        context = PlacementContext(
            grid=Grid(width, height),
            shape_ids=selected,
            variants=variants,
            target_counts={s: config.copies_per_shape for s in selected},
            shape_counts={s: 0 for s in selected},
            deadline=(
                time.monotonic() + config.time_budget_s
                if config.time_budget_s is not None else None
            ),
        )

        self._run_placement(context)

        if len(context.placed) < config.total_pieces:
            raise PlacementExhaustedError(
                f"Placed {len(context.placed)} of {config.total_pieces} pieces"
            )

        template = PuzzleTemplate(
            id=hash_shape_combination(selected),
            shapes=sorted(selected),
            pieces=context.placed,
            grid_width=width,
            grid_height=height,
            cell_size=config.cell_size,
            shape_counts={s: context.shape_counts[s] for s in sorted(selected)},
            relaxed_placements=context.relaxed,
        )
        logger.info(
            "Generated template %s: %d pieces on %dx%d grid, %d relaxed placement(s)",
            template.id, len(template.pieces), width, height, template.relaxed_placement_count,
        )
        return template

    # ── internals ──

    def _run_placement(self, context: PlacementContext) -> None:
        grid = context.grid
        total = self.config.total_pieces
        for y in range(grid.height):
            for x in range(grid.width):
                if len(context.placed) >= total:
                    return
                self._check_deadline(context)
                if not self._place_constrained(context, x, y):
                    logger.debug("No compatible piece at (%d, %d), relaxing", x, y)
                    if not self._place_relaxed(context, x, y):
                        raise PlacementExhaustedError(
                            f"No shape under its target left for cell ({x}, {y})"
                        )

    def _check_deadline(self, context: PlacementContext) -> None:
        if context.deadline is not None and time.monotonic() >= context.deadline:
            raise PlacementTimeoutError(
                f"Time budget of {self.config.time_budget_s}s exhausted after "
                f"{len(context.placed)} pieces"
            )

    def _count_trial(self, context: PlacementContext) -> None:
        context.trials += 1
        limit = self.config.max_trials
        if limit is not None and context.trials > limit:
            raise PlacementTimeoutError(
                f"Trial budget of {limit} exhausted after {len(context.placed)} pieces"
            )

    def _shuffled(self, items: Sequence) -> List:
        return [items[i] for i in self.rng.permutation(len(items))]

    def _place_constrained(self, context: PlacementContext, x: int, y: int) -> bool:
        constraints = cell_constraints(context.grid, x, y)
        candidates = [
            s for s in context.shape_ids
            if context.shape_counts[s] < context.target_counts[s]
        ]
        for shape_id in self._shuffled(candidates):
            shape = SHAPE_DEFINITIONS[shape_id]
            for rotation in ROTATIONS:
                for variant in self._shuffled(context.variants[shape_id]):
                    self._count_trial(context)
                    if variant_satisfies_constraints(variant, shape, rotation, constraints):
                        self._commit(context, shape, variant, x, y, rotation)
                        return True
        return False

    def _place_relaxed(self, context: PlacementContext, x: int, y: int) -> bool:
        constraints = cell_constraints(context.grid, x, y)
        for shape_id in context.shape_ids:
            if context.shape_counts[shape_id] >= context.target_counts[shape_id]:
                continue
            shape = SHAPE_DEFINITIONS[shape_id]
            variant = context.variants[shape_id][0]
            rotation = 0
            piece = self._commit(context, shape, variant, x, y, rotation)
            unmet = unmet_constraints(variant, shape, rotation, constraints)
            record = RelaxedPlacementUsed(
                piece_id=piece.id,
                shape_id=shape_id,
                grid_x=x,
                grid_y=y,
                unmet_directions=tuple(d.value for d in unmet),
            )
            context.relaxed.append(record)
            logger.warning(
                "Relaxed placement at (%d, %d): %s, unmet sides: %s",
                x, y, variant.variant_id, ", ".join(record.unmet_directions) or "none",
            )
            return True
        return False

    def _commit(
        self,
        context: PlacementContext,
        shape: BaseShape,
        variant: ShapeVariant,
        x: int,
        y: int,
        rotation: int,
    ) -> PlacedPiece:
        piece = PlacedPiece(
            id=f"piece-{len(context.placed)}",
            variant_id=variant.variant_id,
            grid_x=x,
            grid_y=y,
            rotation=rotation,
        )
        cell = context.grid.cell(x, y)
        cell.occupant = piece
        cell.exposed = exposed_connectors(variant, shape, rotation)
        context.placed.append(piece)
        context.shape_counts[shape.id] += 1
        return piece


def generate_puzzle_template(
    shape_ids: Sequence[str],
    config: Optional[TemplateConfig] = None,
    seed: Optional[int] = None,
) -> PuzzleTemplate:
    """Generate a template for a shape selection (see TemplateGenerator)."""
    return TemplateGenerator(config=config, seed=seed).generate(shape_ids)
