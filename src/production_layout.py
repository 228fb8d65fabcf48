"""
Sheet layout shared by the SVG and DXF cut-file exporters.

Pieces are laid out in reading order on a page of fixed width. Each piece
occupies a square slot of ``100 * piece_scale`` mm (the catalog box) plus
``piece_spacing``; the page grows downwards when the pieces do not fit.
"""
import logging
import math
from dataclasses import dataclass, field
from typing import List

from shape_definitions import BaseShape, SHAPE_DEFINITIONS
from template_contracts import ExportError, PlacedPiece, PuzzleTemplate
from variant_generator import ShapeVariant, variant_from_id

logger = logging.getLogger(__name__)

# Catalog outlines live in a 100x100 box
SHAPE_BOX = 100.0


@dataclass
class ProductionConfig:
    """Sheet, stroke and material settings for production output."""
    # Page (mm)
    page_width: float = 600.0
    page_height: float = 400.0
    margin: float = 10.0
    # Pieces
    piece_scale: float = 0.5      # 50 mm pieces from the 100-unit box
    piece_spacing: float = 3.0
    # Laser conventions
    cut_stroke_width: float = 0.1
    cut_stroke_color: str = "#FF0000"
    engrave_stroke_width: float = 0.3
    engrave_stroke_color: str = "#0000FF"
    # Material
    material_thickness: float = 3.0
    material_name: str = "Birch Plywood"
    # DXF
    cut_layer: str = "CUT"
    engrave_layer: str = "ENGRAVE"
    cut_color: int = 1       # ACI red
    engrave_color: int = 5   # ACI blue
    dxf_trace_outlines: bool = False
    # Piece-id labels (engraved)
    add_labels: bool = False
    label_height_mm: float = 3.0


@dataclass
class ResolvedPiece:
    """A placed piece with its base shape and connector variant."""
    piece: PlacedPiece
    shape: BaseShape
    variant: ShapeVariant


@dataclass
class SheetSlot:
    resolved: ResolvedPiece
    x: float
    y: float


@dataclass
class SheetLayout:
    pieces_per_row: int
    rows: int
    piece_size: float
    cell_pitch: float
    page_width: float
    page_height: float
    slots: List[SheetSlot] = field(default_factory=list)


def resolve_piece(piece: PlacedPiece) -> ResolvedPiece:
    """Base shape and variant of a placed piece, or ExportError."""
    try:
        variant = variant_from_id(piece.variant_id)
    except (KeyError, ValueError) as exc:
        raise ExportError(f"Piece {piece.id}: {exc}") from exc
    return ResolvedPiece(
        piece=piece,
        shape=SHAPE_DEFINITIONS[variant.base_shape_id],
        variant=variant,
    )


def compute_sheet_layout(template: PuzzleTemplate, config: ProductionConfig) -> SheetLayout:
    """Place every piece of a template on the sheet in reading order.

    Every piece is resolved before any position is produced, so an unknown
    shape fails the whole export.
    """
    resolved = [resolve_piece(p) for p in template.pieces]

    piece_size = SHAPE_BOX * config.piece_scale
    pitch = piece_size + config.piece_spacing
    usable_width = config.page_width - 2 * config.margin
    per_row = math.floor(usable_width / pitch)
    if per_row < 1:
        raise ExportError(
            f"Page width {config.page_width}mm cannot hold a {piece_size}mm piece"
        )

    rows = math.ceil(len(resolved) / per_row)
    page_height = max(config.page_height, config.margin * 2 + rows * pitch)

    slots = []
    for index, item in enumerate(resolved):
        row, col = divmod(index, per_row)
        slots.append(SheetSlot(
            resolved=item,
            x=config.margin + col * pitch,
            y=config.margin + row * pitch,
        ))

    logger.debug(
        "Sheet layout: %d pieces, %d per row, %d rows, page %.1fx%.1f mm",
        len(slots), per_row, rows, config.page_width, page_height,
    )
    return SheetLayout(
        pieces_per_row=per_row,
        rows=rows,
        piece_size=piece_size,
        cell_pitch=pitch,
        page_width=config.page_width,
        page_height=page_height,
        slots=slots,
    )
