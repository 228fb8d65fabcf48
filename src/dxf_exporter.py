"""
DXF export for puzzle cut sheets.

Uses ezdxf to produce a DXF with proper layers:
  - CUT (red, ACI 1): one closed outline per piece
  - ENGRAVE (blue, ACI 5): interior details and optional labels

By default each piece is a 4-vertex bounding-box placeholder at its sheet
slot; with ``dxf_trace_outlines`` the traced outline (connectors included)
is written instead. Sheet coordinates are y-down like the SVG sheet; they
are flipped to DXF's y-up convention on output.

Units: millimeters. Format: R2010.
"""
import io
import logging
import os
from typing import List, Optional, Tuple

import ezdxf
from ezdxf.document import Drawing
from ezdxf.enums import TextEntityAlignment
from shapely import affinity
from shapely.geometry import LineString, Polygon

from piece_geometry import place_outline, shape_geometry, variant_outline
from production_layout import SHAPE_BOX, ProductionConfig, SheetLayout, SheetSlot, compute_sheet_layout
from template_contracts import PuzzleTemplate

logger = logging.getLogger(__name__)


def template_to_dxf_document(
    template: PuzzleTemplate,
    config: Optional[ProductionConfig] = None,
) -> Drawing:
    """Build the cut-sheet DXF document for a template.

    Raises:
        ExportError: a piece references an unknown shape or variant.
    """
    if config is None:
        config = ProductionConfig()

    layout = compute_sheet_layout(template, config)

    doc = ezdxf.new("R2010")
    doc.units = ezdxf.units.MM
    msp = doc.modelspace()
    _setup_layers(doc, config)

    for slot in layout.slots:
        if config.dxf_trace_outlines:
            _add_traced_piece(msp, slot, layout, config)
        else:
            _add_placeholder_piece(msp, slot, layout, config)
        if config.add_labels:
            _add_label(msp, slot, layout, config)

    logger.info(
        "Cut DXF for %s: %d pieces (%s)",
        template.id, len(layout.slots),
        "traced" if config.dxf_trace_outlines else "bounding-box placeholders",
    )
    return doc


def template_to_dxf(template: PuzzleTemplate, config: Optional[ProductionConfig] = None) -> str:
    """DXF document text for a template."""
    doc = template_to_dxf_document(template, config)
    stream = io.StringIO()
    doc.write(stream)
    return stream.getvalue()


def write_cut_dxf(
    template: PuzzleTemplate,
    filepath: str,
    config: Optional[ProductionConfig] = None,
) -> str:
    """Export the cut sheet to a DXF file. Returns the path."""
    doc = template_to_dxf_document(template, config)
    os.makedirs(os.path.dirname(filepath) or ".", exist_ok=True)
    doc.saveas(filepath)
    logger.info("Exported DXF: %s", filepath)
    return filepath


# ─── Internal helpers ────────────────────────────────────────────────────────

def _setup_layers(doc, config: ProductionConfig) -> None:
    """Create CUT and ENGRAVE layers."""
    doc.layers.add(config.cut_layer, color=config.cut_color)
    doc.layers.add(config.engrave_layer, color=config.engrave_color)


def _flip(geom, layout: SheetLayout):
    """Mirror sheet (y-down) geometry into DXF (y-up) space."""
    return affinity.affine_transform(geom, [1, 0, 0, -1, 0, layout.page_height])


def _placeholder_corners(slot: SheetSlot, layout: SheetLayout, config: ProductionConfig) -> List[Tuple[float, float]]:
    bbox = slot.resolved.shape.bounding_box
    width = bbox.width * config.piece_scale
    height = bbox.height * config.piece_scale
    top = layout.page_height - slot.y
    return [
        (slot.x, top),
        (slot.x + width, top),
        (slot.x + width, top - height),
        (slot.x, top - height),
    ]


def _add_placeholder_piece(msp, slot: SheetSlot, layout: SheetLayout, config: ProductionConfig) -> None:
    msp.add_lwpolyline(
        _placeholder_corners(slot, layout, config),
        close=True,
        dxfattribs={"layer": config.cut_layer},
    )


def _add_traced_piece(msp, slot: SheetSlot, layout: SheetLayout, config: ProductionConfig) -> None:
    piece = slot.resolved.piece
    outline = variant_outline(slot.resolved.shape, slot.resolved.variant.connectors)
    placed = _flip(
        place_outline(outline, slot.x, slot.y, piece.rotation, config.piece_scale, SHAPE_BOX / 2),
        layout,
    )
    _add_polygon_to_dxf(msp, placed, config.cut_layer)

    for detail in shape_geometry(slot.resolved.shape).details:
        placed_detail = _flip(
            place_outline(detail, slot.x, slot.y, piece.rotation, config.piece_scale, SHAPE_BOX / 2),
            layout,
        )
        _add_line_to_dxf(msp, placed_detail, config.engrave_layer)


def _add_polygon_to_dxf(msp, polygon: Polygon, layer: str) -> None:
    """Add a Shapely polygon exterior as a closed LWPolyline."""
    if polygon.is_empty:
        return
    coords = list(polygon.exterior.coords)[:-1]
    if len(coords) >= 3:
        msp.add_lwpolyline(coords, close=True, dxfattribs={"layer": layer})


def _add_line_to_dxf(msp, line: LineString, layer: str) -> None:
    coords = list(line.coords)
    if len(coords) < 2:
        return
    closed = len(coords) > 3 and coords[0] == coords[-1]
    msp.add_lwpolyline(coords[:-1] if closed else coords, close=closed, dxfattribs={"layer": layer})


def _add_label(msp, slot: SheetSlot, layout: SheetLayout, config: ProductionConfig) -> None:
    """Piece id at the centre of its slot."""
    centre = layout.piece_size / 2
    msp.add_text(
        slot.resolved.piece.id,
        height=config.label_height_mm,
        dxfattribs={"layer": config.engrave_layer},
    ).set_placement(
        (slot.x + centre, layout.page_height - (slot.y + centre)),
        align=TextEntityAlignment.MIDDLE_CENTER,
    )
