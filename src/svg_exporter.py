"""
SVG export for puzzle production.

Generates the laser cut sheet and the assembly guide from a PuzzleTemplate.

Cut sheet conventions (laser job software separates operations by style):
  - .cut (red, hairline): through-cut piece outline with connectors
  - .engrave (blue): interior details and optional labels

Units: millimeters. Each piece is one <g> carrying
``translate(x, y) rotate(r, c, c) scale(s)`` with c the centre of the
scaled 100-unit catalog box.
"""
import io
import logging
import os
from typing import Dict, Optional

import svgwrite

from piece_geometry import coords_to_svg_path, polygon_to_svg_path, shape_geometry, variant_outline
from production_layout import SHAPE_BOX, ProductionConfig, compute_sheet_layout, resolve_piece
from template_contracts import ExportError, PuzzleTemplate

logger = logging.getLogger(__name__)

# Assembly guide palette, indexed by shape position in template.shapes
SHAPE_COLORS = [
    "#FFB3BA", "#FFDFBA", "#FFFFBA", "#BAFFC9", "#BAE1FF",
    "#E2BAFF", "#FFB3E6", "#C9FFBA", "#BAFFFD", "#FFDAB3",
]

GUIDE_CELL = 60
GUIDE_OFFSET = 20


def _to_string(dwg: svgwrite.Drawing) -> str:
    buffer = io.StringIO()
    dwg.write(buffer, pretty=True)
    return buffer.getvalue()


# ─── Cut sheet ───────────────────────────────────────────────────────────────

def template_to_cut_svg(template: PuzzleTemplate, config: Optional[ProductionConfig] = None) -> str:
    """Production cut sheet for a template.

    Args:
        template: Completed puzzle template.
        config: Page, stroke and material settings.

    Returns:
        SVG document text.

    Raises:
        ExportError: a piece references an unknown shape or variant.
    """
    if config is None:
        config = ProductionConfig()

    layout = compute_sheet_layout(template, config)
    width, height = layout.page_width, layout.page_height

    dwg = svgwrite.Drawing(
        size=(f"{width}mm", f"{height}mm"),
        viewBox=f"0 0 {width} {height}",
    )
    dwg.set_desc(
        title=f"Production SVG for: {template.id}",
        desc=(
            f"Total pieces: {len(template.pieces)}; "
            f"Material: {config.material_name} ({config.material_thickness}mm)"
        ),
    )
    dwg.defs.add(dwg.style(
        f".cut {{ fill: none; stroke: {config.cut_stroke_color}; "
        f"stroke-width: {config.cut_stroke_width}; }}\n"
        f".engrave {{ fill: none; stroke: {config.engrave_stroke_color}; "
        f"stroke-width: {config.engrave_stroke_width}; }}\n"
        f".label {{ font-family: Arial, sans-serif; fill: {config.engrave_stroke_color}; }}"
    ))

    outlines: Dict[str, str] = {}
    pieces = dwg.g(id="pieces")
    scale = config.piece_scale
    centre = SHAPE_BOX / 2 * scale

    for slot in layout.slots:
        piece = slot.resolved.piece
        shape = slot.resolved.shape

        path_d = outlines.get(piece.variant_id)
        if path_d is None:
            path_d = polygon_to_svg_path(variant_outline(shape, slot.resolved.variant.connectors))
            if not path_d:
                raise ExportError(f"Empty outline for variant {piece.variant_id}")
            outlines[piece.variant_id] = path_d

        group = dwg.g(id=piece.id, class_="piece")
        group.translate(slot.x, slot.y)
        group.rotate(piece.rotation, center=(centre, centre))
        group.scale(scale)
        group.add(dwg.path(d=path_d, class_="cut"))

        for detail in shape_geometry(shape).details:
            coords = list(detail.coords)
            closed = len(coords) > 2 and coords[0] == coords[-1]
            group.add(dwg.path(
                d=coords_to_svg_path(coords[:-1] if closed else coords, closed=closed),
                class_="engrave",
            ))

        if config.add_labels:
            group.add(dwg.text(
                piece.id,
                insert=(SHAPE_BOX / 2, SHAPE_BOX / 2),
                class_="label",
                text_anchor="middle",
                font_size=config.label_height_mm / scale,
            ))

        pieces.add(group)

    dwg.add(pieces)
    logger.info(
        "Cut SVG for %s: %d pieces, %d variants, page %.0fx%.0f mm",
        template.id, len(layout.slots), len(outlines), width, height,
    )
    return _to_string(dwg)


def write_cut_svg(
    template: PuzzleTemplate,
    filepath: str,
    config: Optional[ProductionConfig] = None,
) -> str:
    """Write the cut sheet to ``filepath``. Returns the path."""
    content = template_to_cut_svg(template, config)
    os.makedirs(os.path.dirname(filepath) or ".", exist_ok=True)
    with open(filepath, "w", encoding="utf-8") as f:
        f.write(content)
    logger.info("Exported SVG: %s", filepath)
    return filepath


# ─── Assembly guide ──────────────────────────────────────────────────────────

def template_to_assembly_guide(template: PuzzleTemplate) -> str:
    """Colored grid diagram of piece placement with a shape legend."""
    cell = GUIDE_CELL
    svg_width = template.grid_width * cell + 2 * GUIDE_OFFSET
    svg_height = template.grid_height * cell + 100

    dwg = svgwrite.Drawing(size=(svg_width, svg_height), viewBox=f"0 0 {svg_width} {svg_height}")
    dwg.defs.add(dwg.style("text { font-family: Arial, sans-serif; }"))

    dwg.add(dwg.text(
        f"Assembly Guide - {len(template.pieces)} pieces",
        insert=(svg_width / 2, 15),
        text_anchor="middle",
        font_size=12,
        font_weight="bold",
    ))

    grid = dwg.g(id="grid")
    for piece in sorted(template.pieces, key=lambda p: (p.grid_y, p.grid_x)):
        shape_id = resolve_piece(piece).shape.id
        if shape_id not in template.shapes:
            raise ExportError(f"Piece {piece.id} uses {shape_id}, not part of template {template.id}")
        color = SHAPE_COLORS[template.shapes.index(shape_id) % len(SHAPE_COLORS)]
        x = GUIDE_OFFSET + piece.grid_x * cell
        y = GUIDE_OFFSET + piece.grid_y * cell
        grid.add(dwg.rect(
            insert=(x, y),
            size=(cell - 2, cell - 2),
            fill=color,
            stroke="#333",
            stroke_width=1,
            rx=3,
        ))
        grid.add(dwg.text(
            shape_id[:3],
            insert=(x + cell / 2, y + cell / 2 + 4),
            text_anchor="middle",
            font_size=8,
            fill="#333",
        ))
    dwg.add(grid)

    legend = dwg.g(id="legend")
    legend_y = template.grid_height * cell + 40
    for i, shape_id in enumerate(template.shapes):
        legend.add(dwg.rect(
            insert=(GUIDE_OFFSET + i * 50, legend_y),
            size=(12, 12),
            fill=SHAPE_COLORS[i % len(SHAPE_COLORS)],
            stroke="#333",
        ))
        legend.add(dwg.text(shape_id, insert=(35 + i * 50, legend_y + 10), font_size=8))
    dwg.add(legend)

    return _to_string(dwg)


def write_assembly_guide(template: PuzzleTemplate, filepath: str) -> str:
    content = template_to_assembly_guide(template)
    os.makedirs(os.path.dirname(filepath) or ".", exist_ok=True)
    with open(filepath, "w", encoding="utf-8") as f:
        f.write(content)
    logger.info("Exported assembly guide: %s", filepath)
    return filepath
