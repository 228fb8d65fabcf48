"""Piece manifest: how many of each variant production has to cut."""
from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Sequence

from production_layout import resolve_piece
from template_contracts import PuzzleTemplate

RULE = "=" * 50


@dataclass(frozen=True)
class ManifestEntry:
    shape_id: str
    shape_name: str
    variant_id: str
    quantity: int

    def to_dict(self) -> Dict[str, object]:
        return {
            "shapeId": self.shape_id,
            "shapeName": self.shape_name,
            "variantId": self.variant_id,
            "quantity": self.quantity,
        }


def generate_piece_manifest(template: PuzzleTemplate) -> List[ManifestEntry]:
    """Deduplicated variant/quantity table sorted by shape, then variant.

    Raises ExportError when a piece references an unknown shape.
    """
    counts = Counter(p.variant_id for p in template.pieces)
    shapes = {}
    for piece in template.pieces:
        if piece.variant_id not in shapes:
            shapes[piece.variant_id] = resolve_piece(piece).shape

    entries = [
        ManifestEntry(
            shape_id=shapes[variant_id].id,
            shape_name=shapes[variant_id].name,
            variant_id=variant_id,
            quantity=quantity,
        )
        for variant_id, quantity in counts.items()
    ]
    entries.sort(key=lambda e: (e.shape_id, e.variant_id))
    return entries


def manifest_to_text(manifest: Sequence[ManifestEntry]) -> str:
    """Printable manifest grouped by shape with subtotals and a total."""
    lines = ["PUZZLE PIECE MANIFEST", RULE, ""]
    current = None
    subtotal = 0

    for entry in manifest:
        if entry.shape_id != current:
            if current is not None:
                lines.append(f"  Subtotal: {subtotal} pieces")
                lines.append("")
            current = entry.shape_id
            subtotal = 0
            lines.append(entry.shape_name.upper())
        lines.append(f"  {entry.variant_id}: {entry.quantity}x")
        subtotal += entry.quantity

    if current is not None:
        lines.append(f"  Subtotal: {subtotal} pieces")

    lines.append("")
    lines.append(RULE)
    lines.append(f"TOTAL PIECES: {sum(e.quantity for e in manifest)}")
    return "\n".join(lines) + "\n"
