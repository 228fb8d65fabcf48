"""
Production bundle: every production file for one template, built together.

All content is generated in memory first; nothing is written unless every
exporter succeeded, so a failed export never leaves partial files behind.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Optional

from dxf_exporter import template_to_dxf
from piece_manifest import ManifestEntry, generate_piece_manifest, manifest_to_text
from production_layout import ProductionConfig
from run_protocol import write_json, write_text
from svg_exporter import template_to_assembly_guide, template_to_cut_svg
from template_contracts import PuzzleTemplate

logger = logging.getLogger(__name__)


@dataclass
class ProductionBundle:
    template: PuzzleTemplate
    svg: str
    dxf: str
    assembly_guide: str
    manifest: List[ManifestEntry]
    manifest_text: str
    config: ProductionConfig
    generated_at: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )

    @property
    def template_id(self) -> str:
        return self.template.id

    def filenames(self) -> Dict[str, str]:
        stem = f"puzzle-{self.template_id}"
        return {
            "cut_svg": f"{stem}-cut.svg",
            "cut_dxf": f"{stem}-cut.dxf",
            "guide_svg": f"{stem}-guide.svg",
            "manifest_txt": f"{stem}-manifest.txt",
            "manifest_json": f"{stem}-manifest.json",
            "template_json": f"{stem}-template.json",
        }

    def manifest_payload(self) -> Dict[str, object]:
        return {
            "templateId": self.template_id,
            "generatedAt": self.generated_at,
            "totalPieces": sum(e.quantity for e in self.manifest),
            "relaxedPlacementCount": self.template.relaxed_placement_count,
            "entries": [e.to_dict() for e in self.manifest],
            "config": asdict(self.config),
        }


def generate_production_bundle(
    template: PuzzleTemplate,
    config: Optional[ProductionConfig] = None,
) -> ProductionBundle:
    """Cut SVG, cut DXF, assembly guide and manifest for a template.

    Raises:
        ExportError: a piece references an unknown shape or variant.
    """
    if config is None:
        config = ProductionConfig()

    manifest = generate_piece_manifest(template)
    bundle = ProductionBundle(
        template=template,
        svg=template_to_cut_svg(template, config),
        dxf=template_to_dxf(template, config),
        assembly_guide=template_to_assembly_guide(template),
        manifest=manifest,
        manifest_text=manifest_to_text(manifest),
        config=config,
    )
    logger.info(
        "Production bundle for %s: %d pieces, %d distinct variants",
        template.id, len(template.pieces), len(manifest),
    )
    return bundle


def write_production_bundle(bundle: ProductionBundle, out_dir) -> Dict[str, Path]:
    """Write every bundle file into ``out_dir``. Returns paths by role."""
    out = Path(out_dir)
    names = bundle.filenames()
    paths = {role: out / name for role, name in names.items()}

    write_text(paths["cut_svg"], bundle.svg)
    write_text(paths["cut_dxf"], bundle.dxf)
    write_text(paths["guide_svg"], bundle.assembly_guide)
    write_text(paths["manifest_txt"], bundle.manifest_text)
    write_json(paths["manifest_json"], bundle.manifest_payload())
    write_json(paths["template_json"], bundle.template.to_dict())

    logger.info("Wrote %d production files to %s", len(paths), out)
    return paths
