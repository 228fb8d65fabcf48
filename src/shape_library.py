"""Lookup helpers over the silhouette catalog."""
from typing import Dict, List, Optional

from shape_definitions import SHAPE_DEFINITIONS, SHAPE_ID_ALIASES, BaseShape


def resolve_shape_id(shape_id: str) -> str:
    """Map a storefront alias onto its catalog id (unknown ids pass through)."""
    return SHAPE_ID_ALIASES.get(shape_id, shape_id)


def get_shape(shape_id: str) -> Optional[BaseShape]:
    """Shape definition by id or alias, or None when unknown."""
    return SHAPE_DEFINITIONS.get(resolve_shape_id(shape_id))


def is_valid_shape_id(shape_id: str) -> bool:
    return resolve_shape_id(shape_id) in SHAPE_DEFINITIONS


def all_shape_ids() -> List[str]:
    return list(SHAPE_DEFINITIONS.keys())


def categories() -> List[str]:
    seen: Dict[str, None] = {}
    for shape in SHAPE_DEFINITIONS.values():
        seen.setdefault(shape.category, None)
    return list(seen)


def shapes_by_category(category: str) -> List[BaseShape]:
    return [s for s in SHAPE_DEFINITIONS.values() if s.category == category]
