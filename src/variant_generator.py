"""
Connector-assignment variants for base shapes.

With 4 connector kinds and 2 polarities each anchor has 8 states, so a
shape with N anchors has 8**N possible assignments (4,096 at 4 anchors,
262,144 at 6). Full enumeration is never materialised: the exhaustive
space is a lazy, restartable sequence that callers cap, and the placement
engine uses a small curated "core" set built from structured patterns.
"""
import logging
from collections import Counter
from dataclasses import dataclass, field
from functools import lru_cache
from itertools import combinations
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from connectors import (
    ALL_KINDS,
    ALL_POLARITIES,
    ConnectorAssignment,
    ConnectorKind,
    Polarity,
    opposite_polarity,
)
from shape_definitions import SHAPE_DEFINITIONS, BaseShape

logger = logging.getLogger(__name__)

DEFAULT_CORE_VARIANT_COUNT = 20


@dataclass(frozen=True)
class ShapeVariant:
    """A base shape with one connector assignment per (non-flat) anchor."""
    base_shape_id: str
    variant_id: str
    connectors: Tuple[ConnectorAssignment, ...]
    edge_anchor_ids: Tuple[str, ...] = ()

    def connector_for(self, anchor_id: str) -> Optional[ConnectorAssignment]:
        for assignment in self.connectors:
            if assignment.anchor_id == anchor_id:
                return assignment
        return None

    @property
    def signature(self) -> str:
        return "".join(a.code for a in self.connectors)


@dataclass
class VariantGenerationConfig:
    """Acceptance rules for exhaustive variant generation."""
    max_variants_per_shape: int = 500
    require_balanced_kinds: bool = False
    min_distinct_kinds: int = 2
    balance_tolerance: int = 2
    include_edge_variants: bool = True


def create_variant_id(base_shape_id: str, connectors: Sequence[ConnectorAssignment]) -> str:
    """Deterministic id, e.g. ``dolphin_ApArBpBr``."""
    return f"{base_shape_id}_{''.join(a.code for a in connectors)}"


def parse_variant_id(variant_id: str) -> Tuple[str, str]:
    """Split a variant id into (base_shape_id, connector_pattern)."""
    base_shape_id, _, rest = variant_id.partition("_")
    pattern = rest.split("_", 1)[0]
    return base_shape_id, pattern


def variant_from_id(variant_id: str) -> ShapeVariant:
    """Rebuild a variant from its id.

    Raises KeyError for an unknown base shape and ValueError when the
    connector pattern does not fit the shape's anchors.
    """
    base_shape_id, _, rest = variant_id.partition("_")
    shape = SHAPE_DEFINITIONS.get(base_shape_id)
    if shape is None:
        raise KeyError(f"Unknown shape: {base_shape_id!r}")

    pattern, _, suffix = rest.partition("_")
    edge_ids: Tuple[str, ...] = ()
    if suffix.startswith("edge"):
        edge_ids = tuple(suffix[len("edge"):].split("."))
    active = [a for a in shape.anchor_ids if a not in edge_ids]

    codes = [pattern[i:i + 2] for i in range(0, len(pattern), 2)]
    if len(codes) != len(active) or any(len(c) != 2 for c in codes):
        raise ValueError(
            f"Pattern {pattern!r} does not fit {len(active)} anchors of {base_shape_id}"
        )
    connectors = tuple(
        ConnectorAssignment(anchor_id, ConnectorKind(code[0]), Polarity.from_code(code[1]))
        for anchor_id, code in zip(active, codes)
    )
    return ShapeVariant(
        base_shape_id=base_shape_id,
        variant_id=variant_id,
        connectors=connectors,
        edge_anchor_ids=edge_ids,
    )


# ─── Exhaustive space ────────────────────────────────────────────────────────

class AssignmentSpace:
    """Every kind x polarity assignment over a list of anchors.

    A finite, restartable lazy sequence: ``len()`` is known up front,
    items are decoded from their index on demand, and each ``iter()``
    starts again from the beginning.
    """

    def __init__(
        self,
        anchor_ids: Sequence[str],
        kinds: Sequence[ConnectorKind] = ALL_KINDS,
        polarities: Sequence[Polarity] = ALL_POLARITIES,
    ):
        self.anchor_ids = list(anchor_ids)
        self.kinds = list(kinds)
        self.polarities = list(polarities)
        self._options = len(self.kinds) * len(self.polarities)

    def __len__(self) -> int:
        return self._options ** len(self.anchor_ids)

    def __getitem__(self, index: int) -> List[ConnectorAssignment]:
        if index < 0:
            index += len(self)
        if not 0 <= index < len(self):
            raise IndexError(index)
        assignments = []
        remaining = index
        for anchor_id in self.anchor_ids:
            option = remaining % self._options
            remaining //= self._options
            kind = self.kinds[option // len(self.polarities)]
            polarity = self.polarities[option % len(self.polarities)]
            assignments.append(ConnectorAssignment(anchor_id, kind, polarity))
        return assignments

    def __iter__(self) -> Iterator[List[ConnectorAssignment]]:
        for index in range(len(self)):
            yield self[index]


def is_acceptable(assignments: Sequence[ConnectorAssignment], config: VariantGenerationConfig) -> bool:
    kind_counts = Counter(a.kind for a in assignments)
    if len(kind_counts) < config.min_distinct_kinds:
        return False
    if config.require_balanced_kinds:
        counts = kind_counts.values()
        if max(counts) - min(counts) > config.balance_tolerance:
            return False
    return True


def generate_shape_variants(
    shape: BaseShape,
    config: Optional[VariantGenerationConfig] = None,
) -> List[ShapeVariant]:
    """First ``max_variants_per_shape`` acceptable assignments of a shape."""
    if config is None:
        config = VariantGenerationConfig()

    variants: List[ShapeVariant] = []
    for assignments in AssignmentSpace(shape.anchor_ids):
        if len(variants) >= config.max_variants_per_shape:
            break
        if not is_acceptable(assignments, config):
            continue
        variants.append(ShapeVariant(
            base_shape_id=shape.id,
            variant_id=create_variant_id(shape.id, assignments),
            connectors=tuple(assignments),
        ))
    return variants


def generate_all_variants(
    config: Optional[VariantGenerationConfig] = None,
) -> Dict[str, List[ShapeVariant]]:
    """Capped exhaustive variants for every shape in the catalog.

    Edge variants are appended when ``include_edge_variants`` is set.
    """
    if config is None:
        config = VariantGenerationConfig()
    all_variants: Dict[str, List[ShapeVariant]] = {}
    for shape_id, shape in SHAPE_DEFINITIONS.items():
        variants = generate_shape_variants(shape, config)
        if config.include_edge_variants:
            variants.extend(generate_edge_variants(shape))
        all_variants[shape_id] = variants
    return all_variants


# ─── Curated core set ────────────────────────────────────────────────────────

def _core_patterns(n: int) -> List[Tuple[List[ConnectorKind], List[Polarity]]]:
    alternating = [Polarity.PROTRUDING if i % 2 == 0 else Polarity.RECESSED for i in range(n)]
    patterns = []

    # Single kind, alternating polarity
    for kind in ALL_KINDS:
        patterns.append(([kind] * n, alternating))

    # Every unordered pair of kinds, alternating kind and polarity
    for k1, k2 in combinations(ALL_KINDS, 2):
        patterns.append(([k1 if i % 2 == 0 else k2 for i in range(n)], alternating))

    # Kinds cycling A..D with a single polarity
    cycling = [ALL_KINDS[i % len(ALL_KINDS)] for i in range(n)]
    for polarity in ALL_POLARITIES:
        patterns.append((cycling, [polarity] * n))

    # Uniform kind, uniform polarity
    for kind in ALL_KINDS:
        for polarity in ALL_POLARITIES:
            patterns.append(([kind] * n, [polarity] * n))

    return patterns


@lru_cache(maxsize=None)
def _core_variants(shape: BaseShape, count: int) -> Tuple[ShapeVariant, ...]:
    anchor_ids = shape.anchor_ids
    variants: List[ShapeVariant] = []
    seen = set()

    for kinds, polarities in _core_patterns(len(anchor_ids)):
        if len(variants) >= count:
            break
        assignments = tuple(
            ConnectorAssignment(anchor_id, kind, polarity)
            for anchor_id, kind, polarity in zip(anchor_ids, kinds, polarities)
        )
        key = "".join(a.code for a in assignments)
        if key in seen:
            continue
        seen.add(key)
        variants.append(ShapeVariant(
            base_shape_id=shape.id,
            variant_id=create_variant_id(shape.id, assignments),
            connectors=assignments,
        ))

    logger.debug("Built %d core variants for %s", len(variants), shape.id)
    return tuple(variants)


def generate_core_variants(shape: BaseShape, count: int = DEFAULT_CORE_VARIANT_COUNT) -> List[ShapeVariant]:
    """Small deterministic variant set used by the placement engine.

    Patterns, de-duplicated by assignment signature:
      - one kind, alternating polarity (4)
      - two kinds alternating, alternating polarity, every pair (6)
      - kinds cycling A..D, single polarity (2)
      - one kind, one polarity (8)
    Results are memoised per shape.
    """
    return list(_core_variants(shape, count))


# ─── Edge (border) variants ──────────────────────────────────────────────────

def generate_edge_variants(
    shape: BaseShape,
    max_edge_anchors: int = 2,
    variants_per_layout: int = 5,
) -> List[ShapeVariant]:
    """Variants with 1..max_edge_anchors flat anchors, for border pieces.

    Flat anchors carry no connector; the remaining anchors get core
    patterns.
    """
    anchor_ids = shape.anchor_ids
    variants: List[ShapeVariant] = []
    upper = min(max_edge_anchors, len(anchor_ids) - 1)

    for num_edges in range(1, upper + 1):
        for edge_ids in combinations(anchor_ids, num_edges):
            active = [a for a in anchor_ids if a not in edge_ids]
            seen = set()
            for kinds, polarities in _core_patterns(len(active)):
                if len(seen) >= variants_per_layout:
                    break
                assignments = tuple(
                    ConnectorAssignment(anchor_id, kind, polarity)
                    for anchor_id, kind, polarity in zip(active, kinds, polarities)
                )
                key = "".join(a.code for a in assignments)
                if key in seen:
                    continue
                seen.add(key)
                variants.append(ShapeVariant(
                    base_shape_id=shape.id,
                    variant_id=f"{create_variant_id(shape.id, assignments)}_edge{'.'.join(edge_ids)}",
                    connectors=assignments,
                    edge_anchor_ids=tuple(edge_ids),
                ))
    return variants


# ─── Signatures and statistics ───────────────────────────────────────────────

@dataclass(frozen=True)
class ConnectorSignature:
    protruding_kinds: Tuple[ConnectorKind, ...]
    recessed_kinds: Tuple[ConnectorKind, ...]


def connector_signature(variant: ShapeVariant) -> ConnectorSignature:
    """Sorted tab kinds and slot kinds of a variant."""
    protruding = sorted(
        (a.kind for a in variant.connectors if a.polarity is Polarity.PROTRUDING),
        key=lambda k: k.value,
    )
    recessed = sorted(
        (a.kind for a in variant.connectors if a.polarity is Polarity.RECESSED),
        key=lambda k: k.value,
    )
    return ConnectorSignature(tuple(protruding), tuple(recessed))


def find_compatible_variants(
    variants: Sequence[ShapeVariant],
    kind: ConnectorKind,
    polarity: Polarity,
) -> List[ShapeVariant]:
    """Variants with at least one connector able to mate (kind, polarity)."""
    wanted = opposite_polarity(polarity)
    return [
        v for v in variants
        if any(a.kind == kind and a.polarity == wanted for a in v.connectors)
    ]


@dataclass
class VariantStats:
    shape_id: str
    total_possible: int
    generated: int
    anchor_count: int
    kind_distribution: Dict[str, int] = field(default_factory=dict)
    polarity_distribution: Dict[str, int] = field(default_factory=dict)


def variant_stats(shape: BaseShape, variants: Sequence[ShapeVariant]) -> VariantStats:
    kinds = Counter({k.value: 0 for k in ALL_KINDS})
    polarities = Counter({p.value: 0 for p in ALL_POLARITIES})
    for variant in variants:
        for assignment in variant.connectors:
            kinds[assignment.kind.value] += 1
            polarities[assignment.polarity.value] += 1
    return VariantStats(
        shape_id=shape.id,
        total_possible=len(AssignmentSpace(shape.anchor_ids)),
        generated=len(variants),
        anchor_count=len(shape.anchors),
        kind_distribution=dict(kinds),
        polarity_distribution=dict(polarities),
    )


def format_variant_stats(stats: VariantStats) -> str:
    kinds = ", ".join(f"{k}={v}" for k, v in sorted(stats.kind_distribution.items()))
    polarities = ", ".join(f"{k}={v}" for k, v in sorted(stats.polarity_distribution.items()))
    return "\n".join([
        f"Shape: {stats.shape_id}",
        f"  Anchors: {stats.anchor_count}",
        f"  Total possible: {stats.total_possible:,}",
        f"  Generated: {stats.generated}",
        f"  Kinds: {kinds}",
        f"  Polarities: {polarities}",
    ])
