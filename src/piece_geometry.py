"""
Piece geometry built on Shapely.

Turns catalog SVG outlines into polygons, builds connector tab/slot
polygons at anchors, and produces the cut outline of a shape variant
(tabs unioned, slots subtracted). Coordinates are shape units in the
100x100 y-down box used by the catalog.
"""
import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Iterable, List, Tuple

import numpy as np
from shapely import affinity
from shapely.geometry import LineString, MultiPolygon, Point, Polygon, box
from shapely.ops import nearest_points, unary_union

from connectors import Connector, ConnectorAssignment, Polarity, CONNECTOR_PROFILES, connector_dimensions
from shape_definitions import AnchorPoint, BaseShape

Vec2 = Tuple[float, float]

_TOKEN_RE = re.compile(r"[A-Za-z]|-?\d*\.?\d+(?:[eE][-+]?\d+)?")

CURVE_SEGMENTS = 8
# Width of an open sub-path (bicycle tube, handlebar) when it is part of the cut
STROKE_WIDTH = 3.0
# Width of the strip joining separate silhouette parts into one cut ring
BRIDGE_WIDTH = 3.0
# Slack when deciding that a sub-path lies inside the parts already accepted
CONTAIN_TOLERANCE = 0.5
# How far a connector reaches back inside the outline so the union is solid
CONNECTOR_OVERLAP = 1.0


@dataclass
class ShapeGeometry:
    """Outline polygon plus interior detail lines of a base shape."""
    outline: Polygon
    details: List[LineString] = field(default_factory=list)


# ─── SVG path parsing ────────────────────────────────────────────────────────

def parse_svg_path(d: str, curve_segments: int = CURVE_SEGMENTS) -> List[List[Vec2]]:
    """Flatten an absolute M/L/Q/Z path into a list of point sub-paths.

    Quadratic curves are sampled into ``curve_segments`` straight segments.
    """
    return [points for points, _ in _parse_subpaths(d, curve_segments)]


def _parse_subpaths(d: str, curve_segments: int = CURVE_SEGMENTS) -> List[Tuple[List[Vec2], bool]]:
    """Like parse_svg_path, but each sub-path carries whether Z closed it."""
    tokens = _TOKEN_RE.findall(d)
    subpaths: List[Tuple[List[Vec2], bool]] = []
    current: List[Vec2] = []
    command = None
    i = 0

    def number() -> float:
        nonlocal i
        value = float(tokens[i])
        i += 1
        return value

    while i < len(tokens):
        token = tokens[i]
        if token.isalpha():
            command = token
            i += 1
            if command in ("Z", "z"):
                if current:
                    subpaths.append((current, True))
                    current = []
                continue
        if command is None:
            raise ValueError(f"Path data must start with a command: {d[:20]!r}")
        if command == "M":
            if current:
                subpaths.append((current, False))
            current = [(number(), number())]
            command = "L"  # implicit lineto after moveto
        elif command == "L":
            current.append((number(), number()))
        elif command == "Q":
            ctrl = (number(), number())
            end = (number(), number())
            start = current[-1] if current else ctrl
            current.extend(_sample_quadratic(start, ctrl, end, curve_segments))
        else:
            raise ValueError(f"Unsupported path command: {command!r}")

    if current:
        subpaths.append((current, False))
    return subpaths


def _sample_quadratic(p0: Vec2, c: Vec2, p1: Vec2, segments: int) -> List[Vec2]:
    t = np.linspace(0.0, 1.0, segments + 1)[1:]
    a = (1 - t) ** 2
    b = 2 * (1 - t) * t
    e = t ** 2
    xs = a * p0[0] + b * c[0] + e * p1[0]
    ys = a * p0[1] + b * c[1] + e * p1[1]
    return [(float(x), float(y)) for x, y in zip(xs, ys)]


# ─── Outline construction ────────────────────────────────────────────────────

def _largest(geom) -> Polygon:
    if isinstance(geom, MultiPolygon):
        return max(geom.geoms, key=lambda g: g.area)
    if isinstance(geom, Polygon):
        return geom
    polys = [g for g in getattr(geom, "geoms", []) if isinstance(g, Polygon)]
    return max(polys, key=lambda g: g.area) if polys else Polygon()


def _to_polygon(points: List[Vec2]) -> Polygon:
    if len(points) < 3:
        return Polygon()
    poly = Polygon(points)
    if not poly.is_valid:
        poly = _largest(poly.buffer(0))
    return poly


def _silhouette_part(points: List[Vec2], closed: bool):
    """(solid, line) for one sub-path, or None when it has no extent.

    Closed sub-paths are filled. Open ones are filled as SVG would fill
    them and also keep their stroke, so a two-point tube still has width.
    The line is what gets engraved if the part turns out to be interior.
    """
    if not closed and len(points) > 2 and points[0] == points[-1]:
        closed = True
    fill = _to_polygon(points)
    if closed:
        if fill.is_empty:
            return None
        return fill, LineString(fill.exterior.coords)

    if len(points) < 2:
        return None
    line = LineString(points)
    if line.length == 0:
        return None
    stroke = line.buffer(STROKE_WIDTH / 2)
    solid = stroke if fill.is_empty else unary_union([fill, stroke])
    return solid, line


def _join_parts(geom):
    """Bridge separate parts onto the largest one until a single polygon is left."""
    while isinstance(geom, MultiPolygon):
        parts = sorted(geom.geoms, key=lambda g: g.area, reverse=True)
        body = parts[0]
        nearest = min(parts[1:], key=body.distance)
        a, b = nearest_points(body, nearest)
        if a.distance(b) > 0:
            bridge = LineString([(a.x, a.y), (b.x, b.y)]).buffer(BRIDGE_WIDTH / 2)
        else:
            bridge = a.buffer(BRIDGE_WIDTH / 2)
        geom = unary_union([geom, bridge])
    return geom


def build_shape_geometry(outline_path: str) -> ShapeGeometry:
    """Cut outline and engrave details from a catalog outline path.

    Sub-paths are taken largest first. One lying inside the parts accepted
    so far (eyes, windows, ribbon lines) becomes an engrave detail; every
    other one is part of the silhouette (rabbit head, sun rays, wheels).
    Silhouette parts that do not touch are joined by short bridges, so the
    result does not depend on sub-path order and nothing is dropped.
    """
    parts = [
        part for part in (_silhouette_part(points, closed) for points, closed in _parse_subpaths(outline_path))
        if part is not None
    ]
    if not parts:
        return ShapeGeometry(outline=Polygon())

    parts.sort(key=lambda part: part[0].area, reverse=True)
    solids = []
    details: List[LineString] = []
    covered = None

    for solid, line in parts:
        if covered is not None and covered.covers(line):
            details.append(line)
            continue
        solids.append(solid)
        covered = unary_union(solids).buffer(CONTAIN_TOLERANCE)

    merged = _join_parts(unary_union(solids))
    return ShapeGeometry(outline=_exterior_only(_largest(merged)), details=details)


def _exterior_only(polygon: Polygon) -> Polygon:
    """Drop interior rings; a puzzle piece cut path is a single ring."""
    return Polygon(polygon.exterior.coords)


@lru_cache(maxsize=None)
def shape_geometry(shape: BaseShape) -> ShapeGeometry:
    """Memoised geometry of a (hashable, frozen) base shape."""
    return build_shape_geometry(shape.outline_path)


# ─── Connectors ──────────────────────────────────────────────────────────────

def _tab_local(connector: Connector) -> Polygon:
    """Tab polygon in a local frame: +x outward from the edge, y along it."""
    dims = connector_dimensions(connector.kind)
    width, depth, neck = dims["width"], dims["depth"], dims["neck"]
    hw, hn = width / 2, neck / 2

    if CONNECTOR_PROFILES[connector.kind].style == "rounded":
        neck_box = box(-CONNECTOR_OVERLAP, -hn, depth * 0.5, hn)
        head = Point(max(depth - hw, 0.0), 0.0).buffer(hw, quad_segs=16)
        tab = unary_union([neck_box, head])
        return _largest(tab.intersection(box(-CONNECTOR_OVERLAP, -width, depth, width)))

    return Polygon([
        (-CONNECTOR_OVERLAP, -hn),
        (depth * 0.5, -hn),
        (depth, -hw),
        (depth, hw),
        (depth * 0.5, hn),
        (-CONNECTOR_OVERLAP, hn),
    ])


def connector_polygon(connector: Connector, x: float, y: float, angle: float) -> Polygon:
    """Tab (protruding) or slot (recessed) polygon placed at (x, y).

    The tab points along ``angle``; a slot points the opposite way so it
    bites into the piece.
    """
    local = _tab_local(connector)
    if connector.polarity is Polarity.RECESSED:
        local = affinity.scale(local, xfact=-1.0, yfact=1.0, origin=(0, 0))
    rotated = affinity.rotate(local, angle, origin=(0, 0))
    return affinity.translate(rotated, x, y)


def _snap_to_outline(outline: Polygon, anchor: AnchorPoint) -> Vec2:
    ring = outline.exterior
    snapped = ring.interpolate(ring.project(Point(anchor.x, anchor.y)))
    return (snapped.x, snapped.y)


def variant_outline(shape: BaseShape, connectors: Iterable[ConnectorAssignment]) -> Polygon:
    """Cut outline of a shape with its connectors applied.

    Anchors without an assignment (flat edges) are left untouched.
    """
    outline = shape_geometry(shape).outline
    if outline.is_empty:
        return outline

    tabs = []
    slots = []
    for assignment in connectors:
        anchor = shape.get_anchor(assignment.anchor_id)
        x, y = _snap_to_outline(outline, anchor)
        poly = connector_polygon(assignment.connector, x, y, anchor.angle)
        if assignment.polarity is Polarity.PROTRUDING:
            tabs.append(poly)
        else:
            slots.append(poly)

    result = outline
    if tabs:
        result = unary_union([result] + tabs)
    if slots:
        result = result.difference(unary_union(slots))
    return _exterior_only(_largest(result))


# ─── Serialisation / transforms ──────────────────────────────────────────────

def _fmt(value: float, precision: int) -> str:
    text = f"{value:.{precision}f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def coords_to_svg_path(coords: Iterable[Vec2], closed: bool = True, precision: int = 2) -> str:
    parts = []
    for i, (x, y) in enumerate(coords):
        parts.append(f"{'M' if i == 0 else 'L'} {_fmt(x, precision)} {_fmt(y, precision)}")
    if closed and parts:
        parts.append("Z")
    return " ".join(parts)


def polygon_to_svg_path(polygon: Polygon, precision: int = 2) -> str:
    """SVG path data for a polygon exterior (closing vertex dropped)."""
    if polygon.is_empty:
        return ""
    return coords_to_svg_path(list(polygon.exterior.coords)[:-1], closed=True, precision=precision)


def place_outline(
    polygon: Polygon,
    x: float,
    y: float,
    rotation: float,
    scale: float,
    center: float = 50.0,
) -> Polygon:
    """Apply the sheet transform used by the exporters.

    Equivalent to SVG ``translate(x, y) rotate(r, c*s, c*s) scale(s)``:
    scale about the origin, rotate about the scaled box centre, translate.
    """
    scaled = affinity.scale(polygon, xfact=scale, yfact=scale, origin=(0, 0))
    pivot = (center * scale, center * scale)
    rotated = affinity.rotate(scaled, rotation, origin=pivot)
    return affinity.translate(rotated, x, y)
