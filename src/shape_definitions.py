"""
Silhouette catalog for shape puzzle pieces.

Every piece of a puzzle IS one of these silhouettes (a dolphin-shaped piece,
not a square with a dolphin printed on it). Outlines are SVG path strings
in a 100x100, y-down box; anchors are the points on the perimeter where a
connector tab or slot is attached, with the outward-facing angle in degrees
(0 = right, 90 = down, 180 = left, 270 = up).

The catalog is static reference data loaded once per process.
"""
from dataclasses import dataclass
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class AnchorPoint:
    """A fixed connector position on a shape's outline."""
    id: str
    x: float              # 0..100 normalized units
    y: float              # 0..100 normalized units
    angle: float          # outward-facing angle, degrees
    edge_segment: str     # which part of the outline the anchor sits on


@dataclass(frozen=True)
class BoundingBox:
    width: float
    height: float
    offset_x: float
    offset_y: float


@dataclass(frozen=True)
class BaseShape:
    """Immutable silhouette definition: outline, anchors, layout metrics."""
    id: str
    name: str
    category: str
    outline_path: str
    anchors: Tuple[AnchorPoint, ...]
    bounding_box: BoundingBox
    area: float

    @property
    def anchor_ids(self) -> List[str]:
        return [a.id for a in self.anchors]

    def get_anchor(self, anchor_id: str) -> AnchorPoint:
        for anchor in self.anchors:
            if anchor.id == anchor_id:
                return anchor
        raise KeyError(f"Shape {self.id!r} has no anchor {anchor_id!r}")


def _shape(
    shape_id: str,
    name: str,
    category: str,
    outline: str,
    anchors: List[Tuple[str, float, float, float, str]],
    bbox: Tuple[float, float, float, float],
    area: float,
) -> BaseShape:
    return BaseShape(
        id=shape_id,
        name=name,
        category=category,
        outline_path=outline,
        anchors=tuple(
            AnchorPoint(id=a[0], x=float(a[1]), y=float(a[2]), angle=float(a[3]), edge_segment=a[4])
            for a in anchors
        ),
        bounding_box=BoundingBox(*(float(v) for v in bbox)),
        area=float(area),
    )


_CATALOG = [
    _shape(
        "dolphin", "Dolphin", "animals",
        outline=(
            "M 15 50 Q 10 35, 25 30 Q 35 25, 45 20 Q 55 15, 70 20 "
            "Q 80 25, 85 35 Q 90 45, 88 55 Q 85 65, 75 70 "
            "Q 65 75, 50 72 Q 40 70, 35 65 L 25 75 Q 20 78, 18 72 "
            "L 28 60 Q 20 55, 15 50 Z"
        ),
        anchors=[
            ("nose", 15, 50, 180, "front"),
            ("top", 50, 18, 270, "dorsal"),
            ("tail-top", 88, 45, 0, "tail"),
            ("tail-bottom", 85, 65, 45, "tail"),
            ("belly", 50, 72, 90, "bottom"),
            ("fin", 22, 75, 135, "flipper"),
        ],
        bbox=(78, 60, 10, 15),
        area=2800,
    ),
    _shape(
        "butterfly", "Butterfly", "animals",
        outline=(
            "M 50 15 Q 55 10, 65 12 Q 80 15, 88 28 Q 95 42, 85 55 "
            "Q 75 65, 65 60 L 55 52 L 55 75 Q 58 82, 62 88 "
            "Q 55 90, 50 85 Q 45 90, 38 88 Q 42 82, 45 75 L 45 52 "
            "L 35 60 Q 25 65, 15 55 Q 5 42, 12 28 Q 20 15, 35 12 "
            "Q 45 10, 50 15 Z"
        ),
        anchors=[
            ("top", 50, 12, 270, "head"),
            ("right-wing-top", 88, 30, 0, "right-wing"),
            ("right-wing-bottom", 75, 62, 90, "right-wing"),
            ("bottom", 50, 88, 90, "tail"),
            ("left-wing-bottom", 25, 62, 90, "left-wing"),
            ("left-wing-top", 12, 30, 180, "left-wing"),
        ],
        bbox=(90, 80, 5, 10),
        area=3200,
    ),
    _shape(
        "cat", "Cat", "animals",
        outline=(
            "M 35 8 L 25 25 Q 20 30, 20 40 Q 18 55, 22 70 "
            "Q 25 80, 28 88 L 38 88 Q 40 80, 42 78 Q 50 82, 58 78 "
            "Q 60 80, 62 88 L 72 88 Q 75 80, 78 70 Q 82 55, 80 40 "
            "Q 80 30, 75 25 L 65 8 Q 60 12, 55 14 Q 50 16, 45 14 "
            "Q 40 12, 35 8 Z M 35 40 Q 32 38, 32 42 Q 32 46, 35 44 Z "
            "M 65 40 Q 62 38, 62 42 Q 62 46, 65 44 Z"
        ),
        anchors=[
            ("left-ear", 30, 12, 315, "ear"),
            ("right-ear", 70, 12, 45, "ear"),
            ("left-side", 18, 50, 180, "body"),
            ("right-side", 82, 50, 0, "body"),
            ("left-foot", 32, 88, 90, "feet"),
            ("right-foot", 68, 88, 90, "feet"),
        ],
        bbox=(65, 82, 18, 8),
        area=2900,
    ),
    _shape(
        "turtle", "Turtle", "animals",
        outline=(
            "M 20 55 Q 15 55, 10 52 Q 8 50, 10 48 Q 15 45, 22 48 "
            "Q 25 35, 40 28 Q 55 22, 70 28 Q 85 35, 88 50 "
            "Q 90 55, 85 58 L 82 65 Q 88 68, 90 72 Q 88 75, 82 72 "
            "Q 78 70, 75 68 Q 65 75, 50 78 Q 35 75, 25 68 "
            "Q 22 70, 18 72 Q 12 75, 10 72 Q 12 68, 18 65 L 15 58 "
            "Q 18 55, 20 55 Z"
        ),
        anchors=[
            ("head", 8, 50, 180, "head"),
            ("shell-top", 55, 25, 270, "shell"),
            ("shell-right", 88, 50, 0, "shell"),
            ("right-foot", 88, 72, 90, "feet"),
            ("bottom", 50, 78, 90, "shell"),
            ("left-foot", 12, 72, 135, "feet"),
        ],
        bbox=(85, 55, 8, 22),
        area=2600,
    ),
    _shape(
        "bird", "Bird", "animals",
        outline=(
            "M 10 50 L 5 48 L 15 45 Q 25 35, 40 32 Q 55 30, 65 35 "
            "Q 75 40, 80 50 Q 85 60, 80 70 L 85 75 L 75 72 "
            "Q 65 78, 50 80 Q 35 78, 25 72 Q 18 65, 15 55 L 10 50 Z"
        ),
        anchors=[
            ("beak", 5, 48, 180, "head"),
            ("top", 50, 30, 270, "back"),
            ("tail", 82, 72, 45, "tail"),
            ("belly", 50, 80, 90, "bottom"),
            ("chest", 20, 65, 180, "front"),
        ],
        bbox=(82, 52, 5, 30),
        area=2200,
    ),
    _shape(
        "fish", "Fish", "animals",
        outline=(
            "M 90 50 L 78 40 L 82 50 L 78 60 L 90 50 M 78 50 "
            "Q 70 35, 55 30 Q 40 28, 28 35 Q 18 42, 12 50 "
            "Q 18 58, 28 65 Q 40 72, 55 70 Q 70 65, 78 50 Z M 25 48 "
            "Q 22 45, 22 50 Q 22 55, 25 52 Z"
        ),
        anchors=[
            ("mouth", 12, 50, 180, "head"),
            ("top", 45, 28, 270, "dorsal"),
            ("tail-top", 84, 45, 45, "tail"),
            ("tail-bottom", 84, 55, 315, "tail"),
            ("bottom", 45, 72, 90, "belly"),
        ],
        bbox=(82, 46, 10, 28),
        area=2100,
    ),
    _shape(
        "heart", "Heart", "love",
        outline=(
            "M 50 88 Q 20 65, 12 45 Q 5 25, 25 15 Q 40 10, 50 25 "
            "Q 60 10, 75 15 Q 95 25, 88 45 Q 80 65, 50 88 Z"
        ),
        anchors=[
            ("top-left", 25, 15, 315, "left-lobe"),
            ("top-right", 75, 15, 45, "right-lobe"),
            ("left-side", 12, 45, 180, "left"),
            ("right-side", 88, 45, 0, "right"),
            ("bottom-left", 30, 72, 225, "bottom"),
            ("bottom-right", 70, 72, 315, "bottom"),
        ],
        bbox=(88, 78, 5, 10),
        area=3000,
    ),
    _shape(
        "star", "Star", "celebration",
        outline=(
            "M 50 5 L 61 35 L 95 38 L 70 58 L 78 90 L 50 72 L 22 90 "
            "L 30 58 L 5 38 L 39 35 Z"
        ),
        anchors=[
            ("top", 50, 5, 270, "point-1"),
            ("top-right", 95, 38, 0, "point-2"),
            ("bottom-right", 78, 90, 45, "point-3"),
            ("bottom-left", 22, 90, 135, "point-4"),
            ("top-left", 5, 38, 180, "point-5"),
        ],
        bbox=(92, 87, 4, 5),
        area=2800,
    ),
    _shape(
        "balloon", "Balloon", "celebration",
        outline=(
            "M 50 8 Q 25 8, 18 30 Q 12 50, 20 68 Q 30 82, 50 85 "
            "Q 70 82, 80 68 Q 88 50, 82 30 Q 75 8, 50 8 Z M 50 85 "
            "L 48 92 Q 50 94, 52 92 L 50 85 Z"
        ),
        anchors=[
            ("top", 50, 8, 270, "top"),
            ("right", 85, 45, 0, "right"),
            ("bottom-right", 70, 78, 45, "bottom"),
            ("bottom-left", 30, 78, 135, "bottom"),
            ("left", 15, 45, 180, "left"),
        ],
        bbox=(75, 88, 12, 8),
        area=3100,
    ),
    _shape(
        "gift", "Gift Box", "celebration",
        outline=(
            "M 15 35 L 85 35 L 85 88 L 15 88 Z M 15 35 L 15 22 L 45 22 "
            "L 50 15 L 55 22 L 85 22 L 85 35 Z M 45 35 L 45 88 M 55 35 "
            "L 55 88"
        ),
        anchors=[
            ("top-left", 30, 18, 270, "ribbon"),
            ("top-right", 70, 18, 270, "ribbon"),
            ("left", 15, 60, 180, "left"),
            ("right", 85, 60, 0, "right"),
            ("bottom-left", 30, 88, 90, "bottom"),
            ("bottom-right", 70, 88, 90, "bottom"),
        ],
        bbox=(72, 75, 14, 14),
        area=3400,
    ),
    _shape(
        "tree", "Tree", "nature",
        outline=(
            "M 50 5 Q 25 25, 20 40 Q 15 55, 30 60 Q 22 65, 22 75 "
            "Q 22 85, 40 85 L 40 95 L 60 95 L 60 85 Q 78 85, 78 75 "
            "Q 78 65, 70 60 Q 85 55, 80 40 Q 75 25, 50 5 Z"
        ),
        anchors=[
            ("top", 50, 5, 270, "crown"),
            ("left", 18, 55, 180, "left"),
            ("right", 82, 55, 0, "right"),
            ("left-bottom", 25, 80, 180, "foliage"),
            ("right-bottom", 75, 80, 0, "foliage"),
            ("trunk", 50, 95, 90, "trunk"),
        ],
        bbox=(68, 92, 16, 5),
        area=2700,
    ),
    _shape(
        "flower", "Flower", "nature",
        outline=(
            "M 50 10 Q 60 5, 65 15 Q 70 5, 80 15 Q 90 25, 82 35 "
            "Q 95 40, 88 52 Q 95 65, 82 70 Q 90 80, 78 85 "
            "Q 80 95, 65 90 Q 60 95, 50 90 Q 40 95, 35 90 "
            "Q 20 95, 22 85 Q 10 80, 18 70 Q 5 65, 12 52 Q 5 40, 18 35 "
            "Q 10 25, 20 15 Q 30 5, 35 15 Q 40 5, 50 10 Z M 50 35 "
            "Q 40 35, 40 50 Q 40 65, 50 65 Q 60 65, 60 50 "
            "Q 60 35, 50 35 Z"
        ),
        anchors=[
            ("top", 50, 8, 270, "petal-top"),
            ("top-right", 85, 30, 315, "petal-tr"),
            ("right", 92, 52, 0, "petal-right"),
            ("bottom-right", 80, 82, 45, "petal-br"),
            ("bottom", 50, 92, 90, "petal-bottom"),
            ("bottom-left", 20, 82, 135, "petal-bl"),
            ("left", 8, 52, 180, "petal-left"),
            ("top-left", 15, 30, 225, "petal-tl"),
        ],
        bbox=(90, 90, 5, 5),
        area=3500,
    ),
    _shape(
        "sun", "Sun", "nature",
        outline=(
            "M 50 5 L 55 20 L 50 25 L 45 20 Z "
            "M 80 15 L 75 28 L 68 25 L 72 18 Z "
            "M 95 50 L 80 55 L 75 50 L 80 45 Z "
            "M 80 85 L 72 82 L 68 75 L 75 72 Z "
            "M 50 95 L 45 80 L 50 75 L 55 80 Z "
            "M 20 85 L 28 82 L 32 75 L 25 72 Z "
            "M 5 50 L 20 45 L 25 50 L 20 55 Z "
            "M 20 15 L 25 28 L 32 25 L 28 18 Z M 50 25 Q 70 25, 75 50 "
            "Q 75 75, 50 75 Q 25 75, 25 50 Q 25 25, 50 25 Z"
        ),
        anchors=[
            ("ray-top", 50, 5, 270, "ray"),
            ("ray-tr", 80, 15, 315, "ray"),
            ("ray-right", 95, 50, 0, "ray"),
            ("ray-br", 80, 85, 45, "ray"),
            ("ray-bottom", 50, 95, 90, "ray"),
            ("ray-bl", 20, 85, 135, "ray"),
            ("ray-left", 5, 50, 180, "ray"),
            ("ray-tl", 20, 15, 225, "ray"),
        ],
        bbox=(92, 92, 4, 4),
        area=3200,
    ),
    _shape(
        "leaf", "Leaf", "nature",
        outline=(
            "M 50 8 Q 75 15, 88 35 Q 95 55, 85 72 Q 70 88, 50 92 "
            "Q 30 88, 15 72 Q 5 55, 12 35 Q 25 15, 50 8 Z M 50 20 "
            "L 50 85 M 35 45 L 50 55 M 65 45 L 50 55 M 30 65 L 50 72 "
            "M 70 65 L 50 72"
        ),
        anchors=[
            ("top", 50, 8, 270, "tip"),
            ("right-upper", 88, 35, 0, "right"),
            ("right-lower", 78, 78, 45, "right"),
            ("bottom", 50, 92, 90, "stem"),
            ("left-lower", 22, 78, 135, "left"),
            ("left-upper", 12, 35, 180, "left"),
        ],
        bbox=(88, 86, 6, 6),
        area=2900,
    ),
    _shape(
        "mountain", "Mountain", "nature",
        outline=(
            "M 5 85 L 35 25 L 45 40 L 55 20 L 95 85 Z M 55 20 L 65 35 "
            "L 75 28 L 95 85"
        ),
        anchors=[
            ("left-base", 5, 85, 180, "base"),
            ("left-slope", 25, 48, 315, "left-slope"),
            ("peak", 55, 20, 270, "peak"),
            ("right-slope", 80, 48, 45, "right-slope"),
            ("right-base", 95, 85, 0, "base"),
            ("bottom", 50, 85, 90, "base"),
        ],
        bbox=(92, 67, 4, 18),
        area=2400,
    ),
    _shape(
        "musicNote", "Music Note", "hobbies",
        outline=(
            "M 30 75 Q 15 75, 15 85 Q 15 95, 30 95 Q 45 95, 45 85 "
            "Q 45 78, 40 75 L 40 20 L 75 10 L 75 60 Q 60 60, 60 70 "
            "Q 60 80, 75 80 Q 90 80, 90 70 Q 90 62, 85 58 L 85 5 "
            "L 40 15 L 40 75 Z"
        ),
        anchors=[
            ("top-left", 40, 18, 270, "stem"),
            ("top-right", 85, 5, 270, "flag"),
            ("right", 90, 70, 0, "right-note"),
            ("bottom-right", 75, 80, 90, "right-note"),
            ("bottom-left", 30, 95, 90, "left-note"),
            ("left", 15, 85, 180, "left-note"),
        ],
        bbox=(78, 92, 14, 4),
        area=2300,
    ),
    _shape(
        "soccerBall", "Soccer Ball", "hobbies",
        outline=(
            "M 50 5 Q 80 5, 92 35 Q 100 60, 85 82 Q 65 100, 35 95 "
            "Q 10 88, 5 60 Q 2 35, 20 15 Q 40 2, 50 5 Z M 50 20 "
            "L 65 35 L 55 50 L 35 45 L 38 28 Z M 75 55 "
            "L 85 45 L 90 60 L 80 72 L 68 62 Z M 30 70 "
            "L 22 58 L 32 48 L 45 55 L 40 68 Z M 58 80 "
            "L 50 68 L 62 65 L 72 78 L 60 88 Z"
        ),
        anchors=[
            ("top", 50, 5, 270, "top"),
            ("top-right", 88, 25, 315, "upper-right"),
            ("right", 95, 55, 0, "right"),
            ("bottom-right", 75, 90, 45, "lower-right"),
            ("bottom", 45, 95, 90, "bottom"),
            ("bottom-left", 15, 80, 135, "lower-left"),
            ("left", 5, 50, 180, "left"),
            ("top-left", 20, 18, 225, "upper-left"),
        ],
        bbox=(96, 94, 2, 3),
        area=3600,
    ),
    _shape(
        "camera", "Camera", "hobbies",
        outline=(
            "M 10 30 L 30 30 L 35 20 L 65 20 L 70 30 L 90 30 L 90 75 "
            "L 10 75 Z M 50 35 Q 65 35, 65 52 Q 65 68, 50 68 "
            "Q 35 68, 35 52 Q 35 35, 50 35 Z M 50 42 Q 58 42, 58 52 "
            "Q 58 62, 50 62 Q 42 62, 42 52 Q 42 42, 50 42 Z M 78 38 "
            "L 85 38 L 85 45 L 78 45 Z"
        ),
        anchors=[
            ("top-left", 35, 20, 270, "viewfinder"),
            ("top-right", 65, 20, 270, "viewfinder"),
            ("left", 10, 52, 180, "body"),
            ("right", 90, 52, 0, "body"),
            ("bottom-left", 25, 75, 90, "base"),
            ("bottom-right", 75, 75, 90, "base"),
        ],
        bbox=(82, 57, 9, 19),
        area=3000,
    ),
    _shape(
        "book", "Book", "hobbies",
        outline=(
            "M 15 15 L 85 15 Q 88 15, 88 18 L 88 85 Q 88 88, 85 88 "
            "L 15 88 Q 12 88, 12 85 L 12 18 Q 12 15, 15 15 Z M 50 15 "
            "L 50 88 M 18 25 L 45 25 M 18 35 L 45 35 M 55 25 L 82 25 "
            "M 55 35 L 82 35"
        ),
        anchors=[
            ("top-left", 30, 15, 270, "top"),
            ("top-right", 70, 15, 270, "top"),
            ("left", 12, 52, 180, "spine"),
            ("right", 88, 52, 0, "edge"),
            ("bottom-left", 30, 88, 90, "bottom"),
            ("bottom-right", 70, 88, 90, "bottom"),
        ],
        bbox=(78, 75, 11, 14),
        area=3200,
    ),
    _shape(
        "palette", "Palette", "hobbies",
        outline=(
            "M 50 15 Q 80 15, 90 40 Q 95 60, 85 75 Q 70 90, 45 90 "
            "Q 20 90, 12 70 Q 5 50, 15 32 Q 28 15, 50 15 Z M 25 45 "
            "Q 20 45, 20 50 Q 20 55, 25 55 Q 30 55, 30 50 "
            "Q 30 45, 25 45 Z M 40 30 Q 35 30, 35 35 Q 35 40, 40 40 "
            "Q 45 40, 45 35 Q 45 30, 40 30 Z M 60 28 Q 55 28, 55 33 "
            "Q 55 38, 60 38 Q 65 38, 65 33 Q 65 28, 60 28 Z M 75 45 "
            "Q 70 45, 70 50 Q 70 55, 75 55 Q 80 55, 80 50 "
            "Q 80 45, 75 45 Z M 70 70 Q 60 70, 60 78 Q 60 86, 70 86 "
            "Q 80 86, 80 78 Q 80 70, 70 70 Z"
        ),
        anchors=[
            ("top", 50, 15, 270, "top"),
            ("right", 92, 50, 0, "right"),
            ("bottom-right", 70, 88, 90, "bottom"),
            ("bottom-left", 30, 88, 90, "bottom"),
            ("left", 8, 55, 180, "left"),
            ("top-left", 22, 25, 225, "upper-left"),
        ],
        bbox=(88, 77, 6, 13),
        area=3400,
    ),
    _shape(
        "airplane", "Airplane", "travel",
        outline=(
            "M 8 50 L 25 48 L 35 25 L 45 25 L 42 45 L 75 42 L 85 22 "
            "L 92 25 L 85 48 L 95 50 L 85 52 L 92 75 L 85 78 L 75 58 "
            "L 42 55 L 45 75 L 35 75 L 25 52 L 8 50 Z"
        ),
        anchors=[
            ("nose", 95, 50, 0, "nose"),
            ("top-wing", 40, 25, 270, "wing"),
            ("top-tail", 88, 25, 315, "tail"),
            ("bottom-tail", 88, 75, 45, "tail"),
            ("bottom-wing", 40, 75, 90, "wing"),
            ("back", 8, 50, 180, "back"),
        ],
        bbox=(89, 55, 6, 22),
        area=2500,
    ),
    _shape(
        "car", "Car", "travel",
        outline=(
            "M 10 55 L 10 65 Q 10 70, 15 70 L 22 70 Q 22 78, 30 78 "
            "Q 38 78, 38 70 L 62 70 Q 62 78, 70 78 Q 78 78, 78 70 "
            "L 85 70 Q 90 70, 90 65 L 90 55 Q 90 50, 85 48 L 75 45 "
            "L 68 30 Q 65 25, 58 25 L 35 25 Q 28 25, 25 32 L 20 45 "
            "L 15 48 Q 10 50, 10 55 Z M 25 50 L 35 32 L 48 32 L 48 50 Z "
            "M 52 50 L 52 32 L 65 32 L 72 50 Z"
        ),
        anchors=[
            ("hood", 20, 35, 315, "front"),
            ("roof", 50, 25, 270, "roof"),
            ("trunk", 75, 38, 45, "back"),
            ("right", 90, 58, 0, "side"),
            ("right-wheel", 70, 78, 90, "wheel"),
            ("left-wheel", 30, 78, 90, "wheel"),
            ("left", 10, 58, 180, "side"),
        ],
        bbox=(82, 55, 9, 24),
        area=2800,
    ),
    _shape(
        "compass", "Compass", "travel",
        outline=(
            "M 50 5 Q 85 5, 92 40 Q 98 75, 65 92 Q 35 98, 12 70 "
            "Q -2 40, 15 18 Q 30 2, 50 5 Z M 50 20 L 55 45 L 80 50 "
            "L 55 55 L 50 80 L 45 55 L 20 50 L 45 45 Z M 50 10 L 52 18 "
            "L 50 15 L 48 18 Z"
        ),
        anchors=[
            ("north", 50, 5, 270, "north"),
            ("east", 95, 50, 0, "east"),
            ("south", 50, 95, 90, "south"),
            ("west", 5, 50, 180, "west"),
            ("ne", 82, 20, 315, "ne"),
            ("se", 82, 80, 45, "se"),
            ("sw", 18, 80, 135, "sw"),
            ("nw", 18, 20, 225, "nw"),
        ],
        bbox=(94, 94, 3, 3),
        area=3500,
    ),
    _shape(
        "anchor", "Anchor", "travel",
        outline=(
            "M 50 8 Q 42 8, 42 16 Q 42 24, 50 24 Q 58 24, 58 16 "
            "Q 58 8, 50 8 Z M 47 24 L 47 38 L 25 38 L 25 45 L 47 45 "
            "L 47 75 Q 30 72, 18 60 L 10 68 L 22 78 Q 35 88, 50 90 "
            "Q 65 88, 78 78 L 90 68 L 82 60 Q 70 72, 53 75 L 53 45 "
            "L 75 45 L 75 38 L 53 38 L 53 24 Z"
        ),
        anchors=[
            ("top", 50, 8, 270, "ring"),
            ("left-arm", 25, 42, 180, "crossbar"),
            ("right-arm", 75, 42, 0, "crossbar"),
            ("left-fluke", 10, 68, 180, "fluke"),
            ("right-fluke", 90, 68, 0, "fluke"),
            ("bottom", 50, 90, 90, "crown"),
        ],
        bbox=(82, 84, 9, 7),
        area=2200,
    ),
    _shape(
        "rose", "Rose", "flora",
        outline=(
            "M 50 10 Q 60 15, 65 25 Q 75 20, 80 30 Q 90 35, 85 48 "
            "Q 95 55, 85 65 Q 80 75, 65 75 L 55 85 L 55 95 L 45 95 "
            "L 45 85 L 35 75 Q 20 75, 15 65 Q 5 55, 15 48 "
            "Q 10 35, 20 30 Q 25 20, 35 25 Q 40 15, 50 10 Z"
        ),
        anchors=[
            ("top", 50, 10, 270, "petal"),
            ("right", 90, 50, 0, "petal"),
            ("bottom-right", 65, 75, 45, "petal"),
            ("stem", 50, 95, 90, "stem"),
            ("bottom-left", 35, 75, 135, "petal"),
            ("left", 10, 50, 180, "petal"),
        ],
        bbox=(85, 87, 8, 8),
        area=3100,
    ),
    _shape(
        "lotus", "Lotus", "flora",
        outline=(
            "M 50 15 Q 55 8, 60 15 Q 65 10, 68 20 Q 80 15, 82 30 "
            "Q 95 35, 88 50 Q 92 60, 80 65 Q 75 75, 60 78 L 50 85 "
            "L 40 78 Q 25 75, 20 65 Q 8 60, 12 50 Q 5 35, 18 30 "
            "Q 20 15, 32 20 Q 35 10, 40 15 Q 45 8, 50 15 Z"
        ),
        anchors=[
            ("top", 50, 10, 270, "center"),
            ("top-right", 75, 22, 315, "petal"),
            ("right", 90, 50, 0, "petal"),
            ("bottom", 50, 85, 90, "base"),
            ("left", 10, 50, 180, "petal"),
            ("top-left", 25, 22, 225, "petal"),
        ],
        bbox=(88, 78, 6, 8),
        area=2800,
    ),
    _shape(
        "sunflower", "Sunflower", "flora",
        outline=(
            "M 50 5 L 55 18 L 62 8 L 65 22 L 75 15 L 75 28 "
            "L 88 25 L 82 38 L 95 42 L 85 52 "
            "L 95 62 L 82 65 L 88 78 L 75 75 "
            "L 75 88 L 62 82 L 65 95 L 55 85 "
            "L 50 95 L 45 85 L 35 95 L 38 82 "
            "L 25 88 L 25 75 L 12 78 L 18 65 "
            "L 5 62 L 15 52 L 5 42 L 18 38 "
            "L 12 25 L 25 28 L 25 15 L 35 22 L 38 8 L 45 18 L 50 5 Z "
            "M 50 35 Q 65 35, 65 50 Q 65 65, 50 65 Q 35 65, 35 50 "
            "Q 35 35, 50 35 Z"
        ),
        anchors=[
            ("top", 50, 5, 270, "petal"),
            ("top-right", 88, 25, 315, "petal"),
            ("right", 95, 42, 0, "petal"),
            ("bottom-right", 88, 78, 45, "petal"),
            ("bottom", 50, 95, 90, "petal"),
            ("bottom-left", 12, 78, 135, "petal"),
            ("left", 5, 42, 180, "petal"),
            ("top-left", 12, 25, 225, "petal"),
        ],
        bbox=(92, 92, 4, 4),
        area=3800,
    ),
    _shape(
        "fox", "Fox", "fauna",
        outline=(
            "M 20 20 L 30 5 L 40 25 L 50 15 L 60 25 L 70 5 L 80 20 "
            "Q 90 30, 88 45 Q 95 50, 95 55 Q 90 58, 85 55 "
            "Q 85 70, 75 80 L 65 90 L 50 85 L 35 90 L 25 80 "
            "Q 15 70, 15 55 Q 10 58, 5 55 Q 5 50, 12 45 Q 10 30, 20 20 "
            "Z M 35 45 Q 32 42, 32 48 Q 35 52, 38 48 Z M 65 45 "
            "Q 62 42, 62 48 Q 65 52, 68 48 Z"
        ),
        anchors=[
            ("left-ear", 30, 8, 315, "ear"),
            ("right-ear", 70, 8, 45, "ear"),
            ("right-cheek", 92, 52, 0, "face"),
            ("right-body", 75, 80, 45, "body"),
            ("chin", 50, 88, 90, "chin"),
            ("left-body", 25, 80, 135, "body"),
            ("left-cheek", 8, 52, 180, "face"),
        ],
        bbox=(92, 87, 4, 4),
        area=3200,
    ),
    _shape(
        "dog", "Dog", "fauna",
        outline=(
            "M 25 25 Q 15 20, 12 30 Q 8 40, 15 45 Q 12 55, 18 65 "
            "Q 15 75, 22 85 L 32 85 Q 35 78, 40 78 Q 50 80, 60 78 "
            "Q 65 78, 68 85 L 78 85 Q 85 75, 82 65 Q 88 55, 85 45 "
            "Q 92 40, 88 30 Q 85 20, 75 25 Q 70 15, 60 18 "
            "Q 50 12, 40 18 Q 30 15, 25 25 Z M 35 42 Q 32 40, 32 45 "
            "Q 35 48, 38 45 Z M 65 42 Q 62 40, 62 45 Q 65 48, 68 45 Z "
            "M 50 55 Q 45 52, 45 58 Q 50 62, 55 58 Q 55 52, 50 55 Z"
        ),
        anchors=[
            ("left-ear", 12, 32, 225, "ear"),
            ("top", 50, 14, 270, "head"),
            ("right-ear", 88, 32, 315, "ear"),
            ("right", 85, 60, 0, "body"),
            ("right-leg", 72, 85, 90, "leg"),
            ("left-leg", 28, 85, 90, "leg"),
            ("left", 15, 60, 180, "body"),
        ],
        bbox=(82, 75, 9, 10),
        area=3000,
    ),
    _shape(
        "owl", "Owl", "fauna",
        outline=(
            "M 20 20 L 15 10 L 25 18 L 35 8 L 40 22 L 50 15 L 60 22 "
            "L 65 8 L 75 18 L 85 10 L 80 20 Q 92 30, 90 50 "
            "Q 88 70, 75 82 L 65 90 L 50 88 L 35 90 L 25 82 "
            "Q 12 70, 10 50 Q 8 30, 20 20 Z M 30 40 Q 25 40, 25 50 "
            "Q 25 58, 35 58 Q 42 58, 42 50 Q 42 40, 30 40 Z M 70 40 "
            "Q 58 40, 58 50 Q 58 58, 65 58 Q 75 58, 75 50 "
            "Q 75 40, 70 40 Z"
        ),
        anchors=[
            ("left-ear", 15, 12, 270, "ear"),
            ("top", 50, 15, 270, "head"),
            ("right-ear", 85, 12, 270, "ear"),
            ("right", 90, 50, 0, "wing"),
            ("bottom-right", 65, 90, 90, "body"),
            ("bottom-left", 35, 90, 90, "body"),
            ("left", 10, 50, 180, "wing"),
        ],
        bbox=(84, 82, 8, 8),
        area=3400,
    ),
    _shape(
        "whale", "Whale", "fauna",
        outline=(
            "M 10 50 Q 5 45, 8 40 Q 12 35, 20 38 Q 30 30, 50 28 "
            "Q 70 28, 82 40 Q 88 48, 88 55 L 95 48 L 98 55 L 92 58 "
            "L 95 65 L 88 60 Q 85 70, 70 75 Q 50 80, 30 75 "
            "Q 18 70, 12 60 Q 8 55, 10 50 Z M 25 48 Q 22 45, 22 50 "
            "Q 25 52, 28 50 Z"
        ),
        anchors=[
            ("head", 8, 42, 180, "head"),
            ("top", 50, 28, 270, "back"),
            ("tail-top", 96, 52, 0, "tail"),
            ("tail-bottom", 95, 64, 45, "tail"),
            ("belly", 50, 78, 90, "belly"),
            ("chin", 15, 65, 135, "chin"),
        ],
        bbox=(92, 52, 4, 26),
        area=2600,
    ),
    _shape(
        "penguin", "Penguin", "fauna",
        outline=(
            "M 50 8 Q 62 8, 68 20 Q 75 32, 72 45 L 82 55 Q 88 60, 85 68 "
            "L 72 62 Q 70 78, 62 88 L 55 92 L 50 88 L 45 92 L 38 88 "
            "Q 30 78, 28 62 L 15 68 Q 12 60, 18 55 L 28 45 "
            "Q 25 32, 32 20 Q 38 8, 50 8 Z M 42 30 Q 38 28, 38 34 "
            "Q 42 38, 46 34 Z M 58 30 Q 54 28, 54 34 Q 58 38, 62 34 Z"
        ),
        anchors=[
            ("head", 50, 8, 270, "head"),
            ("right-wing", 85, 62, 0, "wing"),
            ("right-foot", 58, 92, 90, "foot"),
            ("left-foot", 42, 92, 90, "foot"),
            ("left-wing", 15, 62, 180, "wing"),
            ("left-body", 28, 45, 180, "body"),
            ("right-body", 72, 45, 0, "body"),
        ],
        bbox=(75, 86, 12, 6),
        area=2400,
    ),
    _shape(
        "deer", "Deer", "fauna",
        outline=(
            "M 30 5 L 25 15 L 20 8 L 25 22 L 15 18 L 28 30 "
            "Q 20 35, 18 45 Q 15 60, 22 75 L 25 90 L 35 90 L 38 78 "
            "Q 45 82, 55 82 Q 62 82, 65 78 L 68 90 L 78 90 L 80 75 "
            "Q 88 60, 85 45 Q 82 35, 72 30 L 85 18 L 75 22 L 80 8 "
            "L 75 15 L 70 5 L 60 18 Q 50 12, 40 18 L 30 5 Z M 35 42 "
            "Q 32 40, 32 45 Z M 68 42 Q 65 40, 65 45 Z"
        ),
        anchors=[
            ("left-antler", 18, 12, 270, "antler"),
            ("right-antler", 82, 12, 270, "antler"),
            ("top", 50, 14, 270, "head"),
            ("right", 88, 55, 0, "body"),
            ("right-leg", 72, 90, 90, "leg"),
            ("left-leg", 30, 90, 90, "leg"),
            ("left", 15, 55, 180, "body"),
        ],
        bbox=(75, 88, 12, 4),
        area=2800,
    ),
    _shape(
        "rabbit", "Rabbit", "fauna",
        outline=(
            "M 35 5 L 30 35 Q 25 38, 25 42 Q 25 50, 35 48 L 40 40 "
            "L 50 35 L 60 40 L 65 48 Q 75 50, 75 42 Q 75 38, 70 35 "
            "L 65 5 Q 55 15, 50 15 Q 45 15, 35 5 Z M 50 48 "
            "Q 40 55, 35 65 Q 30 80, 38 90 L 48 90 Q 50 85, 52 90 "
            "L 62 90 Q 70 80, 65 65 Q 60 55, 50 48 Z M 40 55 "
            "Q 38 53, 38 58 Z M 62 55 Q 60 53, 60 58 Z"
        ),
        anchors=[
            ("left-ear", 32, 8, 270, "ear"),
            ("right-ear", 68, 8, 270, "ear"),
            ("right-cheek", 75, 45, 0, "face"),
            ("right-body", 68, 75, 0, "body"),
            ("bottom", 50, 90, 90, "feet"),
            ("left-body", 32, 75, 180, "body"),
            ("left-cheek", 25, 45, 180, "face"),
        ],
        bbox=(52, 87, 24, 4),
        area=2200,
    ),
    _shape(
        "bear", "Bear", "fauna",
        outline=(
            "M 25 25 Q 18 20, 15 28 Q 12 35, 18 40 Q 10 50, 12 65 "
            "Q 15 80, 28 88 L 38 90 Q 42 85, 50 85 Q 58 85, 62 90 "
            "L 72 88 Q 85 80, 88 65 Q 90 50, 82 40 Q 88 35, 85 28 "
            "Q 82 20, 75 25 Q 70 15, 60 18 Q 50 12, 40 18 "
            "Q 30 15, 25 25 Z M 38 40 Q 35 38, 35 43 Q 38 46, 42 43 Z "
            "M 62 40 Q 58 38, 58 43 Q 62 46, 65 43 Z M 50 52 "
            "Q 45 50, 45 55 Q 50 60, 55 55 Q 55 50, 50 52 Z"
        ),
        anchors=[
            ("left-ear", 15, 28, 225, "ear"),
            ("top", 50, 14, 270, "head"),
            ("right-ear", 85, 28, 315, "ear"),
            ("right", 90, 58, 0, "body"),
            ("right-leg", 68, 90, 90, "leg"),
            ("left-leg", 32, 90, 90, "leg"),
            ("left", 10, 58, 180, "body"),
        ],
        bbox=(80, 80, 10, 10),
        area=3500,
    ),
    _shape(
        "elephant", "Elephant", "fauna",
        outline=(
            "M 15 30 Q 8 35, 5 50 L 5 75 L 15 75 L 15 60 Q 18 55, 25 55 "
            "Q 22 70, 25 85 L 35 85 L 38 70 Q 45 75, 55 75 "
            "Q 62 75, 68 70 L 72 85 L 82 85 Q 85 70, 82 55 "
            "Q 90 55, 92 60 L 92 75 L 98 75 L 98 50 Q 95 35, 88 30 "
            "Q 80 22, 65 22 Q 50 22, 40 28 Q 30 25, 20 28 "
            "Q 12 28, 15 30 Z M 78 35 Q 75 33, 75 38 Z"
        ),
        anchors=[
            ("trunk-top", 5, 50, 180, "trunk"),
            ("top", 50, 22, 270, "back"),
            ("right-ear", 95, 40, 0, "ear"),
            ("right-leg", 78, 85, 90, "leg"),
            ("belly", 55, 78, 90, "belly"),
            ("left-leg", 30, 85, 90, "leg"),
            ("trunk-bottom", 5, 75, 180, "trunk"),
        ],
        bbox=(95, 65, 3, 20),
        area=3200,
    ),
    _shape(
        "moon", "Moon", "celestial",
        outline=(
            "M 70 10 Q 40 15, 25 40 Q 10 65, 25 85 Q 45 105, 75 90 "
            "Q 55 80, 50 60 Q 48 40, 60 25 Q 72 12, 70 10 Z"
        ),
        anchors=[
            ("top", 55, 12, 270, "outer"),
            ("inner-top", 58, 30, 315, "inner"),
            ("inner-middle", 50, 55, 0, "inner"),
            ("inner-bottom", 60, 78, 45, "inner"),
            ("bottom", 45, 92, 90, "outer"),
            ("left", 18, 60, 180, "outer"),
        ],
        bbox=(65, 85, 10, 8),
        area=2200,
    ),
    _shape(
        "cloud", "Cloud", "celestial",
        outline=(
            "M 20 60 Q 8 60, 8 48 Q 8 35, 22 35 Q 22 22, 38 22 "
            "Q 48 15, 62 22 Q 75 18, 82 30 Q 95 32, 95 48 "
            "Q 95 62, 80 62 L 20 62 Z"
        ),
        anchors=[
            ("left", 8, 50, 180, "left"),
            ("top-left", 28, 22, 270, "puff"),
            ("top", 55, 18, 270, "puff"),
            ("top-right", 82, 28, 315, "puff"),
            ("right", 95, 52, 0, "right"),
            ("bottom", 50, 62, 90, "base"),
        ],
        bbox=(90, 47, 5, 15),
        area=2400,
    ),
    _shape(
        "wave", "Wave", "celestial",
        outline=(
            "M 5 55 Q 15 40, 30 45 Q 45 35, 55 50 Q 65 38, 80 48 "
            "Q 92 42, 95 55 L 95 75 Q 80 70, 65 75 Q 50 80, 35 72 "
            "Q 20 78, 5 70 Z"
        ),
        anchors=[
            ("left", 5, 55, 180, "left"),
            ("crest-1", 25, 42, 270, "crest"),
            ("crest-2", 62, 45, 270, "crest"),
            ("crest-3", 82, 45, 270, "crest"),
            ("right", 95, 60, 0, "right"),
            ("bottom", 50, 78, 90, "base"),
        ],
        bbox=(92, 42, 4, 35),
        area=1800,
    ),
    _shape(
        "infinity", "Infinity", "symbols",
        outline=(
            "M 50 40 Q 35 25, 20 35 Q 5 45, 5 55 Q 5 70, 20 75 "
            "Q 35 80, 50 60 Q 65 80, 80 75 Q 95 70, 95 55 "
            "Q 95 45, 80 35 Q 65 25, 50 40 Z M 50 48 Q 40 55, 35 50 "
            "Q 28 45, 28 55 Q 28 65, 40 62 Q 50 55, 50 48 Z M 50 48 "
            "Q 60 55, 65 50 Q 72 45, 72 55 Q 72 65, 60 62 "
            "Q 50 55, 50 48 Z"
        ),
        anchors=[
            ("left-top", 15, 39, 225, "left-loop"),
            ("center", 50, 35, 270, "center"),
            ("right-top", 85, 39, 315, "right-loop"),
            ("right-bottom", 85, 72, 45, "right-loop"),
            ("left-bottom", 15, 72, 135, "left-loop"),
        ],
        bbox=(92, 52, 4, 24),
        area=2000,
    ),
    _shape(
        "diamond", "Diamond", "symbols",
        outline=(
            "M 50 5 L 95 50 L 50 95 L 5 50 Z M 50 20 L 80 50 L 50 80 "
            "L 20 50 Z"
        ),
        anchors=[
            ("top", 50, 5, 270, "top"),
            ("right", 95, 50, 0, "right"),
            ("bottom", 50, 95, 90, "bottom"),
            ("left", 5, 50, 180, "left"),
        ],
        bbox=(92, 92, 4, 4),
        area=4000,
    ),
    _shape(
        "key", "Key", "symbols",
        outline=(
            "M 25 15 Q 10 15, 10 30 Q 10 45, 25 45 Q 35 45, 38 38 "
            "L 70 38 L 70 48 L 78 48 L 78 38 L 85 38 L 85 48 L 95 48 "
            "L 95 30 L 85 30 L 85 32 L 78 32 L 78 30 L 70 30 L 38 30 "
            "Q 35 23, 28 20 Q 25 15, 25 15 Z M 25 28 Q 20 28, 20 33 "
            "Q 20 38, 25 38 Q 30 38, 30 33 Q 30 28, 25 28 Z"
        ),
        anchors=[
            ("bow-top", 18, 18, 270, "bow"),
            ("bow-bottom", 18, 42, 90, "bow"),
            ("shaft-top", 55, 30, 270, "shaft"),
            ("bit", 95, 40, 0, "bit"),
            ("shaft-bottom", 55, 38, 90, "shaft"),
        ],
        bbox=(87, 35, 8, 14),
        area=1600,
    ),
    _shape(
        "coffee", "Coffee", "adventure",
        outline=(
            "M 20 25 L 70 25 Q 75 25, 78 30 L 85 30 Q 95 32, 95 45 "
            "Q 95 58, 85 60 L 78 60 Q 75 85, 55 90 L 35 90 "
            "Q 15 85, 18 60 L 18 30 Q 18 25, 20 25 Z M 78 38 L 85 38 "
            "Q 88 40, 88 48 Q 88 55, 82 55 L 78 55 Z"
        ),
        anchors=[
            ("rim-left", 20, 25, 270, "rim"),
            ("rim-right", 70, 25, 270, "rim"),
            ("handle", 95, 48, 0, "handle"),
            ("bottom-right", 65, 90, 90, "base"),
            ("bottom-left", 35, 90, 90, "base"),
            ("left", 15, 55, 180, "body"),
        ],
        bbox=(82, 68, 14, 23),
        area=2600,
    ),
    _shape(
        "hotAirBalloon", "Hot Air Balloon", "adventure",
        outline=(
            "M 50 5 Q 20 10, 15 35 Q 10 55, 25 70 Q 35 80, 42 78 "
            "L 40 85 L 35 85 L 35 95 L 65 95 L 65 85 L 60 85 L 58 78 "
            "Q 65 80, 75 70 Q 90 55, 85 35 Q 80 10, 50 5 Z M 38 88 "
            "L 38 92 L 62 92 L 62 88 Z"
        ),
        anchors=[
            ("top", 50, 5, 270, "envelope"),
            ("right", 88, 40, 0, "envelope"),
            ("right-bottom", 72, 72, 45, "envelope"),
            ("basket", 50, 95, 90, "basket"),
            ("left-bottom", 28, 72, 135, "envelope"),
            ("left", 12, 40, 180, "envelope"),
        ],
        bbox=(80, 92, 10, 4),
        area=3200,
    ),
    _shape(
        "house", "House", "adventure",
        outline=(
            "M 50 10 L 90 45 L 85 45 L 85 90 L 15 90 L 15 45 L 10 45 Z "
            "M 35 90 L 35 65 L 50 65 L 50 90 Z M 60 50 L 75 50 L 75 65 "
            "L 60 65 Z"
        ),
        anchors=[
            ("roof-peak", 50, 10, 270, "roof"),
            ("roof-right", 88, 45, 0, "roof"),
            ("right", 85, 70, 0, "wall"),
            ("bottom-right", 70, 90, 90, "base"),
            ("bottom-left", 30, 90, 90, "base"),
            ("left", 15, 70, 180, "wall"),
            ("roof-left", 12, 45, 180, "roof"),
        ],
        bbox=(82, 82, 9, 9),
        area=3400,
    ),
    _shape(
        "lighthouse", "Lighthouse", "adventure",
        outline=(
            "M 35 25 L 40 25 L 40 18 L 42 18 L 42 12 Q 50 8, 58 12 "
            "L 58 18 L 60 18 L 60 25 L 65 25 L 68 35 L 65 35 L 62 90 "
            "L 38 90 L 35 35 L 32 35 Z M 45 30 L 55 30 L 55 38 L 45 38 "
            "Z M 44 50 L 56 50 L 55 60 L 45 60 Z M 43 72 L 57 72 "
            "L 56 82 L 44 82 Z"
        ),
        anchors=[
            ("light", 50, 8, 270, "light"),
            ("right-top", 68, 35, 0, "top"),
            ("right-body", 62, 65, 0, "body"),
            ("bottom-right", 58, 90, 90, "base"),
            ("bottom-left", 42, 90, 90, "base"),
            ("left-body", 38, 65, 180, "body"),
            ("left-top", 32, 35, 180, "top"),
        ],
        bbox=(38, 84, 31, 6),
        area=2000,
    ),
    _shape(
        "bicycle", "Bicycle", "adventure",
        outline=(
            "M 25 70 Q 10 70, 10 55 Q 10 40, 25 40 Q 40 40, 40 55 "
            "Q 40 70, 25 70 Z M 75 70 Q 60 70, 60 55 Q 60 40, 75 40 "
            "Q 90 40, 90 55 Q 90 70, 75 70 Z M 25 55 L 45 35 L 55 35 "
            "L 50 55 L 75 55 M 45 35 L 42 25 L 52 25 M 55 35 L 75 55"
        ),
        anchors=[
            ("handlebar", 47, 25, 270, "handlebar"),
            ("front-wheel", 25, 70, 90, "wheel"),
            ("rear-wheel", 75, 70, 90, "wheel"),
            ("left", 10, 55, 180, "wheel"),
            ("right", 90, 55, 0, "wheel"),
            ("seat", 55, 35, 0, "frame"),
        ],
        bbox=(82, 47, 9, 24),
        area=1800,
    ),
    _shape(
        "feather", "Feather", "adventure",
        outline=(
            "M 85 15 Q 80 18, 75 25 Q 60 35, 50 50 Q 40 65, 30 75 "
            "Q 20 85, 15 90 L 12 88 Q 18 82, 25 72 Q 22 70, 20 65 "
            "Q 25 68, 30 68 Q 38 60, 45 50 Q 42 48, 38 45 "
            "Q 45 48, 50 48 Q 58 40, 65 32 Q 62 30, 58 28 "
            "Q 65 30, 72 28 Q 78 22, 85 15 Z"
        ),
        anchors=[
            ("tip", 85, 15, 315, "tip"),
            ("upper-right", 70, 30, 0, "vane"),
            ("middle-right", 48, 48, 45, "vane"),
            ("lower-right", 28, 70, 45, "vane"),
            ("quill", 12, 88, 135, "quill"),
        ],
        bbox=(75, 77, 10, 13),
        area=1400,
    ),
    _shape(
        "ring", "Ring", "adventure",
        outline=(
            "M 50 10 Q 80 10, 90 40 Q 95 60, 85 78 Q 70 95, 50 95 "
            "Q 30 95, 15 78 Q 5 60, 10 40 Q 20 10, 50 10 Z M 50 30 "
            "Q 35 30, 28 48 Q 22 65, 32 78 Q 42 88, 50 88 "
            "Q 58 88, 68 78 Q 78 65, 72 48 Q 65 30, 50 30 Z M 45 12 "
            "L 40 5 L 50 8 L 60 5 L 55 12 Z"
        ),
        anchors=[
            ("gem", 50, 5, 270, "gem"),
            ("right", 92, 50, 0, "band"),
            ("bottom", 50, 95, 90, "band"),
            ("left", 8, 50, 180, "band"),
        ],
        bbox=(88, 92, 6, 4),
        area=2400,
    ),
    _shape(
        "cherry-blossom", "Cherry Blossom", "flora",
        outline=(
            "M 50 15 Q 60 10, 68 18 Q 75 25, 70 35 Q 78 32, 85 38 "
            "Q 92 45, 88 55 Q 84 65, 75 68 Q 80 75, 78 85 "
            "Q 72 92, 62 88 Q 55 85, 50 78 Q 45 85, 38 88 "
            "Q 28 92, 22 85 Q 20 75, 25 68 Q 16 65, 12 55 Q 8 45, 15 38 "
            "Q 22 32, 30 35 Q 25 25, 32 18 Q 40 10, 50 15 Z M 50 35 "
            "Q 55 40, 55 50 Q 55 60, 50 65 Q 45 60, 45 50 "
            "Q 45 40, 50 35 Z"
        ),
        anchors=[
            ("top", 50, 12, 270, "petal"),
            ("top-right", 72, 25, 315, "petal"),
            ("right", 90, 50, 0, "petal"),
            ("bottom-right", 72, 85, 45, "petal"),
            ("bottom-left", 28, 85, 135, "petal"),
            ("left", 10, 50, 180, "petal"),
            ("top-left", 28, 25, 225, "petal"),
        ],
        bbox=(84, 82, 8, 9),
        area=2600,
    ),
    _shape(
        "cactus", "Cactus", "flora",
        outline=(
            "M 42 90 L 42 55 Q 42 50, 35 48 L 20 48 Q 15 48, 15 42 "
            "Q 15 35, 20 35 L 35 35 Q 42 35, 42 28 L 42 15 "
            "Q 42 10, 50 10 Q 58 10, 58 15 L 58 28 Q 58 35, 65 35 "
            "L 80 35 Q 85 35, 85 42 Q 85 50, 80 50 L 65 50 "
            "Q 58 50, 58 55 L 58 90 Q 58 95, 50 95 Q 42 95, 42 90 Z"
        ),
        anchors=[
            ("top", 50, 10, 270, "top"),
            ("left-arm", 15, 42, 180, "left"),
            ("right-arm", 85, 42, 0, "right"),
            ("bottom", 50, 95, 90, "base"),
        ],
        bbox=(70, 85, 15, 10),
        area=1800,
    ),
    _shape(
        "mushroom", "Mushroom", "flora",
        outline=(
            "M 50 10 Q 75 10, 88 25 Q 95 38, 90 52 Q 82 62, 65 65 "
            "L 60 65 L 60 88 Q 60 95, 50 95 Q 40 95, 40 88 L 40 65 "
            "L 35 65 Q 18 62, 10 52 Q 5 38, 12 25 Q 25 10, 50 10 Z"
        ),
        anchors=[
            ("top", 50, 10, 270, "cap"),
            ("right", 92, 40, 0, "cap"),
            ("bottom", 50, 95, 90, "stem"),
            ("left", 8, 40, 180, "cap"),
        ],
        bbox=(87, 85, 7, 10),
        area=2200,
    ),
    _shape(
        "rainbow", "Rainbow", "celestial",
        outline=(
            "M 5 80 Q 5 30, 50 20 Q 95 30, 95 80 L 85 80 Q 85 42, 50 35 "
            "Q 15 42, 15 80 Z"
        ),
        anchors=[
            ("top", 50, 20, 270, "arc"),
            ("right-outer", 95, 60, 0, "arc"),
            ("right-base", 90, 80, 90, "base"),
            ("left-base", 10, 80, 90, "base"),
            ("left-outer", 5, 60, 180, "arc"),
        ],
        bbox=(90, 60, 5, 20),
        area=2000,
    ),
    _shape(
        "snowflake", "Snowflake", "celestial",
        outline=(
            "M 50 5 L 53 25 L 65 15 L 60 30 L 75 25 L 65 38 L 85 35 "
            "L 70 45 L 90 50 L 70 55 L 85 65 L 65 62 L 75 75 L 60 70 "
            "L 65 85 L 53 75 L 50 95 L 47 75 L 35 85 L 40 70 L 25 75 "
            "L 35 62 L 15 65 L 30 55 L 10 50 L 30 45 L 15 35 L 35 38 "
            "L 25 25 L 40 30 L 35 15 L 47 25 L 50 5 Z"
        ),
        anchors=[
            ("top", 50, 5, 270, "arm"),
            ("top-right", 85, 35, 315, "arm"),
            ("right", 90, 50, 0, "arm"),
            ("bottom-right", 85, 65, 45, "arm"),
            ("bottom", 50, 95, 90, "arm"),
            ("bottom-left", 15, 65, 135, "arm"),
            ("left", 10, 50, 180, "arm"),
            ("top-left", 15, 35, 225, "arm"),
        ],
        bbox=(80, 90, 10, 5),
        area=1500,
    ),
    _shape(
        "crown", "Crown", "symbols",
        outline=(
            "M 10 75 L 10 40 L 25 55 L 40 30 L 50 50 L 60 30 L 75 55 "
            "L 90 40 L 90 75 Q 90 85, 50 85 Q 10 85, 10 75 Z"
        ),
        anchors=[
            ("left-peak", 10, 40, 225, "peak"),
            ("center-left-peak", 40, 30, 270, "peak"),
            ("center-peak", 50, 50, 270, "peak"),
            ("center-right-peak", 60, 30, 270, "peak"),
            ("right-peak", 90, 40, 315, "peak"),
            ("bottom", 50, 85, 90, "base"),
        ],
        bbox=(80, 55, 10, 30),
        area=2200,
    ),
    _shape(
        "clover", "Four-Leaf Clover", "symbols",
        outline=(
            "M 50 48 Q 55 35, 65 28 Q 80 20, 85 35 Q 88 50, 75 55 "
            "Q 62 58, 52 52 Q 58 62, 55 75 Q 50 88, 35 85 "
            "Q 20 80, 25 65 Q 30 52, 48 52 Q 38 58, 25 55 "
            "Q 12 50, 15 35 Q 20 20, 35 28 Q 45 35, 50 48 Z M 50 52 "
            "L 50 95 Q 48 95, 48 90 L 48 55 Q 50 52, 52 55 L 52 90 "
            "Q 52 95, 50 95 L 50 52 Z"
        ),
        anchors=[
            ("top", 65, 28, 270, "leaf"),
            ("right", 88, 45, 0, "leaf"),
            ("bottom-leaf", 50, 88, 90, "leaf"),
            ("left", 12, 45, 180, "leaf"),
            ("stem", 50, 95, 90, "stem"),
        ],
        bbox=(78, 77, 11, 18),
        area=2000,
    ),
    _shape(
        "globe", "Globe", "adventure",
        outline=(
            "M 50 5 Q 85 5, 95 50 Q 95 95, 50 95 Q 5 95, 5 50 "
            "Q 5 5, 50 5 Z M 50 5 Q 65 25, 65 50 Q 65 75, 50 95 M 50 5 "
            "Q 35 25, 35 50 Q 35 75, 50 95 M 8 35 Q 50 35, 92 35 M 8 65 "
            "Q 50 65, 92 65"
        ),
        anchors=[
            ("top", 50, 5, 270, "meridian"),
            ("right", 95, 50, 0, "equator"),
            ("bottom", 50, 95, 90, "meridian"),
            ("left", 5, 50, 180, "equator"),
        ],
        bbox=(90, 90, 5, 5),
        area=6400,
    ),
    _shape(
        "tent", "Tent", "adventure",
        outline=(
            "M 50 10 L 95 85 L 5 85 Z M 50 10 L 50 5 L 52 5 L 55 8 "
            "Q 52 10, 50 10 Z M 40 85 L 40 60 Q 42 55, 50 55 "
            "Q 58 55, 60 60 L 60 85 Z"
        ),
        anchors=[
            ("peak", 50, 5, 270, "peak"),
            ("left-slope", 28, 48, 245, "slope"),
            ("right-slope", 72, 48, 295, "slope"),
            ("bottom-left", 5, 85, 180, "base"),
            ("bottom-right", 95, 85, 0, "base"),
        ],
        bbox=(90, 80, 5, 5),
        area=3000,
    ),
    _shape(
        "baby-bottle", "Baby Bottle", "baby",
        outline=(
            "M 40 10 Q 40 5, 50 5 Q 60 5, 60 10 L 60 15 Q 68 18, 68 28 "
            "L 68 75 Q 68 90, 50 90 Q 32 90, 32 75 L 32 28 "
            "Q 32 18, 40 15 L 40 10 Z M 38 30 L 62 30 M 38 45 L 62 45 "
            "M 38 60 L 62 60"
        ),
        anchors=[
            ("nipple", 50, 5, 270, "nipple"),
            ("right", 68, 50, 0, "body"),
            ("bottom", 50, 90, 90, "base"),
            ("left", 32, 50, 180, "body"),
        ],
        bbox=(36, 85, 32, 5),
        area=2100,
    ),
    _shape(
        "pacifier", "Pacifier", "baby",
        outline=(
            "M 50 20 Q 70 20, 78 35 Q 85 50, 78 65 Q 70 80, 50 80 "
            "Q 30 80, 22 65 Q 15 50, 22 35 Q 30 20, 50 20 Z M 50 35 "
            "Q 60 35, 65 45 Q 68 55, 65 62 Q 58 70, 50 70 "
            "Q 42 70, 35 62 Q 32 55, 35 45 Q 40 35, 50 35 Z M 78 50 "
            "L 95 50 Q 98 50, 98 55 Q 98 60, 95 60 L 78 60 "
            "Q 78 55, 78 50 Z"
        ),
        anchors=[
            ("top", 50, 20, 270, "shield"),
            ("handle", 98, 55, 0, "handle"),
            ("bottom", 50, 80, 90, "shield"),
            ("left", 15, 50, 180, "shield"),
        ],
        bbox=(85, 60, 13, 20),
        area=2200,
    ),
    _shape(
        "stroller", "Stroller", "baby",
        outline=(
            "M 20 25 L 25 25 Q 30 25, 30 30 L 30 55 L 75 55 L 80 30 "
            "Q 82 25, 88 25 L 90 25 Q 92 25, 92 28 L 85 60 L 85 70 "
            "Q 85 75, 80 75 L 35 75 Q 30 75, 30 70 L 30 60 L 20 60 "
            "Q 15 60, 15 55 L 15 30 Q 15 25, 20 25 Z M 30 80 "
            "Q 30 92, 20 92 Q 10 92, 10 82 Q 10 72, 20 72 "
            "Q 30 72, 30 80 Z M 80 80 Q 80 92, 70 92 Q 60 92, 60 82 "
            "Q 60 72, 70 72 Q 80 72, 80 80 Z"
        ),
        anchors=[
            ("handle", 90, 25, 270, "handle"),
            ("canopy", 20, 25, 270, "canopy"),
            ("front-wheel", 20, 92, 90, "wheel"),
            ("back-wheel", 70, 92, 90, "wheel"),
        ],
        bbox=(82, 67, 10, 25),
        area=2500,
    ),
    _shape(
        "rattle", "Baby Rattle", "baby",
        outline=(
            "M 50 15 Q 72 15, 80 35 Q 85 55, 75 72 Q 62 85, 50 80 "
            "L 50 95 Q 45 95, 45 90 L 45 80 Q 38 85, 25 72 "
            "Q 15 55, 20 35 Q 28 15, 50 15 Z M 40 35 Q 35 35, 35 40 "
            "Q 35 45, 40 45 Q 45 45, 45 40 Q 45 35, 40 35 Z M 60 35 "
            "Q 55 35, 55 40 Q 55 45, 60 45 Q 65 45, 65 40 "
            "Q 65 35, 60 35 Z M 50 55 Q 45 55, 45 60 Q 45 65, 50 65 "
            "Q 55 65, 55 60 Q 55 55, 50 55 Z"
        ),
        anchors=[
            ("top", 50, 15, 270, "head"),
            ("right", 82, 45, 0, "head"),
            ("handle", 48, 95, 90, "handle"),
            ("left", 18, 45, 180, "head"),
        ],
        bbox=(67, 80, 15, 15),
        area=2400,
    ),
    _shape(
        "onesie", "Baby Onesie", "baby",
        outline=(
            "M 35 10 Q 42 5, 50 5 Q 58 5, 65 10 L 80 20 Q 85 22, 85 28 "
            "L 85 35 Q 85 40, 80 40 L 70 38 L 70 75 Q 70 85, 60 88 "
            "L 55 90 L 55 85 Q 55 80, 50 80 Q 45 80, 45 85 L 45 90 "
            "L 40 88 Q 30 85, 30 75 L 30 38 L 20 40 Q 15 40, 15 35 "
            "L 15 28 Q 15 22, 20 20 L 35 10 Z"
        ),
        anchors=[
            ("collar", 50, 5, 270, "collar"),
            ("left-sleeve", 15, 32, 180, "sleeve"),
            ("right-sleeve", 85, 32, 0, "sleeve"),
            ("left-leg", 45, 90, 90, "leg"),
            ("right-leg", 55, 90, 90, "leg"),
        ],
        bbox=(70, 85, 15, 5),
        area=2600,
    ),
    _shape(
        "teddy-bear", "Teddy Bear", "baby",
        outline=(
            "M 25 25 Q 20 15, 28 10 Q 38 8, 40 18 Q 42 25, 50 28 "
            "Q 58 25, 60 18 Q 62 8, 72 10 Q 80 15, 75 25 Q 72 32, 75 42 "
            "Q 85 50, 82 62 Q 78 72, 70 75 L 70 82 Q 70 90, 65 92 "
            "L 55 92 Q 52 92, 52 88 L 52 82 Q 50 82, 48 82 L 48 88 "
            "Q 48 92, 45 92 L 35 92 Q 30 90, 30 82 L 30 75 "
            "Q 22 72, 18 62 Q 15 50, 25 42 Q 28 32, 25 25 Z M 40 45 "
            "Q 38 45, 38 48 Q 38 52, 42 52 Q 45 52, 45 48 "
            "Q 45 45, 40 45 Z M 60 45 Q 58 45, 58 48 Q 58 52, 62 52 "
            "Q 65 52, 65 48 Q 65 45, 60 45 Z M 50 58 Q 48 58, 48 62 "
            "Q 48 65, 52 65 Q 55 65, 55 62 Q 55 58, 50 58 Z"
        ),
        anchors=[
            ("left-ear", 25, 12, 225, "ear"),
            ("right-ear", 75, 12, 315, "ear"),
            ("left-arm", 18, 55, 180, "arm"),
            ("right-arm", 82, 55, 0, "arm"),
            ("left-leg", 35, 92, 90, "leg"),
            ("right-leg", 65, 92, 90, "leg"),
        ],
        bbox=(67, 84, 15, 8),
        area=3200,
    ),
    _shape(
        "cake", "Birthday Cake", "celebration",
        outline=(
            "M 50 5 L 52 5 Q 54 8, 54 12 Q 54 18, 50 22 Q 46 18, 46 12 "
            "Q 46 8, 48 5 L 50 5 Z M 48 22 L 52 22 L 52 30 L 48 30 Z "
            "M 20 30 L 80 30 Q 88 30, 88 40 L 88 50 L 12 50 L 12 40 "
            "Q 12 30, 20 30 Z M 10 50 L 90 50 Q 95 50, 95 58 L 95 80 "
            "Q 95 88, 88 88 L 12 88 Q 5 88, 5 80 L 5 58 Q 5 50, 10 50 Z"
        ),
        anchors=[
            ("candle", 50, 5, 270, "candle"),
            ("top-layer-right", 88, 40, 0, "layer"),
            ("bottom-right", 95, 70, 0, "layer"),
            ("bottom", 50, 88, 90, "base"),
            ("bottom-left", 5, 70, 180, "layer"),
            ("top-layer-left", 12, 40, 180, "layer"),
        ],
        bbox=(90, 83, 5, 5),
        area=3800,
    ),
    _shape(
        "confetti", "Confetti", "celebration",
        outline=(
            "M 15 20 L 25 15 L 28 25 L 18 30 Z M 45 10 L 55 12 L 52 22 "
            "L 42 20 Z M 75 18 L 85 22 L 82 32 L 72 28 Z M 50 40 "
            "Q 65 35, 75 50 Q 80 65, 70 78 Q 55 88, 40 82 "
            "Q 25 75, 28 58 Q 30 42, 50 40 Z M 20 55 L 28 50 L 32 60 "
            "L 24 65 Z M 80 60 L 90 58 L 88 68 L 78 70 Z M 35 85 "
            "L 42 90 L 38 95 L 30 92 Z M 65 88 L 75 92 L 70 98 L 60 95 "
            "Z"
        ),
        anchors=[
            ("top-left", 20, 15, 270, "piece"),
            ("top-center", 50, 10, 270, "piece"),
            ("top-right", 80, 20, 270, "piece"),
            ("center", 89, 63, 0, "burst"),
            ("bottom", 38, 95, 90, "piece"),
        ],
        bbox=(78, 86, 12, 8),
        area=1800,
    ),
    _shape(
        "party-hat", "Party Hat", "celebration",
        outline=(
            "M 50 5 L 50 8 Q 55 10, 55 15 Q 55 20, 50 22 Q 45 20, 45 15 "
            "Q 45 10, 50 8 L 50 5 Z M 50 22 L 85 85 Q 88 90, 82 92 "
            "L 18 92 Q 12 90, 15 85 L 50 22 Z"
        ),
        anchors=[
            ("pom-pom", 50, 5, 270, "top"),
            ("right-edge", 70, 55, 330, "cone"),
            ("bottom-right", 82, 92, 45, "brim"),
            ("bottom", 50, 92, 90, "brim"),
            ("bottom-left", 18, 92, 135, "brim"),
            ("left-edge", 30, 55, 210, "cone"),
        ],
        bbox=(76, 87, 12, 5),
        area=2200,
    ),
    _shape(
        "candle", "Candle", "celebration",
        outline=(
            "M 50 5 Q 55 8, 55 15 Q 58 22, 55 28 Q 52 32, 50 28 "
            "Q 48 32, 45 28 Q 42 22, 45 15 Q 45 8, 50 5 Z M 48 28 "
            "L 48 35 L 52 35 L 52 28 Z M 35 35 L 65 35 Q 70 35, 70 42 "
            "L 70 88 Q 70 95, 50 95 Q 30 95, 30 88 L 30 42 "
            "Q 30 35, 35 35 Z"
        ),
        anchors=[
            ("flame", 50, 5, 270, "flame"),
            ("right", 70, 65, 0, "body"),
            ("bottom", 50, 95, 90, "base"),
            ("left", 30, 65, 180, "body"),
        ],
        bbox=(40, 90, 30, 5),
        area=2000,
    ),
]

SHAPE_DEFINITIONS: Dict[str, BaseShape] = {shape.id: shape for shape in _CATALOG}

# Storefront ids that differ from catalog ids (hyphenated vs camelCase)
SHAPE_ID_ALIASES: Dict[str, str] = {
    "leaf-simple": "leaf",
    "music-note": "musicNote",
    "hot-air-balloon": "hotAirBalloon",
    "cherryBlossom": "cherry-blossom",
    "babyBottle": "baby-bottle",
    "teddyBear": "teddy-bear",
    "partyHat": "party-hat",
    "soccer-ball": "soccerBall",
}
