"""
Connector model for interlocking puzzle pieces.

Four connector kinds (A, B, C, D), each with a protruding (tab) and a
recessed (slot) polarity. Two connectors join only when they share a kind
and have opposite polarities. Each kind also has its own width/depth/neck
proportions and a rounded or angular style, so pieces of different kinds
cannot be force-fitted by hand.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict


class ConnectorKind(Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"


class Polarity(Enum):
    PROTRUDING = "protruding"  # tab
    RECESSED = "recessed"      # slot

    @property
    def code(self) -> str:
        return "p" if self is Polarity.PROTRUDING else "r"

    @classmethod
    def from_code(cls, code: str) -> "Polarity":
        if code == "p":
            return cls.PROTRUDING
        if code == "r":
            return cls.RECESSED
        raise ValueError(f"Unknown polarity code: {code!r}")


ALL_KINDS = (ConnectorKind.A, ConnectorKind.B, ConnectorKind.C, ConnectorKind.D)
ALL_POLARITIES = (Polarity.PROTRUDING, Polarity.RECESSED)


@dataclass(frozen=True)
class Connector:
    """A connector as seen on an exposed edge: kind + polarity."""
    kind: ConnectorKind
    polarity: Polarity

    @property
    def code(self) -> str:
        return f"{self.kind.value}{self.polarity.code}"

    def mate(self) -> "Connector":
        """The connector that interlocks with this one."""
        return Connector(self.kind, opposite_polarity(self.polarity))


@dataclass(frozen=True)
class ConnectorAssignment:
    """A connector placed on a specific anchor of a shape."""
    anchor_id: str
    kind: ConnectorKind
    polarity: Polarity

    @property
    def connector(self) -> Connector:
        return Connector(self.kind, self.polarity)

    @property
    def code(self) -> str:
        return self.connector.code


@dataclass(frozen=True)
class ConnectorProfile:
    """Geometric proportions of one connector kind."""
    width_mult: float
    depth_mult: float
    neck_mult: float
    style: str  # "rounded" or "angular"


# Base sizes in shape units (a shape spans 100 units)
TAB_WIDTH = 8.0
TAB_DEPTH = 6.0
NECK_WIDTH = 5.0

CONNECTOR_PROFILES: Dict[ConnectorKind, ConnectorProfile] = {
    ConnectorKind.A: ConnectorProfile(width_mult=1.0, depth_mult=1.0, neck_mult=1.0, style="rounded"),
    ConnectorKind.B: ConnectorProfile(width_mult=1.2, depth_mult=0.8, neck_mult=1.15, style="rounded"),
    ConnectorKind.C: ConnectorProfile(width_mult=0.9, depth_mult=1.1, neck_mult=0.85, style="angular"),
    ConnectorKind.D: ConnectorProfile(width_mult=1.1, depth_mult=0.9, neck_mult=1.05, style="angular"),
}


def opposite_polarity(polarity: Polarity) -> Polarity:
    if polarity is Polarity.PROTRUDING:
        return Polarity.RECESSED
    return Polarity.PROTRUDING


def can_connect(a, b) -> bool:
    """True iff a and b have the same kind and opposite polarity.

    Accepts anything with ``kind`` and ``polarity`` attributes
    (Connector or ConnectorAssignment).
    """
    return a.kind == b.kind and a.polarity != b.polarity


def connector_dimensions(kind: ConnectorKind) -> Dict[str, float]:
    """Absolute width/depth/neck (shape units) for a connector kind."""
    profile = CONNECTOR_PROFILES[kind]
    return {
        "width": TAB_WIDTH * profile.width_mult,
        "depth": TAB_DEPTH * profile.depth_mult,
        "neck": NECK_WIDTH * profile.neck_mult,
    }
