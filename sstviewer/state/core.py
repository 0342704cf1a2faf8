"""
Core State Types

Foundational enums and identity types for all graph snapshots.

FIXED TABLE REQUIREMENT:
========================
Relation categories form a closed table of 7 slots.
Category identity is always an index in [0, 7).
Out-of-range indices are rejected at construction, never branched on.
"""

from __future__ import annotations
from enum import Enum
from dataclasses import dataclass
from typing import Final, FrozenSet, Tuple

from ..errors import InvariantViolation


# =============================================================================
# RELATION CATEGORIES (Closed Enumeration)
# =============================================================================

# Offset between a slot index and its signed spacetime type.
ST_ZERO: Final[int] = 3

# Number of category slots.
ST_TOP: Final[int] = 7


class RelationCategory(Enum):
    """
    The 7 semantic relation kinds.

    Value is the slot index. Each member carries its wire key, display
    label and the index of its inverse.
    """
    PROPERTY_OF = 0
    CONTAINED_BY = 1
    DERIVES_FROM = 2
    NEAR = 3
    LEADS_TO = 4
    CONTAINS = 5
    EXPRESSES_PROPERTY = 6

    @property
    def index(self) -> int:
        return self.value

    @property
    def wire_key(self) -> str:
        return _CATEGORY_TABLE[self.value][0]

    @property
    def label(self) -> str:
        return _CATEGORY_TABLE[self.value][1]

    @property
    def description(self) -> str:
        """Short signed description, e.g. '+(leading to)'."""
        return _CATEGORY_TABLE[self.value][2]

    @property
    def sttype(self) -> int:
        """Signed spacetime type in [-3, +3]."""
        return self.value - ST_ZERO

    @property
    def inverse(self) -> 'RelationCategory':
        return RelationCategory(ST_TOP - 1 - self.value)

    @classmethod
    def from_index(cls, index: int) -> 'RelationCategory':
        if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < ST_TOP:
            raise InvariantViolation(
                f"Relation category index out of range [0,{ST_TOP}): {index!r}"
            )
        return cls(index)

    @classmethod
    def from_sttype(cls, sttype: int) -> 'RelationCategory':
        return cls.from_index(sttype + ST_ZERO)

    @classmethod
    def from_wire_key(cls, key: str) -> 'RelationCategory':
        for category in cls:
            if category.wire_key == key:
                return category
        raise InvariantViolation(f"Unknown relation category key: {key!r}")


# (wire key, display label, signed description), indexed by slot
_CATEGORY_TABLE: Final[Tuple[Tuple[str, str, str], ...]] = (
    ("Im3", "is a property expressed by", "-(expressed by)"),
    ("Im2", "is contained by", "-(part of)"),
    ("Im1", "comes from", "-(arriving from)"),
    ("In0", "is near/similar to", "(close to)"),
    ("Il1", "leads to", "+(leading to)"),
    ("Ic2", "contains", "+(containing)"),
    ("Ie3", "expresses property", "+(expressing)"),
)


# =============================================================================
# TEMPORAL ARROWS (Reserved Sequence Slots)
# =============================================================================

# Arrow-directory pointers reserved for proper-time sequences:
# 2 is the forward "then" arrow, 3 its "prev" inverse.
THEN_ARROW: Final[int] = 2
PREV_ARROW: Final[int] = 3
TEMPORAL_ARROWS: Final[FrozenSet[int]] = frozenset({THEN_ARROW, PREV_ARROW})

# Arrow label suppressed while walking a story axis.
THEN_LABEL: Final[str] = "then"


# =============================================================================
# NODE IDENTITY
# =============================================================================

@dataclass(frozen=True)
class NodeRef:
    """
    Identity of a graph node as seen by the viewer.

    OPAQUE:
    =======
    Never dereferenced locally. Only used as an activation payload.
    """
    node_class: int
    pointer: int

    def as_form(self) -> dict:
        return {"nclass": str(self.node_class), "ncptr": str(self.pointer)}


# =============================================================================
# QUERY MODES
# =============================================================================

class QueryMode(Enum):
    """Query modes offered by the graph service, valued by route name."""
    NEIGHBORHOOD = "orbit"
    CONE = "cone"
    SEQUENCE = "sequence"
    BROWSE = "browse"
    TOC = "toc"
    PAGE = "page"

    @property
    def endpoint(self) -> str:
        return _ENDPOINTS[self]


_ENDPOINTS = {
    QueryMode.NEIGHBORHOOD: "/Orbit",
    QueryMode.CONE: "/Cone",
    QueryMode.SEQUENCE: "/Sequence",
    QueryMode.BROWSE: "/Browse",
    QueryMode.TOC: "/TOC",
    QueryMode.PAGE: "/Page",
}
