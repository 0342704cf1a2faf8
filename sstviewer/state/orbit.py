"""
Orbit State

Read-only snapshot of a node and its multi-directional relation set.

PRESERVED ORDER:
================
- Relations inside a category keep the service-returned order
- Missing categories are empty, never an error
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, Mapping, Optional, Sequence, Tuple

from ..errors import InvariantViolation
from .core import NodeRef, RelationCategory, ST_TOP


BROKEN_ARROW = "broken arrow"


@dataclass(frozen=True)
class Relation:
    """
    One edge instance in an orbit.

    distance is the traversal radius from the query origin and is
    used for presentation grouping only.
    """
    label: str
    category: RelationCategory
    distance: int
    context: str
    target: NodeRef
    text: str


@dataclass(frozen=True)
class Orbit:
    """
    A node's neighborhood: one relation tuple per category slot.

    Slots are indexed by RelationCategory.index.
    """
    slots: Tuple[Tuple[Relation, ...], ...] = field(
        default_factory=lambda: ((),) * ST_TOP
    )

    def __post_init__(self):
        if len(self.slots) != ST_TOP:
            raise InvariantViolation(
                f"Orbit must have {ST_TOP} category slots, got {len(self.slots)}"
            )

    @classmethod
    def from_mapping(
        cls, mapping: Mapping[RelationCategory, Sequence[Relation]]
    ) -> 'Orbit':
        slots = [()] * ST_TOP
        for category, relations in mapping.items():
            slots[category.index] = tuple(relations)
        return cls(slots=tuple(slots))

    def relations(self, category: RelationCategory) -> Tuple[Relation, ...]:
        return self.slots[category.index]

    def categories(self) -> Iterator[RelationCategory]:
        """Categories that hold at least one relation, in slot order."""
        for category in RelationCategory:
            if self.slots[category.index]:
                yield category

    def __len__(self) -> int:
        return sum(len(s) for s in self.slots)


@dataclass(frozen=True)
class NodeEvent:
    """
    A node presentation snapshot.

    IMMUTABLE:
    ==========
    Not a live graph handle. Built once from one response.
    """
    text: str
    chapter: str
    identity: NodeRef
    orbit: Orbit = field(default_factory=Orbit)
    title: Optional[str] = None

    @property
    def is_multiline(self) -> bool:
        return "\n" in self.text
