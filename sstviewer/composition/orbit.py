"""
Orbit Composer

Orders and filters a node's per-category relation lists into a
presentation fragment for that node.

FIXED ORDER:
============
contained-by, derives-from, property-of, expresses-property,
near/similar-to, contains, leads-to.
The order is not alphabetical and not the slot order. It never depends on
how the orbit was built.
"""

from __future__ import annotations
from enum import Enum
from typing import Final, List, Tuple

from ..presentation import (
    Block, Group, HeadingLevel, Image, Link, NodeActivation,
    ExternalActivation, Preformatted, Text, TextStyle,
)
from ..state import NodeEvent, Relation, RelationCategory
from .links import ITEM_TRUNCATION, LinkKind, TruncationPolicy, classify, is_image_ref


class Direction(Enum):
    """ALL shows every category; FORWARD hides backward-looking ones."""
    ALL = "all"
    FORWARD = "fwd"


# (category, backward-looking)
ORBIT_ORDER: Final[Tuple[Tuple[RelationCategory, bool], ...]] = (
    (RelationCategory.CONTAINED_BY, True),
    (RelationCategory.DERIVES_FROM, False),
    (RelationCategory.PROPERTY_OF, True),
    (RelationCategory.EXPRESSES_PROPERTY, False),
    (RelationCategory.NEAR, True),
    (RelationCategory.CONTAINS, False),
    (RelationCategory.LEADS_TO, False),
)


class OrbitComposer:
    """
    Composes one node and its orbit.

    Stateless apart from presentation settings; safe to reuse.
    """

    def __init__(
        self,
        truncation: TruncationPolicy = ITEM_TRUNCATION,
        short_text_limit: int = 20,
    ):
        self._truncation = truncation
        self._short_text_limit = short_text_limit

    def compose(
        self,
        event: NodeEvent,
        counter: int = 0,
        direction: Direction = Direction.ALL,
        skip_label: str = "",
        heading_level: HeadingLevel = HeadingLevel.H1,
    ) -> Group:
        """
        Compose a node fragment.

        counter 0 marks the anchor item with "*", otherwise "N.".
        Relations labelled exactly skip_label are omitted.
        """
        blocks: List[Block] = list(self._node_text(event, counter, heading_level))
        blocks.append(Text(event.chapter, style=TextStyle.CHAPTER))

        for category, backward in ORBIT_ORDER:
            if backward and direction is Direction.FORWARD:
                continue
            for relation in event.orbit.relations(category):
                if relation.label == skip_label:
                    continue
                blocks.append(self.compose_relation(relation))
                if category is RelationCategory.PROPERTY_OF and is_image_ref(event.text, relation.label):
                    blocks.append(Image(event.text))

        return Group(children=tuple(blocks), role="node")

    def compose_relation(self, relation: Relation) -> Group:
        """One link item: (label) followed by the destination payload."""
        blocks: List[Block] = [
            Text(f"( {relation.label} )", style=TextStyle.ARROW, tooltip=relation.category.label)
        ]
        text = relation.text
        kind = classify(text, relation.label)

        if kind is LinkKind.PREFORMATTED:
            blocks.append(Link(Preformatted(text), NodeActivation(relation.target)))
        else:
            label = Text(text, enlarged=self._is_short(text))
            if kind is LinkKind.URL:
                blocks.append(Link(label, ExternalActivation(text)))
            elif kind is LinkKind.IMAGE:
                blocks.append(Image(text))
                blocks.append(label)
            else:
                blocks.append(Link(label, NodeActivation(relation.target)))

        if relation.context:
            blocks.append(Text(f" in {relation.context}", style=TextStyle.CONTEXT))

        return Group(children=tuple(blocks), role="relation", radius=relation.distance)

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _node_text(
        self, event: NodeEvent, counter: int, heading_level: HeadingLevel
    ) -> Tuple[Block, ...]:
        marker = "*" if counter == 0 else f"{counter}."
        full = f"{marker} {event.text}"
        activation = NodeActivation(event.identity)

        if event.is_multiline:
            return (Link(Preformatted(full), activation),)

        if self._truncation.applies(event.text):
            short = f"{marker} {self._truncation.apply(event.text)}"
            return (
                Link(Text(short, style=TextStyle.HEADING, level=heading_level), activation),
                Text(full, style=TextStyle.FULL_TEXT, hidden=True),
            )

        return (Link(Text(full, style=TextStyle.HEADING, level=heading_level), activation),)

    def _is_short(self, text: str) -> bool:
        return len(text) < self._short_text_limit
