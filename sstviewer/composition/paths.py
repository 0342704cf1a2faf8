"""
Path Composer

Renders alternating node/arrow paths. Arrows on the reserved temporal
slots open a new paragraph so proper-time sub-runs stand apart.
"""

from __future__ import annotations
from typing import AbstractSet, List, Optional, Sequence

from ..presentation import (
    Block, Group, Link, NodeActivation, ParagraphBreak, Preformatted,
    Separator, Text, TextStyle,
)
from ..state import TEMPORAL_ARROWS, NodeRef, Path, PathElement


class PathComposer:
    """Composes sequences of paths into a container group."""

    def __init__(
        self,
        temporal_arrows: AbstractSet[int] = TEMPORAL_ARROWS,
        short_text_limit: int = 20,
    ):
        self._temporal_arrows = frozenset(temporal_arrows)
        self._short_text_limit = short_text_limit

    def compose(self, paths: Sequence[Optional[Path]], into: Optional[Group] = None) -> Group:
        """
        Append every path to the container, each followed by a rule.

        An empty sequence returns the container unchanged.
        """
        container = into if into is not None else Group(role="paths")
        if not paths:
            return container

        blocks: List[Block] = []
        for path in paths:
            if path is None:
                continue
            for position, element in enumerate(path):
                if position % 2 == 0:
                    blocks.append(self._node(element))
                else:
                    if element.is_temporal(self._temporal_arrows):
                        blocks.append(ParagraphBreak())
                    blocks.append(self._arrow(element))
            blocks.append(Separator())

        return container.extend(*blocks)

    def _node(self, element: PathElement) -> Link:
        activation = NodeActivation(element.identity or NodeRef(0, 0))
        if "\n" in element.name:
            return Link(Preformatted(element.name), activation)
        return Link(
            Text(
                element.name,
                style=TextStyle.EMPHASIS,
                enlarged=len(element.name) < self._short_text_limit,
            ),
            activation,
        )

    def _arrow(self, element: PathElement) -> Text:
        tooltip = element.category.label if element.category is not None else None
        return Text(f"( {element.name} )", style=TextStyle.ARROW, tooltip=tooltip)
