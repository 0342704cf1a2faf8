"""
Path State

Read-only representation of traversals returned by the graph service.

ALTERNATION:
============
A path alternates node and arrow elements.
Even positions are nodes, odd positions are arrows.
The element kind is decided by position, not by content.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

from .core import NodeRef, RelationCategory


@dataclass(frozen=True)
class PathElement:
    """
    One element of a path.

    Node elements carry an identity. Arrow elements carry the arrow
    pointer and the category of the arrow.
    """
    name: str
    identity: Optional[NodeRef] = None
    arrow: int = 0
    category: Optional[RelationCategory] = None

    def is_temporal(self, temporal_arrows) -> bool:
        return self.arrow in temporal_arrows


# A path is a plain ordered tuple of elements.
Path = Tuple[PathElement, ...]


@dataclass(frozen=True)
class ConeResult:
    """
    The entire cone of paths around a node, with upstream rankings.

    BACKEND-RANKED:
    ===============
    betweenness and supernodes are displayed in the order provided.
    """
    title: str
    identity: NodeRef
    entire_path: Tuple[Path, ...]
    betweenness_ranking: Tuple[str, ...]
    supernodes: Tuple[str, ...]


@dataclass(frozen=True)
class BrowseEntry:
    """A browsed node with its paths grouped per relation category."""
    title: str
    identity: NodeRef
    paths_per_category: Tuple[Tuple[RelationCategory, Tuple[Path, ...]], ...]

    def paths(self, category: RelationCategory) -> Tuple[Path, ...]:
        for cat, paths in self.paths_per_category:
            if cat is category:
                return paths
        return ()
