"""
State Access Layer

Responsibility:
Read-only snapshots of graph service responses.
These contracts mirror the service payloads but are optimized for composition.

PRINCIPLES:
1. Immutable (Frozen)
2. No Composition Logic
3. No Rendering Logic
"""

from .core import (
    RelationCategory, NodeRef, QueryMode,
    ST_TOP, TEMPORAL_ARROWS, THEN_ARROW, PREV_ARROW, THEN_LABEL,
)
from .orbit import Relation, Orbit, NodeEvent, BROKEN_ARROW
from .path import PathElement, Path, ConeResult, BrowseEntry
from .story import Story, TOCEntry, PageView
from .envelope import (
    QueryRequest, Response,
    NeighborhoodResponse, ConeResponse, SequenceResponse,
    BrowseResponse, TOCResponse, PageResponse,
)

__all__ = [
    'RelationCategory', 'NodeRef', 'QueryMode',
    'ST_TOP', 'TEMPORAL_ARROWS', 'THEN_ARROW', 'PREV_ARROW', 'THEN_LABEL',
    'Relation', 'Orbit', 'NodeEvent', 'BROKEN_ARROW',
    'PathElement', 'Path', 'ConeResult', 'BrowseEntry',
    'Story', 'TOCEntry', 'PageView',
    'QueryRequest', 'Response',
    'NeighborhoodResponse', 'ConeResponse', 'SequenceResponse',
    'BrowseResponse', 'TOCResponse', 'PageResponse',
]
