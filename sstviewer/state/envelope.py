"""
Response Envelopes

Tagged union over the response shapes of the graph service.

ENVELOPE CONTRACT:
==================
- The shape is decided once, at the dispatch boundary
- Every envelope carries the request that produced it
- Composers never sniff for optional fields
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import ClassVar, Optional, Tuple, Union

from ..errors import InvariantViolation
from .core import NodeRef, QueryMode
from .orbit import NodeEvent
from .path import BrowseEntry, ConeResult
from .story import PageView, Story, TOCEntry


# =============================================================================
# QUERY REQUEST
# =============================================================================

@dataclass(frozen=True)
class QueryRequest:
    """
    One query against the graph service.

    Posted as form fields; empty strings are sent as empty values.
    """
    mode: QueryMode = QueryMode.NEIGHBORHOOD
    name: str = ""
    chapter: str = ""
    context: str = ""
    node: Optional[NodeRef] = None
    page_nr: int = 1

    def __post_init__(self):
        if self.page_nr < 1:
            raise InvariantViolation(f"page_nr must be >= 1, got {self.page_nr}")

    @classmethod
    def for_node(cls, ref: NodeRef) -> 'QueryRequest':
        return cls(mode=QueryMode.NEIGHBORHOOD, node=ref)

    @classmethod
    def for_chapter(cls, chapter: str, context: str = "") -> 'QueryRequest':
        return cls(mode=QueryMode.BROWSE, chapter=chapter, context=context)

    def next_page(self) -> 'QueryRequest':
        return replace(self, page_nr=self.page_nr + 1)

    def previous_page(self) -> 'QueryRequest':
        return replace(self, page_nr=max(1, self.page_nr - 1))

    def as_form(self) -> dict:
        form = {
            "name": self.name,
            "chapter": self.chapter,
            "context": self.context,
            "pagenr": str(self.page_nr),
        }
        if self.node is not None:
            form.update(self.node.as_form())
        return form


# =============================================================================
# RESPONSE SHAPES
# =============================================================================

@dataclass(frozen=True)
class NeighborhoodResponse:
    mode: ClassVar[QueryMode] = QueryMode.NEIGHBORHOOD
    request: QueryRequest
    events: Tuple[NodeEvent, ...] = ()


@dataclass(frozen=True)
class ConeResponse:
    mode: ClassVar[QueryMode] = QueryMode.CONE
    request: QueryRequest
    paths: Tuple[ConeResult, ...] = ()


@dataclass(frozen=True)
class SequenceResponse:
    mode: ClassVar[QueryMode] = QueryMode.SEQUENCE
    request: QueryRequest
    stories: Tuple[Story, ...] = ()


@dataclass(frozen=True)
class BrowseResponse:
    mode: ClassVar[QueryMode] = QueryMode.BROWSE
    request: QueryRequest
    nptrs: Tuple[BrowseEntry, ...] = ()


@dataclass(frozen=True)
class TOCResponse:
    mode: ClassVar[QueryMode] = QueryMode.TOC
    request: QueryRequest
    entries: Tuple[TOCEntry, ...] = ()


@dataclass(frozen=True)
class PageResponse:
    mode: ClassVar[QueryMode] = QueryMode.PAGE
    request: QueryRequest
    page: PageView


Response = Union[
    NeighborhoodResponse,
    ConeResponse,
    SequenceResponse,
    BrowseResponse,
    TOCResponse,
    PageResponse,
]
