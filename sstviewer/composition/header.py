"""
Header Composer

Derives the display title from whichever response shape was returned.
The shape is already decided by the envelope type.
"""

from __future__ import annotations
from typing import Callable, Dict, Optional

from ..state import (
    BrowseResponse, ConeResponse, NeighborhoodResponse, PageResponse,
    QueryMode, Response, SequenceResponse, TOCResponse,
)
from .links import HEADER_TRUNCATION, TruncationPolicy


def compose_header(
    response: Response,
    default_title: str = "app",
    truncation: TruncationPolicy = HEADER_TRUNCATION,
) -> str:
    """Title for a response, truncated under the header policy."""
    source = _TITLE_SOURCES.get(getattr(response, "mode", None))
    if source is None:
        raise TypeError(f"Unsupported response type: {type(response).__name__}")
    title = source(response)
    if not title:
        title = default_title
    return truncation.apply(title)


def chapter_title(chapter: str, context: str) -> str:
    return f"{chapter} :: {context} ::"


# =============================================================================
# TITLE SOURCES
# =============================================================================

def _neighborhood_title(response: NeighborhoodResponse) -> Optional[str]:
    if not response.events:
        return None
    first = response.events[0]
    return first.title or first.text


def _cone_title(response: ConeResponse) -> Optional[str]:
    return response.paths[0].title if response.paths else None


def _browse_title(response: BrowseResponse) -> Optional[str]:
    return response.nptrs[0].title if response.nptrs else None


def _sequence_title(response: SequenceResponse) -> Optional[str]:
    return response.stories[0].text if response.stories else None


def _toc_title(response: TOCResponse) -> str:
    return chapter_title(response.request.chapter, response.request.context)


def _page_title(response: PageResponse) -> str:
    return chapter_title(response.page.title, response.page.context)


_TITLE_SOURCES: Dict[QueryMode, Callable[..., Optional[str]]] = {
    QueryMode.NEIGHBORHOOD: _neighborhood_title,
    QueryMode.CONE: _cone_title,
    QueryMode.BROWSE: _browse_title,
    QueryMode.SEQUENCE: _sequence_title,
    QueryMode.TOC: _toc_title,
    QueryMode.PAGE: _page_title,
}
