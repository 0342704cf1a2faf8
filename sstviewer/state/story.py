"""
Story and Contents State

Linear narratives and chapter indexes returned by the graph service.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

from .core import NodeRef
from .orbit import NodeEvent
from .path import Path


@dataclass(frozen=True)
class Story:
    """
    A node plus its forward temporal chain.

    An empty axis means the service only listed the story title.
    """
    text: str
    arrow_context: str
    container: Optional[NodeRef]
    axis: Tuple[NodeEvent, ...] = ()


@dataclass(frozen=True)
class TOCEntry:
    """A chapter and its contexts, in service order."""
    chapter: str
    contexts: Tuple[str, ...] = ()


@dataclass(frozen=True)
class PageView:
    """A page of notes for one chapter/context pair."""
    title: str
    context: str
    notes: Tuple[Path, ...] = ()
