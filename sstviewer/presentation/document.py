"""
Presentation Document

Responsibility:
Define the abstract, immutable block tree handed to renderers.
Strictly decoupled from any UI toolkit.

BLOCK TREE:
===========
- Every block is frozen
- Containers hold tuples of blocks
- Composers return new Groups, never mutate existing ones
"""

from __future__ import annotations
from dataclasses import dataclass, fields, is_dataclass
from enum import Enum, IntEnum
from typing import Any, Dict, Optional, Tuple, Union
import json

from ..state import NodeRef, QueryMode, QueryRequest


# =============================================================================
# PRESENTATION ATTRIBUTES
# =============================================================================

class TextStyle(Enum):
    """How a text block is presented."""
    BODY = "body"
    HEADING = "heading"
    EMPHASIS = "emphasis"
    ARROW = "arrow"
    CHAPTER = "chapter"
    CONTEXT = "context"
    FULL_TEXT = "full_text"
    MESSAGE = "message"


class HeadingLevel(IntEnum):
    """Presentational weight only. BODY is paragraph level."""
    BODY = 0
    H1 = 1
    H2 = 2


# =============================================================================
# ACTIVATIONS
# =============================================================================

@dataclass(frozen=True)
class NodeActivation:
    """Activating re-queries the neighborhood of a node."""
    ref: NodeRef

    def to_request(self) -> QueryRequest:
        return QueryRequest.for_node(self.ref)


@dataclass(frozen=True)
class ChapterActivation:
    """Activating browses a chapter, optionally narrowed to one context."""
    chapter: str
    context: str = ""

    def to_request(self) -> QueryRequest:
        return QueryRequest.for_chapter(self.chapter, self.context)


@dataclass(frozen=True)
class ExternalActivation:
    """Opens an external URL in a new context. Not a graph query."""
    url: str

    def to_request(self) -> None:
        return None


Activation = Union[NodeActivation, ChapterActivation, ExternalActivation]


# =============================================================================
# BLOCKS
# =============================================================================

@dataclass(frozen=True)
class Text:
    text: str
    style: TextStyle = TextStyle.BODY
    level: HeadingLevel = HeadingLevel.BODY
    enlarged: bool = False
    hidden: bool = False
    tooltip: Optional[str] = None


@dataclass(frozen=True)
class Preformatted:
    text: str


@dataclass(frozen=True)
class Link:
    content: 'Block'
    activation: Activation


@dataclass(frozen=True)
class Image:
    src: str


@dataclass(frozen=True)
class ListBlock:
    """A display list in upstream order. Never re-sorted."""
    items: Tuple[str, ...]
    ordered: bool = True


@dataclass(frozen=True)
class Table:
    rows: Tuple[Tuple['Block', ...], ...]


@dataclass(frozen=True)
class Separator:
    pass


@dataclass(frozen=True)
class ParagraphBreak:
    pass


@dataclass(frozen=True)
class Group:
    """
    Ordered container of blocks.

    role tags the group for renderers (e.g. "node", "relation").
    radius is the traversal distance of a relation group.
    """
    children: Tuple['Block', ...] = ()
    role: str = ""
    radius: Optional[int] = None

    def extend(self, *blocks: 'Block') -> 'Group':
        """Return a new group with blocks appended."""
        return Group(children=self.children + blocks, role=self.role, radius=self.radius)

    def __len__(self) -> int:
        return len(self.children)


Block = Union[Text, Preformatted, Link, Image, ListBlock, Table, Separator, ParagraphBreak, Group]


@dataclass(frozen=True)
class Document:
    """
    A complete presentation for one query response.

    DETERMINISTIC:
    Same response = identical document.
    """
    mode: QueryMode
    title: str
    body: Group
    is_fallback: bool = False


# =============================================================================
# SERIALIZATION
# =============================================================================

def document_to_dict(obj: Any) -> Any:
    """
    Convert a document (or any block) into plain JSON-compatible data.

    Each dataclass is tagged with its class name under "kind".
    """
    if isinstance(obj, Enum):
        return obj.value
    if is_dataclass(obj) and not isinstance(obj, type):
        data: Dict[str, Any] = {"kind": type(obj).__name__}
        for f in fields(obj):
            data[f.name] = document_to_dict(getattr(obj, f.name))
        return data
    if isinstance(obj, (tuple, list)):
        return [document_to_dict(item) for item in obj]
    return obj


class DocumentEncoder(json.JSONEncoder):
    """JSON encoder for documents, blocks and activations."""

    def default(self, obj: Any) -> Any:
        if isinstance(obj, Enum) or is_dataclass(obj):
            return document_to_dict(obj)
        return super().default(obj)
