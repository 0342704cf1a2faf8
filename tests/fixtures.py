"""
Shared Test Fixtures

Builders for wire payloads and state snapshots.
"""

from typing import Dict, List, Optional

from sstviewer.state import (
    NodeEvent, NodeRef, Orbit, PathElement, QueryRequest, Relation,
    RelationCategory, Story,
)


# =============================================================================
# STATE BUILDERS
# =============================================================================

def make_relation(
    label: str = "leads to",
    category: RelationCategory = RelationCategory.LEADS_TO,
    text: str = "target",
    context: str = "",
    distance: int = 1,
    target: Optional[NodeRef] = None,
) -> Relation:
    return Relation(
        label=label,
        category=category,
        distance=distance,
        context=context,
        target=target or NodeRef(1, 99),
        text=text,
    )


def make_event(
    text: str = "origin",
    chapter: str = "chapter one",
    identity: Optional[NodeRef] = None,
    relations: Optional[Dict[RelationCategory, List[Relation]]] = None,
    title: Optional[str] = None,
) -> NodeEvent:
    return NodeEvent(
        text=text,
        chapter=chapter,
        identity=identity or NodeRef(1, 1),
        orbit=Orbit.from_mapping(relations or {}),
        title=title,
    )


def one_relation_per_category() -> Dict[RelationCategory, List[Relation]]:
    """Every category holds one relation whose text names the category."""
    return {
        category: [make_relation(
            label=f"label-{category.name}",
            category=category,
            text=f"text-{category.name}",
        )]
        for category in RelationCategory
    }


def node(name: str, node_class: int = 1, pointer: int = 0) -> PathElement:
    return PathElement(name=name, identity=NodeRef(node_class, pointer))


def arrow(
    name: str,
    arr: int = 10,
    category: RelationCategory = RelationCategory.LEADS_TO,
) -> PathElement:
    return PathElement(name=name, arrow=arr, category=category)


def make_story(
    text: str = "story",
    arrow_context: str = "contains",
    container: Optional[NodeRef] = None,
    axis=(),
) -> Story:
    return Story(text=text, arrow_context=arrow_context, container=container, axis=tuple(axis))


# =============================================================================
# WIRE PAYLOAD BUILDERS
# =============================================================================

def wire_orbit(arrow: str, stindex: int, text: str, ctx: str = "", radius: int = 1,
               dst=(1, 7)) -> dict:
    return {
        "Radius": radius,
        "Arrow": arrow,
        "STindex": stindex,
        "Dst": {"Class": dst[0], "CPtr": dst[1]},
        "Ctx": ctx,
        "Text": text,
    }


def wire_event(text: str = "origin", chap: str = "chapter one", orbits=None,
               nptr=(1, 1), title: Optional[str] = None) -> dict:
    event = {
        "Text": text,
        "L": len(text),
        "Chap": chap,
        "NPtr": {"Class": nptr[0], "CPtr": nptr[1]},
        "Orbits": orbits if orbits is not None else [None] * 7,
    }
    if title is not None:
        event["Title"] = title
    return event


def wire_node(name: str, nptr=(1, 0)) -> dict:
    return {"NPtr": {"Class": nptr[0], "CPtr": nptr[1]}, "Arr": 0, "STindex": 0, "Name": name}


def wire_arrow(name: str, arr: int = 10, stindex: int = 4) -> dict:
    return {"NPtr": {"Class": 0, "CPtr": 0}, "Arr": arr, "STindex": stindex, "Name": name}


def request_for(mode, **kwargs) -> QueryRequest:
    return QueryRequest(mode=mode, **kwargs)
